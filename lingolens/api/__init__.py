"""
Companion HTTP server: translation gateway, AI spelling suggestions and
document processing.
"""
from flask import Flask
from flask_cors import CORS

from .backends import (
    BackendTranslationGateway,
    GoogleTranslatorBackend,
    OpenAISuggestionBackend,
    SuggestionBackend,
    TranslationBackend,
)
from .routes import configure_routes


def create_app(gateway_backend=None, suggestion_backend=None, extractors=None):
    """
    Build the Flask application.

    Args:
        gateway_backend: TranslationBackend (default: Google via deep-translator)
        suggestion_backend: SuggestionBackend (default: OpenAI chat completions)
        extractors: Optional override of the per-kind extractors

    Returns:
        Flask app with CORS enabled
    """
    translation_backend = gateway_backend or GoogleTranslatorBackend()
    suggestion_backend = suggestion_backend or OpenAISuggestionBackend()

    app = Flask(__name__)
    CORS(app)

    configure_routes(
        app,
        translation_backend,
        suggestion_backend,
        gateway_factory=lambda: BackendTranslationGateway(translation_backend),
        extractors=extractors
    )
    return app


__all__ = [
    'create_app',
    'TranslationBackend',
    'GoogleTranslatorBackend',
    'BackendTranslationGateway',
    'SuggestionBackend',
    'OpenAISuggestionBackend',
]
