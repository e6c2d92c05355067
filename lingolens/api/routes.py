"""
Flask routes orchestrator for the companion API

Registers every route blueprint:

- blueprints/health_routes.py: Health check
- blueprints/translation_routes.py: Translation gateway contract
- blueprints/suggestion_routes.py: LLM spelling suggestions
- blueprints/process_routes.py: Full document pipeline
- blueprints/spellcheck_routes.py: Batch dictionary spell check
- blueprints/compare_routes.py: Word-level document comparison
"""
import logging
from flask import jsonify

from .blueprints import (
    create_health_blueprint,
    create_translation_blueprint,
    create_suggestion_blueprint,
    create_process_blueprint,
    create_spellcheck_blueprint,
    create_compare_blueprint
)

logger = logging.getLogger(__name__)


def configure_routes(app, translation_backend, suggestion_backend, gateway_factory, extractors=None):
    """
    Configure Flask routes by registering all blueprints

    Args:
        app: Flask application instance
        translation_backend: Backend serving /api/translate
        suggestion_backend: Backend serving /api/ai-suggestion
        gateway_factory: Callable returning the gateway used by /api/process
        extractors: Optional override of the per-kind extractors (process and compare)
    """
    app.register_blueprint(create_health_blueprint())
    app.register_blueprint(create_translation_blueprint(translation_backend))
    app.register_blueprint(create_suggestion_blueprint(suggestion_backend))
    app.register_blueprint(create_process_blueprint(gateway_factory, extractors))
    app.register_blueprint(create_spellcheck_blueprint())
    app.register_blueprint(create_compare_blueprint(extractors))

    _register_error_handlers(app)


def _register_error_handlers(app):
    """Register global error handlers"""

    @app.errorhandler(404)
    def route_not_found(error):
        return jsonify({"error": "API Endpoint not found"}), 404

    @app.errorhandler(500)
    def internal_server_error(error):
        logger.exception(f"Internal server error: {error}")
        return jsonify({"error": "Internal server error", "details": str(error)}), 500
