"""
Translation gateway route

Serves the `{text, sourceLanguage, targetLanguage}` -> `{translatedText}`
contract the pipeline's HTTP gateway speaks.
"""
import logging
from flask import Blueprint, request, jsonify

from lingolens.core.translation import AUTO_SOURCE_LANGUAGE

logger = logging.getLogger(__name__)


def create_translation_blueprint(backend):
    """
    Create the translation blueprint

    Args:
        backend: TranslationBackend doing the actual translation
    """
    bp = Blueprint('translation', __name__)

    @bp.route('/api/translate', methods=['POST'])
    def translate():
        data = request.get_json(silent=True) or {}
        text = data.get('text')
        target_language = data.get('targetLanguage')
        source_language = data.get('sourceLanguage') or AUTO_SOURCE_LANGUAGE

        if not isinstance(text, str) or not target_language:
            return jsonify({"error": "Missing 'text' or 'targetLanguage'"}), 400

        logger.info(f"Translate request: {len(text)} chars, {source_language} -> {target_language}")
        try:
            translated = backend.translate(text, source_language, target_language)
        except Exception as e:
            logger.error(f"Translation failed: {e}")
            return jsonify({"translatedText": text, "error": str(e)}), 500

        return jsonify({"translatedText": translated})

    return bp
