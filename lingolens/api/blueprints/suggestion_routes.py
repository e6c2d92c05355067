"""
AI spelling suggestion route
"""
import asyncio
import logging
from flask import Blueprint, request, jsonify

from lingolens.core.exceptions import SuggestionError

logger = logging.getLogger(__name__)


def create_suggestion_blueprint(backend):
    """
    Create the suggestion blueprint

    Args:
        backend: SuggestionBackend producing corrected words
    """
    bp = Blueprint('suggestion', __name__)

    @bp.route('/api/ai-suggestion', methods=['POST'])
    def ai_suggestion():
        data = request.get_json(silent=True) or {}
        context = data.get('context') or ""
        word = data.get('word') or ""

        if not word:
            return jsonify({"suggestion": word, "error": "Missing 'word'"}), 400

        try:
            suggestion = asyncio.run(backend.suggest(context, word))
        except SuggestionError as e:
            logger.warning(f"Suggestion failed for '{word}': {e}")
            return jsonify({"suggestion": word, "error": str(e)}), 500

        return jsonify({"suggestion": suggestion})

    return bp
