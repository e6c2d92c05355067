"""
Batch spell check route
"""
from flask import Blueprint, request, jsonify

from lingolens.core.annotation import get_spell_oracle


def create_spellcheck_blueprint(oracle=None):
    """
    Create the spell check blueprint

    Args:
        oracle: SpellOracle to use (defaults to the shared English oracle)
    """
    bp = Blueprint('spellcheck', __name__)

    @bp.route('/api/spellcheck', methods=['POST'])
    def spellcheck():
        data = request.get_json(silent=True) or {}
        words = data.get('words')
        if not isinstance(words, list):
            return jsonify({"error": "'words' must be a list"}), 400

        spell = oracle or get_spell_oracle()
        results = []
        for word in words:
            if not isinstance(word, str):
                word = str(word)
            correct = spell.is_correct(word)
            results.append({
                "word": word,
                "correct": correct,
                "suggestions": [] if correct else spell.suggest(word)
            })
        return jsonify(results)

    return bp
