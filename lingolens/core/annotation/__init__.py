"""
Word-level annotation for interactive proofreading.
"""

from .spellcheck import SpellOracle, get_spell_oracle, is_correct, suggest, normalize_word
from .suggestions import SuggestionClient

__all__ = [
    'SpellOracle',
    'get_spell_oracle',
    'is_correct',
    'suggest',
    'normalize_word',
    'SuggestionClient',
]
