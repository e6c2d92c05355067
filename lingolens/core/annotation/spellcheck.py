"""
Dictionary-based spell checking for interactive proofreading.

Words are normalized (letters and apostrophes only, lower-case) before any
lookup. Anything that normalizes to nothing, such as punctuation or numbers,
counts as correct so it is never flagged.
"""

import re
from typing import Iterable, List, Optional

from spellchecker import SpellChecker

from lingolens.core.models import EditableWord, Word

_NON_WORD_CHARS = re.compile(r"[^a-zA-Z']")


def normalize_word(word) -> str:
    """Strip everything but letters and apostrophes, lower-cased."""
    if not isinstance(word, str):
        return ""
    return _NON_WORD_CHARS.sub('', word).lower()


def _is_subsequence(short: str, long: str) -> bool:
    remaining = iter(long)
    return all(char in remaining for char in short)


def _match_case(suggestion: str, original: str) -> str:
    letters = _NON_WORD_CHARS.sub('', original)
    if letters[:1].isupper():
        return suggestion[:1].upper() + suggestion[1:]
    return suggestion


class SpellOracle:
    """
    Correctness check and nearest-match suggestion against a fixed dictionary.

    By default the English word-frequency dictionary shipped with
    pyspellchecker is used; `words` replaces it with a custom word list.
    """

    def __init__(self, language: str = 'en', words: Optional[Iterable[str]] = None, distance: int = 2):
        if words is not None:
            self._spell = SpellChecker(language=None, distance=distance)
            self._spell.word_frequency.load_words([normalize_word(w) for w in words if normalize_word(w)])
        else:
            self._spell = SpellChecker(language=language, distance=distance)

    def is_correct(self, word) -> bool:
        """True for dictionary words and for anything that is not a word."""
        clean = normalize_word(word)
        if not clean:
            return True
        return clean in self._spell

    def suggest(self, word, max_results: int = 5) -> List[str]:
        """
        Nearest dictionary match for a word.

        Returns at most one suggestion, capitalized like the input, or an
        empty list when nothing close enough exists.

        Among the closest dictionary words, those reachable by only adding
        letters (a dropped-letter typo such as "Helo" for "Hello") rank
        first; ties go to the most frequent word.
        """
        clean = normalize_word(word)
        if not clean or max_results < 1:
            return []

        candidates = [c for c in (self._spell.candidates(clean) or ()) if c in self._spell]
        if not candidates:
            return []
        best = max(candidates, key=lambda c: (_is_subsequence(clean, c), self._spell[c], c))
        return [_match_case(best, word)]

    def annotate(self, words: Iterable[Word], max_suggestions: int = 5) -> List[EditableWord]:
        """Build editable copies of words, flagged and with suggestions."""
        annotated = []
        for word in words:
            correct = self.is_correct(word.text)
            annotated.append(EditableWord(
                original=word,
                text=word.text,
                is_correct=correct,
                suggestions=[] if correct else self.suggest(word.text, max_suggestions),
            ))
        return annotated


_default_oracle: Optional[SpellOracle] = None


def get_spell_oracle() -> SpellOracle:
    """Shared English oracle (the dictionary is loaded once)."""
    global _default_oracle
    if _default_oracle is None:
        _default_oracle = SpellOracle()
    return _default_oracle


def is_correct(word) -> bool:
    return get_spell_oracle().is_correct(word)


def suggest(word, max_results: int = 5) -> List[str]:
    return get_spell_oracle().suggest(word, max_results)
