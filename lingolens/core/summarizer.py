"""
Deterministic extractive summarization.

Sentences are picked verbatim from the source text: the first one, the middle
one, the last one, then long sentences in document order until the budget is
spent. The picks are joined in the order they were chosen, not in document
order.
"""

import logging
import math
import re
from typing import List, Optional

from lingolens.config import (
    LONG_SENTENCE_LENGTH,
    MAX_SUMMARY_SENTENCES,
    MIN_SENTENCE_LENGTH,
    SENTENCE_TERMINATORS,
)
from lingolens.core.models import DEFAULT_LANGUAGE_CODE, LanguageCode
from lingolens.core.translation import TranslationOrchestrator

logger = logging.getLogger(__name__)

NO_CONTENT_MESSAGE = "No content available for summarization."
FAILURE_MESSAGE = "Unable to generate summary at this time."

_SENTENCE_SPLIT = re.compile(f"[{re.escape(SENTENCE_TERMINATORS)}]+")


def split_sentences(text: str, min_length: int = MIN_SENTENCE_LENGTH) -> List[str]:
    """Split on sentence-terminal punctuation, dropping short fragments."""
    fragments = (fragment.strip() for fragment in _SENTENCE_SPLIT.split(text))
    return [fragment for fragment in fragments if len(fragment) >= min_length]


def summary_budget(sentence_count: int) -> int:
    return min(MAX_SUMMARY_SENTENCES, math.ceil(sentence_count / 3))


def select_sentences(sentences: List[str]) -> List[str]:
    """
    Choose summary sentences by priority.

    First, middle (more than 2 sentences) and last (more than 4 sentences)
    are always taken; the remaining budget is filled with sentences longer
    than LONG_SENTENCE_LENGTH, scanning from the second to the second-to-last.
    """
    count = len(sentences)
    if count == 0:
        return []

    budget = summary_budget(count)
    chosen: List[int] = [0]
    if count > 2:
        chosen.append(count // 2)
    if count > 4:
        chosen.append(count - 1)

    for i in range(1, count - 1):
        if len(chosen) >= budget:
            break
        if i not in chosen and len(sentences[i]) > LONG_SENTENCE_LENGTH:
            chosen.append(i)

    return [sentences[i] for i in chosen]


class ExtractiveSummarizer:
    """Builds short summaries, translated when the target is not the default language."""

    def __init__(
        self,
        orchestrator: Optional[TranslationOrchestrator] = None,
        default_language: LanguageCode = DEFAULT_LANGUAGE_CODE
    ):
        """
        Args:
            orchestrator: Used to translate summaries; without one, summaries
                stay in the source language
            default_language: Language that needs no translation
        """
        self.orchestrator = orchestrator
        self.default_language = default_language

    async def _localize(self, text: str, target_language: LanguageCode) -> str:
        if target_language == self.default_language or self.orchestrator is None:
            return text
        return await self.orchestrator.translate(text, None, target_language)

    async def summarize(self, text: str, target_language: LanguageCode) -> str:
        """
        Summarize text in the target language.

        Never raises; failures produce a fixed fallback message.
        """
        try:
            sentences = split_sentences(text)
            if not sentences:
                return await self._localize(NO_CONTENT_MESSAGE, target_language)

            summary = '. '.join(select_sentences(sentences)).strip() + '.'
            logger.debug(f"Summary built from {len(sentences)} candidate sentence(s)")
            return await self._localize(summary, target_language)
        except Exception as e:
            logger.error(f"Summary generation error: {e}")
            try:
                return await self._localize(FAILURE_MESSAGE, target_language)
            except Exception as fallback_error:
                logger.error(f"Could not translate summary fallback: {fallback_error}")
                return FAILURE_MESSAGE
