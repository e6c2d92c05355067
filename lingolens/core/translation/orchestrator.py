"""
Chunked translation with per-chunk failure isolation.

Text is cut into contiguous fixed-size slices (not sentence aware), each
slice is sent to the gateway in order, and the results are joined with a
single space. A failed chunk is replaced by its original text; translation
never fails as a whole.
"""

import logging
from typing import List, Optional, Union

from lingolens.config import TRANSLATION_CHUNK_SIZE
from lingolens.core.models import LanguageCode
from .gateway import AUTO_SOURCE_LANGUAGE, TranslationGateway
from .rate_limit import FixedDelayPolicy, RateLimitPolicy

logger = logging.getLogger(__name__)

LanguageLike = Union[LanguageCode, str]


def split_into_chunks(text: str, chunk_size: int = TRANSLATION_CHUNK_SIZE) -> List[str]:
    """
    Split text into contiguous slices of at most `chunk_size` characters.

    Slices may cut words or sentences in half.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")
    return [text[i:i + chunk_size] for i in range(0, len(text), chunk_size)]


def should_translate(detected: LanguageCode, target: LanguageCode) -> bool:
    """Translate when detection was inconclusive or the languages differ."""
    return detected is LanguageCode.UNDETERMINED or detected != target


def _gateway_code(language: Optional[LanguageLike]) -> str:
    if language is None:
        return AUTO_SOURCE_LANGUAGE
    code = language.value if isinstance(language, LanguageCode) else str(language)
    if code == LanguageCode.UNDETERMINED.value:
        return AUTO_SOURCE_LANGUAGE
    return code


class TranslationOrchestrator:
    """Sequential, rate-limited translation of arbitrarily long text."""

    def __init__(
        self,
        gateway: TranslationGateway,
        chunk_size: int = TRANSLATION_CHUNK_SIZE,
        rate_limit: Optional[RateLimitPolicy] = None
    ):
        """
        Args:
            gateway: Translation gateway used for every chunk
            chunk_size: Maximum characters per gateway request
            rate_limit: Pacing between consecutive calls (default: fixed 100ms)
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        self.gateway = gateway
        self.chunk_size = chunk_size
        self.rate_limit = rate_limit if rate_limit is not None else FixedDelayPolicy()

    async def translate(
        self,
        text: str,
        source_language: Optional[LanguageLike],
        target_language: LanguageLike
    ) -> str:
        """
        Translate text chunk by chunk.

        Args:
            text: Text to translate
            source_language: Detected source language (UNDETERMINED/None -> "auto")
            target_language: Target language

        Returns:
            Translated text; failed chunks keep their original content
        """
        if not text or not text.strip():
            return text

        source = _gateway_code(source_language)
        target = _gateway_code(target_language)
        chunks = split_into_chunks(text, self.chunk_size)
        translated_chunks: List[str] = []
        failures = 0

        for i, chunk in enumerate(chunks):
            if i > 0:
                await self.rate_limit.wait()
            try:
                translated_chunks.append(await self.gateway.translate(chunk, source, target))
            except Exception as e:
                failures += 1
                logger.warning(f"Translation chunk {i + 1}/{len(chunks)} failed, using original: {e}")
                translated_chunks.append(chunk)

        if failures:
            logger.info(f"Translated {len(chunks) - failures}/{len(chunks)} chunk(s) to {target}")
        return ' '.join(translated_chunks)
