"""
Word-level comparison of two documents.

Both documents go through the same extractors as the pipeline; the
extracted texts are then diffed word by word. Runs of consecutive changed
words are reported as single phrases, in document order.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from difflib import SequenceMatcher
from typing import Any, Dict, List, Optional

from lingolens.core.extraction import FormatExtractor, extract
from lingolens.core.models import FileKind, UploadedFile

logger = logging.getLogger(__name__)


@dataclass
class DocumentComparison:
    """Differences between two extracted texts."""

    text_a: str
    text_b: str
    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)

    @property
    def identical(self) -> bool:
        return not self.added and not self.removed

    def to_dict(self) -> Dict[str, Any]:
        return {
            'textA': self.text_a,
            'textB': self.text_b,
            'added': list(self.added),
            'removed': list(self.removed),
        }


def diff_words(text_a: str, text_b: str) -> DocumentComparison:
    """
    Diff two texts on whitespace-separated words.

    Returns:
        DocumentComparison where `removed` holds phrases only in `text_a`
        and `added` holds phrases only in `text_b`
    """
    words_a = text_a.split()
    words_b = text_b.split()
    comparison = DocumentComparison(text_a=text_a, text_b=text_b)

    matcher = SequenceMatcher(None, words_a, words_b, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag in ('replace', 'delete'):
            comparison.removed.append(' '.join(words_a[i1:i2]))
        if tag in ('replace', 'insert'):
            comparison.added.append(' '.join(words_b[j1:j2]))
    return comparison


async def compare(
    file_a: UploadedFile,
    file_b: UploadedFile,
    extractors: Optional[Dict[FileKind, FormatExtractor]] = None
) -> DocumentComparison:
    """
    Extract two documents and diff their texts.

    Raises:
        UnsupportedFormatError: If either declared MIME type is not supported
        ExtractionError: If either document has no extractable text
    """
    document_a, document_b = await asyncio.gather(
        extract(file_a, extractors),
        extract(file_b, extractors)
    )
    comparison = diff_words(document_a.text, document_b.text)
    logger.info(
        f"Compared {file_a.filename} with {file_b.filename}: "
        f"{len(comparison.added)} added, {len(comparison.removed)} removed"
    )
    return comparison


__all__ = ['DocumentComparison', 'diff_words', 'compare']
