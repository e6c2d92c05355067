"""
Plain text and CSV extractors.

Both read the full upload as text; CSV rows are rewritten as tab-separated
lines. Words are whitespace-split with full confidence.
"""

import re

from lingolens.core.models import ExtractedDocument, FileKind, UploadedFile
from .base import FormatExtractor, decode_text

_LINE_BREAK = re.compile(r'\r?\n')


class TextExtractor(FormatExtractor):
    """Extractor for text/plain uploads."""

    @property
    def kind(self) -> FileKind:
        return FileKind.TEXT

    async def _extract(self, file: UploadedFile) -> ExtractedDocument:
        return self._text_document(decode_text(file.data))


class CsvExtractor(FormatExtractor):
    """Extractor for text/csv uploads.

    Rows are split on plain commas; quoted fields are not interpreted.
    """

    @property
    def kind(self) -> FileKind:
        return FileKind.CSV

    async def _extract(self, file: UploadedFile) -> ExtractedDocument:
        return self._text_document(csv_to_tsv(decode_text(file.data)))


def csv_to_tsv(csv_text: str) -> str:
    """Convert comma-separated rows to tab-separated lines."""
    rows = _LINE_BREAK.split(csv_text)
    return '\n'.join('\t'.join(row.split(',')) for row in rows)
