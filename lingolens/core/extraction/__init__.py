"""
Format extraction for uploaded documents.

Dispatch is keyed on the declared file kind. Every FileKind must have an
extractor registered here; a missing handler fails at import time rather
than silently producing empty text.
"""

from typing import Dict, Optional

from lingolens.config import TESSERACT_LANG
from lingolens.core.exceptions import UnsupportedFormatError
from lingolens.core.models import ExtractedDocument, FileKind, UploadedFile
from .base import FormatExtractor, decode_text
from .pdf_extractor import PdfExtractor
from .image_extractor import ImageExtractor, build_ocr_document
from .text_extractor import TextExtractor, CsvExtractor, csv_to_tsv


def default_extractors(tesseract_lang: str = TESSERACT_LANG) -> Dict[FileKind, FormatExtractor]:
    """Build one extractor per supported file kind."""
    extractors: Dict[FileKind, FormatExtractor] = {
        FileKind.PDF: PdfExtractor(),
        FileKind.IMAGE: ImageExtractor(tesseract_lang),
        FileKind.TEXT: TextExtractor(),
        FileKind.CSV: CsvExtractor(),
    }
    missing = set(FileKind) - set(extractors)
    if missing:
        raise RuntimeError(f"No extractor registered for: {sorted(k.value for k in missing)}")
    return extractors


_DEFAULT_EXTRACTORS = default_extractors()


async def extract(
    file: UploadedFile,
    extractors: Optional[Dict[FileKind, FormatExtractor]] = None
) -> ExtractedDocument:
    """
    Extract text and words from an uploaded document.

    Args:
        file: The uploaded document
        extractors: Optional override of the per-kind extractors

    Returns:
        ExtractedDocument with non-blank text

    Raises:
        UnsupportedFormatError: If the declared MIME type is not supported
        ExtractionError: If no text could be extracted
    """
    table = extractors if extractors is not None else _DEFAULT_EXTRACTORS
    extractor = table.get(file.kind)
    if extractor is None:
        raise UnsupportedFormatError(file.mime_type)
    return await extractor.extract(file)


__all__ = [
    'FormatExtractor',
    'PdfExtractor',
    'ImageExtractor',
    'TextExtractor',
    'CsvExtractor',
    'default_extractors',
    'extract',
    'decode_text',
    'csv_to_tsv',
    'build_ocr_document',
]
