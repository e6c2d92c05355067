"""
PDF text-layer extractor.

Reads the embedded text layer page by page with PyMuPDF. No OCR is applied
to PDFs, so text-layer words are treated as certain (confidence 100).
"""

import asyncio
import logging
from typing import List

import fitz  # PyMuPDF

from lingolens.core.exceptions import ExtractionError
from lingolens.core.models import ExtractedDocument, FileKind, UploadedFile
from .base import FormatExtractor

logger = logging.getLogger(__name__)


class PdfExtractor(FormatExtractor):
    """Extractor for application/pdf uploads."""

    @property
    def kind(self) -> FileKind:
        return FileKind.PDF

    async def _extract(self, file: UploadedFile) -> ExtractedDocument:
        try:
            doc = fitz.open(stream=file.data, filetype="pdf")
        except Exception as e:
            raise ExtractionError(
                "Failed to extract text from PDF",
                {'filename': file.filename, 'error': str(e)}
            ) from e

        page_texts: List[str] = []
        with doc:
            for page in doc:
                page_texts.append(page.get_text("text"))
                # Yield to the event loop between pages
                await asyncio.sleep(0)

        logger.debug(f"Read text layer of {len(page_texts)} page(s) from {file.filename}")
        return self._text_document('\n'.join(page_texts).strip())
