"""
Abstract base class for format extractors.

Each supported file kind (PDF, image, plain text, CSV) implements this
interface to turn raw upload bytes into text plus a word sequence.
"""

from abc import ABC, abstractmethod

from lingolens.core.exceptions import ExtractionError
from lingolens.core.models import ExtractedDocument, FileKind, UploadedFile, words_from_text

# Tried in order; latin-1 accepts any byte sequence
TEXT_ENCODINGS = ('utf-8-sig', 'utf-8', 'latin-1')


def decode_text(data: bytes) -> str:
    """Decode uploaded bytes as text, trying common encodings."""
    for encoding in TEXT_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode('utf-8', errors='replace')


class FormatExtractor(ABC):
    """
    Abstract interface for extracting text from one file kind.

    Subclasses implement `_extract`; `extract` enforces the shared contract
    that an extraction never yields blank text.
    """

    @property
    @abstractmethod
    def kind(self) -> FileKind:
        """The file kind this extractor handles."""
        pass

    @abstractmethod
    async def _extract(self, file: UploadedFile) -> ExtractedDocument:
        """
        Format-specific extraction.

        Args:
            file: The uploaded document

        Returns:
            Extracted text and words (may be blank; checked by `extract`)
        """
        pass

    async def extract(self, file: UploadedFile) -> ExtractedDocument:
        """
        Extract text and words from an uploaded document.

        Raises:
            ExtractionError: If no text could be extracted
        """
        document = await self._extract(file)
        if not document.text.strip():
            raise ExtractionError(
                "No text could be extracted from the document",
                {'filename': file.filename, 'kind': self.kind.value}
            )
        return document

    @staticmethod
    def _text_document(text: str) -> ExtractedDocument:
        return ExtractedDocument(text=text, words=words_from_text(text))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value})"
