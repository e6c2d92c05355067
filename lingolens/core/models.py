"""
Data model for the document pipeline.

Words come in two flavours: OCR-derived words carry the engine's confidence
and bounding boxes, text-derived words are synthesized by whitespace
splitting and always have full confidence and no geometry. Callers that need
geometry must check which flavour they hold.
"""

import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Tuple, Union

from lingolens.config import DEFAULT_LANGUAGE
from lingolens.core.exceptions import UnsupportedFormatError, UnsupportedLanguageError


class LanguageCode(str, Enum):
    """Languages exposed in the UI, plus the fallback for inconclusive detection."""

    EN = "en"
    HI = "hi"
    FR = "fr"
    ES = "es"
    DE = "de"
    ZH = "zh"
    JA = "ja"
    AR = "ar"
    UNDETERMINED = "und"

    @classmethod
    def parse(cls, value: Any) -> 'LanguageCode':
        """Validate a user-supplied language code.

        The fallback code is not a valid selection.
        """
        if isinstance(value, cls) and value is not cls.UNDETERMINED:
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for code in cls:
                if code is not cls.UNDETERMINED and code.value == normalized:
                    return code
        raise UnsupportedLanguageError(value)

    @classmethod
    def supported(cls) -> List['LanguageCode']:
        return [code for code in cls if code is not cls.UNDETERMINED]

    def __str__(self) -> str:
        return self.value


DEFAULT_LANGUAGE_CODE = LanguageCode.parse(DEFAULT_LANGUAGE)


class FileKind(Enum):
    """Document formats the extractor understands."""

    PDF = "pdf"
    IMAGE = "image"
    TEXT = "text"
    CSV = "csv"

    @classmethod
    def from_mime_type(cls, mime_type: Optional[str]) -> 'FileKind':
        """Resolve a declared MIME type. Content is never sniffed."""
        mime = (mime_type or "").split(';')[0].strip().lower()
        if mime == 'application/pdf':
            return cls.PDF
        if mime.startswith('image/'):
            return cls.IMAGE
        if mime == 'text/plain':
            return cls.TEXT
        if mime == 'text/csv':
            return cls.CSV
        raise UnsupportedFormatError(mime_type or "")


@dataclass(frozen=True)
class UploadedFile:
    """A document as handed over by the presentation layer."""

    filename: str
    mime_type: str
    data: bytes

    @property
    def kind(self) -> FileKind:
        return FileKind.from_mime_type(self.mime_type)

    @classmethod
    def from_path(cls, path: Union[str, Path], mime_type: Optional[str] = None) -> 'UploadedFile':
        """Read a file from disk, guessing the MIME type from its extension."""
        path = Path(path)
        if mime_type is None:
            mime_type, _ = mimetypes.guess_type(path.name)
        return cls(filename=path.name, mime_type=mime_type or "", data=path.read_bytes())


@dataclass(frozen=True)
class BoundingBox:
    """Word geometry in image pixels, as reported by the OCR engine."""

    left: int
    top: int
    width: int
    height: int

    def to_dict(self) -> Dict[str, int]:
        return {'left': self.left, 'top': self.top, 'width': self.width, 'height': self.height}


@dataclass(frozen=True)
class Word:
    """A single token of the document text."""

    text: str
    confidence: float
    index: int
    bounding_box: Optional[BoundingBox] = None

    def __post_init__(self):
        if not 0 <= self.confidence <= 100:
            raise ValueError(f"confidence must be within [0, 100], got {self.confidence}")
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'confidence': self.confidence,
            'index': self.index,
            'bbox': self.bounding_box.to_dict() if self.bounding_box else None,
        }


@dataclass(frozen=True)
class _WordSequence:
    words: Tuple[Word, ...] = ()

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> Word:
        return self.words[index]

    def texts(self) -> List[str]:
        return [word.text for word in self.words]


@dataclass(frozen=True)
class OcrDerivedWords(_WordSequence):
    """Words produced by the OCR engine, possibly with bounding boxes."""

    source: ClassVar[str] = "ocr"


@dataclass(frozen=True)
class TextDerivedWords(_WordSequence):
    """Words synthesized by whitespace-splitting text (confidence 100, no boxes)."""

    source: ClassVar[str] = "text"


Words = Union[OcrDerivedWords, TextDerivedWords]


def words_from_text(text: str) -> TextDerivedWords:
    """Whitespace-split text into full-confidence words."""
    return TextDerivedWords(tuple(
        Word(text=token, confidence=100, index=i)
        for i, token in enumerate(text.split())
    ))


@dataclass
class EditableWord:
    """User-correctable copy of a Word. The original is never modified."""

    original: Word
    text: str
    is_correct: bool = True
    suggestions: List[str] = field(default_factory=list)

    @property
    def is_edited(self) -> bool:
        return self.text != self.original.text


class PipelineState(Enum):
    """Linear states of a single pipeline run."""

    UPLOADED = "uploaded"
    EXTRACTED = "extracted"
    IDENTIFIED = "identified"
    TRANSLATED = "translated"
    SKIPPED = "skipped"
    SUMMARIZED = "summarized"
    RESULT = "result"


@dataclass(frozen=True)
class ExtractedDocument:
    """Output of the format extractor."""

    text: str
    words: Words


@dataclass
class PipelineResult:
    """Everything the presentation layer needs about one processed document.

    Attributes:
        text: Text the pipeline settled on (possibly translated)
        words: Word sequence matching `text`
        original_text: Extractor output, never translated
        summary: Extractive summary in the primary language
        confidence: Overall confidence in [0, 1]
        detected_languages: Languages identified in the source
        translated_to: Languages the text was translated into
    """
    text: str
    words: Words
    original_text: str
    summary: str
    confidence: float
    detected_languages: Tuple[LanguageCode, ...]
    translated_to: Tuple[LanguageCode, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'words': [word.to_dict() for word in self.words],
            'wordSource': self.words.source,
            'originalText': self.original_text,
            'summary': self.summary,
            'confidence': self.confidence,
            'detectedLanguages': [code.value for code in self.detected_languages],
            'translatedTo': [code.value for code in self.translated_to],
        }
