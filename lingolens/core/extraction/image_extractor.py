"""
Image extractor backed by the Tesseract OCR engine.

The word sequence is taken verbatim from the engine's per-word output
(text, confidence, bounding box) in its native order. The document text is
rebuilt from the same output, one line per OCR line and a blank line between
blocks, so text and words always come from a single recognition pass.
"""

import asyncio
import io
import logging
from typing import Any, Dict, List, Optional, Tuple

import pytesseract
from PIL import Image, UnidentifiedImageError

from lingolens.config import TESSERACT_LANG
from lingolens.core.exceptions import ExtractionError
from lingolens.core.models import (
    BoundingBox,
    ExtractedDocument,
    FileKind,
    OcrDerivedWords,
    UploadedFile,
    Word,
)
from .base import FormatExtractor

logger = logging.getLogger(__name__)


class ImageExtractor(FormatExtractor):
    """Extractor for image/* uploads."""

    def __init__(self, lang: str = TESSERACT_LANG):
        self.lang = lang

    @property
    def kind(self) -> FileKind:
        return FileKind.IMAGE

    async def _extract(self, file: UploadedFile) -> ExtractedDocument:
        # Tesseract is a blocking subprocess call
        data = await asyncio.to_thread(self._recognize, file)
        return build_ocr_document(data)

    def _recognize(self, file: UploadedFile) -> Dict[str, List[Any]]:
        try:
            with Image.open(io.BytesIO(file.data)) as image:
                image.load()
                return pytesseract.image_to_data(
                    image, lang=self.lang, output_type=pytesseract.Output.DICT
                )
        except UnidentifiedImageError as e:
            raise ExtractionError(
                "Uploaded file is not a readable image",
                {'filename': file.filename}
            ) from e
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as e:
            raise ExtractionError(
                "OCR engine failed",
                {'filename': file.filename, 'error': str(e)}
            ) from e


def _column(data: Dict[str, List[Any]], name: str, idx: int, default: Any = 0) -> Any:
    values = data.get(name, [])
    return values[idx] if idx < len(values) else default


def _confidence(raw: Any) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return max(0.0, min(100.0, value))


def _bounding_box(data: Dict[str, List[Any]], idx: int) -> Optional[BoundingBox]:
    try:
        return BoundingBox(
            left=int(data['left'][idx]),
            top=int(data['top'][idx]),
            width=int(data['width'][idx]),
            height=int(data['height'][idx]),
        )
    except (KeyError, IndexError, TypeError, ValueError):
        return None


def build_ocr_document(data: Dict[str, List[Any]]) -> ExtractedDocument:
    """
    Convert pytesseract `image_to_data` output into text and words.

    Args:
        data: Column dictionary as returned with `Output.DICT`

    Returns:
        ExtractedDocument with OCR-derived words
    """
    words: List[Word] = []
    lines: List[List[str]] = []
    line_keys: List[Tuple[int, int, int]] = []

    for idx, token in enumerate(data.get('text', [])):
        text_value = (token or "").strip()
        if not text_value:
            # Layout rows (page/block/paragraph/line) carry no text
            continue

        words.append(Word(
            text=text_value,
            confidence=_confidence(_column(data, 'conf', idx)),
            index=len(words),
            bounding_box=_bounding_box(data, idx),
        ))

        key = (
            int(_column(data, 'block_num', idx)),
            int(_column(data, 'par_num', idx)),
            int(_column(data, 'line_num', idx)),
        )
        if not line_keys or line_keys[-1] != key:
            line_keys.append(key)
            lines.append([])
        lines[-1].append(text_value)

    text_lines: List[str] = []
    for i, (key, tokens) in enumerate(zip(line_keys, lines)):
        if i > 0 and key[0] != line_keys[i - 1][0]:
            text_lines.append("")
        text_lines.append(' '.join(tokens))

    logger.debug(f"OCR produced {len(words)} word(s) on {len(lines)} line(s)")
    return ExtractedDocument(text='\n'.join(text_lines), words=OcrDerivedWords(tuple(words)))
