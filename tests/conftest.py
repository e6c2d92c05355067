"""
Pytest configuration and fixtures for all tests.

This file is automatically loaded by pytest and provides common fixtures
and configuration for all test modules.
"""

import io
import sys
import time
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import fitz
import pytest
from PIL import Image

from lingolens.core.exceptions import GatewayResponseError
from lingolens.core.models import UploadedFile
from lingolens.core.translation import TranslationGateway


class RecordingGateway(TranslationGateway):
    """Gateway double that records every call and its start time.

    Args:
        fail_on: 1-based call numbers that raise a GatewayResponseError
        transform: Function applied to each chunk (default: upper-case)
    """

    def __init__(self, fail_on=(), transform=None):
        self.fail_on = set(fail_on)
        self.transform = transform or (lambda text: text.upper())
        self.calls = []
        self.timestamps = []
        self.closed = False

    async def translate(self, text, source_language, target_language):
        self.calls.append((text, source_language, target_language))
        self.timestamps.append(time.monotonic())
        if len(self.calls) in self.fail_on:
            raise GatewayResponseError("simulated failure", status_code=500)
        return self.transform(text)

    async def close(self):
        self.closed = True


@pytest.fixture
def recording_gateway():
    """Upper-casing gateway that records calls."""
    return RecordingGateway()


@pytest.fixture
def identity_gateway():
    """Gateway returning every chunk unchanged."""
    return RecordingGateway(transform=lambda text: text)


@pytest.fixture
def make_upload():
    """Factory for in-memory uploads."""
    def _make(data, mime_type="text/plain", filename="document.txt"):
        if isinstance(data, str):
            data = data.encode("utf-8")
        return UploadedFile(filename=filename, mime_type=mime_type, data=data)
    return _make


@pytest.fixture
def pdf_bytes():
    """Factory building a PDF whose pages carry the given text layers."""
    def _make(*pages):
        doc = fitz.open()
        for page_text in pages:
            page = doc.new_page()
            if page_text:
                page.insert_text((72, 72), page_text)
        data = doc.tobytes()
        doc.close()
        return data
    return _make


@pytest.fixture
def png_bytes():
    """A small blank PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (40, 20), "white").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def ocr_data():
    """pytesseract image_to_data output for two lines in two blocks."""
    return {
        'level':     [1, 2, 4, 5, 5, 2, 4, 5],
        'block_num': [0, 1, 1, 1, 1, 2, 2, 2],
        'par_num':   [0, 1, 1, 1, 1, 1, 1, 1],
        'line_num':  [0, 0, 1, 1, 1, 0, 1, 1],
        'left':      [0, 10, 10, 10, 60, 10, 10, 10],
        'top':       [0, 5, 5, 5, 5, 40, 40, 40],
        'width':     [200, 100, 100, 45, 50, 80, 80, 70],
        'height':    [100, 20, 20, 20, 20, 20, 20, 20],
        'conf':      ['-1', '-1', '-1', '96.5', '91', '-1', '-1', '42'],
        'text':      ['', '', '', 'Hello', 'world', '', '', 'Second'],
    }


@pytest.fixture
def make_gateway():
    """Factory for RecordingGateway doubles with custom behavior."""
    return RecordingGateway
