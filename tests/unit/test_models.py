"""Unit tests for the pipeline data model."""

import pytest

from lingolens.core.exceptions import UnsupportedFormatError, UnsupportedLanguageError
from lingolens.core.models import (
    BoundingBox,
    EditableWord,
    FileKind,
    LanguageCode,
    OcrDerivedWords,
    PipelineResult,
    TextDerivedWords,
    UploadedFile,
    Word,
    words_from_text,
)


class TestLanguageCode:
    """Test LanguageCode parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("en", LanguageCode.EN),
        (" FR ", LanguageCode.FR),
        ("zh", LanguageCode.ZH),
        (LanguageCode.HI, LanguageCode.HI),
    ])
    def test_parse_supported(self, raw, expected):
        assert LanguageCode.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["xx", "", None, "und", LanguageCode.UNDETERMINED, 42])
    def test_parse_rejects_unsupported(self, raw):
        with pytest.raises(UnsupportedLanguageError):
            LanguageCode.parse(raw)

    def test_unsupported_language_is_value_error(self):
        with pytest.raises(ValueError):
            LanguageCode.parse("klingon")

    def test_supported_excludes_fallback(self):
        supported = LanguageCode.supported()
        assert LanguageCode.UNDETERMINED not in supported
        assert len(supported) == 8

    def test_str_is_code(self):
        assert str(LanguageCode.DE) == "de"


class TestFileKind:
    """Test MIME type dispatch."""

    @pytest.mark.parametrize("mime,kind", [
        ("application/pdf", FileKind.PDF),
        ("image/png", FileKind.IMAGE),
        ("image/jpeg", FileKind.IMAGE),
        ("text/plain; charset=utf-8", FileKind.TEXT),
        ("text/csv", FileKind.CSV),
    ])
    def test_known_types(self, mime, kind):
        assert FileKind.from_mime_type(mime) is kind

    @pytest.mark.parametrize("mime", ["application/zip", "", None, "text/html"])
    def test_unknown_types(self, mime):
        with pytest.raises(UnsupportedFormatError):
            FileKind.from_mime_type(mime)

    def test_uploaded_file_from_path_guesses_mime(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello there", encoding="utf-8")

        upload = UploadedFile.from_path(path)

        assert upload.filename == "notes.txt"
        assert upload.mime_type == "text/plain"
        assert upload.kind is FileKind.TEXT
        assert upload.data == b"hello there"


class TestWord:
    """Test Word validation and serialization."""

    @pytest.mark.parametrize("confidence", [-1, 100.5])
    def test_confidence_range(self, confidence):
        with pytest.raises(ValueError):
            Word(text="x", confidence=confidence, index=0)

    def test_negative_index(self):
        with pytest.raises(ValueError):
            Word(text="x", confidence=50, index=-1)

    def test_to_dict(self):
        word = Word(text="Hi", confidence=88.0, index=3, bounding_box=BoundingBox(1, 2, 3, 4))
        assert word.to_dict() == {
            'text': "Hi",
            'confidence': 88.0,
            'index': 3,
            'bbox': {'left': 1, 'top': 2, 'width': 3, 'height': 4},
        }


class TestWordsFromText:
    """Test text-derived word sequences."""

    def test_split_on_any_whitespace(self):
        words = words_from_text("Ths is\ta  tst.\n")
        assert words.texts() == ["Ths", "is", "a", "tst."]
        assert [w.index for w in words] == [0, 1, 2, 3]
        assert all(w.confidence == 100 and w.bounding_box is None for w in words)
        assert isinstance(words, TextDerivedWords)
        assert words.source == "text"

    def test_join_round_trip(self):
        text = "  one two\n\nthree   four "
        assert " ".join(words_from_text(text).texts()) == " ".join(text.split())

    def test_blank_text_has_no_words(self):
        assert len(words_from_text(" \n\t ")) == 0

    def test_ocr_words_source(self):
        assert OcrDerivedWords().source == "ocr"


class TestEditableWord:
    """Test EditableWord edits leave the original intact."""

    def test_edit(self):
        original = Word(text="Helo", confidence=70, index=0)
        editable = EditableWord(original=original, text="Helo", is_correct=False)

        editable.text = "Hello"

        assert editable.is_edited
        assert original.text == "Helo"


class TestPipelineResult:
    """Test result serialization."""

    def test_to_dict(self):
        result = PipelineResult(
            text="Hola mundo",
            words=words_from_text("Hola mundo"),
            original_text="Hello world",
            summary="Resumen.",
            confidence=0.85,
            detected_languages=(LanguageCode.EN,),
            translated_to=(LanguageCode.ES,),
        )

        data = result.to_dict()

        assert data['text'] == "Hola mundo"
        assert data['originalText'] == "Hello world"
        assert data['wordSource'] == "text"
        assert [w['text'] for w in data['words']] == ["Hola", "mundo"]
        assert data['detectedLanguages'] == ["en"]
        assert data['translatedTo'] == ["es"]
        assert data['confidence'] == 0.85
