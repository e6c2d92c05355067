"""Unit tests for language identification."""

from unittest.mock import patch

import pytest

from lingolens.core.language import identify, map_detected_code
from lingolens.core.models import LanguageCode


class TestIdentify:
    """Test identify() against real langdetect profiles."""

    def test_english(self):
        text = ("The quick brown fox jumps over the lazy dog. This sentence is written "
                "in plain English and should be easy to recognise.")
        assert identify(text) is LanguageCode.EN

    def test_french(self):
        text = ("Le renard brun rapide saute par-dessus le chien paresseux. Cette phrase "
                "est écrite en français et devrait être facile à reconnaître.")
        assert identify(text) is LanguageCode.FR

    def test_spanish(self):
        text = ("El veloz zorro marrón salta sobre el perro perezoso. Esta frase está "
                "escrita en español y debería ser fácil de reconocer.")
        assert identify(text) is LanguageCode.ES

    def test_unsupported_language_is_undetermined(self):
        text = ("Быстрая коричневая лиса прыгает через ленивую собаку. Это предложение "
                "написано на русском языке.")
        assert identify(text) is LanguageCode.UNDETERMINED

    @pytest.mark.parametrize("text", ["", "   ", "hi", "short", None])
    def test_too_short_or_invalid(self, text):
        assert identify(text) is LanguageCode.UNDETERMINED

    def test_no_letters(self):
        assert identify("1234567890 0987654321 !!!") is LanguageCode.UNDETERMINED

    def test_urls_are_ignored(self):
        assert identify("https://example.com/a/very/long/path/name") is LanguageCode.UNDETERMINED

    def test_deterministic(self):
        text = "Guten Morgen, wie geht es Ihnen heute? Ich hoffe, es geht Ihnen gut."
        assert identify(text) is identify(text) is LanguageCode.DE

    def test_empty_detector_result(self):
        with patch('lingolens.core.language.detect_langs', return_value=[]):
            assert identify("Some long enough text here") is LanguageCode.UNDETERMINED


class TestMapDetectedCode:
    """Test raw detector code mapping."""

    @pytest.mark.parametrize("raw,expected", [
        ("en", LanguageCode.EN),
        ("zh-cn", LanguageCode.ZH),
        ("zh-tw", LanguageCode.ZH),
        ("JA", LanguageCode.JA),
        ("it", LanguageCode.UNDETERMINED),
        ("", LanguageCode.UNDETERMINED),
    ])
    def test_mapping(self, raw, expected):
        assert map_detected_code(raw) is expected
