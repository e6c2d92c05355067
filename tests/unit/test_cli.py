"""Unit tests for the command-line helpers."""

import json
from types import SimpleNamespace
from unittest.mock import patch

import httpx

import process_document
from lingolens.config import PipelineConfig
from lingolens.core.annotation import SuggestionClient
from lingolens.core.compare import diff_words
from lingolens.core.models import words_from_text


def _result(text):
    return SimpleNamespace(text=text, words=words_from_text(text))


def _client_factory(handler):
    def _make(api_url, timeout):
        return SuggestionClient(api_url, timeout, transport=httpx.MockTransport(handler))
    return _make


class TestSpellingReport:
    """Test --check-spelling output data."""

    def test_dictionary_only(self):
        report = process_document.spelling_report(_result("Ths is a tst."), PipelineConfig())

        assert report == [
            {"word": "Ths", "index": 0, "suggestions": ["This"]},
            {"word": "tst.", "index": 3, "suggestions": ["test"]},
        ]

    def test_ai_suggestions_use_configured_url(self):
        seen = []

        def handler(request):
            seen.append((str(request.url), json.loads(request.content)))
            return httpx.Response(200, json={"suggestion": "This"})

        config = PipelineConfig(suggestion_api_url="http://suggest.test/api/ai-suggestion")
        with patch('process_document.SuggestionClient', _client_factory(handler)):
            report = process_document.spelling_report(_result("Ths is fine."), config, use_ai=True)

        assert report == [{"word": "Ths", "index": 0, "suggestions": ["This"], "aiSuggestion": "This"}]
        assert seen == [("http://suggest.test/api/ai-suggestion", {"context": "Ths is fine.", "word": "Ths"})]

    def test_ai_failure_keeps_word(self):
        config = PipelineConfig(suggestion_api_url="http://suggest.test/api/ai-suggestion")
        with patch('process_document.SuggestionClient', _client_factory(lambda request: httpx.Response(503))):
            report = process_document.spelling_report(_result("Ths"), config, use_ai=True)

        assert report[0]["aiSuggestion"] == "Ths"


class TestPrintComparison:
    """Test the human readable comparison."""

    def test_changes_listed(self, capsys):
        process_document.print_comparison(diff_words("a b c", "a x c"), enable_colors=False)

        assert capsys.readouterr().out == "- b\n+ x\n"

    def test_identical(self, capsys):
        process_document.print_comparison(diff_words("a b", "a b"), enable_colors=False)

        assert "same words" in capsys.readouterr().out
