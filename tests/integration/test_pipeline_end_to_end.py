"""
End-to-end tests of the document pipeline.

Covers the proofreading workflow: extract a short text, annotate its words,
then ask the (mocked) suggestion service for a correction.
"""

import json
from unittest.mock import patch

import httpx
import pytest

from lingolens.config import PipelineConfig
from lingolens.core.annotation import SuggestionClient, get_spell_oracle
from lingolens.core.models import LanguageCode, PipelineState
from lingolens.core.pipeline import DocumentPipeline
from lingolens.core.summarizer import NO_CONTENT_MESSAGE

pytestmark = pytest.mark.integration


class TestProofreadingWorkflow:
    """A misspelled sentence travels through extraction and annotation."""

    @pytest.mark.asyncio
    async def test_misspelled_sentence(self, identity_gateway, make_upload):
        pipeline = DocumentPipeline(identity_gateway, PipelineConfig(translation_delay=0))

        result = await pipeline.process(make_upload("Ths is a tst."), ["en"])

        assert result.words.texts() == ["Ths", "is", "a", "tst."]
        assert result.summary == NO_CONTENT_MESSAGE
        assert result.translated_to == ()

        annotated = get_spell_oracle().annotate(result.words)
        assert [word.is_correct for word in annotated] == [False, True, True, False]
        assert annotated[0].suggestions == ["This"]
        assert annotated[3].suggestions == ["test"]

        def handler(request):
            body = json.loads(request.content)
            assert body == {"context": result.text, "word": "Ths"}
            return httpx.Response(200, json={"suggestion": "This"})

        async with SuggestionClient("http://suggest.test/api/ai-suggestion",
                                    transport=httpx.MockTransport(handler)) as client:
            suggestion = await client.suggest(result.text, annotated[0].text)

        assert suggestion == "This"
        annotated[0].text = suggestion
        assert annotated[0].is_edited
        assert result.words[0].text == "Ths"

    @pytest.mark.asyncio
    async def test_matching_language_never_calls_gateway(self, recording_gateway, make_upload):
        text = ("This report describes the quarterly results of the company. Revenue grew "
                "steadily while operating costs remained stable throughout the period.")
        states = []
        pipeline = DocumentPipeline(recording_gateway, PipelineConfig(translation_delay=0))

        result = await pipeline.process(make_upload(text), ["en"], states.append)

        assert result.detected_languages == (LanguageCode.EN,)
        assert recording_gateway.calls == []
        assert PipelineState.SKIPPED in states
        assert result.text == text


class TestHttpGatewayEndToEnd:
    """French text translated through the HTTP gateway contract."""

    @pytest.mark.asyncio
    async def test_french_csv_to_english(self, make_upload):
        from lingolens.core.translation import HttpTranslationGateway

        requests = []

        def handler(request):
            body = json.loads(request.content)
            requests.append(body)
            return httpx.Response(200, json={"translatedText": f"[{body['targetLanguage']}] {body['text']}"})

        gateway = HttpTranslationGateway("http://gateway.test/api/translate",
                                         transport=httpx.MockTransport(handler))
        csv = ("phrase,note\n"
               "Le chat dort sur le canapé depuis ce matin,calme\n"
               "Les enfants jouent dans le jardin avec leurs amis,joyeux\n")

        with patch('lingolens.core.pipeline.identify', return_value=LanguageCode.FR):
            async with gateway:
                result = await DocumentPipeline(gateway, PipelineConfig(translation_delay=0)).process(
                    make_upload(csv, "text/csv", "phrases.csv"), ["en"]
                )

        assert requests[0]['sourceLanguage'] == "fr"
        assert requests[0]['targetLanguage'] == "en"
        assert result.text.startswith("[en] phrase\tnote")
        assert result.original_text.startswith("phrase\tnote")
        assert result.detected_languages == (LanguageCode.FR,)
