"""Unit tests for the HTTP translation gateway."""

import json

import httpx
import pytest

from lingolens.core.exceptions import GatewayConnectionError, GatewayResponseError
from lingolens.core.translation import HttpTranslationGateway, TranslationOrchestrator, NoDelayPolicy

API_URL = "http://gateway.test/api/translate"


def make_gateway(handler):
    return HttpTranslationGateway(API_URL, timeout=5, transport=httpx.MockTransport(handler))


class TestHttpTranslationGateway:
    """Test the JSON gateway contract."""

    @pytest.mark.asyncio
    async def test_request_payload_and_response(self):
        seen = {}

        def handler(request):
            seen['url'] = str(request.url)
            seen['body'] = json.loads(request.content)
            return httpx.Response(200, json={"translatedText": "Bonjour"})

        async with make_gateway(handler) as gateway:
            result = await gateway.translate("Hello", "en", "fr")

        assert result == "Bonjour"
        assert seen['url'] == API_URL
        assert seen['body'] == {"text": "Hello", "sourceLanguage": "en", "targetLanguage": "fr"}

    @pytest.mark.asyncio
    async def test_missing_source_becomes_auto(self):
        bodies = []

        def handler(request):
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"translatedText": "x"})

        async with make_gateway(handler) as gateway:
            await gateway.translate("Hello", "", "fr")

        assert bodies[0]['sourceLanguage'] == "auto"

    @pytest.mark.asyncio
    async def test_error_status(self):
        gateway = make_gateway(lambda request: httpx.Response(500, json={"error": "down"}))

        with pytest.raises(GatewayResponseError) as exc_info:
            await gateway.translate("Hello", "en", "fr")
        await gateway.close()

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", [
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={"somethingElse": "x"}),
        httpx.Response(200, json={"translatedText": None}),
    ])
    async def test_malformed_body(self, response):
        gateway = make_gateway(lambda request: response)

        with pytest.raises(GatewayResponseError):
            await gateway.translate("Hello", "en", "fr")
        await gateway.close()

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        gateway = make_gateway(handler)

        with pytest.raises(GatewayConnectionError):
            await gateway.translate("Hello", "en", "fr")
        await gateway.close()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        gateway = make_gateway(lambda request: httpx.Response(200, json={"translatedText": "x"}))
        await gateway.translate("Hello", "en", "fr")

        await gateway.close()
        await gateway.close()

        assert gateway._client is None

    @pytest.mark.asyncio
    async def test_orchestrator_recovers_from_http_errors(self):
        responses = iter([
            httpx.Response(200, json={"translatedText": "ONE"}),
            httpx.Response(503),
            httpx.Response(200, json={"translatedText": "THREE"}),
        ])
        gateway = make_gateway(lambda request: next(responses))
        orchestrator = TranslationOrchestrator(gateway, chunk_size=3, rate_limit=NoDelayPolicy())

        result = await orchestrator.translate("onetwothr", "en", "fr")
        await gateway.close()

        assert result == "ONE two THREE"
