"""
Translation gateway clients.

The gateway is an external service that translates one bounded chunk per
request. Every failure mode (transport error, non-success status, malformed
body) is surfaced as a GatewayError subclass; the orchestrator decides what
to do with it.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from lingolens.config import REQUEST_TIMEOUT, TRANSLATION_API_URL
from lingolens.core.exceptions import GatewayConnectionError, GatewayResponseError

logger = logging.getLogger(__name__)

# Source language sent when the document language is undetermined
AUTO_SOURCE_LANGUAGE = "auto"


class TranslationGateway(ABC):
    """Abstract base class for translation gateways"""

    @abstractmethod
    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        """
        Translate a single chunk.

        Args:
            text: Chunk to translate
            source_language: Source code, or "auto"
            target_language: Target code

        Returns:
            Translated text

        Raises:
            GatewayError: On any failure
        """
        pass

    async def close(self):
        """Release any held resources"""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()


class HttpTranslationGateway(TranslationGateway):
    """
    Gateway speaking the JSON contract
    `{text, sourceLanguage, targetLanguage}` -> `{translatedText}`.
    """

    def __init__(
        self,
        api_url: str = TRANSLATION_API_URL,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            api_url: Full URL of the translate endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create a persistent HTTP client with connection pooling"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport
            )
        return self._client

    async def close(self):
        """Close the HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        payload = {
            "text": text,
            "sourceLanguage": source_language or AUTO_SOURCE_LANGUAGE,
            "targetLanguage": target_language,
        }
        logger.debug(f"Gateway request: {len(text)} chars, {payload['sourceLanguage']} -> {target_language}")

        client = await self._get_client()
        try:
            response = await client.post(self.api_url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GatewayResponseError(
                "Translation gateway returned an error status",
                status_code=e.response.status_code,
                context={'body': e.response.text[:200]}
            ) from e
        except httpx.HTTPError as e:
            raise GatewayConnectionError(
                f"Translation gateway unreachable: {e}",
                {'url': self.api_url}
            ) from e

        try:
            translated = response.json()["translatedText"]
        except (ValueError, KeyError, TypeError) as e:
            raise GatewayResponseError(
                "Malformed translation gateway response",
                status_code=response.status_code
            ) from e

        if not isinstance(translated, str):
            raise GatewayResponseError(
                "translatedText is not a string",
                status_code=response.status_code
            )
        return translated
