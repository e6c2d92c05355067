"""
Client for the LLM-backed spelling suggestion service.

Interactive path only: the pipeline never calls it. A failed lookup must not
block the user, so `suggest` always falls back to the original word.
"""

import logging
from typing import Optional

import httpx

from lingolens.config import REQUEST_TIMEOUT, SUGGESTION_API_URL
from lingolens.core.exceptions import SuggestionError

logger = logging.getLogger(__name__)


class SuggestionClient:
    """Requests a single corrected word for a word in its sentence context."""

    def __init__(
        self,
        api_url: str = SUGGESTION_API_URL,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport
            )
        return self._client

    async def close(self):
        """Close the HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def request_suggestion(self, context: str, word: str) -> str:
        """
        Ask the service for a correction.

        Raises:
            SuggestionError: On transport failure or unusable response
        """
        client = await self._get_client()
        try:
            response = await client.post(self.api_url, json={"context": context, "word": word})
            response.raise_for_status()
            suggestion = response.json().get("suggestion")
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            raise SuggestionError(f"Suggestion service failed: {e}", {'word': word}) from e

        if not isinstance(suggestion, str) or not suggestion.strip():
            raise SuggestionError("Empty suggestion", {'word': word})
        return suggestion.strip()

    async def suggest(self, context: str, word: str) -> str:
        """Corrected word, or `word` itself if the service is unavailable."""
        try:
            return await self.request_suggestion(context, word)
        except SuggestionError as e:
            logger.warning(f"{e}; keeping original word")
            return word
