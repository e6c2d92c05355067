"""
Backends behind the companion HTTP server.

The translation backend answers the gateway contract served at
/api/translate; the suggestion backend answers /api/ai-suggestion with an
OpenAI-compatible chat completion.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from deep_translator import GoogleTranslator

from lingolens.config import (
    OPENAI_API_ENDPOINT,
    OPENAI_API_KEY,
    REQUEST_TIMEOUT,
    SUGGESTION_MODEL,
)
from lingolens.core.exceptions import GatewayResponseError, SuggestionError
from lingolens.core.models import LanguageCode
from lingolens.core.translation import AUTO_SOURCE_LANGUAGE, TranslationGateway

logger = logging.getLogger(__name__)


SUGGESTION_PROMPT = """
You are a spelling correction assistant.
Given the sentence: "{context}", and the word: "{word}", if the word is misspelled or incorrect, respond with the correct word.
If the word is correct, respond with the same word.
Respond with only the corrected word, nothing else.

Example:
Sentence: "Helo thi is ruturaj", Word: "Helo" -> "Hello"
Sentence: "Helo thi is ruturaj", Word: "thi" -> "this"
Sentence: "Helo thi is ruturaj", Word: "is" -> "is"
Sentence: "Helo thi is ruturaj", Word: "ruturaj" -> "ruturaj"

Now, given the sentence: "{context}", and the word: "{word}", respond with only the corrected word.
"""


class TranslationBackend(ABC):
    """Synchronous machine translation used by the /api/translate route."""

    @abstractmethod
    def translate(self, text: str, source_language: str, target_language: str) -> str:
        pass


# Google expects regional codes for Chinese
GOOGLE_LANGUAGE_CODES = {
    LanguageCode.ZH.value: "zh-CN",
}


def google_language_code(code: str) -> str:
    """Map a gateway language code to the code Google Translate accepts."""
    if not code:
        return AUTO_SOURCE_LANGUAGE
    return GOOGLE_LANGUAGE_CODES.get(code.lower(), code)


class GoogleTranslatorBackend(TranslationBackend):
    """Google Translate through deep-translator (no API key needed)."""

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        translator = GoogleTranslator(
            source=google_language_code(source_language),
            target=google_language_code(target_language)
        )
        return translator.translate(text)


class BackendTranslationGateway(TranslationGateway):
    """
    In-process gateway over a TranslationBackend.

    Lets the server run the pipeline without calling itself over HTTP.
    Blocking backend calls run in a worker thread.
    """

    def __init__(self, backend: TranslationBackend):
        self.backend = backend

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        try:
            translated = await asyncio.to_thread(
                self.backend.translate, text, source_language, target_language
            )
        except Exception as e:
            raise GatewayResponseError(
                f"Translation backend failed: {e}",
                context={'backend': type(self.backend).__name__}
            ) from e
        if not isinstance(translated, str):
            raise GatewayResponseError("Translation backend returned no text")
        return translated


class SuggestionBackend(ABC):
    """Produces a single corrected word for a word in context."""

    @abstractmethod
    async def suggest(self, context: str, word: str) -> str:
        """
        Raises:
            SuggestionError: If no suggestion could be produced
        """
        pass


class OpenAISuggestionBackend(SuggestionBackend):
    """Spelling suggestions from an OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        api_endpoint: str = OPENAI_API_ENDPOINT,
        api_key: str = OPENAI_API_KEY,
        model: str = SUGGESTION_MODEL,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_endpoint = api_endpoint
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._transport = transport

    async def suggest(self, context: str, word: str) -> str:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": SUGGESTION_PROMPT.format(context=context, word=word)}],
            "max_tokens": 5,
            "temperature": 0.2,
        }

        # One client per call: Flask routes run each request in a fresh event loop
        async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self._transport) as client:
            try:
                response = await client.post(self.api_endpoint, json=payload, headers=headers)
                response.raise_for_status()
                data = response.json()
            except (httpx.HTTPError, ValueError) as e:
                raise SuggestionError(f"Suggestion request failed: {e}", {'model': self.model}) from e

        try:
            content = data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError):
            content = ""
        # An empty completion means "no opinion": keep the word
        return content.strip() or word
