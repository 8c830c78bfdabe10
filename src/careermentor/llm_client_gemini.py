"""Gemini LLM client for the career mentor bot.

This module implements an LLM client that talks to the Google Generative
Language REST API (``models/<model>:generateContent``) over aiohttp.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from .config import GenerationConfig
from .errors import GenerationError
from .llm_client import LLMClient

logger = logging.getLogger(__name__)


class GeminiLLMClient(LLMClient):
    """LLM client using the Gemini ``generateContent`` endpoint.

    Example usage:
        config = GenerationConfig(api_key="...", model="gemini-1.5-flash")
        client = GeminiLLMClient(config)
        response = await client.generate_completion("Write hello world in Python")
        await client.close()
    """

    def __init__(self, config: Optional[GenerationConfig] = None, session: Optional[aiohttp.ClientSession] = None):
        """Initialize the Gemini client.

        Args:
            config: GenerationConfig with key, model and timeout
            session: Optional shared aiohttp session. If None, one is created
                lazily and owned by this client.
        """
        config = config or GenerationConfig()
        super().__init__(config)
        self.api_key = config.api_key
        self.model = config.model
        self.base_url = config.base_url.rstrip("/")
        self.timeout = config.timeout
        self.temperature = config.temperature
        self._session = session
        self._owns_session = session is None

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def _build_payload(self, prompt: str, **kwargs: Any) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }
        temperature = kwargs.get("temperature", self.temperature)
        if temperature is not None:
            payload["generationConfig"] = {"temperature": temperature}
        return payload

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def generate_completion(self, prompt: str, **kwargs: Any) -> str:
        """Generate a completion via the Gemini REST API.

        Args:
            prompt: The prompt to send to the model
            **kwargs: ``temperature`` overrides the configured value

        Returns:
            The generated text response

        Raises:
            GenerationError: If the request fails, times out, or the response
                carries no text.
        """
        if not self.api_key:
            raise GenerationError("Gemini API key is not configured")

        logger.debug("Gemini request to %s (%d prompt chars)", self.model, len(prompt))
        session = await self._get_session()
        try:
            async with session.post(
                self.endpoint,
                json=self._build_payload(prompt, **kwargs),
                headers={"x-goog-api-key": self.api_key},
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                response_text = await response.text()
                if response.status != 200:
                    raise GenerationError(
                        f"Gemini returned status {response.status}: {response_text[:500]}"
                    )
        except asyncio.TimeoutError:
            raise GenerationError(f"Gemini request timed out after {self.timeout} seconds")
        except aiohttp.ClientError as e:
            raise GenerationError(f"Gemini request failed: {e}")

        return self._extract_text_from_response(response_text)

    def _extract_text_from_response(self, response: str) -> str:
        """Extract text content from a ``generateContent`` JSON response.

        The text lives in ``candidates[0].content.parts[*].text``. A prompt
        blocked by safety filters comes back with ``promptFeedback`` and no
        candidates.

        Raises:
            GenerationError: If the body is not JSON or holds no text.
        """
        try:
            data = json.loads(response)
        except json.JSONDecodeError:
            raise GenerationError("Gemini response is not valid JSON")

        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not candidates:
            feedback = data.get("promptFeedback") if isinstance(data, dict) else None
            raise GenerationError(f"Gemini returned no candidates (feedback: {feedback})")

        content = candidates[0].get("content") or {}
        parts = [p.get("text", "") for p in content.get("parts", []) if isinstance(p, dict)]
        text = "".join(parts)
        if not text:
            reason = candidates[0].get("finishReason")
            raise GenerationError(f"Gemini candidate has no text (finishReason: {reason})")
        return text

    async def close(self) -> None:
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None

