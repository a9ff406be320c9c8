"""Client for the Gemini generateContent REST endpoint."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from highground.config import settings

from .errors import ConfigurationError, HttpError, NetworkError, ShapeError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Issues one generateContent request per prompt and returns the raw text.

    Single attempt, no retry. Failures surface as
    :class:`~highground.services.discovery.errors.DiscoveryError` subclasses.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_base: Optional[str] = None,
        generation_config: Optional[Dict[str, Any]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._api_key = api_key if api_key is not None else settings.gemini_api_key
        self._model = model or settings.gemini_model
        self._api_base = (api_base or settings.gemini_api_base).rstrip("/")
        self._generation_config = generation_config or self.default_generation_config()
        self._client = client

    @staticmethod
    def default_generation_config() -> Dict[str, Any]:
        return {
            "temperature": settings.gemini_temperature,
            "topK": settings.gemini_top_k,
            "topP": settings.gemini_top_p,
            "maxOutputTokens": settings.gemini_max_output_tokens,
        }

    @property
    def endpoint(self) -> str:
        return f"{self._api_base}/models/{self._model}:generateContent"

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def generate(self, prompt: str) -> str:
        if not self.is_configured:
            raise ConfigurationError("Gemini API key is not configured.")

        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": self._generation_config,
        }
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self._api_key,
        }

        logger.info("Sending request to Gemini model %s", self._model)
        try:
            if self._client is not None:
                response = await self._client.post(self.endpoint, headers=headers, json=body)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(self.endpoint, headers=headers, json=body)
        except httpx.HTTPError as exc:
            raise NetworkError(
                f"Gemini request failed: {type(exc).__name__}"
            ) from exc

        logger.info("Gemini API response status: %s", response.status_code)

        if not response.is_success:
            error_body = self._read_error_body(response)
            logger.error(
                "API error: %s %s. Response: %s",
                response.status_code,
                response.reason_phrase,
                error_body,
            )
            raise HttpError(response.status_code, response.reason_phrase, error_body)

        return self._extract_text(response)

    @staticmethod
    def _read_error_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _extract_text(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError as exc:
            raise ShapeError("Unexpected API response structure") from exc

        try:
            parts = data["candidates"][0]["content"]["parts"]
            text = parts[0].get("text", "")
        except (KeyError, IndexError, TypeError, AttributeError) as exc:
            logger.error("Unexpected API response structure: %.200s", data)
            raise ShapeError("Unexpected API response structure") from exc

        if not isinstance(text, str) or not text:
            logger.error("Empty text in Gemini API response")
            raise ShapeError("Empty response from generative model")

        logger.debug("Raw Gemini response length: %d", len(text))
        return text
