"""Ollama adapter for Folio."""

from __future__ import annotations

import base64
import logging
from typing import Any
from urllib.parse import urlparse

import httpx

from folio.errors import InferenceError
from folio.llm.base import VisionProvider
from folio.llm.models import LLMConfig, LLMResponse, TokenUsage

logger = logging.getLogger(__name__)

_DEFAULT_BASE_URL = "http://localhost:11434"
_RETRYABLE_STATUS = {429, 502, 503, 504}


def _validate_base_url(url: str) -> str:
    """Validate Ollama base_url for SSRF and injection risks.

    Raises ValueError if the URL is malformed or contains injection patterns.
    Warns if the URL is not localhost (remote Ollama is valid but uncommon).
    """
    parsed = urlparse(url)

    if parsed.scheme not in ("http", "https"):
        raise ValueError(f"Ollama base_url must be http(s), got {parsed.scheme}")

    if "\r" in url or "\n" in url:
        raise ValueError("CRLF injection detected in base_url")

    allowed_hosts = {"localhost", "127.0.0.1", "::1", "0.0.0.0"}
    if parsed.hostname not in allowed_hosts:
        logger.warning(
            "Ollama base_url %s is not localhost, page images will leave this machine",
            parsed.hostname,
        )

    return url


class OllamaProvider(VisionProvider):
    """Ollama adapter using its REST chat API via httpx."""

    name = "ollama"

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        raw_url = (config.base_url or _DEFAULT_BASE_URL).rstrip("/")
        self._base_url = _validate_base_url(raw_url)

    async def generate(
        self,
        prompt: str,
        image: bytes,
        mime_type: str,
        json_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        payload: dict[str, Any] = {
            "model": self.config.model,
            "messages": [
                {
                    "role": "user",
                    "content": prompt,
                    "images": [base64.b64encode(image).decode("ascii")],
                },
            ],
            "stream": False,
            "options": {
                "temperature": self.config.temperature,
                "num_predict": self.config.max_tokens,
            },
        }
        if json_schema is not None:
            payload["format"] = json_schema

        try:
            async with httpx.AsyncClient() as client:
                resp = await client.post(
                    f"{self._base_url}/api/chat",
                    json=payload,
                    timeout=self.config.timeout,
                )
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            raise InferenceError(
                "ollama",
                "generate",
                e,
                retryable=e.response.status_code in _RETRYABLE_STATUS,
            ) from e
        except httpx.HTTPError as e:
            raise InferenceError("ollama", "generate", e, retryable=True) from e
        except ValueError as e:
            raise InferenceError("ollama", "generate", e) from e

        # ValidationError is a ValueError
        try:
            return LLMResponse(
                content=data.get("message", {}).get("content", ""),
                usage=TokenUsage(
                    input_tokens=data.get("prompt_eval_count", 0),
                    output_tokens=data.get("eval_count", 0),
                ),
                model=self.config.model,
            )
        except (AttributeError, ValueError) as e:
            raise InferenceError(
                "ollama", "generate", ValueError(f"Malformed Ollama response: {e}")
            ) from e
