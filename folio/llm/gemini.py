"""Google Gemini adapter for Folio."""

from __future__ import annotations

from typing import Any

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from folio.errors import InferenceError
from folio.llm.base import VisionProvider
from folio.llm.models import LLMConfig, LLMResponse, TokenUsage


class GeminiProvider(VisionProvider):
    """Gemini adapter using the google-genai async client."""

    name = "gemini"

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        self._client = genai.Client(api_key=config.api_key)

    async def generate(
        self,
        prompt: str,
        image: bytes,
        mime_type: str,
        json_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        generation_config = types.GenerateContentConfig(
            max_output_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
        )
        if json_schema is not None:
            generation_config.response_mime_type = "application/json"
            generation_config.response_schema = json_schema

        try:
            response = await self._client.aio.models.generate_content(
                model=self.config.model,
                contents=[types.Part.from_bytes(data=image, mime_type=mime_type), prompt],
                config=generation_config,
            )
        except genai_errors.APIError as e:
            raise InferenceError("gemini", "generate", e, retryable=e.code == 429) from e
        except httpx.HTTPError as e:
            raise InferenceError("gemini", "generate", e, retryable=True) from e

        usage = response.usage_metadata
        return LLMResponse(
            content=response.text or "",
            usage=TokenUsage(
                input_tokens=(usage.prompt_token_count or 0) if usage else 0,
                output_tokens=(usage.candidates_token_count or 0) if usage else 0,
            ),
            model=self.config.model,
        )
