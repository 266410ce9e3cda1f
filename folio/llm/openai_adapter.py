"""OpenAI adapter for Folio."""

from __future__ import annotations

import base64
from typing import Any

from openai import APIError, AsyncOpenAI, RateLimitError

from folio.errors import InferenceError
from folio.llm.base import VisionProvider
from folio.llm.models import LLMConfig, LLMResponse, TokenUsage


class OpenAIProvider(VisionProvider):
    """OpenAI adapter using the async SDK."""

    name = "openai"

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        self._client = AsyncOpenAI(
            api_key=config.api_key,  # falls back to OPENAI_API_KEY env var
            base_url=config.base_url,
            max_retries=config.max_retries,
        )

    async def generate(
        self,
        prompt: str,
        image: bytes,
        mime_type: str,
        json_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        data_url = f"data:{mime_type};base64,{base64.b64encode(image).decode('ascii')}"
        kwargs: dict[str, Any] = {}
        if json_schema is not None:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self._client.chat.completions.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": prompt},
                            {"type": "image_url", "image_url": {"url": data_url}},
                        ],
                    }
                ],
                **kwargs,
            )
        except APIError as e:
            raise InferenceError(
                "openai", "generate", e, retryable=isinstance(e, RateLimitError)
            ) from e

        if not response.choices:
            raise InferenceError("openai", "generate", ValueError("No choices in OpenAI response"))
        usage = response.usage
        return LLMResponse(
            content=response.choices[0].message.content or "",
            usage=TokenUsage(
                input_tokens=usage.prompt_tokens if usage else 0,
                output_tokens=usage.completion_tokens if usage else 0,
            ),
            model=response.model,
        )
