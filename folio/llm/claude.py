"""Anthropic Claude adapter for Folio."""

from __future__ import annotations

import base64
from typing import Any

from anthropic import APIError, AsyncAnthropic, RateLimitError

from folio.errors import InferenceError
from folio.llm.base import VisionProvider
from folio.llm.models import LLMConfig, LLMResponse, TokenUsage


class ClaudeProvider(VisionProvider):
    """Claude adapter using the Anthropic async SDK.

    The Messages API has no response-schema switch, so for tables the schema
    travels inside the prompt only.
    """

    name = "claude"

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        self._client = AsyncAnthropic(
            api_key=config.api_key,  # falls back to ANTHROPIC_API_KEY env var
            max_retries=config.max_retries,
        )

    async def generate(
        self,
        prompt: str,
        image: bytes,
        mime_type: str,
        json_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        content = [
            {
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": mime_type,
                    "data": base64.b64encode(image).decode("ascii"),
                },
            },
            {"type": "text", "text": prompt},
        ]
        try:
            message = await self._client.messages.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                messages=[{"role": "user", "content": content}],
            )
        except APIError as e:
            raise InferenceError(
                "claude", "generate", e, retryable=isinstance(e, RateLimitError)
            ) from e

        text = "".join(block.text for block in message.content if hasattr(block, "text"))
        return LLMResponse(
            content=text,
            usage=TokenUsage(
                input_tokens=message.usage.input_tokens,
                output_tokens=message.usage.output_tokens,
            ),
            model=message.model,
        )
