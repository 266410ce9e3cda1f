"""Abstract vision-model interface for Folio."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any

from folio.errors import InferenceError
from folio.llm.models import LLMConfig, LLMResponse
from folio.llm.prompts import build_prompt, response_schema
from folio.pipeline.models import ConversionTarget, Page


class VisionProvider(ABC):
    """Provider-agnostic interface for reading one page image.

    Adapters implement `generate`; the pipeline only ever calls `infer`,
    which picks the prompt for the target and enforces the per-call timeout.
    """

    name: str = "llm"

    def __init__(self, config: LLMConfig) -> None:
        self.config = config

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        image: bytes,
        mime_type: str,
        json_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        """Send one image plus prompt and return the model's text."""
        ...

    async def infer(self, page: Page, target: ConversionTarget) -> str:
        """Return the raw page result for `target`. Raises InferenceError."""
        try:
            response = await asyncio.wait_for(
                self.generate(
                    build_prompt(target),
                    page.image,
                    page.mime_type,
                    json_schema=response_schema(target),
                ),
                timeout=self.config.timeout,
            )
        except TimeoutError as e:
            raise InferenceError(
                self.name,
                "infer",
                TimeoutError(f"page {page.index}: no response within {self.config.timeout:g}s"),
                retryable=True,
            ) from e
        return response.content
