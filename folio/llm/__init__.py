"""Vision provider abstraction layer."""

import os

from folio.config.models import LLMSettings
from folio.llm.base import VisionProvider
from folio.llm.claude import ClaudeProvider
from folio.llm.gemini import GeminiProvider
from folio.llm.models import LLMConfig, LLMResponse, TokenUsage
from folio.llm.ollama import OllamaProvider
from folio.llm.openai_adapter import OpenAIProvider
from folio.llm.prompts import TABLES_SCHEMA, build_prompt

_PROVIDER_MAP: dict[str, type[VisionProvider]] = {
    "google": GeminiProvider,
    "anthropic": ClaudeProvider,
    "openai": OpenAIProvider,
    "ollama": OllamaProvider,
}


def create_llm_provider(config: LLMSettings) -> VisionProvider:
    """Create a vision provider from app-level settings.

    Resolves the API key from the env var in config.api_key_env, then
    bridges LLMSettings to the provider-level LLMConfig.
    For "auto" provider, delegates to auto_detect_provider(config).
    """
    if config.provider == "auto":
        from folio.llm.auto_detect import auto_detect_provider

        return auto_detect_provider(config)

    cls = _PROVIDER_MAP.get(config.provider)
    if cls is None:
        raise ValueError(
            f"Unsupported LLM provider: {config.provider!r}. "
            f"Supported: {', '.join(_PROVIDER_MAP)}"
        )

    api_key: str | None = None
    # Ollama doesn't require an API key
    if config.provider != "ollama":
        api_key = os.environ.get(config.api_key_env)
        if not api_key:
            raise ValueError(
                f"Missing API key: set environment variable {config.api_key_env!r}"
            )

    llm_config = LLMConfig(
        provider=config.provider,
        model=config.model,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
        timeout=config.timeout,
        max_retries=config.max_retries,
        api_key=api_key,
        base_url=config.base_url,
    )
    return cls(llm_config)


__all__ = [
    "ClaudeProvider",
    "GeminiProvider",
    "LLMConfig",
    "LLMResponse",
    "OllamaProvider",
    "OpenAIProvider",
    "TABLES_SCHEMA",
    "TokenUsage",
    "VisionProvider",
    "build_prompt",
    "create_llm_provider",
]
