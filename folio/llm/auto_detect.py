"""Auto-detect the best available vision provider."""

from __future__ import annotations

import os

import httpx

from folio.config.models import LLMSettings
from folio.llm.base import VisionProvider
from folio.llm.models import LLMConfig

# Substrings that mark a local Ollama model as image-capable.
_OLLAMA_VISION_HINTS = ("llava", "vision", "-vl", "gemma3", "moondream", "minicpm-v")
_OLLAMA_DEFAULT_URL = "http://localhost:11434"


def _pick_ollama_model(models: list[dict]) -> str:
    names = [m["name"] for m in models]
    for name in names:
        if any(hint in name.lower() for hint in _OLLAMA_VISION_HINTS):
            return name
    return names[0]


def _detected_config(
    settings: LLMSettings,
    provider: str,
    model: str,
    api_key: str | None = None,
    base_url: str | None = None,
) -> LLMConfig:
    """Detected provider and model, with the user's tuning knobs carried over."""
    return LLMConfig(
        provider=provider,
        model=model,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
        timeout=settings.timeout,
        max_retries=settings.max_retries,
        api_key=api_key,
        base_url=base_url,
    )


def auto_detect_provider(settings: LLMSettings | None = None) -> VisionProvider:
    """Try providers in priority order and return the first available one.

    Order: Google Gemini > Anthropic > OpenAI > Ollama (local).
    max_tokens, temperature, timeout and max_retries come from settings;
    settings.base_url is used as the Ollama address.
    Raises ValueError if nothing is available.
    """
    settings = settings or LLMSettings()

    # 1. Google Gemini
    api_key = os.environ.get("GOOGLE_API_KEY") or os.environ.get("GEMINI_API_KEY")
    if api_key:
        from folio.llm.gemini import GeminiProvider

        return GeminiProvider(
            _detected_config(settings, "google", "gemini-2.5-flash", api_key=api_key)
        )

    # 2. Anthropic
    api_key = os.environ.get("ANTHROPIC_API_KEY")
    if api_key:
        from folio.llm.claude import ClaudeProvider

        return ClaudeProvider(
            _detected_config(settings, "anthropic", "claude-sonnet-4-20250514", api_key=api_key)
        )

    # 3. OpenAI
    api_key = os.environ.get("OPENAI_API_KEY")
    if api_key:
        from folio.llm.openai_adapter import OpenAIProvider

        return OpenAIProvider(
            _detected_config(settings, "openai", "gpt-4o", api_key=api_key)
        )

    # 4. Ollama (local)
    base_url = (settings.base_url or _OLLAMA_DEFAULT_URL).rstrip("/")
    try:
        resp = httpx.get(f"{base_url}/api/tags", timeout=2.0)
        resp.raise_for_status()
        models = resp.json().get("models", [])
        if models:
            from folio.llm.ollama import OllamaProvider

            return OllamaProvider(
                _detected_config(
                    settings, "ollama", _pick_ollama_model(models), base_url=base_url
                )
            )
    except (httpx.ConnectError, httpx.TimeoutException, httpx.HTTPStatusError):
        pass

    raise ValueError(
        "No vision provider found. Set llm.provider in folio.yaml or export an "
        "API key (GOOGLE_API_KEY, ANTHROPIC_API_KEY, OPENAI_API_KEY) or start Ollama."
    )
