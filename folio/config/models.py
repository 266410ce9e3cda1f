from typing import Literal

from pydantic import BaseModel, Field


class LLMSettings(BaseModel):
    provider: Literal["google", "anthropic", "openai", "ollama", "auto"] = "google"
    model: str = "gemini-2.5-flash"
    api_key_env: str = "GOOGLE_API_KEY"
    max_tokens: int = Field(default=8192, gt=0)
    temperature: float = Field(default=0.1, ge=0)
    timeout: int = Field(default=120, gt=0)
    max_retries: int = Field(default=2, ge=0)
    base_url: str | None = None


class RenderConfig(BaseModel):
    max_pages: int = Field(default=10, gt=0)
    scale: float = Field(default=2.0, gt=0)
    max_file_size_mb: int = Field(default=50, gt=0)


class OutputConfig(BaseModel):
    base_dir: str = "."
    overwrite: bool = True


class FolioConfig(BaseModel):
    llm: LLMSettings = Field(default_factory=LLMSettings)
    render: RenderConfig = Field(default_factory=RenderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
