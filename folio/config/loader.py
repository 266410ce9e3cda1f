"""Resolve folio.yaml and build a validated FolioConfig."""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import FolioConfig

PROJECT_CONFIG = "folio.yaml"
USER_CONFIG = Path(".folio") / "config.yaml"

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def config_search_paths() -> list[Path]:
    """Implicit locations, highest priority first."""
    return [Path.cwd() / PROJECT_CONFIG, Path.home() / USER_CONFIG]


def load_config(cli_path: str | None = None) -> FolioConfig:
    """Load config: --config path, else ./folio.yaml, else ~/.folio/config.yaml, else defaults.

    An explicit path must exist. Empty files are skipped.
    """
    if cli_path:
        explicit = Path(cli_path)
        if not explicit.is_file():
            raise ValueError(f"Config file not found: {explicit}")
        candidates = [explicit]
    else:
        candidates = config_search_paths()

    for path in candidates:
        if not path.is_file():
            continue
        raw = _read_yaml(path)
        if raw is None:
            continue
        try:
            return FolioConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return FolioConfig()


def _read_yaml(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def _expand_env_vars(obj: Any) -> Any:
    """Substitute ${VAR} in every string leaf; unset variables become ""."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    return obj


# Default YAML template for `folio config init`
DEFAULT_CONFIG_TEMPLATE = """\
# folio.yaml

# Vision model used to read each page
llm:
  provider: "google"           # google | anthropic | openai | ollama | auto
  model: "gemini-2.5-flash"
  api_key_env: "GOOGLE_API_KEY"
  max_tokens: 8192
  temperature: 0.1
  timeout: 120                 # seconds per page
  max_retries: 2
  # base_url: "http://localhost:11434"   # ollama only

# Page rendering
render:
  max_pages: 10                # pages past this are skipped
  scale: 2.0                   # PDF rasterization zoom
  max_file_size_mb: 50

# Output
output:
  base_dir: "."
  overwrite: true

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
