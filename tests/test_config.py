"""Tests for folio.config: models and YAML loader."""

import pytest
import yaml
from unittest.mock import patch
from pydantic import ValidationError

from folio.config import DEFAULT_CONFIG_TEMPLATE, FolioConfig, LLMSettings, RenderConfig, load_config
from folio.config.loader import _expand_env_vars
from folio.config.models import OutputConfig


# ── FolioConfig defaults ──────────────────────────────────────────


class TestFolioConfigDefaults:
    def test_default_log_level(self):
        assert FolioConfig().log_level == "info"

    def test_default_log_format(self):
        assert FolioConfig().log_format == "text"

    def test_default_llm_provider(self):
        cfg = FolioConfig()
        assert cfg.llm.provider == "google"
        assert cfg.llm.model == "gemini-2.5-flash"
        assert cfg.llm.api_key_env == "GOOGLE_API_KEY"

    def test_default_output(self):
        assert FolioConfig().output == OutputConfig(base_dir=".", overwrite=True)


# ── Individual config model validations ───────────────────────────


class TestLLMSettings:
    def test_defaults(self):
        cfg = LLMSettings()
        assert cfg.max_tokens == 8192
        assert cfg.temperature == 0.1
        assert cfg.timeout == 120
        assert cfg.max_retries == 2
        assert cfg.base_url is None

    def test_invalid_provider_rejected(self):
        with pytest.raises(ValidationError):
            LLMSettings(provider="badprovider")

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            LLMSettings(timeout=0)


class TestRenderConfig:
    def test_defaults(self):
        cfg = RenderConfig()
        assert cfg.max_pages == 10
        assert cfg.scale == 2.0
        assert cfg.max_file_size_mb == 50

    @pytest.mark.parametrize("field", ["max_pages", "scale", "max_file_size_mb"])
    def test_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            RenderConfig(**{field: 0})


class TestFolioConfigValidation:
    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            FolioConfig(log_level="verbose")

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            FolioConfig(log_format="xml")


# ── Loader ────────────────────────────────────────────────────────


class TestLoadConfig:
    def test_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("folio.config.loader.Path.home", return_value=tmp_path / "home"):
            cfg = load_config()
        assert cfg == FolioConfig()

    def test_cli_path_wins(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "folio.yaml").write_text("log_level: debug\n")
        explicit = tmp_path / "explicit.yaml"
        explicit.write_text("log_level: error\n")

        assert load_config(str(explicit)).log_level == "error"

    def test_missing_cli_path(self, tmp_path):
        with pytest.raises(ValueError, match="Config file not found"):
            load_config(str(tmp_path / "nope.yaml"))

    def test_project_local_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "folio.yaml").write_text("render:\n  max_pages: 3\n")
        assert load_config().render.max_pages == 3

    def test_user_global_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        home = tmp_path / "home"
        (home / ".folio").mkdir(parents=True)
        (home / ".folio" / "config.yaml").write_text("output:\n  overwrite: false\n")
        with patch("folio.config.loader.Path.home", return_value=home):
            cfg = load_config()
        assert cfg.output.overwrite is False

    def test_empty_file_is_skipped(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "folio.yaml").write_text("")
        with patch("folio.config.loader.Path.home", return_value=tmp_path / "home"):
            assert load_config() == FolioConfig()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("llm: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(str(path))

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("llm:\n  provider: nope\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config(str(path))

    def test_env_var_expansion(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FOLIO_OUT", "/srv/exports")
        path = tmp_path / "cfg.yaml"
        path.write_text("output:\n  base_dir: ${FOLIO_OUT}\n")
        assert load_config(str(path)).output.base_dir == "/srv/exports"

    def test_default_template_is_valid(self):
        cfg = FolioConfig(**yaml.safe_load(DEFAULT_CONFIG_TEMPLATE))
        assert cfg == FolioConfig()


class TestExpandEnvVars:
    def test_missing_var_becomes_empty(self, monkeypatch):
        monkeypatch.delenv("FOLIO_UNSET_VAR", raising=False)
        assert _expand_env_vars("x${FOLIO_UNSET_VAR}y") == "xy"

    def test_nested_structures(self, monkeypatch):
        monkeypatch.setenv("FOLIO_A", "1")
        assert _expand_env_vars({"k": ["${FOLIO_A}", 2]}) == {"k": ["1", 2]}
