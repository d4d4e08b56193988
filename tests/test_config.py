"""Tests for configuration loading."""

import os
from unittest.mock import patch

from readmegen.core.config import AppConfig, load_config

ENV_KEYS = ["GEMINI_API_KEY", "GEMINI_API_BASE_URL", "GITHUB_TOKEN", "GITHUB_API_BASE_URL", "READMEGEN_LOG_LEVEL"]


def clean_env():
    return {k: v for k, v in os.environ.items() if k not in ENV_KEYS}


class TestLoadConfig:
    """Tests for YAML + environment configuration."""

    def test_defaults_without_file(self, tmp_path):
        with patch.dict(os.environ, clean_env(), clear=True):
            config = load_config(str(tmp_path / "missing.yaml"))

        assert config == AppConfig()
        assert config.github.api_base_url == "https://api.github.com"
        assert config.github.token is None
        assert config.gemini.api_key is None
        assert config.logging.level == "INFO"

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "readmegen.yaml"
        path.write_text(
            "gemini:\n"
            "  api_key: from-file\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  structured: true\n"
        )

        with patch.dict(os.environ, clean_env(), clear=True):
            config = load_config(str(path))

        assert config.gemini.api_key == "from-file"
        assert config.logging.level == "DEBUG"
        assert config.logging.structured is True

    def test_environment_overrides_file(self, tmp_path):
        path = tmp_path / "readmegen.yaml"
        path.write_text("gemini:\n  api_key: from-file\n")
        env = clean_env()
        env.update({
            "GEMINI_API_KEY": "from-env",
            "GITHUB_TOKEN": "gh-token",
            "GITHUB_API_BASE_URL": "https://ghe.example.com/api/v3",
            "READMEGEN_LOG_LEVEL": "WARNING",
        })

        with patch.dict(os.environ, env, clear=True):
            config = load_config(str(path))

        assert config.gemini.api_key == "from-env"
        assert config.github.token == "gh-token"
        assert config.github.api_base_url == "https://ghe.example.com/api/v3"
        assert config.logging.level == "WARNING"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        with patch.dict(os.environ, clean_env(), clear=True):
            assert load_config(str(path)) == AppConfig()
