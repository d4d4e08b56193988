"""Configuration management with environment overrides."""

import os
import yaml
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "configs/readmegen.yaml"


class GitHubConfig(BaseModel):
    """GitHub REST API configuration."""
    api_base_url: str = Field(default="https://api.github.com")
    token: Optional[str] = Field(default=None, description="Optional bearer token")


class GeminiConfig(BaseModel):
    """Gemini generative API configuration."""
    api_key: Optional[str] = Field(default=None, description="Gemini API key")
    api_base_url: str = Field(default="https://generativelanguage.googleapis.com")


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO")
    structured: bool = Field(default=False)


class AppConfig(BaseModel):
    """Application configuration."""
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration from file with environment overrides.

    Args:
        config_path: Path to config file (default: configs/readmegen.yaml)

    Returns:
        Loaded configuration
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    config_dict = {}

    if Path(config_path).exists():
        with open(config_path, "r") as f:
            config_dict = yaml.safe_load(f) or {}
        logger.debug(f"Loaded configuration from {config_path}")

    # Apply environment overrides
    if api_key := os.getenv("GEMINI_API_KEY"):
        config_dict.setdefault("gemini", {})["api_key"] = api_key
    if gemini_url := os.getenv("GEMINI_API_BASE_URL"):
        config_dict.setdefault("gemini", {})["api_base_url"] = gemini_url
    if github_token := os.getenv("GITHUB_TOKEN"):
        config_dict.setdefault("github", {})["token"] = github_token
    if github_url := os.getenv("GITHUB_API_BASE_URL"):
        config_dict.setdefault("github", {})["api_base_url"] = github_url
    if level := os.getenv("READMEGEN_LOG_LEVEL"):
        config_dict.setdefault("logging", {})["level"] = level

    return AppConfig(**config_dict)
