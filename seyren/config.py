"""
Configuration loading and validation for Seyren notifications.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Environment variable -> config field
ENV_OVERRIDES: dict[str, str] = {
    "SEYREN_URL": "base_url",
    "SLACK_WEBHOOK_URL": "slack_webhook_url",
    "SLACK_USERNAME": "slack_username",
    "SEYREN_HTTP_TIMEOUT": "http_timeout",
    "SEYREN_LOG_LEVEL": "log_level",
    "SEYREN_LOG_FILE": "log_file",
}


class SeyrenConfig(BaseModel):
    """Settings shared by every notification service."""
    model_config = ConfigDict(frozen=True)

    base_url: str = "http://localhost:8080/seyren"  # Externally visible UI URL
    slack_webhook_url: str = ""
    slack_username: str = "Seyren"
    http_timeout: float = Field(default=10, gt=0)  # Seconds
    log_level: str = "INFO"
    log_file: str | None = None  # Rotating file in addition to stdout


def load_config(
    config_path: str | Path | None = None,
    env: Mapping[str, str] | None = None
) -> SeyrenConfig:
    """
    Load and validate configuration from an optional YAML file and the environment.

    Environment variables take precedence over values from the file.

    Args:
        config_path: Path to the YAML configuration file (optional)
        env: Environment mapping (defaults to os.environ)

    Returns:
        Validated SeyrenConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
        yaml.YAMLError: If YAML parsing fails
    """
    raw_config: dict[str, Any] = {}

    if config_path is not None:
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with path.open('r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f) or {}

        if not isinstance(raw_config, dict):
            raise ValueError(f"Configuration must be a mapping: {config_path}")

    if env is None:
        env = os.environ

    for variable, field in ENV_OVERRIDES.items():
        if env.get(variable):
            raw_config[field] = env[variable]

    try:
        return SeyrenConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ValueError(f"Configuration validation error: {e}") from e
