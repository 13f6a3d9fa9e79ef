"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import Optional

import pendulum
import yaml
from pydantic import BaseModel, field_validator, model_validator

CONFIG_FILENAME = "config.yaml"
DEFAULT_EVENTS_FILE = "events.json"


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: str = "UTC"
    events_file: Optional[Path] = None
    events_url: Optional[str] = None
    api_token: Optional[str] = None
    request_timeout: int = 30
    log_level: str = "WARNING"

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone is a known IANA identifier."""
        try:
            pendulum.timezone(value)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, value: int) -> int:
        """Ensure request timeout is positive."""
        if value <= 0:
            raise ValueError("request_timeout must be greater than zero")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Ensure the log level is one the logging module knows."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @model_validator(mode="after")
    def validate_single_source(self) -> "AppConfig":
        """Only one event source may be configured."""
        if self.events_file is not None and self.events_url is not None:
            raise ValueError("Configure either events_file or events_url, not both")
        return self

    def get_events_file(self) -> Path:
        """Get the events file, falling back to ./events.json."""
        return self.events_file or Path.cwd() / DEFAULT_EVENTS_FILE

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.
        
        Args:
            config_path: Path to the YAML config file
            
        Returns:
            AppConfig instance
            
        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                "Create it with an event source (events_file or events_url) and a timezone, "
                "or drop --config to run on defaults with ./events.json."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError(
                f"{config_path} must map setting names (timezone, events_file, events_url, ...) to values."
            )

        return cls(**data)


def get_default_config_path() -> Path:
    """
    Get the default configuration file path.
    
    The working directory wins over the checkout the package lives in.
    """
    candidates = [
        Path.cwd() / CONFIG_FILENAME,
        Path(__file__).parent.parent / CONFIG_FILENAME,
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return candidates[0]
