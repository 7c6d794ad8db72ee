"""Configuration management for termfolio.

Loads settings from a YAML configuration file, with environment variable
overrides (``TERMFOLIO_`` prefix, ``__`` for nested sections) for anything
the file leaves out. Supports .env files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/termfolio.yaml")


class TerminalConfig(BaseModel):
    prompt_text: str = Field(default="guest@portfolio:~$", description="Prompt echoed before each command")
    typing_delay: float = Field(default=0.018, ge=0, description="Seconds per revealed character")
    owner: str = Field(default="guest", description="Owner column of the detailed listing")
    group: str = Field(default="staff", description="Group column of the detailed listing")
    screen_rows: int = Field(default=24, gt=0)
    intro_enabled: bool = Field(default=True)


class SoundConfig(BaseModel):
    enabled: bool = Field(default=True, description="Initial state of the sound flag")
    backend: Literal["pygame", "null"] = Field(default="pygame")
    volume: float = Field(default=0.07, ge=0.0, le=1.0)
    sample_rate: int = Field(default=44100, gt=0)
    click_duration: float = Field(default=0.06, gt=0)


class ContentConfig(BaseModel):
    path: str | None = Field(default=None, description="YAML file with portfolio records")


class EndpointConfig(BaseModel):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)
    display_enabled: bool = Field(default=False, description="Open the pygame display window")
    fullscreen: bool = Field(default=False)
    cols: int = Field(default=100, gt=0)
    font_size: int = Field(default=20, gt=0)
    bg_color: tuple[int, int, int] = Field(default=(12, 12, 12))
    fg_color: tuple[int, int, int] = Field(default=(204, 204, 204))


class ClientConfig(BaseModel):
    base_url: str = Field(default="http://localhost:8080")
    timeout: float = Field(default=10.0, gt=0)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for termfolio.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "TERMFOLIO_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    terminal: TerminalConfig = Field(default_factory=TerminalConfig)
    sound: SoundConfig = Field(default_factory=SoundConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    endpoint: EndpointConfig = Field(default_factory=EndpointConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Sections present in the YAML file win; everything else comes from
    the environment, then the defaults.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data: dict = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    return Settings(**yaml_data)
