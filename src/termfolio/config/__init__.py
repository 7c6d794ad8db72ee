"""Configuration management for termfolio.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides with the ``TERMFOLIO_`` prefix.
"""

from termfolio.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
