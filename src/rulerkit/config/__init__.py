"""
rulerkit configuration.

Provides:
- Pydantic-based settings (environment variables, .env files)
- YAML client configuration files with a project/user search order
"""

from rulerkit.config.loader import (
    get_config_path,
    load_client_config,
)
from rulerkit.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "get_config_path",
    "load_client_config",
]
