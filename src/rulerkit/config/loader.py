"""
Ruler client configuration loading.

Search order:
1. Explicit path
2. .rulerkit/config.yaml (project root)
3. ~/.rulerkit/config.yaml (user home)
4. RULERKIT_* environment settings

The file holds the client record either at the top level or under a
``ruler:`` key:

    ruler:
      address: https://mimir.example.com/
      id: tenant-1
      key: s3cr3t
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml

from rulerkit.clients.ruler import RulerClientConfig
from rulerkit.config.settings import Settings, get_settings
from rulerkit.core.errors import ConfigurationError

logger = structlog.get_logger()


def get_config_path(explicit_path: str | Path | None = None) -> Path | None:
    """
    Find the configuration file to use.

    Returns:
        Path to config file or None if not found
    """
    if explicit_path:
        path = Path(explicit_path)
        if path.exists():
            return path
        return None

    cwd_config = Path.cwd() / ".rulerkit" / "config.yaml"
    if cwd_config.exists():
        return cwd_config

    home_config = Path.home() / ".rulerkit" / "config.yaml"
    if home_config.exists():
        return home_config

    return None


def _read_file(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"failed to load config file: {e}", details={"path": str(path)}
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError("config file must be a mapping", details={"path": str(path)})

    section = data.get("ruler", data)
    if not isinstance(section, dict):
        raise ConfigurationError("'ruler' section must be a mapping", details={"path": str(path)})

    logger.debug("loaded_config", path=str(path))
    return section


def load_client_config(
    path: str | Path | None = None,
    settings: Settings | None = None,
) -> RulerClientConfig:
    """
    Resolve the ruler client configuration.

    Values from the config file win; missing ones are filled from settings.

    Raises:
        ConfigurationError: if an explicit path does not exist, the file is
            unreadable, or no address / tenant id can be resolved.
    """
    if path is not None and not Path(path).exists():
        raise ConfigurationError("config file not found", details={"path": str(path)})

    config_path = get_config_path(path)
    data = _read_file(config_path) if config_path else {}

    settings = settings or get_settings()
    config = RulerClientConfig(
        address=str(data.get("address") or settings.ruler_address or ""),
        id=str(data.get("id") or settings.ruler_tenant_id or ""),
        key=str(data.get("key") or settings.ruler_key or ""),
    )

    if not config.address:
        raise ConfigurationError("no ruler address configured")
    if not config.id:
        raise ConfigurationError("no tenant id configured")

    return config
