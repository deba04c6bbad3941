"""Static configuration loading."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .constants import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    DEFAULT_REQUEST_TIMEOUT_S,
    DEFAULT_SYSINFO_PATH,
)
from .exceptions import ConfigError


@dataclass(frozen=True)
class BootNetConfig:
    """Service endpoints and document defaults."""

    cnapi_url: str
    napi_url: str
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT_S
    sysinfo_path: str = DEFAULT_SYSINFO_PATH
    dns_domain: str | None = None
    resolvers: tuple[str, ...] = ()
    routes: dict[str, str] = field(default_factory=dict)


def config_path(explicit: str | None = None) -> Path:
    """Return the config file path.

    Looks in this order:
    1. Explicit path (--config)
    2. File path from BOOTNET_CONFIG environment variable
    3. /opt/smartdc/booter/config.json
    """
    if explicit:
        return Path(explicit)
    return Path(os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)


def _service_url(data: dict[str, Any], key: str, cfg_path: Path) -> str:
    section = data.get(key)
    url = section.get("url") if isinstance(section, dict) else None
    if not url or not isinstance(url, str):
        raise ConfigError(f"Missing {key}.url in {cfg_path}")
    return url


def parse_config(data: Any, cfg_path: Path) -> BootNetConfig:
    """Validate decoded JSON and build a BootNetConfig.

    Raises:
        ConfigError: If required keys are missing or have the wrong type
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Config in {cfg_path} must be a JSON object")

    timeout = data.get("requestTimeout", DEFAULT_REQUEST_TIMEOUT_S)
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
        raise ConfigError(f"requestTimeout in {cfg_path} must be a positive integer")

    resolvers = data.get("resolvers") or []
    if not isinstance(resolvers, list) or not all(isinstance(r, str) for r in resolvers):
        raise ConfigError(f"resolvers in {cfg_path} must be a list of strings")

    routes = data.get("routes") or {}
    if not isinstance(routes, dict):
        raise ConfigError(f"routes in {cfg_path} must be an object")

    sysinfo_path = data.get("sysinfoPath", DEFAULT_SYSINFO_PATH)
    if not isinstance(sysinfo_path, str) or not sysinfo_path:
        raise ConfigError(f"sysinfoPath in {cfg_path} must be a non-empty string")

    return BootNetConfig(
        cnapi_url=_service_url(data, "cnapi", cfg_path),
        napi_url=_service_url(data, "napi", cfg_path),
        request_timeout=timeout,
        sysinfo_path=sysinfo_path,
        dns_domain=data.get("dnsDomain"),
        resolvers=tuple(resolvers),
        routes=dict(routes),
    )


def load_config(path: str | None = None) -> BootNetConfig:
    """Load the static configuration file.

    Args:
        path: Explicit config path, or None to use the default lookup

    Returns:
        BootNetConfig object

    Raises:
        ConfigError: If the file is not found or invalid
    """
    cfg_path = config_path(path)

    if not cfg_path.exists():
        raise ConfigError(
            f"Config file not found at {cfg_path}. "
            f"Pass --config or set {CONFIG_ENV_VAR} to the file path."
        )

    try:
        with cfg_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {cfg_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {cfg_path}: {e}") from e

    return parse_config(data, cfg_path)
