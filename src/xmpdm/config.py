"""Configuration management for xmpdm.

Supports loading configuration from:
1. Environment variables (XMPDM_*)
2. Config file (~/.xmpdm/config.yaml)
3. Default values

Example config file (~/.xmpdm/config.yaml):
    scan:
      use_sidecar: true
      sidecar_extension: ".xmp"
    http:
      timeout_seconds: 30
      max_download_mb: 256

Configuration only affects how XMP payloads are located and fetched;
extraction from a parsed document does not read it.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".xmpdm" / "config.yaml",
    Path.home() / ".config" / "xmpdm" / "config.yaml",
    Path(".xmpdm.yaml"),
]


@dataclass
class ScanConfig:
    """How XMP packets are located in local files."""

    use_sidecar: bool = True
    sidecar_extension: str = ".xmp"


@dataclass
class HTTPConfig:
    """Remote fetch configuration."""

    timeout_seconds: float = 30.0
    max_download_mb: int = 256

    @property
    def max_download_bytes(self) -> int:
        return self.max_download_mb * 1024 * 1024


@dataclass
class XmpdmConfig:
    """Main configuration for xmpdm."""

    scan: ScanConfig = field(default_factory=ScanConfig)
    http: HTTPConfig = field(default_factory=HTTPConfig)


def _load_yaml_config(locations: list[Path] | None = None) -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in locations or CONFIG_LOCATIONS:
        if not config_path.exists():
            continue
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Ignoring unreadable config file {config_path}: {e}")
            continue
        if isinstance(data, dict):
            return data
        if data is not None:
            logger.warning(f"Ignoring config file {config_path}: expected a mapping")
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with XMPDM_ prefix."""
    return os.environ.get(f"XMPDM_{key}", default)


def _parse_bool(value: str | None) -> bool | None:
    """Parse boolean from string."""
    if value is None:
        return None
    return value.lower() in ("true", "1", "yes", "on")


def load_config(locations: list[Path] | None = None) -> XmpdmConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (XMPDM_*)
    2. Config file (~/.xmpdm/config.yaml)
    3. Default values
    """
    file_config = _load_yaml_config(locations)

    # Scan config
    scan_config = file_config.get("scan") or {}
    use_sidecar = _parse_bool(_get_env("USE_SIDECAR"))
    scan = ScanConfig(
        use_sidecar=(
            use_sidecar if use_sidecar is not None else bool(scan_config.get("use_sidecar", True))
        ),
        sidecar_extension=_get_env("SIDECAR_EXTENSION")
        or scan_config.get("sidecar_extension", ".xmp"),
    )

    # HTTP config
    http_config = file_config.get("http") or {}
    http = HTTPConfig(
        timeout_seconds=float(
            _get_env("HTTP_TIMEOUT") or http_config.get("timeout_seconds", 30.0)
        ),
        max_download_mb=int(
            _get_env("HTTP_MAX_DOWNLOAD_MB") or http_config.get("max_download_mb", 256)
        ),
    )

    return XmpdmConfig(scan=scan, http=http)


# Global config instance (lazy loaded)
_config: XmpdmConfig | None = None


def get_config() -> XmpdmConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
