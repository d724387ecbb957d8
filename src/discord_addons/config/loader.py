"""Config loading: YAML file over built-in defaults."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from discord_addons.core.errors import AddonsConfigurationError

DEFAULTS: dict[str, Any] = {
    "log_level": "INFO",
    "webhooks": {"audit_reason": None},
}


def _deep_update(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_update(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | Path) -> dict[str, Any]:
    """Load config from YAML (SafeLoader) merged over DEFAULTS. Missing file yields DEFAULTS."""
    path = Path(path)
    if not path.exists():
        logger.warning("Config file not found: {}", path)
        return _deep_update(DEFAULTS, {})

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise AddonsConfigurationError(
            f"Failed to parse config {path}",
            code="invalid_yaml",
            details={"path": str(path)},
            original_error=exc,
        ) from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        logger.warning("Config file {} has invalid structure (expected dict)", path)
        return _deep_update(DEFAULTS, {})
    return _deep_update(DEFAULTS, data)


def load_config_with_env(path: str | Path) -> dict[str, Any]:
    """Load .env into the environment, then the YAML config."""
    from dotenv import load_dotenv

    load_dotenv()
    return load_config(path)
