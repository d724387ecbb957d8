"""Config schema and accessor."""

from __future__ import annotations

import os
from typing import Any

from loguru import logger

from discord_addons.core.errors import AddonsConfigurationError

_ENV_OVERRIDE_KEYS = (
    "DISCORD_ADDONS_LOG_LEVEL",
    "DISCORD_ADDONS_WEBHOOK_AUDIT_REASON",
)
_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _load_env_overrides() -> dict[str, str]:
    return {k: os.environ.get(k, "") for k in _ENV_OVERRIDE_KEYS}


class Config:
    """Config accessor; env overrides win over file values."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data or {}
        self._env: dict[str, str] = _load_env_overrides()

    def reload(self, data: dict[str, Any], *, validate: bool = True) -> None:
        """Replace config data and re-read env overrides."""
        self._data = data or {}
        self._env = _load_env_overrides()
        if validate:
            self._validate()
        logger.debug("Config reloaded: log_level={}", self.log_level)

    def _validate(self) -> None:
        """Raise AddonsConfigurationError on malformed values."""
        if self.log_level not in _LOG_LEVELS:
            raise AddonsConfigurationError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}",
                code="invalid_log_level",
                details={"log_level": self.log_level},
            )
        webhooks = self._data.get("webhooks")
        if webhooks is not None and not isinstance(webhooks, dict):
            raise AddonsConfigurationError(
                "webhooks must be a mapping",
                code="invalid_webhooks",
                details={"type": type(webhooks).__name__},
            )

    @property
    def raw(self) -> dict[str, Any]:
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by dot-separated path."""
        obj: Any = self._data
        for part in key.split("."):
            if isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    @property
    def log_level(self) -> str:
        env_val = self._env.get("DISCORD_ADDONS_LOG_LEVEL", "").strip()
        if env_val:
            return env_val.upper()
        return str(self._data.get("log_level", "INFO")).upper()

    @property
    def webhook_audit_reason(self) -> str | None:
        """Audit log reason attached to webhook creation when the caller gives none."""
        env_val = self._env.get("DISCORD_ADDONS_WEBHOOK_AUDIT_REASON", "").strip()
        if env_val:
            return env_val
        val = self.get("webhooks.audit_reason")
        if val and isinstance(val, str) and val.strip():
            return val.strip()
        return None


cfg: Config = Config({})
