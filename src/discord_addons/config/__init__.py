"""Configuration: YAML + env overlay."""

from discord_addons.config.loader import DEFAULTS, _deep_update, load_config, load_config_with_env
from discord_addons.config.schema import Config, cfg

__all__ = ["DEFAULTS", "Config", "_deep_update", "cfg", "load_config", "load_config_with_env"]
