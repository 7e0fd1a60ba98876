"""Configuration module for idoitclient."""

from idoitclient.config.loader import load_config, save_config, get_config_path
from idoitclient.config.schema import ClientConfig
from idoitclient.config.access import get_config, clear_config_cache

__all__ = ["ClientConfig", "load_config", "save_config", "get_config_path", "get_config", "clear_config_cache"]
