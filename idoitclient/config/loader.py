"""Configuration loading utilities."""

import json
from pathlib import Path
from typing import Any

from idoitclient.config.schema import ClientConfig
from idoitclient.utils.helpers import get_data_path


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return get_data_path() / "config.json"


def load_config(config_path: Path | None = None) -> ClientConfig:
    """
    Load configuration from file, falling back to environment and defaults.

    Values from the file take precedence over IDOIT_* environment variables.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("config file must contain a JSON object")
            return config_from_data(data)
        except (json.JSONDecodeError, ValueError) as e:
            raise ValueError(
                f"Failed to load config from {path}: {e}. "
                "Fix the file or remove it to regenerate defaults."
            ) from e

    return ClientConfig()


def config_from_data(data: dict[str, Any]) -> ClientConfig:
    """Validate raw camelCase config data; raises ValueError when it does not validate."""
    return ClientConfig(**convert_keys(_migrate_config(dict(data))))


def save_config(config: ClientConfig, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = convert_to_camel(config.model_dump())

    with open(path, "w") as f:
        json.dump(data, f, indent=2)
    from idoitclient.config.access import clear_config_cache

    clear_config_cache(config_path=path)


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current."""
    # Older files nested the connection under "connection" and used "apikey"
    connection = data.pop("connection", None)
    if isinstance(connection, dict):
        for key, value in connection.items():
            data.setdefault(key, value)
    if "apikey" in data and "apiKey" not in data:
        data["apiKey"] = data.pop("apikey")
    return data


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
