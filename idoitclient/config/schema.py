"""Configuration schema using Pydantic.

Single data model for connection settings, persisted to ~/.idoitclient/config.json
and overridable through IDOIT_* environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    """Root configuration for idoitclient."""
    url: str = ""  # JSON-RPC endpoint, e.g. "https://cmdb.example.com/src/jsonrpc.php"
    api_key: str = ""
    username: str = ""  # Optional; login is skipped when empty
    password: str = ""
    language: str | None = None  # Sent as "language" param, e.g. "en" or "de"
    timeout: float = Field(default=20.0, gt=0)
    verify_tls: bool = True

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    model_config = SettingsConfigDict(
        env_prefix="IDOIT_",
        env_nested_delimiter="__",
    )
