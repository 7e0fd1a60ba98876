"""Credentials sent as i-doit auth headers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

USERNAME_HEADER = "X-RPC-Auth-Username"
PASSWORD_HEADER = "X-RPC-Auth-Password"
SESSION_HEADER = "X-RPC-Auth-Session"


class Credentials(Protocol):
    def headers(self) -> dict[str, str]: ...


@dataclass(frozen=True)
class PasswordCredentials:
    """Username and password, only used for idoit.login."""
    username: str
    password: str = field(repr=False)

    def headers(self) -> dict[str, str]:
        return {USERNAME_HEADER: self.username, PASSWORD_HEADER: self.password}


@dataclass(frozen=True)
class SessionCredentials:
    """Session token handed out by idoit.login."""
    session_id: str = field(repr=False)

    def headers(self) -> dict[str, str]:
        return {SESSION_HEADER: self.session_id}
