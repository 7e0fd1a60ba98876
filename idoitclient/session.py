"""Authenticated session against an i-doit instance."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger

from idoitclient.config.schema import ClientConfig
from idoitclient.jsonrpc.auth import Credentials, PasswordCredentials, SessionCredentials
from idoitclient.jsonrpc.batch import Batch
from idoitclient.jsonrpc.client import JsonRpcClient
from idoitclient.jsonrpc.requests import IdoitRequest, Login, LoginResponse, Logout, ObjectsRead
from idoitclient.transport.http import HttpTransport
from idoitclient.utils.exceptions import IdoitClientError, InvalidArgument

if TYPE_CHECKING:
    from idoitclient.models.base import IdoitObject, ObjectFactory


class IdoitSession:
    """
    Pairs a protocol client with the credentials used for every call.

    Sessions never change their credentials. ``login`` and ``logout`` return
    a new session, so a session can be shared between threads.

    Usage:
        anonymous = IdoitSession(JsonRpcClient(HttpTransport(url), api_key))
        with anonymous.login("admin", "secret") as session:
            servers = session.read_objects(Server)
    """

    def __init__(self, client: JsonRpcClient, credentials: Credentials | None = None):
        self.client = client
        self._credentials = credentials

    @property
    def credentials(self) -> Credentials | None:
        return self._credentials

    @property
    def is_authenticated(self) -> bool:
        return isinstance(self._credentials, SessionCredentials)

    def login(self, username: str, password: str) -> IdoitSession:
        """Exchange username/password for a session token."""
        response: LoginResponse = self.client.send_request(Login(), PasswordCredentials(username, password))
        logger.info(f"Logged in to i-doit as {username}")
        return IdoitSession(self.client, SessionCredentials(response.session_id))

    def logout(self) -> IdoitSession:
        if self.is_authenticated:
            self.client.send_request(Logout(), self._credentials)
            logger.info("Logged out from i-doit")
        return IdoitSession(self.client)

    def send(self, target: IdoitRequest | Batch) -> Any:
        return self.client.send(target, self._credentials)

    def read_objects(
        self,
        target: type[IdoitObject] | ObjectsRead,
        factory: ObjectFactory | None = None,
    ) -> list[IdoitObject]:
        from idoitclient.reader import ObjectsReader

        return ObjectsReader(self).read(target, factory=factory)

    def __enter__(self) -> IdoitSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.is_authenticated:
            return
        try:
            self.logout()
        except IdoitClientError as e:
            logger.warning(f"Logout failed: {e}")


def open_session(config: ClientConfig) -> IdoitSession:
    """Build transport and client from config; log in when credentials are configured."""
    if not config.url:
        raise InvalidArgument("No i-doit url configured", field="url")
    if not config.api_key:
        raise InvalidArgument("No i-doit api key configured", field="api_key")
    transport = HttpTransport(config.url, timeout=config.timeout, verify=config.verify_tls)
    session = IdoitSession(JsonRpcClient(transport, config.api_key, language=config.language))
    if config.has_credentials:
        session = session.login(config.username, config.password)
    return session
