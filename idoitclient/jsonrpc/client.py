"""JSON-RPC protocol engine: envelopes, dispatch and batch correlation."""

from __future__ import annotations

from typing import Any, Protocol, overload

from loguru import logger

from idoitclient.jsonrpc.auth import Credentials
from idoitclient.jsonrpc.batch import Batch
from idoitclient.jsonrpc.cleaner import JsonRpcResponseCleaner
from idoitclient.jsonrpc.envelope import UNBATCHED_ID, JsonRpcRequest, JsonRpcResponse
from idoitclient.jsonrpc.requests import IdoitRequest
from idoitclient.utils.exceptions import ProtocolError


class Transport(Protocol):
    def send(self, payload: Any, headers: dict[str, str]) -> Any: ...


class JsonRpcClient:
    def __init__(
        self,
        transport: Transport,
        api_key: str,
        *,
        language: str | None = None,
        response_cleaner: JsonRpcResponseCleaner | None = None,
    ):
        self.transport = transport
        self.api_key = api_key
        self.language = language
        self.response_cleaner = response_cleaner or JsonRpcResponseCleaner()

    @overload
    def send(self, target: Batch, credentials: Credentials | None = None) -> dict[str, Any]: ...

    @overload
    def send(self, target: IdoitRequest, credentials: Credentials | None = None) -> Any: ...

    def send(self, target, credentials=None):
        """Send one request or a whole batch."""
        if isinstance(target, Batch):
            return self.send_batch(target, credentials)
        return self.send_request(target, credentials)

    def send_request(self, request: IdoitRequest, credentials: Credentials | None = None) -> Any:
        envelope = self._new_envelope(request, UNBATCHED_ID)
        logger.debug(f"JSON-RPC {envelope.method} id={envelope.id}")
        body = self.transport.send(envelope.to_wire(), self._headers(credentials))
        response = self._decode(body, request)
        return self._parse_result(response, request)

    def send_batch(self, batch: Batch, credentials: Credentials | None = None) -> dict[str, Any]:
        """
        Send all requests of ``batch`` in one round trip.

        Returns results keyed like the batch, in the order the batch was built.
        """
        requests = batch.requests
        if not requests:
            logger.debug("Empty batch, skipping JSON-RPC call")
            return {}

        envelopes = [self._new_envelope(request, name).to_wire() for name, request in requests.items()]
        logger.debug(f"JSON-RPC batch of {len(envelopes)} requests")
        body = self.transport.send(envelopes, self._headers(credentials))

        if not isinstance(body, list):
            # A batch rejected as a whole comes back as a single error object
            response = self._decode(body, batch)
            if response.has_error():
                raise ProtocolError(
                    f"Received error <{response.error}> for batch <{batch!r}>",
                    request=batch,
                    error=response.error,
                )
            raise ProtocolError(f"Expected an array of replies for batch <{batch!r}>", request=batch)

        replies: dict[str, JsonRpcResponse] = {}
        for element in body:
            response = self._decode(element, batch)
            if response.id not in requests:
                raise ProtocolError(
                    f"Reply id <{response.id}> matches no request in batch <{batch!r}>",
                    request=batch,
                )
            if response.id in replies:
                raise ProtocolError(f"Duplicate reply id <{response.id}> in batch <{batch!r}>", request=batch)
            replies[response.id] = response

        missing = [name for name in requests if name not in replies]
        if missing:
            raise ProtocolError(f"No reply for {missing} in batch <{batch!r}>", request=batch)

        return {name: self._parse_result(replies[name], request) for name, request in requests.items()}

    def _new_envelope(self, request: IdoitRequest, request_id: str) -> JsonRpcRequest:
        params = request.to_params()
        params["apikey"] = self.api_key
        if self.language:
            params.setdefault("language", self.language)
        return JsonRpcRequest(id=request_id, method=request.method, params=params)

    @staticmethod
    def _headers(credentials: Credentials | None) -> dict[str, str]:
        return credentials.headers() if credentials is not None else {}

    @staticmethod
    def _decode(body: Any, request: Any) -> JsonRpcResponse:
        try:
            return JsonRpcResponse.from_wire(body)
        except ValueError as exc:
            raise ProtocolError(f"Malformed reply for request <{request!r}>: {exc}", request=request) from exc

    def _parse_result(self, response: JsonRpcResponse, request: IdoitRequest) -> Any:
        if response.has_error():
            raise ProtocolError(
                f"Received error <{response.error}> for request <{request!r}>",
                request=request,
                error=response.error,
            )
        if response.result is None:
            raise ProtocolError(f"Result is null for request <{request!r}>", request=request)
        return self.response_cleaner.clean_result(request, response.result)
