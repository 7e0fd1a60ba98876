"""Ordered, uniquely keyed collection of requests sent as one round trip."""

from __future__ import annotations

from typing import Iterator

from idoitclient.jsonrpc.requests import IdoitRequest
from idoitclient.utils.exceptions import InvalidArgument


class Batch:
    """
    Requests keyed by caller-chosen names.

    The key doubles as the JSON-RPC id of the request, so replies can be matched
    back to their request no matter in which order the service returns them.
    """

    def __init__(self) -> None:
        self._requests: dict[str, IdoitRequest] = {}
        self._next_index = 0

    def add(self, name: str, request: IdoitRequest) -> str:
        if not name:
            raise InvalidArgument("Batch key must not be empty", field="name")
        if name in self._requests:
            raise InvalidArgument(f"Duplicate batch key: {name}", field="name")
        self._requests[name] = request
        return name

    def add_with_prefix(self, prefix: str, request: IdoitRequest) -> str:
        """Add under ``prefix`` plus a running index; return the generated key."""
        name = f"{prefix}{self._next_index}"
        while name in self._requests:
            self._next_index += 1
            name = f"{prefix}{self._next_index}"
        self._next_index += 1
        return self.add(name, request)

    @property
    def requests(self) -> dict[str, IdoitRequest]:
        return dict(self._requests)

    def get(self, name: str) -> IdoitRequest | None:
        return self._requests.get(name)

    def __len__(self) -> int:
        return len(self._requests)

    def __iter__(self) -> Iterator[str]:
        return iter(self._requests)

    def __contains__(self, name: object) -> bool:
        return name in self._requests

    def __repr__(self) -> str:
        return f"Batch({list(self._requests)})"
