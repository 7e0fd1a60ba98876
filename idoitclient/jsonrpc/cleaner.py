"""Turns loosely typed JSON-RPC results into the result type a request declares."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from idoitclient.jsonrpc.requests import CategoryRead, IdoitRequest
from idoitclient.utils.exceptions import ProtocolError


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


class JsonRpcResponseCleaner:
    """Stateless; safe to share between clients."""

    def clean_result(self, request: IdoitRequest, raw_result: Any) -> Any:
        target = request.response_type()
        if isinstance(request, CategoryRead):
            raw_result = self._first_entry(raw_result)
            if raw_result is None:
                return None

        wrap_key = getattr(target, "WRAP_KEY", None)
        if wrap_key and isinstance(raw_result, list):
            raw_result = {wrap_key: raw_result}

        if target is None:
            return raw_result
        try:
            return _adapter(target).validate_python(raw_result)
        except ValidationError as exc:
            raise ProtocolError(
                f"Cannot decode result for request <{request!r}>: {exc}",
                request=request,
                error=raw_result,
            ) from exc

    @staticmethod
    def _first_entry(raw_result: Any) -> Any:
        # cmdb.category.read answers with a list of entries, empty when the object has none
        if isinstance(raw_result, list):
            return raw_result[0] if raw_result else None
        return raw_result
