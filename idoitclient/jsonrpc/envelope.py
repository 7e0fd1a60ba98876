"""JSON-RPC wire envelopes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

JSONRPC_VERSION = "2.0"
UNBATCHED_ID = "0"


class JsonRpcRequest(BaseModel):
    """Outbound envelope: ``{jsonrpc, id, method, params}``."""
    model_config = ConfigDict(frozen=True)

    id: str
    method: str
    params: dict[str, Any] = Field(default_factory=dict)
    jsonrpc: str = JSONRPC_VERSION

    def to_wire(self) -> dict[str, Any]:
        return {"jsonrpc": self.jsonrpc, "id": self.id, "method": self.method, "params": self.params}


class JsonRpcResponse(BaseModel):
    """Inbound envelope: ``{id, result | error}``."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | None = None
    result: Any = None
    error: Any = None

    @classmethod
    def from_wire(cls, body: Any) -> JsonRpcResponse:
        if not isinstance(body, dict):
            raise ValueError(f"expected a JSON-RPC reply object, got {type(body).__name__}")
        raw_id = body.get("id")
        return cls(id=None if raw_id is None else str(raw_id), result=body.get("result"), error=body.get("error"))

    def has_error(self) -> bool:
        return self.error is not None
