"""HTTP transport for the i-doit JSON-RPC endpoint."""

from __future__ import annotations

from typing import Any

import httpx

from idoitclient.utils.exceptions import TransportError


class HttpTransport:
    """POSTs JSON to one endpoint and returns the decoded JSON reply."""

    def __init__(self, url: str, *, timeout: float = 20.0, verify: bool = True):
        self.url = url
        self.timeout = timeout
        self.verify = verify

    def send(self, payload: Any, headers: dict[str, str]) -> Any:
        request_headers = {"Accept": "application/json", **headers}
        try:
            with httpx.Client(timeout=self.timeout, verify=self.verify) as client:
                resp = client.post(self.url, json=payload, headers=request_headers)
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"i-doit timeout: POST {self.url}",
                code="TRANSPORT_TIMEOUT",
                retryable=True,
            ) from exc
        except httpx.RequestError as exc:
            raise TransportError(
                f"i-doit network error: POST {self.url}: {exc}",
                code="TRANSPORT_NETWORK_ERROR",
                retryable=True,
            ) from exc

        status_code = int(getattr(resp, "status_code", 0) or 0)
        if status_code >= 400:
            raise TransportError(
                f"i-doit http error {status_code}: {self._error_text(resp)}",
                code="TRANSPORT_HTTP_ERROR",
                status_code=status_code,
                retryable=self._is_retryable_status(status_code),
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise TransportError(
                f"i-doit bad response: non-json body from {self.url}",
                code="TRANSPORT_BAD_RESPONSE",
                status_code=status_code or None,
            ) from exc

    @staticmethod
    def _is_retryable_status(status_code: int) -> bool:
        return status_code >= 500 or status_code in {408, 425, 429}

    @staticmethod
    def _error_text(resp: Any) -> str:
        text = str(getattr(resp, "text", "") or "").strip()
        return text[:200] if text else "request failed"
