import httpx
import pytest

import idoitclient.transport.http as http_module
from idoitclient.transport import HttpTransport
from idoitclient.utils.exceptions import ErrorCategory, TransportError

URL = "https://cmdb.example.com/src/jsonrpc.php"


class FakeResponse:
    def __init__(self, status_code: int, body=None, text: str = ""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise ValueError("no json")
        return self._body


def install_fake_client(monkeypatch, respond):
    seen: dict = {}

    class FakeClient:
        def __init__(self, timeout=None, verify=None):
            seen.update(timeout=timeout, verify=verify)

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

        def post(self, url, json=None, headers=None):
            seen.update(url=url, json=json, headers=headers)
            return respond()

    monkeypatch.setattr(http_module.httpx, "Client", FakeClient)
    return seen


def test_send_posts_json_and_returns_decoded_reply(monkeypatch) -> None:
    reply = {"jsonrpc": "2.0", "id": "0", "result": []}
    seen = install_fake_client(monkeypatch, lambda: FakeResponse(200, reply))
    transport = HttpTransport(URL, timeout=5.0, verify=False)

    result = transport.send({"method": "cmdb.objects.read"}, {"X-RPC-Auth-Session": "sid"})

    assert result == reply
    assert seen["url"] == URL
    assert seen["json"] == {"method": "cmdb.objects.read"}
    assert seen["headers"] == {"Accept": "application/json", "X-RPC-Auth-Session": "sid"}
    assert (seen["timeout"], seen["verify"]) == (5.0, False)


def test_server_error_is_retryable(monkeypatch) -> None:
    install_fake_client(monkeypatch, lambda: FakeResponse(503, text="Service Unavailable"))

    with pytest.raises(TransportError) as err:
        HttpTransport(URL).send({}, {})
    assert err.value.code == "TRANSPORT_HTTP_ERROR"
    assert err.value.status_code == 503
    assert err.value.retryable is True
    assert err.value.category == ErrorCategory.RETRYABLE
    assert "Service Unavailable" in str(err.value)


def test_client_error_is_not_retryable(monkeypatch) -> None:
    install_fake_client(monkeypatch, lambda: FakeResponse(404, text=""))

    with pytest.raises(TransportError) as err:
        HttpTransport(URL).send({}, {})
    assert err.value.retryable is False
    assert str(err.value) == "i-doit http error 404: request failed"


def test_non_json_body_is_bad_response(monkeypatch) -> None:
    install_fake_client(monkeypatch, lambda: FakeResponse(200, None, text="<html>maintenance</html>"))

    with pytest.raises(TransportError) as err:
        HttpTransport(URL).send({}, {})
    assert err.value.code == "TRANSPORT_BAD_RESPONSE"


def test_network_failures_are_retryable(monkeypatch) -> None:
    def refuse():
        raise httpx.ConnectError("connection refused")

    install_fake_client(monkeypatch, refuse)
    with pytest.raises(TransportError) as err:
        HttpTransport(URL).send({}, {})
    assert err.value.code == "TRANSPORT_NETWORK_ERROR"
    assert err.value.retryable is True

    def stall():
        raise httpx.ReadTimeout("timed out")

    install_fake_client(monkeypatch, stall)
    with pytest.raises(TransportError) as err:
        HttpTransport(URL).send({}, {})
    assert err.value.code == "TRANSPORT_TIMEOUT"
