import json

import pytest
from typer.testing import CliRunner

import idoitclient.cli.commands as commands
from idoitclient import __version__
from idoitclient.cli.shared.config_utils import deep_get, deep_set, deep_unset, masked, parse_config_value, parse_value
from idoitclient.config.loader import load_config
from idoitclient.config.schema import ClientConfig
from idoitclient.jsonrpc import JsonRpcClient
from idoitclient.models import Server
from idoitclient.session import IdoitSession

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_cli(monkeypatch, tmp_path, clean_idoit_env):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(commands, "configure_console_logging", lambda verbose=False: None)
    monkeypatch.setattr(commands, "ensure_rotating_log_file", lambda name, level="INFO": tmp_path / f"{name}.log")


def test_build_objects_request_uses_registered_type() -> None:
    request = commands.build_objects_request(object_type="C__OBJTYPE__SERVER", ids=[3], sort="desc", limit="10,5")

    assert request.filter_type is Server
    assert request.to_params() == {
        "filter": {"ids": [3], "type": "C__OBJTYPE__SERVER"},
        "sort": "DESC",
        "limit": "10,5",
    }


def test_build_objects_request_keeps_unknown_type_constant() -> None:
    request = commands.build_objects_request(object_type="C__OBJTYPE__ROUTER", limit="25")

    assert request.filter_type is None
    assert request.to_params() == {"filter": {"type": "C__OBJTYPE__ROUTER"}, "limit": 25}


def test_version() -> None:
    result = runner.invoke(commands.app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_config_set_get_and_unset(tmp_path) -> None:
    assert runner.invoke(commands.app, ["config", "set", "url", "https://cmdb.example.com/src/jsonrpc.php"]).exit_code == 0
    assert runner.invoke(commands.app, ["config", "set", "apiKey", "c1ia5q"]).exit_code == 0

    stored = json.loads((tmp_path / ".idoitclient" / "config.json").read_text(encoding="utf-8"))
    assert stored == {"url": "https://cmdb.example.com/src/jsonrpc.php", "apiKey": "c1ia5q"}

    shown = runner.invoke(commands.app, ["config", "get", "apiKey"])
    assert shown.exit_code == 0
    assert "c1ia5q" not in shown.stdout
    assert "[REDACTED]" in shown.stdout

    assert runner.invoke(commands.app, ["config", "unset", "apiKey"]).exit_code == 0
    assert runner.invoke(commands.app, ["config", "get", "apiKey"]).exit_code == 1


def test_config_set_keeps_numeric_secrets_as_strings(tmp_path) -> None:
    assert runner.invoke(commands.app, ["config", "set", "password", "123456"]).exit_code == 0
    assert runner.invoke(commands.app, ["config", "set", "apiKey", "42"]).exit_code == 0
    assert runner.invoke(commands.app, ["config", "set", "timeout", "5"]).exit_code == 0

    path = tmp_path / ".idoitclient" / "config.json"
    assert json.loads(path.read_text(encoding="utf-8")) == {"password": "123456", "apiKey": "42", "timeout": 5}
    cfg = load_config(path)
    assert (cfg.password, cfg.api_key, cfg.timeout) == ("123456", "42", 5.0)


def test_config_set_refuses_invalid_value(tmp_path) -> None:
    assert runner.invoke(commands.app, ["config", "set", "url", "https://cmdb.example.com"]).exit_code == 0

    result = runner.invoke(commands.app, ["config", "set", "timeout", "0"])

    assert result.exit_code == 1
    assert "Set timeout" not in result.stdout
    stored = json.loads((tmp_path / ".idoitclient" / "config.json").read_text(encoding="utf-8"))
    assert stored == {"url": "https://cmdb.example.com"}


def test_objects_without_config_exits_with_error() -> None:
    result = runner.invoke(commands.app, ["objects", "--type", "C__OBJTYPE__SERVER"])

    assert result.exit_code == 1
    assert "No i-doit url configured" in result.stdout


def test_objects_rejects_unknown_sort_direction() -> None:
    result = runner.invoke(commands.app, ["objects", "--type", "C__OBJTYPE__SERVER", "--sort", "sideways"])

    assert result.exit_code == 2


def test_objects_prints_json(monkeypatch, make_transport) -> None:
    transport = make_transport(lambda payload: {"id": "0", "result": [{"id": "1", "title": "srv-1", "sysid": "SRV_1"}]})
    monkeypatch.setattr(commands, "get_config", lambda: ClientConfig(url="https://cmdb.example.com", api_key="k"))
    monkeypatch.setattr(commands, "open_session", lambda cfg: IdoitSession(JsonRpcClient(transport, cfg.api_key)))

    result = runner.invoke(commands.app, ["objects", "--type", "C__OBJTYPE__SERVER", "--json"])

    assert result.exit_code == 0
    rows = json.loads(result.stdout)
    assert rows[0]["id"] == 1
    assert rows[0]["sysid"] == "SRV_1"
    payload, _ = transport.calls[0]
    assert payload["params"]["filter"] == {"type": "C__OBJTYPE__SERVER"}


def test_login_requires_credentials(monkeypatch) -> None:
    monkeypatch.setattr(commands, "get_config", lambda: ClientConfig(url="https://cmdb.example.com", api_key="k"))

    result = runner.invoke(commands.app, ["login"])

    assert result.exit_code == 1


def test_config_helpers() -> None:
    data: dict = {}
    deep_set(data, "connection.url", "https://cmdb.example.com")
    assert deep_get(data, "connection.url") == "https://cmdb.example.com"
    assert deep_unset(data, "connection.url") is True
    assert deep_unset(data, "connection.url") is False
    assert parse_value("20") == 20
    assert parse_value("False") is False
    assert parse_value("de") == "de"
    assert parse_config_value("password", "123456") == "123456"
    assert parse_config_value("verifyTls", "false") is False
    assert masked({"apiKey": "secret", "password": "", "url": "https://x"}) == {
        "apiKey": "[REDACTED]",
        "password": "",
        "url": "https://x",
    }
