"""Pytest hooks and fixtures."""

import os
from typing import Any, Callable

import pytest


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless an i-doit instance is configured."""
    if os.environ.get("IDOIT_URL") and os.environ.get("IDOIT_API_KEY"):
        return
    skip = pytest.mark.skip(reason="Requires IDOIT_URL and IDOIT_API_KEY")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


class FakeTransport:
    """Records every exchange and answers through ``handler(payload)``."""

    def __init__(self, handler: Callable[[Any], Any]):
        self.handler = handler
        self.calls: list[tuple[Any, dict[str, str]]] = []

    def send(self, payload: Any, headers: dict[str, str]) -> Any:
        self.calls.append((payload, dict(headers)))
        return self.handler(payload)

    @property
    def methods(self) -> list[Any]:
        out = []
        for payload, _ in self.calls:
            if isinstance(payload, list):
                out.append([p["method"] for p in payload])
            else:
                out.append(payload["method"])
        return out


@pytest.fixture
def make_transport() -> Callable[[Callable[[Any], Any]], FakeTransport]:
    return FakeTransport


@pytest.fixture
def clean_idoit_env(monkeypatch):
    """Hide IDOIT_* variables of the developer's shell from config tests."""
    for key in list(os.environ):
        if key.startswith("IDOIT_"):
            monkeypatch.delenv(key, raising=False)
