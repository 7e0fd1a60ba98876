"""Loguru helpers for consistent file logging in CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from idoitclient.utils.helpers import get_data_path

_SINK_IDS: dict[str, int] = {}
_CONSOLE_SINK: list[int] = []


def ensure_rotating_log_file(name: str, level: str = "INFO") -> Path:
    """Ensure a rotating log sink for the given command name."""
    log_dir = get_data_path() / "logs"
    log_path = log_dir / f"{name}.log"
    if name in _SINK_IDS:
        return log_path
    log_dir.mkdir(parents=True, exist_ok=True)
    sink_id = logger.add(
        str(log_path),
        level=level,
        rotation="10 MB",
        retention="14 days",
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    _SINK_IDS[name] = sink_id
    return log_path


def configure_console_logging(verbose: bool = False) -> None:
    """Route stderr logging through a single sink; DEBUG when verbose, WARNING otherwise."""
    if _CONSOLE_SINK:
        logger.remove(_CONSOLE_SINK.pop())
    else:
        # Drop loguru's default handler; call before adding file sinks
        logger.remove()
    _CONSOLE_SINK.append(logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING"))
