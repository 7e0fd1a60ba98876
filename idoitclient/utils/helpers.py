"""Filesystem helpers."""

from pathlib import Path


def ensure_dir(path: Path) -> Path:
    """Ensure a directory exists, return it."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_path() -> Path:
    """Get the idoitclient data directory (~/.idoitclient)."""
    return ensure_dir(Path.home() / ".idoitclient")
