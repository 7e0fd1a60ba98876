"""Config command group."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from idoitclient.cli.shared.config_utils import (
    SECRET_KEYS,
    deep_get,
    deep_set,
    deep_unset,
    load_config_json,
    masked,
    parse_config_value,
    save_config_json,
)
from idoitclient.config.access import clear_config_cache
from idoitclient.config.loader import config_from_data, get_config_path, load_config


def register_config_commands(app: typer.Typer, console: Console) -> None:
    """Register config show/get/set/unset/path commands."""
    config_app = typer.Typer(help="Config helpers (show/get/set/unset)")
    app.add_typer(config_app, name="config")

    @config_app.command("path")
    def config_path() -> None:
        console.print(str(get_config_path()))

    @config_app.command("show")
    def config_show() -> None:
        """Print the effective configuration (file + IDOIT_* environment)."""
        try:
            cfg = load_config()
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)
        data = masked({"url": cfg.url, "apiKey": cfg.api_key, "username": cfg.username, "password": cfg.password})
        table = Table(show_header=True, header_style="bold")
        table.add_column("Key")
        table.add_column("Value")
        for key, value in data.items():
            table.add_row(key, str(value) if value else "[dim]-[/dim]")
        table.add_row("language", cfg.language or "[dim]-[/dim]")
        table.add_row("timeout", str(cfg.timeout))
        table.add_row("verifyTls", str(cfg.verify_tls))
        console.print(table)

    @config_app.command("get")
    def config_get(
        key: str = typer.Argument(..., help="Key, e.g. url or apiKey"),
    ) -> None:
        data = load_config_json()
        try:
            value = deep_get(data, key)
        except KeyError:
            console.print(f"[red]Key not found:[/red] {key}")
            raise typer.Exit(1)
        if key in SECRET_KEYS and value:
            value = "[REDACTED]"
        console.print(json.dumps(value, indent=2, ensure_ascii=False))

    @config_app.command("set")
    def config_set(
        key: str = typer.Argument(..., help="Key, e.g. url or apiKey"),
        value: str = typer.Argument(..., help="JSON value or plain string"),
    ) -> None:
        data = load_config_json()
        deep_set(data, key, parse_config_value(key, value))
        try:
            config_from_data(data)
        except ValueError as e:
            console.print(f"[red]Not saved, the config would not validate:[/red] {e}")
            raise typer.Exit(1)
        path = save_config_json(data)
        clear_config_cache(config_path=path)
        console.print(f"[green]✓[/green] Set {key}")

    @config_app.command("unset")
    def config_unset(
        key: str = typer.Argument(..., help="Key"),
    ) -> None:
        data = load_config_json()
        if not deep_unset(data, key):
            console.print(f"[yellow]Key not found:[/yellow] {key}")
            raise typer.Exit(1)
        path = save_config_json(data)
        clear_config_cache(config_path=path)
        console.print(f"[green]✓[/green] Unset {key}")
