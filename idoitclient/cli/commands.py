"""CLI commands for idoitclient.

Top-level commands (version, login, objects) plus the config command group.
"""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from idoitclient import __logo__, __version__
from idoitclient.cli.command_groups.config_commands import register_config_commands
from idoitclient.cli.shared.logging_utils import configure_console_logging, ensure_rotating_log_file
from idoitclient.config.access import get_config
from idoitclient.jsonrpc.requests import ObjectsRead, ObjectsReadResponse
from idoitclient.models.base import lookup_object_type
from idoitclient.session import IdoitSession, open_session
from idoitclient.utils.exceptions import IdoitClientError

app = typer.Typer(
    name="idoitclient",
    help=f"{__logo__} idoitclient - i-doit CMDB JSON-RPC client",
    no_args_is_help=True,
)

console = Console()

register_config_commands(app=app, console=console)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log protocol details to stderr"),
) -> None:
    configure_console_logging(verbose)


def _open_session() -> IdoitSession:
    ensure_rotating_log_file("idoitclient")
    try:
        return open_session(get_config())
    except (IdoitClientError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _parse_limit(limit: str | None) -> int | str | None:
    if limit is None:
        return None
    return int(limit) if limit.strip().isdigit() else limit.strip()


def build_objects_request(
    *,
    object_type: str | None = None,
    ids: list[int] | None = None,
    title: str | None = None,
    sysid: str | None = None,
    email: str | None = None,
    order_by: str | None = None,
    sort: str | None = None,
    limit: str | None = None,
) -> ObjectsRead:
    """Build the cmdb.objects.read request for the objects command."""
    object_class = lookup_object_type(object_type)
    return ObjectsRead.build(
        filter_type=object_class,
        filter_type_name=object_type,
        ids=ids,
        title=title,
        sysid=sysid,
        email=email,
        order_by=order_by,
        sort=sort.upper() if sort else None,
        limit=_parse_limit(limit),
    )


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"{__logo__} idoitclient v{__version__}")


@app.command()
def login() -> None:
    """Check url, api key and credentials by logging in and out again."""
    cfg = get_config()
    if not cfg.has_credentials:
        console.print("[yellow]No username/password configured; requests use the api key only.[/yellow]")
        raise typer.Exit(1)
    with _open_session() as session:
        if session.is_authenticated:
            console.print(f"[green]✓[/green] Logged in to {cfg.url} as {cfg.username}")


@app.command()
def objects(
    object_type: str = typer.Option(None, "--type", "-t", help="Object type constant, e.g. C__OBJTYPE__SERVER"),
    ids: list[int] = typer.Option(None, "--id", help="Object id (repeatable)"),
    title: str = typer.Option(None, "--title", help="Exact object title"),
    sysid: str = typer.Option(None, "--sysid", help="SYSID, e.g. SRV_101010"),
    email: str = typer.Option(None, "--email", help="Primary e-mail of persons/organizations"),
    order_by: str = typer.Option(None, "--order-by", help="id, title, sysid, type, type_title, ..."),
    sort: str = typer.Option(None, "--sort", help="ASC or DESC"),
    limit: str = typer.Option(None, "--limit", help="Count, or 'offset,count'"),
    with_categories: bool = typer.Option(
        False, "--categories", "-c", help="Also read the categories declared for the object type"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """List objects matching a filter."""
    try:
        request = build_objects_request(
            object_type=object_type,
            ids=ids,
            title=title,
            sysid=sysid,
            email=email,
            order_by=order_by,
            sort=sort,
            limit=limit,
        )
    except ValueError as e:
        console.print(f"[red]Invalid filter:[/red] {e}")
        raise typer.Exit(2)

    with _open_session() as session:
        try:
            if with_categories:
                found = session.read_objects(request)
                console.print(json.dumps([o.model_dump(mode="json") for o in found], indent=2, ensure_ascii=False))
                return
            response: ObjectsReadResponse = session.send(request)
        except IdoitClientError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)

    if as_json:
        console.print(json.dumps([o.model_dump(mode="json") for o in response.objects], indent=2, ensure_ascii=False))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Type")
    table.add_column("SYSID")
    table.add_column("CMDB status")
    for row in response.objects:
        table.add_row(
            str(row.id),
            row.title or "",
            row.type_title or str(row.type or ""),
            row.sysid or "",
            row.cmdb_status_title or "",
        )
    console.print(table)
    console.print(f"[dim]{len(response.objects)} object(s)[/dim]")


if __name__ == "__main__":
    app()
