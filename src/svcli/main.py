# src/svcli/main.py
"""Entry-point for the SVCLI."""
from __future__ import annotations

import logging
import os
import sys
from typing import List, Optional

import typer

from svcli.cli_options import CommandLine, describe_connection_options, obtain_servers
from svcli.commands.servers import servers_action
from svcli.errors import ParseError
from svcli.models import Server
from svcli.project import Project, load_project

# ──────────────────────────────────────────────────────────────────────────────
# logging
# ──────────────────────────────────────────────────────────────────────────────
def _env_log_level() -> int:
    """Level named by SVCLI_LOG_LEVEL; unknown names fall back to INFO."""
    name = os.getenv("SVCLI_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    format="%(asctime)s  %(levelname)-8s  %(message)s",
    stream=sys.stderr,
    level=_env_log_level(),
)

logger = logging.getLogger(__name__)

_CONNECTION_OPTIONS = describe_connection_options()


def _connection_option(index: int):
    decls, help_text = _CONNECTION_OPTIONS[index]
    return typer.Option(None, *decls, help=help_text, show_default=False)


# ──────────────────────────────────────────────────────────────────────────────
# Typer root app + global verbosity flags
# ──────────────────────────────────────────────────────────────────────────────
app = typer.Typer(add_completion=False, help="Resolve and inspect target servers.")
servers_app = typer.Typer(help="Commands for working with servers")
app.add_typer(servers_app, name="servers", help="Servers commands")


@app.callback(invoke_without_command=False)
def main_callback(  # noqa: D401
    quiet: bool = typer.Option(
        False, "-q", "--quiet", help="Only log warnings and errors", show_default=False
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Log debug output", show_default=False
    ),
) -> None:
    """Common pre-command setup (handles --quiet / --verbose)."""
    if quiet:
        logging.getLogger().setLevel(logging.WARNING)
    elif verbose:
        logging.getLogger().setLevel(logging.DEBUG)


# ──────────────────────────────────────────────────────────────────────────────
# shared resolution
# ──────────────────────────────────────────────────────────────────────────────
def _resolve(
    *,
    mgmt_url: Optional[str],
    username: Optional[str],
    password: Optional[str],
    servers: Optional[str],
    use_server: Optional[str],
    project_file: Optional[str],
    just_one_server: bool,
) -> List[Server]:
    line = CommandLine.from_options(
        mgmt_url=mgmt_url,
        username=username,
        password=password,
        servers=servers,
        use_server=use_server,
    )
    try:
        project: Optional[Project] = load_project(project_file) if project_file else None
        return obtain_servers(line, project, just_one_server)
    except ParseError as exc:
        logger.debug("Server resolution failed", exc_info=exc)
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(code=1)


# ──────────────────────────────────────────────────────────────────────────────
# servers list / show
# ──────────────────────────────────────────────────────────────────────────────
@servers_app.command("list", help="Show every server the connection options resolve to.")
def servers_list(
    mgmt_url: Optional[str] = _connection_option(0),
    username: Optional[str] = _connection_option(1),
    password: Optional[str] = _connection_option(2),
    servers: Optional[str] = _connection_option(3),
    use_server: Optional[str] = _connection_option(4),
    project_file: Optional[str] = typer.Option(
        None, "--project", help="Project file providing a fallback management URL"
    ),
) -> None:
    resolved = _resolve(
        mgmt_url=mgmt_url,
        username=username,
        password=password,
        servers=servers,
        use_server=use_server,
        project_file=project_file,
        just_one_server=False,
    )
    servers_action(resolved)


@servers_app.command("show", help="Print the management URL of the single target server.")
def servers_show(
    mgmt_url: Optional[str] = _connection_option(0),
    username: Optional[str] = _connection_option(1),
    password: Optional[str] = _connection_option(2),
    servers: Optional[str] = _connection_option(3),
    use_server: Optional[str] = _connection_option(4),
    project_file: Optional[str] = typer.Option(
        None, "--project", help="Project file providing a fallback management URL"
    ),
) -> None:
    (server,) = _resolve(
        mgmt_url=mgmt_url,
        username=username,
        password=password,
        servers=servers,
        use_server=use_server,
        project_file=project_file,
        just_one_server=True,
    )
    typer.echo(f"{server.id}\t{server.url}")


# ──────────────────────────────────────────────────────────────────────────────
# main
# ──────────────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app()  # Typer dispatch
