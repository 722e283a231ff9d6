# svcli/cli_options.py
"""
Shared option-processing helpers for SVCLI commands.

Works out which servers a command should talk to.  Two mutually exclusive
inputs are reconciled here:

* inline ``--mgmt-url`` / ``--username`` / ``--password`` flags describing a
  single server, optionally falling back to the URL stored in a loaded project;
* a ``--servers`` file describing several servers, optionally narrowed to one
  with ``--use-server``.

The file wins whenever it is given; the inline flags are then ignored.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Protocol, Tuple

from pydantic import ValidationError

from svcli.errors import ParseError
from svcli.models import (
    DEFAULT_SERVER_ID,
    MANAGEMENT_URL_ADAPTER,
    Credentials,
    ProjectHandle,
    Server,
)
from svcli.server_parser import JsonServerParser

logger = logging.getLogger(__name__)

PARAM_URL = "url"
LONG_PARAM_URL = "mgmt-url"
PARAM_USER = "usr"
LONG_PARAM_USER = "username"
PARAM_PASS = "pwd"
LONG_PARAM_PASS = "password"
LONG_SERVERS_PARAM = "servers"
LONG_USE_SERVER_PARAM = "use-server"

# short name → long name
_ALIASES: Dict[str, str] = {
    PARAM_URL: LONG_PARAM_URL,
    PARAM_USER: LONG_PARAM_USER,
    PARAM_PASS: LONG_PARAM_PASS,
}


# ──────────────────────────────────────────────────────────────────────────────
# collaborators
# ──────────────────────────────────────────────────────────────────────────────
class FlagAccessor(Protocol):
    def has_option(self, name: str) -> bool: ...

    def get_option_value(self, name: str) -> Optional[str]: ...


class ServerParser(Protocol):
    def parse_servers(
        self, path: Path, selected_id: Optional[str] = None
    ) -> Optional[List[Server]]: ...


class CommandLine:
    """
    In-memory :class:`FlagAccessor` over already-parsed option values.

    Options whose value is ``None`` count as not supplied.  Short and long
    names of the same option are interchangeable.
    """

    def __init__(self, values: Optional[Mapping[str, Optional[str]]] = None) -> None:
        self._values: Dict[str, str] = {}
        for name, value in (values or {}).items():
            if value is not None:
                self._values[_ALIASES.get(name, name)] = value

    @classmethod
    def from_options(cls, **options: Optional[str]) -> "CommandLine":
        """Build from Python identifiers as Typer hands them over (``mgmt_url``)."""
        return cls({name.replace("_", "-"): value for name, value in options.items()})

    def has_option(self, name: str) -> bool:
        return _ALIASES.get(name, name) in self._values

    def get_option_value(self, name: str) -> Optional[str]:
        return self._values.get(_ALIASES.get(name, name))

    def __repr__(self) -> str:
        shown = {k: ("***" if k == LONG_PARAM_PASS else v) for k, v in self._values.items()}
        return f"CommandLine({shown!r})"


def describe_connection_options() -> List[Tuple[Tuple[str, ...], str]]:
    """Flag declarations and help text for the connection options."""
    return [
        ((f"-{PARAM_URL}", f"--{LONG_PARAM_URL}"), "URL of the server management endpoint."),
        ((f"-{PARAM_USER}", f"--{LONG_PARAM_USER}"), "Username for server management endpoint connection"),
        ((f"-{PARAM_PASS}", f"--{LONG_PARAM_PASS}"), "Password for server management endpoint connection"),
        (
            (f"--{LONG_SERVERS_PARAM}",),
            "A file containing properties of servers (management URL, username, and password)",
        ),
        (
            (f"--{LONG_USE_SERVER_PARAM}",),
            f"Selected server ID from the file given by --{LONG_SERVERS_PARAM}. "
            "Just the selected server will be used.",
        ),
    ]


# ──────────────────────────────────────────────────────────────────────────────
# helpers
# ──────────────────────────────────────────────────────────────────────────────
def _option(line: FlagAccessor, name: str) -> Optional[str]:
    return line.get_option_value(name) if line.has_option(name) else None


def validate_url(value: str) -> str:
    """Return *value* unchanged if it is a well-formed URL, else raise ParseError."""
    try:
        MANAGEMENT_URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise ParseError(f"Invalid URL defined: '{value}'", exc) from exc
    return value


def obtain_credentials(line: FlagAccessor) -> Optional[Credentials]:
    """
    Credentials from ``--username`` / ``--password``.

    A password without a username is dropped without complaint.
    """
    username = _option(line, PARAM_USER)
    password = _option(line, PARAM_PASS)
    return Credentials(username, password) if username is not None else None


def obtain_mgmt_endpoint_info(line: FlagAccessor) -> Server:
    """
    Build the single server described by the inline flags.

    The URL may be missing; callers decide whether that is acceptable.
    """
    raw_url = _option(line, PARAM_URL)
    mgmt_url = validate_url(raw_url) if raw_url is not None else None
    return Server(DEFAULT_SERVER_ID, mgmt_url, obtain_credentials(line))


# ──────────────────────────────────────────────────────────────────────────────
# main helper used by every server-bound command
# ──────────────────────────────────────────────────────────────────────────────
def _obtain_servers_from_file(
    line: FlagAccessor,
    project: Optional[ProjectHandle],
    just_one_server: bool,
    parser: ServerParser,
    log: logging.Logger,
) -> List[Server]:
    if project is not None:
        log.info("Skipping project URL '%s'", project.server_url)

    file_path = line.get_option_value(LONG_SERVERS_PARAM) or ""
    path = Path(file_path)
    if not (path.exists() and path.is_file() and os.access(path, os.R_OK)):
        raise ParseError(
            f"Defined file '{path}' does not exist, or is not a file, or is not readable."
        )

    selected_id = _option(line, LONG_USE_SERVER_PARAM)
    try:
        servers = parser.parse_servers(path, selected_id)
    except ParseError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise ParseError(f"Unable to read server file '{file_path}': {exc}", exc) from exc

    if not servers:
        raise ParseError(f"No server found in the defined server file '{file_path}'")

    if just_one_server and len(servers) != 1:
        raise ParseError(
            f"Only one server is supported by this command. Use --{LONG_USE_SERVER_PARAM} "
            "<Server ID> to select just one server. Defined server IDs: "
            + ", ".join(str(srv) for srv in servers)
        )
    return servers


def obtain_servers(
    line: FlagAccessor,
    project: Optional[ProjectHandle] = None,
    just_one_server: bool = False,
    *,
    parser: Optional[ServerParser] = None,
    log: Optional[logging.Logger] = None,
) -> List[Server]:
    """
    Resolve the servers a command should operate against.

    Precedence: ``--servers`` file > ``--mgmt-url`` > the project's URL.
    Credentials never come from the project.  The result is never empty and
    every server in it has a URL; anything else raises :class:`ParseError`.
    """
    logger.debug("Resolving servers: line=%r project=%r", line, project)

    if line.has_option(LONG_SERVERS_PARAM):
        return _obtain_servers_from_file(
            line, project, just_one_server, parser or JsonServerParser(), log or logger
        )

    srv = obtain_mgmt_endpoint_info(line)
    project_url = project.server_url if project is not None else None
    if srv.url is None and project_url is None:
        raise ParseError("No server management URL defined")
    if srv.url is None:
        srv = srv.with_url(project_url)

    logger.debug("Resolved inline server %s at %s", srv.id, srv.url)
    return [srv]
