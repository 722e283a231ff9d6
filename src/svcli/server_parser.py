# svcli/server_parser.py
"""
Reader for server descriptor files (``--servers``).

The file is JSON with one entry per server, keyed by server ID::

    {
      "servers": {
        "dev":  {"url": "http://dev:6085/management", "username": "admin"},
        "prod": {"url": "https://prod:6086/management",
                 "username": "deployer", "password": "secret"}
      }
    }

Entries keep the order they have in the file.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from svcli.errors import ParseError
from svcli.models import MANAGEMENT_URL_ADAPTER, Credentials, Server

logger = logging.getLogger(__name__)

SERVERS_KEY = "servers"


class ServerEntry(BaseModel):
    """One ``servers`` entry as written in the file."""

    model_config = ConfigDict(extra="ignore")

    url: str
    username: Optional[str] = None
    password: Optional[str] = None

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        try:
            MANAGEMENT_URL_ADAPTER.validate_python(value)
        except ValidationError as exc:
            raise ValueError(f"invalid URL '{value}'") from exc
        return value

    def to_server(self, server_id: str) -> Server:
        credentials = (
            Credentials(self.username, self.password) if self.username is not None else None
        )
        return Server(server_id, self.url, credentials)


class JsonServerParser:
    """Parses server descriptor files; satisfies ``cli_options.ServerParser``."""

    def parse_servers(
        self, path: Union[str, Path], selected_id: Optional[str] = None
    ) -> List[Server]:
        """
        Return the servers in *path*, or only *selected_id* when given.

        An unknown *selected_id* yields an empty list.
        """
        entries = self._load_entries(Path(path))

        if selected_id is not None:
            if selected_id not in entries:
                logger.warning(
                    "Server '%s' not found in '%s' (defined: %s)",
                    selected_id, path, ", ".join(entries) or "none",
                )
                return []
            entries = {selected_id: entries[selected_id]}

        servers: List[Server] = []
        for server_id, raw in entries.items():
            try:
                entry = ServerEntry.model_validate(raw)
            except ValidationError as exc:
                raise ParseError(
                    f"Invalid definition of server '{server_id}' in '{path}': {exc}", exc
                ) from exc
            servers.append(entry.to_server(server_id))

        logger.debug("Parsed %d server(s) from %s", len(servers), path)
        return servers

    # ------------------------------------------------------------------
    # private helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _load_entries(path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid JSON in server file '{path}': {exc}", exc) from exc
        except OSError as exc:
            raise ParseError(f"Error loading server file '{path}': {exc}", exc) from exc

        if not isinstance(data, dict) or not isinstance(data.get(SERVERS_KEY), dict):
            raise ParseError(
                f"Server file '{path}' must contain a '{SERVERS_KEY}' object"
            )
        return data[SERVERS_KEY]


def parse_servers(path: Union[str, Path], selected_id: Optional[str] = None) -> List[Server]:
    return JsonServerParser().parse_servers(path, selected_id)
