# svcli/project.py
"""Loading of project files that remember their target server."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from svcli.cli_options import validate_url
from svcli.errors import ParseError

logger = logging.getLogger(__name__)


@dataclass
class Project:
    """A loaded project; ``server_url`` is the fallback management URL."""
    name: str
    path: Path
    server_url: Optional[str] = None


def load_project(path: Union[str, Path]) -> Project:
    """
    Read a JSON project file such as ``{"name": "Orders", "serverUrl": "..."}``.

    ``name`` defaults to the file name without extension.
    """
    path = Path(path)
    if not path.is_file():
        raise ParseError(f"Project file '{path}' not found.")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON in project file '{path}': {exc}", exc) from exc
    except OSError as exc:
        raise ParseError(f"Error loading project file '{path}': {exc}", exc) from exc

    if not isinstance(data, dict):
        raise ParseError(f"Project file '{path}' must contain a JSON object")

    server_url = data.get("serverUrl")
    if server_url is not None:
        server_url = validate_url(str(server_url))

    project = Project(name=data.get("name") or path.stem, path=path, server_url=server_url)
    logger.debug("Loaded project %s (server URL: %s)", project.name, project.server_url)
    return project
