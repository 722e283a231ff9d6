# svcli/models.py
"""Data models used throughout SVCLI."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Annotated, Optional, Protocol

from pydantic import AnyUrl, TypeAdapter, UrlConstraints

DEFAULT_SERVER_ID = "Default"

# protocols a management endpoint may use; anything else (e.g. "localhost:8080",
# where "localhost" would parse as the scheme) is rejected
URL_SCHEMES = ["http", "https", "ftp", "file", "jar"]

ManagementUrl = Annotated[AnyUrl, UrlConstraints(allowed_schemes=URL_SCHEMES)]
MANAGEMENT_URL_ADAPTER: TypeAdapter = TypeAdapter(ManagementUrl)


@dataclass(frozen=True)
class Credentials:
    """Login for a server management endpoint."""
    username: str
    password: Optional[str] = None


@dataclass(frozen=True)
class Server:
    """
    Connection descriptor for one target server.

    ``url`` is the management endpoint exactly as the user wrote it, after it
    passed ``MANAGEMENT_URL_ADAPTER``.  The string is kept rather than the
    parsed ``AnyUrl`` because pydantic normalises on parse (``http://h``
    becomes ``http://h/``) and callers echo the URL back to the user.  It is
    ``None`` only while the resolver is still looking for a fallback.
    """
    id: str
    url: Optional[str] = None
    credentials: Optional[Credentials] = None

    def with_url(self, url: str) -> "Server":
        return replace(self, url=url)

    def __str__(self) -> str:
        return self.id


class ProjectHandle(Protocol):
    """A loaded project that may remember the server it was built against."""
    server_url: Optional[str]
