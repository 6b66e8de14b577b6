"""Endpoint configuration and dataclass models for Etherpad API results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from urllib.parse import urlsplit

from ._exceptions import ConfigurationError

SECURE_PORT = 443
_DEFAULT_PORTS = {"http": 80, "https": SECURE_PORT}


@dataclass(frozen=True)
class Endpoint:
    """Where the API lives: ``scheme://host:port[/prefix]/api/<api_version>``."""

    scheme: str
    host: str
    port: int
    api_version: str
    path: str = ""

    @classmethod
    def from_url(cls, base_url: str, api_version: str) -> Endpoint:
        parts = urlsplit(base_url.strip())
        scheme = parts.scheme.lower()
        if scheme not in _DEFAULT_PORTS or not parts.hostname:
            raise ConfigurationError(
                f"Invalid base URL {base_url!r}: expected http(s)://host[:port]"
            )
        try:
            port = parts.port or _DEFAULT_PORTS[scheme]
        except ValueError as e:
            raise ConfigurationError(f"Invalid port in base URL {base_url!r}") from e
        if not api_version:
            raise ConfigurationError("API version must not be empty")
        return cls(
            scheme=scheme,
            host=parts.hostname,
            port=port,
            api_version=api_version,
            path=parts.path.rstrip("/"),
        )

    @property
    def is_secure(self) -> bool:
        return is_secure(self)

    @property
    def base_url(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{self.scheme}://{host}:{self.port}{self.path}"

    def url_for(self, operation: str) -> str:
        return f"{self.base_url}/api/{self.api_version}/{operation}"


def is_secure(endpoint: Endpoint) -> bool:
    """True iff the endpoint uses the conventional HTTPS port.

    Advisory only: the scheme is not consulted and no TLS handshake is made.
    """
    return endpoint.port == SECURE_PORT


def _from_timestamp(value: int | float | None) -> datetime | None:
    if value is None:
        return None
    # Etherpad reports some timestamps in milliseconds, others in seconds.
    if value > 10**11:
        value = value / 1000
    return datetime.fromtimestamp(value, tz=UTC)


@dataclass
class SessionInfo:
    """A session binding an author to a group until ``valid_until``."""

    group_id: str
    author_id: str
    valid_until: datetime | None
    session_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict, session_id: str | None = None) -> SessionInfo:
        return cls(
            group_id=data["groupID"],
            author_id=data["authorID"],
            valid_until=_from_timestamp(data.get("validUntil")),
            session_id=session_id or data.get("id"),
        )


@dataclass
class ChatMessage:
    """A single chat line on a pad."""

    text: str
    author_id: str | None
    time: datetime | None
    user_name: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> ChatMessage:
        return cls(
            text=data.get("text", ""),
            author_id=data.get("userId"),
            time=_from_timestamp(data.get("time")),
            user_name=data.get("userName"),
        )


@dataclass
class AttributePool:
    """A pad's attribute pool, passed through as the server reports it."""

    num_to_attrib: dict[str, list[str]]
    attrib_to_num: dict[str, int]
    next_num: int

    @classmethod
    def from_dict(cls, data: dict) -> AttributePool:
        return cls(
            num_to_attrib=data.get("numToAttrib", {}),
            attrib_to_num=data.get("attribToNum", {}),
            next_num=data.get("nextNum", 0),
        )


@dataclass
class DiffHTML:
    """HTML rendering of the changes between two revisions."""

    html: str
    authors: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> DiffHTML:
        return cls(html=data["html"], authors=data.get("authors", []))


@dataclass
class Stats:
    """Server-wide pad and session counters."""

    total_pads: int
    total_sessions: int
    total_active_pads: int

    @classmethod
    def from_dict(cls, data: dict) -> Stats:
        return cls(
            total_pads=data.get("totalPads", 0),
            total_sessions=data.get("totalSessions", 0),
            total_active_pads=data.get("totalActivePads", 0),
        )
