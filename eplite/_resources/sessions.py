"""Sessions resource: time-limited author access to group pads."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from .._types import SessionInfo
from ._utils import _expect, _expect_dict, _from_data

if TYPE_CHECKING:
    from .._http import HTTPClient


class Sessions:
    """client.sessions: session lifecycle and lookup."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def create(self, group_id: str, author_id: str, valid_until: datetime | int) -> str:
        """Create a session valid until ``valid_until`` (datetime or epoch seconds)."""
        params = {"groupID": group_id, "authorID": author_id, "validUntil": valid_until}
        data = self._http.invoke("createSession", params)
        return _expect(data, "sessionID", str, "createSession")

    def create_for(self, group_id: str, author_id: str, hours: int) -> str:
        """Create a session lasting ``hours`` from now."""
        valid_until = datetime.now(UTC) + timedelta(hours=hours)
        return self.create(group_id, author_id, valid_until)

    def delete(self, session_id: str) -> None:
        self._http.invoke("deleteSession", {"sessionID": session_id})

    def get_info(self, session_id: str) -> SessionInfo:
        data = self._http.invoke("getSessionInfo", {"sessionID": session_id})
        return _from_data(SessionInfo, data, "getSessionInfo", session_id=session_id)

    def list_of_group(self, group_id: str) -> dict[str, SessionInfo]:
        data = self._http.invoke("listSessionsOfGroup", {"groupID": group_id})
        return self._sessions(data, "listSessionsOfGroup")

    def list_of_author(self, author_id: str) -> dict[str, SessionInfo]:
        data = self._http.invoke("listSessionsOfAuthor", {"authorID": author_id})
        return self._sessions(data, "listSessionsOfAuthor")

    @staticmethod
    def _sessions(data: object, operation: str) -> dict[str, SessionInfo]:
        # The server sends null rather than {} when there are no sessions.
        if data is None:
            return {}
        return {
            sid: _from_data(SessionInfo, info, operation, session_id=sid)
            for sid, info in _expect_dict(data, operation).items()
            if info is not None
        }
