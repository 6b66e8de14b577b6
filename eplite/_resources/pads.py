"""Pads resource: pad content, revisions, access control and housekeeping."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from .._exceptions import MalformedResponseError
from .._types import AttributePool, DiffHTML
from ._utils import _build_params, _expect, _from_data

if TYPE_CHECKING:
    from .._http import HTTPClient


class Pads:
    """client.pads: everything addressed by a pad ID."""

    def __init__(self, http: HTTPClient):
        self._http = http

    # ── Lifecycle ────────────────────────────────────────────────────

    def create(self, pad_id: str, text: str | None = None) -> None:
        """Create a pad outside any group, optionally with initial text."""
        self._http.invoke("createPad", _build_params(padID=pad_id, text=text))

    def delete(self, pad_id: str) -> None:
        self._http.invoke("deletePad", {"padID": pad_id})

    def copy(self, source_id: str, destination_id: str, force: bool = False) -> None:
        """Copy a pad with its history. ``force`` overwrites an existing destination."""
        params = {"sourceID": source_id, "destinationID": destination_id, "force": force}
        self._http.invoke("copyPad", params)

    def copy_without_history(
        self, source_id: str, destination_id: str, force: bool = False
    ) -> None:
        """Copy only the latest text of a pad. Requires Etherpad API 1.2.15 or later."""
        params = {"sourceID": source_id, "destinationID": destination_id, "force": force}
        self._http.invoke("copyPadWithoutHistory", params)

    def move(self, source_id: str, destination_id: str, force: bool = False) -> None:
        params = {"sourceID": source_id, "destinationID": destination_id, "force": force}
        self._http.invoke("movePad", params)

    def list_all(self) -> list[str]:
        data = self._http.invoke("listAllPads")
        return _expect(data, "padIDs", list, "listAllPads")

    # ── Content ──────────────────────────────────────────────────────

    def get_text(self, pad_id: str, rev: int | None = None) -> str:
        data = self._http.invoke("getText", _build_params(padID=pad_id, rev=rev))
        return _expect(data, "text", str, "getText")

    def set_text(self, pad_id: str, text: str) -> None:
        self._http.invoke("setText", {"padID": pad_id, "text": text})

    def append_text(self, pad_id: str, text: str) -> None:
        self._http.invoke("appendText", {"padID": pad_id, "text": text})

    def get_html(self, pad_id: str, rev: int | None = None) -> str:
        data = self._http.invoke("getHTML", _build_params(padID=pad_id, rev=rev))
        return _expect(data, "html", str, "getHTML")

    def set_html(self, pad_id: str, html: str) -> None:
        self._http.invoke("setHTML", {"padID": pad_id, "html": html})

    def get_attribute_pool(self, pad_id: str) -> AttributePool:
        data = self._http.invoke("getAttributePool", {"padID": pad_id})
        pool = _expect(data, "pool", dict, "getAttributePool")
        return _from_data(AttributePool, pool, "getAttributePool")

    # ── Revisions ────────────────────────────────────────────────────

    def get_revision_changeset(self, pad_id: str, rev: int | None = None) -> str:
        """The changeset of ``rev`` (latest when omitted), as an opaque string."""
        data = self._http.invoke("getRevisionChangeset", _build_params(padID=pad_id, rev=rev))
        if not isinstance(data, str):
            raise MalformedResponseError(
                f"getRevisionChangeset: expected a string, got {data!r}",
                operation="getRevisionChangeset",
            )
        return data

    def create_diff_html(self, pad_id: str, start_rev: int, end_rev: int) -> DiffHTML:
        params = {"padID": pad_id, "startRev": start_rev, "endRev": end_rev}
        data = self._http.invoke("createDiffHTML", params)
        return _from_data(DiffHTML, data, "createDiffHTML")

    def restore_revision(self, pad_id: str, rev: int) -> None:
        self._http.invoke("restoreRevision", {"padID": pad_id, "rev": rev})

    def get_revisions_count(self, pad_id: str) -> int:
        data = self._http.invoke("getRevisionsCount", {"padID": pad_id})
        return _expect(data, "revisions", int, "getRevisionsCount")

    def get_saved_revisions_count(self, pad_id: str) -> int:
        data = self._http.invoke("getSavedRevisionsCount", {"padID": pad_id})
        return _expect(data, "savedRevisions", int, "getSavedRevisionsCount")

    def list_saved_revisions(self, pad_id: str) -> list[int]:
        data = self._http.invoke("listSavedRevisions", {"padID": pad_id})
        return _expect(data, "savedRevisions", list, "listSavedRevisions")

    def save_revision(self, pad_id: str, rev: int | None = None) -> None:
        self._http.invoke("saveRevision", _build_params(padID=pad_id, rev=rev))

    # ── Access ───────────────────────────────────────────────────────

    def get_read_only_id(self, pad_id: str) -> str:
        data = self._http.invoke("getReadOnlyID", {"padID": pad_id})
        return _expect(data, "readOnlyID", str, "getReadOnlyID")

    def get_pad_id(self, read_only_id: str) -> str:
        data = self._http.invoke("getPadID", {"roID": read_only_id})
        return _expect(data, "padID", str, "getPadID")

    def set_public_status(self, pad_id: str, public: bool) -> None:
        """Group pads only."""
        self._http.invoke("setPublicStatus", {"padID": pad_id, "publicStatus": public})

    def get_public_status(self, pad_id: str) -> bool:
        data = self._http.invoke("getPublicStatus", {"padID": pad_id})
        return _expect(data, "publicStatus", bool, "getPublicStatus")

    def set_password(self, pad_id: str, password: str) -> None:
        """Group pads only."""
        self._http.invoke("setPassword", {"padID": pad_id, "password": password})

    def is_password_protected(self, pad_id: str) -> bool:
        data = self._http.invoke("isPasswordProtected", {"padID": pad_id})
        return _expect(data, "isPasswordProtected", bool, "isPasswordProtected")

    # ── Activity ─────────────────────────────────────────────────────

    def users_count(self, pad_id: str) -> int:
        data = self._http.invoke("padUsersCount", {"padID": pad_id})
        return _expect(data, "padUsersCount", int, "padUsersCount")

    def users(self, pad_id: str) -> list[dict]:
        data = self._http.invoke("padUsers", {"padID": pad_id})
        return _expect(data, "padUsers", list, "padUsers")

    def list_authors(self, pad_id: str) -> list[str]:
        data = self._http.invoke("listAuthorsOfPad", {"padID": pad_id})
        return _expect(data, "authorIDs", list, "listAuthorsOfPad")

    def get_last_edited(self, pad_id: str) -> datetime:
        data = self._http.invoke("getLastEdited", {"padID": pad_id})
        millis = _expect(data, "lastEdited", (int, float), "getLastEdited")
        return datetime.fromtimestamp(millis / 1000, tz=UTC)

    def send_clients_message(self, pad_id: str, msg: str) -> None:
        """Broadcast ``msg`` to every client connected to the pad."""
        self._http.invoke("sendClientsMessage", {"padID": pad_id, "msg": msg})
