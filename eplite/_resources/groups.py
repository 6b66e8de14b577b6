"""Groups resource: group lifecycle and group-scoped pads."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._utils import _build_params, _expect

if TYPE_CHECKING:
    from .._http import HTTPClient


class Groups:
    """client.groups: group lifecycle and the pads inside a group."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def create(self) -> str:
        """Create a new group and return its ``g.`` prefixed ID."""
        data = self._http.invoke("createGroup")
        return _expect(data, "groupID", str, "createGroup")

    def create_if_not_exists_for(self, group_mapper: str) -> str:
        """Return the group mapped to ``group_mapper``, creating it on first use."""
        data = self._http.invoke("createGroupIfNotExistsFor", {"groupMapper": group_mapper})
        return _expect(data, "groupID", str, "createGroupIfNotExistsFor")

    def delete(self, group_id: str) -> None:
        self._http.invoke("deleteGroup", {"groupID": group_id})

    def list_pads(self, group_id: str) -> list[str]:
        data = self._http.invoke("listPads", {"groupID": group_id})
        return _expect(data, "padIDs", list, "listPads")

    def list_all(self) -> list[str]:
        data = self._http.invoke("listAllGroups")
        return _expect(data, "groupIDs", list, "listAllGroups")

    def create_pad(self, group_id: str, pad_name: str, text: str | None = None) -> str:
        """Create ``pad_name`` inside a group. Returns the ``groupID$padName`` pad ID."""
        params = _build_params(groupID=group_id, padName=pad_name, text=text)
        data = self._http.invoke("createGroupPad", params)
        return _expect(data, "padID", str, "createGroupPad")
