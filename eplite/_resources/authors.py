"""Authors resource: author identities and their pads."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._exceptions import MalformedResponseError
from ._utils import _build_params, _expect

if TYPE_CHECKING:
    from .._http import HTTPClient


class Authors:
    """client.authors: create and look up authors."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def create(self, name: str | None = None) -> str:
        """Create an author, optionally with a display name. Returns the author ID.

        Sent as GET without a name and as POST with one.
        """
        data = self._http.invoke("createAuthor", _build_params(name=name))
        return _expect(data, "authorID", str, "createAuthor")

    def create_if_not_exists_for(self, author_mapper: str, name: str | None = None) -> str:
        """Return the author mapped to ``author_mapper``, creating it on first use.

        Passing ``name`` renames an existing author.
        """
        params = _build_params(name=name, authorMapper=author_mapper)
        data = self._http.invoke("createAuthorIfNotExistsFor", params)
        return _expect(data, "authorID", str, "createAuthorIfNotExistsFor")

    def list_pads(self, author_id: str) -> list[str]:
        data = self._http.invoke("listPadsOfAuthor", {"authorID": author_id})
        return _expect(data, "padIDs", list, "listPadsOfAuthor")

    def get_name(self, author_id: str) -> str | None:
        data = self._http.invoke("getAuthorName", {"authorID": author_id})
        # Older servers return the bare name, newer ones wrap it.
        if isinstance(data, dict):
            data = data.get("authorName")
        if data is not None and not isinstance(data, str):
            raise MalformedResponseError(
                f"getAuthorName: unexpected data {data!r}", operation="getAuthorName"
            )
        return data
