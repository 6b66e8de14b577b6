"""Operation catalogue and HTTP verb selection for the Etherpad API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ._exceptions import InvalidParametersError, UnknownOperationError


@dataclass(frozen=True)
class Operation:
    """One named remote procedure and the parameters it accepts."""

    name: str
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    mutating: bool = False

    @property
    def parameters(self) -> tuple[str, ...]:
        return self.required + self.optional


def _op(name: str, *required: str, optional: tuple[str, ...] = (), mutating: bool = False):
    return Operation(name=name, required=required, optional=optional, mutating=mutating)


_CATALOGUE = [
    # Groups
    _op("createGroup", mutating=True),
    _op("createGroupIfNotExistsFor", "groupMapper", mutating=True),
    _op("deleteGroup", "groupID", mutating=True),
    _op("listPads", "groupID"),
    _op("createGroupPad", "groupID", "padName", optional=("text",), mutating=True),
    _op("listAllGroups"),
    # Authors
    _op("createAuthor", optional=("name",)),
    _op("createAuthorIfNotExistsFor", "authorMapper", optional=("name",), mutating=True),
    _op("listPadsOfAuthor", "authorID"),
    _op("getAuthorName", "authorID"),
    # Sessions
    _op("createSession", "groupID", "authorID", "validUntil", mutating=True),
    _op("deleteSession", "sessionID", mutating=True),
    _op("getSessionInfo", "sessionID"),
    _op("listSessionsOfGroup", "groupID"),
    _op("listSessionsOfAuthor", "authorID"),
    # Pad content
    _op("getText", "padID", optional=("rev",)),
    _op("setText", "padID", "text", mutating=True),
    _op("appendText", "padID", "text", mutating=True),
    _op("getHTML", "padID", optional=("rev",)),
    _op("setHTML", "padID", "html", mutating=True),
    _op("getAttributePool", "padID"),
    _op("getRevisionChangeset", "padID", optional=("rev",)),
    _op("createDiffHTML", "padID", "startRev", "endRev"),
    _op("restoreRevision", "padID", "rev"),
    # Chat
    _op("getChatHistory", "padID", optional=("start", "end")),
    _op("getChatHead", "padID"),
    _op("appendChatMessage", "padID", "text", "authorID", optional=("time",), mutating=True),
    # Pads
    _op("createPad", "padID", optional=("text",), mutating=True),
    _op("getRevisionsCount", "padID"),
    _op("getSavedRevisionsCount", "padID"),
    _op("listSavedRevisions", "padID"),
    _op("saveRevision", "padID", optional=("rev",), mutating=True),
    _op("padUsersCount", "padID"),
    _op("padUsers", "padID"),
    _op("deletePad", "padID", mutating=True),
    _op("copyPad", "sourceID", "destinationID", optional=("force",), mutating=True),
    _op(
        "copyPadWithoutHistory",
        "sourceID",
        "destinationID",
        optional=("force",),
        mutating=True,
    ),
    _op("movePad", "sourceID", "destinationID", optional=("force",), mutating=True),
    _op("getReadOnlyID", "padID"),
    _op("getPadID", "roID"),
    _op("setPublicStatus", "padID", "publicStatus", mutating=True),
    _op("getPublicStatus", "padID"),
    _op("setPassword", "padID", "password", mutating=True),
    _op("isPasswordProtected", "padID"),
    _op("listAuthorsOfPad", "padID"),
    _op("getLastEdited", "padID"),
    _op("sendClientsMessage", "padID", "msg", mutating=True),
    # Misc
    _op("checkToken"),
    _op("listAllPads"),
    _op("getStats"),
]

OPERATIONS: dict[str, Operation] = {op.name: op for op in _CATALOGUE}

MUTATING: frozenset[str] = frozenset(op.name for op in _CATALOGUE if op.mutating)

# createAuthor has two call shapes: a bare lookup (GET) and a named create (POST).
_NAMED_CREATE = ("createAuthor", "name")


def get_operation(name: str) -> Operation:
    """Look up an operation, raising UnknownOperationError if it is not catalogued."""
    try:
        return OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(f"Unknown operation: {name}", operation=name) from None


def classify(name: str, params: Mapping[str, Any] | None = None) -> str:
    """Return "POST" for mutating operations, "GET" otherwise."""
    op = get_operation(name)
    if op.mutating:
        return "POST"
    operation, key = _NAMED_CREATE
    if name == operation and params and params.get(key) is not None:
        return "POST"
    return "GET"


def validate_params(name: str, params: Mapping[str, Any]) -> Operation:
    """Check params against the catalogue entry for ``name``."""
    op = get_operation(name)
    missing = [p for p in op.required if params.get(p) is None]
    if missing:
        raise InvalidParametersError(
            f"{name}: missing required parameter(s): {', '.join(missing)}", operation=name
        )
    unknown = [p for p in params if p not in op.parameters]
    if unknown:
        raise InvalidParametersError(
            f"{name}: unexpected parameter(s): {', '.join(unknown)}", operation=name
        )
    return op
