"""Chat resource: pad chat history and messages."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from .._types import ChatMessage
from ._utils import _build_params, _expect, _from_data

if TYPE_CHECKING:
    from .._http import HTTPClient


class Chat:
    """client.chat: read and append pad chat messages."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def get_history(
        self, pad_id: str, start: int | None = None, end: int | None = None
    ) -> list[ChatMessage]:
        """Chat messages of a pad, optionally limited to the ``start``..``end`` range."""
        params = _build_params(padID=pad_id, start=start, end=end)
        data = self._http.invoke("getChatHistory", params)
        messages = _expect(data, "messages", list, "getChatHistory")
        return [_from_data(ChatMessage, m, "getChatHistory") for m in messages]

    def get_head(self, pad_id: str) -> int:
        """Index of the latest chat message, -1 when the chat is empty."""
        data = self._http.invoke("getChatHead", {"padID": pad_id})
        return _expect(data, "chatHead", int, "getChatHead")

    def append_message(
        self,
        pad_id: str,
        text: str,
        author_id: str,
        time: datetime | int | None = None,
    ) -> None:
        """Post ``text`` as ``author_id``. ``time`` defaults to the server clock."""
        if isinstance(time, datetime):
            # chat timestamps are milliseconds, unlike session expiry
            time = int(time.timestamp() * 1000)
        params = _build_params(padID=pad_id, text=text, authorID=author_id, time=time)
        self._http.invoke("appendChatMessage", params)
