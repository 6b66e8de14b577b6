"""Etherpad API client: one namespace per entity over a single dispatcher."""

from __future__ import annotations

import os
from typing import Any

import requests

from ._exceptions import ConfigurationError
from ._http import HTTPClient
from ._resources import Authors, Chat, Groups, Pads, Sessions
from ._resources._utils import _from_data
from ._types import Endpoint, Stats

DEFAULT_BASE_URL = "http://localhost:9001"
DEFAULT_API_VERSION = "1.2.13"


class EPLite:
    """Client for the Etherpad HTTP API.

    Usage:
        client = EPLite(api_key="...", base_url="http://localhost:9001")
        client.pads.create("notes", text="hello")
        print(client.pads.get_text("notes"))
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        api_version: str | None = None,
        charset: str = "utf-8",
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        api_key = api_key or os.environ.get("ETHERPAD_API_KEY")
        if not api_key:
            raise ConfigurationError(
                "No API key provided. Pass api_key= or set ETHERPAD_API_KEY env var."
            )
        base_url = base_url or os.environ.get("ETHERPAD_URL") or DEFAULT_BASE_URL
        api_version = api_version or os.environ.get("ETHERPAD_API_VERSION") or DEFAULT_API_VERSION

        self._http = HTTPClient(
            api_key=api_key,
            endpoint=Endpoint.from_url(base_url, api_version),
            charset=charset,
            timeout=timeout,
            session=session,
        )
        self.groups = Groups(self._http)
        self.authors = Authors(self._http)
        self.sessions = Sessions(self._http)
        self.pads = Pads(self._http)
        self.chat = Chat(self._http)

    def __enter__(self) -> EPLite:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    @property
    def endpoint(self) -> Endpoint:
        return self._http.endpoint

    @property
    def is_secure(self) -> bool:
        """Whether the configured port is the HTTPS port. No TLS check is made."""
        return self._http.endpoint.is_secure

    def call(self, operation: str, **params: Any) -> Any:
        """Invoke any catalogued operation by name and return its raw data."""
        return self._http.invoke(operation, params)

    def check_token(self) -> None:
        """Raise PermissionDeniedError if the API key is rejected."""
        self._http.invoke("checkToken")

    def get_stats(self) -> Stats:
        """Server-wide counters. Requires Etherpad API 1.2.14 or later."""
        data = self._http.invoke("getStats")
        return _from_data(Stats, data, "getStats")
