"""Form-encoding of operation parameters into a query string or request body."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from urllib.parse import urlencode

from ._exceptions import InvalidParametersError

API_KEY_PARAM = "apikey"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_API_KEY_RE = re.compile(rf"({API_KEY_PARAM}=)[^&\s'\"]*")


@dataclass(frozen=True)
class Payload:
    """Encoded request parameters, placed according to the HTTP verb."""

    method: str
    query: str = ""
    body: str = ""


def _stringify(value: Any) -> str:
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, datetime):
        return str(int(value.timestamp()))
    if isinstance(value, str):
        return value
    raise InvalidParametersError(
        f"Unsupported parameter type {type(value).__name__!s}: {value!r}"
    )


def encode_params(params: Mapping[str, Any], api_key: str) -> str:
    """Encode params as ``apikey=<key>&name=value...``, omitting None values.

    Spaces become ``+``; everything outside ``[A-Za-z0-9_.-~]`` is
    percent-escaped as UTF-8, including ``$``, ``&``, ``=`` and ``/``.
    """
    if API_KEY_PARAM in params:
        raise InvalidParametersError(f"'{API_KEY_PARAM}' is set by the client, not per call")
    pairs = [(API_KEY_PARAM, api_key)]
    pairs.extend((name, _stringify(value)) for name, value in params.items() if value is not None)
    return urlencode(pairs, encoding="utf-8")


def build_payload(method: str, params: Mapping[str, Any], api_key: str) -> Payload:
    """Place encoded params in the query string (GET) or form body (POST)."""
    encoded = encode_params(params, api_key)
    if method == "POST":
        return Payload(method=method, body=encoded)
    return Payload(method=method, query=encoded)


def redact(text: str) -> str:
    """Mask any ``apikey=<value>`` pair in ``text``, e.g. a URL echoed by requests."""
    return _API_KEY_RE.sub(r"\1***", text)
