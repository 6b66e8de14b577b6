"""Parse the ``{code, message, data}`` response envelope and classify errors."""

from __future__ import annotations

import json
import logging
from typing import Any

from ._exceptions import CODE_MAP, APIError, MalformedResponseError, TransportError

logger = logging.getLogger(__name__)

ENVELOPE_KEYS = ("code", "message", "data")


def decode_envelope(
    raw: bytes | str, *, charset: str = "utf-8", operation: str | None = None
) -> dict[str, Any]:
    """Decode raw bytes into an envelope dict, validating its shape."""
    try:
        text = raw.decode(charset) if isinstance(raw, bytes) else raw
        body = json.loads(text)
    except (UnicodeDecodeError, ValueError) as e:
        snippet = raw[:200] if raw else "empty"
        logger.debug("Failed to parse response body: %r", snippet)
        raise TransportError(f"Response is not valid JSON: {e}", operation=operation) from e

    if not isinstance(body, dict) or any(key not in body for key in ENVELOPE_KEYS):
        raise MalformedResponseError(
            f"Response lacks the code/message/data envelope: {str(body)[:200]}",
            operation=operation,
        )
    code = body["code"]
    if isinstance(code, bool) or not isinstance(code, int):
        raise MalformedResponseError(
            f"Envelope code must be an integer, got {code!r}", operation=operation
        )
    return body


def raise_for_code(
    envelope: dict[str, Any], *, operation: str | None = None, status_code: int | None = None
) -> None:
    """Map a non-zero envelope code to its typed exception."""
    code = envelope["code"]
    if code == 0:
        return
    message = envelope["message"]
    message = message if isinstance(message, str) else str(message)
    exc_cls = CODE_MAP.get(code, APIError)
    raise exc_cls(message, code=code, operation=operation, status_code=status_code)


def parse_envelope(
    raw: bytes | str, *, charset: str = "utf-8", operation: str | None = None
) -> Any:
    """Return the envelope's ``data`` on success, raise a typed error otherwise."""
    envelope = decode_envelope(raw, charset=charset, operation=operation)
    raise_for_code(envelope, operation=operation)
    return envelope["data"]
