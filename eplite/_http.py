"""Request dispatcher wrapping requests.Session with verb selection and envelope parsing."""

import logging
from collections.abc import Mapping
from typing import Any

import requests

from ._envelope import decode_envelope, parse_envelope, raise_for_code
from ._exceptions import EPLiteError, TransportError
from ._operations import classify, validate_params
from ._params import FORM_CONTENT_TYPE, Payload, build_payload, redact
from ._types import Endpoint

logger = logging.getLogger(__name__)


class HTTPClient:
    """Dispatches one catalogued operation per call. Never retries."""

    def __init__(
        self,
        api_key: str,
        endpoint: Endpoint,
        charset: str = "utf-8",
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self._api_key = api_key
        self._endpoint = endpoint
        self._charset = charset
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers["Accept"] = "application/json"

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    def close(self) -> None:
        self._session.close()

    def _send(
        self, method: str, url: str, payload: Payload, operation: str
    ) -> requests.Response:
        kwargs: dict[str, Any] = {"timeout": self._timeout}
        if method == "POST":
            kwargs["data"] = payload.body.encode("ascii")
            kwargs["headers"] = {"Content-Type": f"{FORM_CONTENT_TYPE}; charset={self._charset}"}
        else:
            kwargs["params"] = payload.query
        try:
            return self._session.request(method, url, **kwargs)
        except requests.RequestException as e:
            reason = redact(str(e))
            logger.warning("%s %s failed: %s", method, operation, reason)
            raise TransportError(f"{operation}: {reason}", operation=operation) from e

    def invoke(self, operation: str, params: Mapping[str, Any] | None = None) -> Any:
        """Call ``operation`` with ``params`` and return the envelope's data."""
        params = dict(params or {})
        validate_params(operation, params)
        method = classify(operation, params)
        payload = build_payload(method, params, self._api_key)
        url = self._endpoint.url_for(operation)
        logger.debug(
            "%s %s params=%s", method, url, [k for k, v in params.items() if v is not None]
        )

        with self._send(method, url, payload, operation) as resp:
            try:
                raw = resp.content
            except requests.RequestException as e:
                raise TransportError(
                    f"{operation}: {redact(str(e))}",
                    operation=operation,
                    status_code=resp.status_code,
                ) from e
            if resp.ok:
                return parse_envelope(raw, charset=self._charset, operation=operation)
            return self._handle_error_status(resp.status_code, raw, operation)

    def _handle_error_status(self, status_code: int, raw: bytes, operation: str) -> Any:
        logger.warning("%s returned HTTP %d", operation, status_code)
        try:
            envelope = decode_envelope(raw, charset=self._charset, operation=operation)
        except EPLiteError as e:
            text = raw.decode(self._charset, errors="replace")[:200] if raw else ""
            raise TransportError(
                f"{operation}: HTTP {status_code} {text}".rstrip(),
                operation=operation,
                status_code=status_code,
            ) from e
        raise_for_code(envelope, operation=operation, status_code=status_code)
        return envelope["data"]
