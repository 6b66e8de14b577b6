"""Shared helpers for resource modules."""

from typing import Any

from .._exceptions import MalformedResponseError


def _build_params(**kwargs: Any) -> dict:
    """Build a params dict in call order, omitting None values."""
    return {k: v for k, v in kwargs.items() if v is not None}


def _expect(data: Any, key: str, kind: type | tuple[type, ...], operation: str) -> Any:
    """Narrow ``data[key]`` to ``kind`` or raise MalformedResponseError."""
    if not isinstance(data, dict) or key not in data:
        raise MalformedResponseError(
            f"{operation}: expected an object with '{key}', got {data!r}", operation=operation
        )
    value = data[key]
    # bool is an int subclass; never accept it where a number is expected
    if not isinstance(value, kind) or (isinstance(value, bool) and bool not in _as_tuple(kind)):
        raise MalformedResponseError(
            f"{operation}: '{key}' has unexpected type {type(value).__name__}",
            operation=operation,
        )
    return value


def _expect_dict(data: Any, operation: str) -> dict:
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"{operation}: expected an object, got {data!r}", operation=operation
        )
    return data


def _as_tuple(kind: type | tuple[type, ...]) -> tuple[type, ...]:
    return kind if isinstance(kind, tuple) else (kind,)


def _from_data(model: type, data: Any, operation: str, **kwargs: Any) -> Any:
    """Build ``model`` from ``data``, mapping shape errors to MalformedResponseError."""
    try:
        return model.from_dict(_expect_dict(data, operation), **kwargs)
    except (KeyError, TypeError, AttributeError) as e:
        raise MalformedResponseError(
            f"{operation}: unexpected {model.__name__} data {data!r}", operation=operation
        ) from e
