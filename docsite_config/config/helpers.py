"""Utility helpers shared by the site configuration resolver."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from urllib.parse import urlsplit

from .models import ConfigValidationError


def _optional_nonblank_str(
    raw: cabc.Mapping[str, typ.Any], key: str, *, field: str
) -> str | None:
    """Return the string stored under ``key``, rejecting explicit blanks."""
    value = _optional_str(raw, key, field=field)
    if value is not None and not value.strip():
        msg = "must not be empty"
        raise ConfigValidationError(field, msg)
    return value


def _require_str(raw: cabc.Mapping[str, typ.Any], key: str, *, field: str) -> str:
    """Return the non-empty string stored under ``key``."""
    value = raw.get(key)
    if value is None:
        msg = "is required"
        raise ConfigValidationError(field, msg)
    if not isinstance(value, str):
        msg = f"must be a string, got {type(value).__name__}"
        raise ConfigValidationError(field, msg)
    if not value.strip():
        msg = "must not be empty"
        raise ConfigValidationError(field, msg)
    return value


def _optional_str(
    raw: cabc.Mapping[str, typ.Any], key: str, *, field: str
) -> str | None:
    """Return the string stored under ``key`` or None when it is absent."""
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"must be a string, got {type(value).__name__}"
        raise ConfigValidationError(field, msg)
    return value


def _optional_bool(
    raw: cabc.Mapping[str, typ.Any], key: str, *, field: str, default: bool
) -> bool:
    """Return the boolean stored under ``key`` or ``default`` when absent."""
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        msg = f"must be a boolean, got {type(value).__name__}"
        raise ConfigValidationError(field, msg)
    return value


def _as_sequence(value: object, *, field: str) -> cabc.Sequence[typ.Any]:
    """Return ``value`` as a sequence, rejecting strings and mappings."""
    if isinstance(value, str | bytes) or not isinstance(value, cabc.Sequence):
        msg = f"must be a list, got {type(value).__name__}"
        raise ConfigValidationError(field, msg)
    return value


def _as_mapping(value: object, *, field: str) -> cabc.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping or fail with a validation error."""
    if not isinstance(value, cabc.Mapping):
        msg = f"must be a mapping, got {type(value).__name__}"
        raise ConfigValidationError(field, msg)
    return value


def _string_tuple(value: object, *, field: str) -> tuple[str, ...]:
    """Return a tuple of non-empty strings taken from a list value."""
    items: list[str] = []
    for index, item in enumerate(_as_sequence(value, field=field)):
        if not isinstance(item, str) or not item.strip():
            msg = "must be a non-empty string"
            raise ConfigValidationError(f"{field}[{index}]", msg)
        items.append(item)
    return tuple(items)


def _check_site_url(url: str) -> None:
    """Ensure ``url`` is an absolute origin such as ``https://example.org``."""
    try:
        parts = urlsplit(url)
        parts.port  # noqa: B018 - parsing the port validates it
    except ValueError as exc:
        msg = f"is not a valid URL: {exc}"
        raise ConfigValidationError("url", msg) from exc
    if not parts.scheme or not parts.hostname:
        msg = f"must be an absolute URL with a scheme and host, got {url!r}"
        raise ConfigValidationError("url", msg)
    if parts.path not in ("", "/"):
        msg = f"must not include a path; move {parts.path!r} into 'baseUrl'"
        raise ConfigValidationError("url", msg)
    if parts.query or parts.fragment:
        msg = "must not include a query string or fragment"
        raise ConfigValidationError("url", msg)


def _check_base_url(base_url: str) -> None:
    """Ensure ``base_url`` is a path wrapped in slashes, e.g. ``/docs/``."""
    if not (base_url.startswith("/") and base_url.endswith("/")):
        msg = f"must start and end with '/', got {base_url!r}"
        raise ConfigValidationError("baseUrl", msg)
    parts = urlsplit(base_url)
    if base_url.startswith("//") or parts.query or parts.fragment:
        msg = f"must be a plain path, got {base_url!r}"
        raise ConfigValidationError("baseUrl", msg)


def _format_copyright(year: int, owner: str) -> str:
    """Return the footer and feed copyright line."""
    return f"Copyright © {year} {owner}"


__all__ = [
    "_as_mapping",
    "_as_sequence",
    "_check_base_url",
    "_check_site_url",
    "_format_copyright",
    "_optional_bool",
    "_optional_nonblank_str",
    "_optional_str",
    "_require_str",
    "_string_tuple",
]
