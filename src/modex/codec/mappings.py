"""Helpers over string-keyed mappings: merging, JSON and query strings.

Unlike the record helpers, the JSON helpers here never return `None`: a mapping
that cannot be serialized renders as ``"{}"`` (text) or ``b""`` (bytes).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, TypeVar

from rich.console import Console

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

EMPTY_JSON_OBJECT = "{}"
COMPACT_SEPARATORS = (",", ":")
PRETTY_INDENT = 2


def update(target: MutableMapping[K, V], other: Mapping[K, V]) -> None:
    """Merge `other` into `target` in place; `other` wins on shared keys.

    Example:
        ```py
        >>> d = {"a": 1, "b": 2}
        >>> update(d, {"b": 3, "c": 4})
        >>> d
        {'a': 1, 'b': 3, 'c': 4}
        ```
    """
    target.update(other)


def dumps(value: Any, *, pretty_printed: bool = False) -> str:
    """Serialize `value` to JSON text with MODEX's formatting conventions.

    Compact output has no whitespace between tokens; pretty output uses a
    two-space indent. Non-ASCII characters are written as-is and NaN/Infinity
    are rejected.

    Raises:
        TypeError: If `value` contains something JSON cannot represent.
        ValueError: If `value` contains NaN/Infinity or a circular reference.
        RecursionError: If `value` is nested too deeply to serialize.
    """
    if pretty_printed:
        return json.dumps(
            value, indent=PRETTY_INDENT, ensure_ascii=False, allow_nan=False
        )
    return json.dumps(
        value, separators=COMPACT_SEPARATORS, ensure_ascii=False, allow_nan=False
    )


def to_json_str(mapping: Mapping[str, Any], *, pretty_printed: bool = False) -> str:
    """Render `mapping` as JSON text, or ``"{}"`` if it cannot be serialized."""
    try:
        return dumps(dict(mapping), pretty_printed=pretty_printed)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Mapping is not JSON serializable: %s", exc)
        return EMPTY_JSON_OBJECT


def to_json_data(mapping: Mapping[str, Any], *, pretty_printed: bool = False) -> bytes:
    """Render `mapping` as UTF-8 JSON bytes, or ``b""`` if it cannot be serialized."""
    try:
        return dumps(dict(mapping), pretty_printed=pretty_printed).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Mapping is not JSON serializable: %s", exc)
        return b""


def to_query(mapping: Mapping[str, Any]) -> str:
    """Join ``key=value`` pairs with ``&``.

    Keys and values are inserted verbatim: nothing is URL-escaped. Use
    :func:`urllib.parse.urlencode` when the values may contain reserved
    characters.

    Example:
        ```py
        >>> to_query({"name": "Alice", "age": "25"})
        'name=Alice&age=25'
        ```
    """
    return "&".join(f"{key}={value}" for key, value in mapping.items())


def print_json(mapping: Mapping[str, Any], console: Console | None = None) -> None:
    """Pretty-print `mapping` as highlighted JSON (debugging aid)."""
    (console or Console()).print_json(to_json_str(mapping, pretty_printed=True))
