"""Helpers over raw bytes: hex, Base64, gzip, UTF-8 and JSON objects."""

from __future__ import annotations

import base64
import binascii
import gzip
import json
import logging
import string
import zlib
from typing import Any

logger = logging.getLogger(__name__)


def to_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex, two digits per byte.

    Example:
        ```py
        >>> to_hex(b"Hello")
        '48656c6c6f'
        ```
    """
    return data.hex()


def from_hex(text: str) -> bytes | None:
    """Decode a hex string.

    ``len(text) // 2`` byte pairs are read from the start; a trailing odd
    nibble is ignored. Any pair that is not valid hex gives `None`.
    """
    usable = text[: len(text) - len(text) % 2]
    # bytes.fromhex() would skip whitespace between pairs
    if any(ch not in string.hexdigits for ch in usable):
        return None
    return bytes.fromhex(usable)


def to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def from_base64(text: str) -> bytes | None:
    """Decode strict Base64, returning `None` for malformed input."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return None


def gzip_compress(data: bytes) -> bytes:
    return gzip.compress(data)


def gzip_decompress(data: bytes) -> bytes | None:
    """Decompress a gzip stream, or return `None` if it is not one."""
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as exc:
        logger.debug("gzip decompression failed: %s", exc)
        return None


def to_json_object(data: bytes) -> Any | None:
    """Parse JSON bytes into Python objects, `None` on invalid JSON."""
    try:
        return json.loads(data)
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        logger.debug("JSON decoding failed: %s", exc)
        return None


def utf8_string(data: bytes) -> str | None:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None
