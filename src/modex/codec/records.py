"""Conversions for records: dataclass instances and plain JSON-like values.

A *record* is either a dataclass instance (converted with
:func:`dataclasses.asdict`) or a value built from dicts, lists, strings,
numbers, booleans and `None`.

Every encoder returns `None` when the record cannot be represented in the
target format; nothing here raises on bad input. `save_to_file` is the one
exception: a failed *write* still raises `FileSystemError`.
"""

from __future__ import annotations

import base64
import dataclasses
import json
import logging
import plistlib
from pathlib import Path
from typing import Any

from modex import filesystem
from modex.codec.mappings import dumps
from modex.interfaces.directories import Directories
from modex.interfaces.filesystem import FileSystem, FileSystemError

logger = logging.getLogger(__name__)


def _to_document(record: Any) -> Any:
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return dataclasses.asdict(record)
    return record


def _contains_none(value: Any) -> bool:
    # the binary plist writer would otherwise emit a null object
    if value is None:
        return True
    if isinstance(value, dict):
        return any(_contains_none(item) for item in value.values())
    if isinstance(value, (list, tuple)):
        return any(_contains_none(item) for item in value)
    return False


def to_json_string(record: Any, *, pretty_printed: bool = False) -> str | None:
    """Encode `record` as JSON text.

    Args:
        record: Dataclass instance or JSON-like value.
        pretty_printed: Indent with two spaces. Only whitespace changes.

    Returns:
        The JSON text, or `None` if `record` is not JSON serializable.
    """
    try:
        return dumps(_to_document(record), pretty_printed=pretty_printed)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Record is not JSON serializable: %s", exc)
        return None


def to_json_data(record: Any) -> bytes | None:
    """Encode `record` as compact UTF-8 JSON bytes, or `None` on failure."""
    text = to_json_string(record)
    return text.encode("utf-8") if text is not None else None


def to_dictionary(record: Any) -> dict[str, Any] | None:
    """Return `record` as a plain dict after a JSON round trip.

    Returns `None` if `record` cannot be encoded or does not encode to a JSON
    object (e.g. a list or a bare string).

    Example:
        ```py
        >>> @dataclasses.dataclass
        ... class User:
        ...     name: str
        ...     age: int
        >>> to_dictionary(User("Alice", 25))
        {'name': 'Alice', 'age': 25}
        ```
    """
    if (text := to_json_string(record)) is None:
        return None
    value = json.loads(text)
    return value if isinstance(value, dict) else None


def to_plist_data(
    record: Any, fmt: plistlib.PlistFormat = plistlib.FMT_BINARY
) -> bytes | None:
    """Encode `record` as a property list (binary by default).

    Property lists cannot hold `None`; a record containing one, or any other
    type `plistlib` does not support, yields `None`.
    """
    try:
        document = _to_document(record)
        if _contains_none(document):
            logger.debug("Record contains None, which property lists cannot hold")
            return None
        return plistlib.dumps(document, fmt=fmt)
    except (TypeError, ValueError, OverflowError, RecursionError) as exc:
        logger.debug("Record is not plist serializable: %s", exc)
        return None


def to_plist_string(record: Any) -> str | None:
    """Encode `record` as XML property list text, or `None` on failure."""
    data = to_plist_data(record, fmt=plistlib.FMT_XML)
    return data.decode("utf-8") if data is not None else None


def to_base64_json(record: Any) -> str | None:
    """Return the standard Base64 encoding of the record's compact JSON bytes."""
    if (data := to_json_data(record)) is None:
        return None
    return base64.b64encode(data).decode("ascii")


def save_to_file(
    record: Any,
    file_name: str,
    *,
    fs: FileSystem | None = None,
    directories: Directories | None = None,
) -> Path | None:
    """Write the record's JSON bytes to ``<documents>/<file_name>``.

    An existing file with the same name is replaced.

    Args:
        record: Dataclass instance or JSON-like value.
        file_name: Name of the file inside the document directory.
        fs: File system to write through (default: local disk).
        directories: Directory resolver (default: platform directories).

    Returns:
        The path written, or `None` if the record could not be encoded.

    Raises:
        FileSystemError: If the file could not be written.
        DirectoryNotFoundError: If the document directory cannot be resolved.
    """
    if (data := to_json_data(record)) is None:
        logger.warning("Not saving %s: record could not be encoded as JSON", file_name)
        return None
    fs = fs or filesystem.default_filesystem()
    path = filesystem.document_path(file_name, directories=directories)
    try:
        fs.write_bytes(path, data)
    except FileSystemError:
        logger.error("Failed to save %s", path)
        raise
    logger.debug("Saved %d bytes to %s", len(data), path)
    return path
