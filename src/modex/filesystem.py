"""Filesystem helpers.

Thin, uncached wrappers that resolve well-known directories and manage items
through a `FileSystem` port. Each helper accepts the port (and, where a platform
directory is involved, a `Directories` resolver) as a keyword argument; the
defaults are the local disk and `PlatformDirectories`.

Error policy:
    * Queries that can reasonably come back empty (`file_size`) return `None`.
    * Mutations and listings raise `FileSystemError` subclasses.
    * An unresolvable platform directory raises `DirectoryNotFoundError`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from modex.adapters.directories import PlatformDirectories
from modex.adapters.filesystem import LocalFileSystem
from modex.interfaces.directories import Directories
from modex.interfaces.filesystem import FileSystem, FileSystemError, ItemExistsError, PathLike

logger = logging.getLogger(__name__)


def default_filesystem() -> FileSystem:
    return LocalFileSystem()


def default_directories() -> Directories:
    return PlatformDirectories()


# --- Platform directories ---


def temporary_directory(*, directories: Directories | None = None) -> Path:
    """Return the temporary directory. Never fails."""
    return (directories or default_directories()).temporary()


def document_directory(*, directories: Directories | None = None) -> Path:
    """Return the user's document directory.

    Raises:
        DirectoryNotFoundError: If the directory cannot be resolved.
    """
    return (directories or default_directories()).document()


def application_support_directory(*, directories: Directories | None = None) -> Path:
    """Return the user's application-support directory.

    Raises:
        DirectoryNotFoundError: If the directory cannot be resolved.
    """
    return (directories or default_directories()).application_support()


def library_directory(*, directories: Directories | None = None) -> Path:
    """Return the user's library directory.

    Raises:
        DirectoryNotFoundError: If the directory cannot be resolved.
    """
    return (directories or default_directories()).library()


def document_path(
    filename: str,
    extension: str | None = None,
    *,
    directories: Directories | None = None,
) -> Path:
    """Build ``<documents>/<filename>[.<extension>]``.

    Example:
        ```py
        >>> document_path("report", "json")  # doctest: +SKIP
        PosixPath('/home/alice/Documents/report.json')
        ```
    """
    name = f"{filename}.{extension}" if extension else filename
    return document_directory(directories=directories) / name


# --- Items ---


def create_directory_if_needed(
    path: PathLike,
    *,
    create_intermediates: bool = True,
    fs: FileSystem | None = None,
) -> None:
    """Create a directory unless something already exists at `path`.

    Raises:
        ItemNotFoundError: If a parent is missing and `create_intermediates` is False.
        FileSystemError: If the directory could not be created.
    """
    fs = fs or default_filesystem()
    if fs.exists(path):
        return
    fs.make_dirs(path, parents=create_intermediates)
    logger.debug("Created directory %s", path)


def remove_item_if_exists(path: PathLike, *, fs: FileSystem | None = None) -> None:
    """Remove a file or directory tree; do nothing if `path` does not exist."""
    fs = fs or default_filesystem()
    if not fs.exists(path):
        return
    fs.remove(path)
    logger.debug("Removed %s", path)


def file_size(path: PathLike, *, fs: FileSystem | None = None) -> int | None:
    """Return the size in bytes of the item at `path`, or `None` if unavailable."""
    try:
        return (fs or default_filesystem()).size(path)
    except FileSystemError:
        return None


def contents_of_directory(path: PathLike, *, fs: FileSystem | None = None) -> list[Path]:
    """Return the immediate children of a directory.

    Raises:
        ItemNotFoundError: If `path` does not exist.
        NotDirectoryError: If `path` is not a directory.
    """
    return (fs or default_filesystem()).list_dir(path)


def copy_item(
    source: PathLike,
    destination: PathLike,
    *,
    overwrite: bool = False,
    fs: FileSystem | None = None,
) -> None:
    """Copy a file or directory tree.

    Args:
        source: Item to copy.
        destination: Target path (not the containing directory).
        overwrite: Remove an existing `destination` first.
        fs: File system to operate on.

    Raises:
        ItemExistsError: If `destination` exists and `overwrite` is False.
        ItemNotFoundError: If `source` does not exist.
    """
    fs = fs or default_filesystem()
    _clear_destination(fs, destination, overwrite)
    fs.copy(source, destination)
    logger.debug("Copied %s -> %s", source, destination)


def move_item(
    source: PathLike,
    destination: PathLike,
    *,
    overwrite: bool = False,
    fs: FileSystem | None = None,
) -> None:
    """Move a file or directory tree. Same contract as `copy_item`."""
    fs = fs or default_filesystem()
    _clear_destination(fs, destination, overwrite)
    fs.move(source, destination)
    logger.debug("Moved %s -> %s", source, destination)


def directory_size(path: PathLike, *, fs: FileSystem | None = None) -> int:
    """Sum the sizes of the immediate children of a directory.

    Subdirectories contribute their own entry size, not their contents.
    Children whose size cannot be read count as zero.

    Raises:
        ItemNotFoundError: If `path` does not exist.
        NotDirectoryError: If `path` is not a directory.
    """
    fs = fs or default_filesystem()
    total = 0
    for child in fs.list_dir(path):
        size = file_size(child, fs=fs)
        if size is None:
            logger.debug("Skipping unreadable entry %s", child)
            continue
        total += size
    return total


def _clear_destination(fs: FileSystem, destination: PathLike, overwrite: bool) -> None:
    if not fs.exists(destination):
        return
    if not overwrite:
        raise ItemExistsError(destination)
    fs.remove(destination)
