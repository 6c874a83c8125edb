"""File system interface definitions.

The helpers in :mod:`modex.filesystem` never touch the disk directly; they go
through a `FileSystem` so tests can swap in an in-memory implementation.

Implementations must not cache anything: every call re-queries the underlying
storage. Failures are reported with the `FileSystemError` hierarchy below,
never with raw `OSError`s.
"""

import abc
import os
from pathlib import Path

from modex.errors import ModexError

PathLike = str | os.PathLike[str]


class FileSystemError(ModexError):
    """Base class for all file system errors."""

    def __init__(self, message: str, path: PathLike | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ItemNotFoundError(FileSystemError):
    """The path does not exist."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(f"No such file or directory: '{path}'", path)


class ItemExistsError(FileSystemError):
    """The destination of a create/copy/move already exists."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(f"Item already exists: '{path}'", path)


class NotDirectoryError(FileSystemError):
    """A directory operation was attempted on something that is not a directory."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(f"Not a directory: '{path}'", path)


class FileSystem(abc.ABC):
    """Abstract base class for file system operations."""

    # --- Queries ---

    @abc.abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Return True if a file or directory exists at `path`."""

    @abc.abstractmethod
    def is_dir(self, path: PathLike) -> bool:
        """Return True if `path` is an existing directory."""

    @abc.abstractmethod
    def size(self, path: PathLike) -> int:
        """Return the size in bytes of the item at `path`.

        Raises:
            ItemNotFoundError: If nothing exists at `path`.
            FileSystemError: If the attributes cannot be read.
        """

    @abc.abstractmethod
    def list_dir(self, path: PathLike) -> list[Path]:
        """Return the immediate children of a directory (not recursive).

        Raises:
            ItemNotFoundError: If `path` does not exist.
            NotDirectoryError: If `path` is not a directory.
        """

    @abc.abstractmethod
    def read_bytes(self, path: PathLike) -> bytes:
        """Return the contents of a file.

        Raises:
            ItemNotFoundError: If the file does not exist.
        """

    # --- Mutations ---

    @abc.abstractmethod
    def make_dirs(self, path: PathLike, *, parents: bool = True) -> None:
        """Create a directory.

        Args:
            path: Directory to create.
            parents: Also create missing intermediate directories.

        Raises:
            ItemExistsError: If something already exists at `path`.
            ItemNotFoundError: If the parent is missing and `parents` is False.
        """

    @abc.abstractmethod
    def write_bytes(self, path: PathLike, data: bytes) -> None:
        """Create or replace a file with `data`.

        Raises:
            ItemNotFoundError: If the parent directory does not exist.
        """

    @abc.abstractmethod
    def remove(self, path: PathLike) -> None:
        """Remove a file, or a directory and everything below it.

        Raises:
            ItemNotFoundError: If nothing exists at `path`.
        """

    @abc.abstractmethod
    def copy(self, source: PathLike, destination: PathLike) -> None:
        """Copy a file or directory tree to `destination`.

        Raises:
            ItemNotFoundError: If `source` does not exist.
            ItemExistsError: If `destination` already exists.
        """

    @abc.abstractmethod
    def move(self, source: PathLike, destination: PathLike) -> None:
        """Move a file or directory tree to `destination`.

        Raises:
            ItemNotFoundError: If `source` does not exist.
            ItemExistsError: If `destination` already exists.
        """
