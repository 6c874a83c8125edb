"""In-memory `FileSystem` backend.

A tiny, dependency-free file system meant for **tests** and examples. Files
and directories live entirely in RAM; nothing persists across processes.

Key behaviors
-------------
- **POSIX-style paths**: every path is normalized to an absolute
  `PurePosixPath`; relative paths are taken relative to ``/``. The root
  directory always exists.
- **Same contract as the disk**: missing parents, existing destinations and
  directory operations on files raise the same `FileSystemError` subclasses
  as `LocalFileSystem`.
- **Sizes**: a file's size is its byte length; directories report 0.
- **Thread-safety**: all reads and mutations happen under an `RLock`.

Typical usage
-------------
    fs = MemoryFileSystem()
    fs.make_dirs("/docs")
    fs.write_bytes("/docs/a.txt", b"hello")
    fs.size("/docs/a.txt")  # 5
"""

from __future__ import annotations

import posixpath
import threading
from pathlib import Path, PurePosixPath

from modex.interfaces.filesystem import (
    FileSystem,
    FileSystemError,
    ItemExistsError,
    ItemNotFoundError,
    NotDirectoryError,
    PathLike,
)

__all__ = ["MemoryFileSystem"]

ROOT = PurePosixPath("/")


def _normalize(path: PathLike) -> PurePosixPath:
    raw = str(path).replace("\\", "/")
    return PurePosixPath(posixpath.normpath(posixpath.join("/", raw)))


class MemoryFileSystem(FileSystem):
    """In-memory FileSystem implementation."""

    def __init__(self) -> None:
        self._files: dict[PurePosixPath, bytes] = {}
        self._dirs: set[PurePosixPath] = {ROOT}
        self._lock = threading.RLock()

    # --- Queries ---

    def exists(self, path: PathLike) -> bool:
        key = _normalize(path)
        with self._lock:
            return key in self._files or key in self._dirs

    def is_dir(self, path: PathLike) -> bool:
        with self._lock:
            return _normalize(path) in self._dirs

    def size(self, path: PathLike) -> int:
        key = _normalize(path)
        with self._lock:
            if key in self._dirs:
                return 0
            try:
                return len(self._files[key])
            except KeyError as e:
                raise ItemNotFoundError(path) from e

    def list_dir(self, path: PathLike) -> list[Path]:
        key = _normalize(path)
        with self._lock:
            self._require_dir(key, path)
            children = [
                p for p in (*self._files, *self._dirs) if p != ROOT and p.parent == key
            ]
        return sorted(Path(str(child)) for child in children)

    def read_bytes(self, path: PathLike) -> bytes:
        key = _normalize(path)
        with self._lock:
            if key in self._dirs:
                raise FileSystemError(f"Is a directory: '{path}'", path)
            try:
                return self._files[key]
            except KeyError as e:
                raise ItemNotFoundError(path) from e

    # --- Mutations ---

    def make_dirs(self, path: PathLike, *, parents: bool = True) -> None:
        key = _normalize(path)
        with self._lock:
            if key in self._files or key in self._dirs:
                raise ItemExistsError(path)
            missing = [key]
            for ancestor in key.parents:
                if ancestor in self._dirs:
                    break
                if ancestor in self._files:
                    raise NotDirectoryError(str(ancestor))
                missing.append(ancestor)
            if len(missing) > 1 and not parents:
                raise ItemNotFoundError(str(key.parent))
            self._dirs.update(missing)

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        key = _normalize(path)
        with self._lock:
            self._require_dir(key.parent, str(key.parent))
            if key in self._dirs:
                raise ItemExistsError(path)
            self._files[key] = bytes(data)

    def remove(self, path: PathLike) -> None:
        key = _normalize(path)
        with self._lock:
            if key in self._files:
                del self._files[key]
                return
            if key not in self._dirs or key == ROOT:
                raise ItemNotFoundError(path)
            for file_key in [p for p in self._files if key in p.parents]:
                del self._files[file_key]
            self._dirs.difference_update(
                {p for p in self._dirs if p == key or key in p.parents}
            )

    def copy(self, source: PathLike, destination: PathLike) -> None:
        with self._lock:
            self._transfer(source, destination)

    def move(self, source: PathLike, destination: PathLike) -> None:
        with self._lock:
            self._transfer(source, destination)
            self.remove(source)

    # --- Internal Helpers ---

    def _require_dir(self, key: PurePosixPath, path: PathLike) -> None:
        if key in self._files:
            raise NotDirectoryError(path)
        if key not in self._dirs:
            raise ItemNotFoundError(path)

    def _transfer(self, source: PathLike, destination: PathLike) -> None:
        """Copy `source` (file or tree) to a fresh `destination`."""
        src, dst = _normalize(source), _normalize(destination)
        if src not in self._files and src not in self._dirs:
            raise ItemNotFoundError(source)
        if dst in self._files or dst in self._dirs:
            raise ItemExistsError(destination)
        self._require_dir(dst.parent, str(dst.parent))
        if src in self._files:
            self._files[dst] = self._files[src]
            return
        if src in dst.parents:
            raise FileSystemError(
                f"Cannot copy '{source}' into itself", destination
            )
        for dir_key in [p for p in self._dirs if p == src or src in p.parents]:
            self._dirs.add(dst / dir_key.relative_to(src))
        for file_key in [p for p in self._files if src in p.parents]:
            self._files[dst / file_key.relative_to(src)] = self._files[file_key]
