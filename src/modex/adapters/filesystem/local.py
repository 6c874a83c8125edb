"""Local disk `FileSystem` adapter."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from modex.interfaces.filesystem import (
    FileSystem,
    FileSystemError,
    ItemExistsError,
    ItemNotFoundError,
    NotDirectoryError,
    PathLike,
)


@contextmanager
def _translate_os_errors(path: PathLike) -> Iterator[None]:
    """Re-raise `OSError`s from the block as `FileSystemError` subclasses."""
    try:
        yield
    except FileNotFoundError as e:
        raise ItemNotFoundError(e.filename or path) from e
    except FileExistsError as e:
        raise ItemExistsError(e.filename or path) from e
    except NotADirectoryError as e:
        raise NotDirectoryError(e.filename or path) from e
    except OSError as e:
        raise FileSystemError(str(e), e.filename or path) from e


class LocalFileSystem(FileSystem):
    """FileSystem implementation backed by the local disk (pathlib + shutil)."""

    # --- Queries ---

    def exists(self, path: PathLike) -> bool:
        # a dangling symlink still occupies the name
        return os.path.lexists(path)

    def is_dir(self, path: PathLike) -> bool:
        return Path(path).is_dir()

    def size(self, path: PathLike) -> int:
        with _translate_os_errors(path):
            return Path(path).stat().st_size

    def list_dir(self, path: PathLike) -> list[Path]:
        with _translate_os_errors(path):
            return sorted(Path(path).iterdir())

    def read_bytes(self, path: PathLike) -> bytes:
        with _translate_os_errors(path):
            return Path(path).read_bytes()

    # --- Mutations ---

    def make_dirs(self, path: PathLike, *, parents: bool = True) -> None:
        with _translate_os_errors(path):
            Path(path).mkdir(parents=parents, exist_ok=False)

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        with _translate_os_errors(path):
            Path(path).write_bytes(data)

    def remove(self, path: PathLike) -> None:
        target = Path(path)
        with _translate_os_errors(path):
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()

    def copy(self, source: PathLike, destination: PathLike) -> None:
        src, dst = self._check_transfer(source, destination)
        with _translate_os_errors(destination):
            if src.is_dir() and not src.is_symlink():
                shutil.copytree(src, dst, symlinks=True)
            else:
                shutil.copy2(src, dst, follow_symlinks=False)

    def move(self, source: PathLike, destination: PathLike) -> None:
        src, dst = self._check_transfer(source, destination)
        with _translate_os_errors(destination):
            shutil.move(src, dst)

    # --- Internal Helpers ---

    def _check_transfer(
        self, source: PathLike, destination: PathLike
    ) -> tuple[Path, Path]:
        """Validate a copy/move: the source must exist, the destination must not.

        `shutil` would otherwise merge into (or move inside) an existing
        destination directory.
        """
        if not self.exists(source):
            raise ItemNotFoundError(source)
        if self.exists(destination):
            raise ItemExistsError(destination)
        return Path(source), Path(destination)
