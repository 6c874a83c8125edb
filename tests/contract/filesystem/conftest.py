"""Pytest fixtures for `FileSystem` contract tests.

Provided fixtures
-----------------
- **fs**: Parametrized backend returning a **fresh** `FileSystem` per test:
  `"local"` (`LocalFileSystem`) or `"memory"` (`MemoryFileSystem`).
- **root**: An existing, empty directory on that backend. Tests build every
  path below it so the same test body runs against both backends.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from modex.adapters.filesystem import LocalFileSystem, MemoryFileSystem
from modex.interfaces.filesystem import FileSystem


@pytest.fixture(params=["local", "memory"])
def backend(request: pytest.FixtureRequest, tmp_path: Path) -> tuple[FileSystem, Path]:
    """Return ``(file_system, root)`` for the requested backend."""
    match request.param:
        case "local":
            return LocalFileSystem(), tmp_path
        case "memory":
            fs = MemoryFileSystem()
            root = Path("/contract")
            fs.make_dirs(root)
            return fs, root
        case _:
            raise ValueError(f"unknown file system type: {request.param}")


@pytest.fixture
def fs(backend: tuple[FileSystem, Path]) -> FileSystem:
    return backend[0]


@pytest.fixture
def root(backend: tuple[FileSystem, Path]) -> Path:
    return backend[1]
