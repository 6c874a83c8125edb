"""Global pytest fixtures for MODEX."""

from __future__ import annotations

from pathlib import Path

import pytest

from modex.adapters.directories import FixedDirectories
from modex.adapters.filesystem import MemoryFileSystem
from modex.config import DIRECTORY_KINDS, directory_env_var

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = ("unit", "integration", "contract", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]  # pylint: disable=unused-argument
) -> None:
    """Mark each item after the top-level test folder it lives in."""
    for item in items:
        try:
            folder = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if folder not in FOLDER_MARKERS:
            continue
        if not any(marker.name == folder for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, folder))


@pytest.fixture(autouse=True)
def _clear_directory_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MODEX_* variables from the developer's shell out of the tests."""
    for kind in DIRECTORY_KINDS:
        monkeypatch.delenv(directory_env_var(kind), raising=False)
    for name in ("MODEX_BUILD", "MODEX_LOG_PATH", "MODEX_LOGGER_LEVELS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Fresh in-memory file system with ``/docs`` and ``/tmp`` created."""
    fs = MemoryFileSystem()
    fs.make_dirs("/docs")
    fs.make_dirs("/tmp")
    return fs


@pytest.fixture
def fixed_dirs() -> FixedDirectories:
    """Directories matching the layout of `memory_fs`."""
    return FixedDirectories(
        temporary_dir=Path("/tmp"),
        document_dir=Path("/docs"),
        application_support_dir=Path("/support"),
        library_dir=Path("/library"),
    )
