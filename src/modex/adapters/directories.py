"""Directory resolution adapters.

`PlatformDirectories` asks `platformdirs` where the current user's folders live
(honoring ``MODEX_<KIND>_DIR`` environment overrides first).
`FixedDirectories` returns paths handed to it, which keeps tests away from the
real home directory.

Mapping onto platformdirs (no application name):

============================  =======================================
kind                          source
============================  =======================================
temporary                     :func:`tempfile.gettempdir`
document                      ``platformdirs.user_documents_dir()``
application_support           ``platformdirs.user_data_dir()``
library                       parent of ``user_data_dir()`` (``~/Library`` on macOS)
============================  =======================================
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import platformdirs

from modex.config import get_directory_override
from modex.errors import DirectoryNotFoundError
from modex.interfaces.directories import Directories

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


def _resolve(kind: str, label: str, resolver: Callable[[], str]) -> Path:
    if (override := get_directory_override(kind)) is not None:
        logger.debug("%s directory overridden from environment: %s", label, override)
        return override.absolute()
    try:
        raw = resolver()
    except (OSError, RuntimeError, KeyError) as e:
        raise DirectoryNotFoundError(label) from e
    if not raw:
        raise DirectoryNotFoundError(label)
    return Path(raw).absolute()


class PlatformDirectories(Directories):
    """Directories resolved for the current user via `platformdirs`."""

    def __init__(self, app_name: str | None = None) -> None:
        self._app_name = app_name

    def temporary(self) -> Path:
        if (override := get_directory_override("temporary")) is not None:
            return override.absolute()
        return Path(tempfile.gettempdir()).absolute()

    def document(self) -> Path:
        return _resolve("document", "Document", platformdirs.user_documents_dir)

    def application_support(self) -> Path:
        return _resolve(
            "application_support",
            "Application Support",
            lambda: platformdirs.user_data_dir(self._app_name, appauthor=False),
        )

    def library(self) -> Path:
        return _resolve(
            "library",
            "Library",
            lambda: str(Path(platformdirs.user_data_dir()).parent),
        )


@dataclass(frozen=True)
class FixedDirectories(Directories):
    """Directories fixed at construction time.

    Leaving a non-temporary directory as `None` makes it unresolvable, which
    raises `DirectoryNotFoundError` just like a misconfigured host would.
    """

    temporary_dir: Path
    document_dir: Path | None = None
    application_support_dir: Path | None = None
    library_dir: Path | None = None

    def temporary(self) -> Path:
        return self.temporary_dir

    def document(self) -> Path:
        return self._require(self.document_dir, "Document")

    def application_support(self) -> Path:
        return self._require(self.application_support_dir, "Application Support")

    def library(self) -> Path:
        return self._require(self.library_dir, "Library")

    @staticmethod
    def _require(path: Path | None, label: str) -> Path:
        if path is None:
            raise DirectoryNotFoundError(label)
        return path
