"""Logging setup for the MODEX CLI.

Library modules never configure logging; they only emit records on their module
loggers. The CLI turns its options into a `LoggingOptions` and hands it to
`configure_logging`, which installs:

- a Rich console handler on stderr, and
- optionally a "flight recorder": a `MemoryHandler` that keeps recent DEBUG
  records and writes them to a file once a WARNING shows up.

`log_startup` then records what the process is running with, including where
the platform directories resolved, so a flushed log is enough to diagnose a
misplaced file.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.metadata import version as dist_version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from modex import __version__, runtime
from modex.config import DIRECTORY_KINDS, directory_env_var, get_directory_override
from modex.errors import DirectoryNotFoundError
from modex.filesystem import default_directories

if TYPE_CHECKING:
    from logging import Handler, Logger

    from modex.interfaces.directories import Directories

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "modex"
REPORTED_DISTRIBUTIONS = ("click", "click-extra", "platformdirs", "rich")

FLIGHT_RECORDER_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s:%(lineno)d [%(threadName)s] %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True)
class LoggingOptions:
    """Logging settings gathered from the ``modex`` command line.

    Verbosity starts at WARNING; each ``verbose`` step lowers it by one level
    and each ``quiet`` step raises it, clamped to DEBUG..CRITICAL.
    A `log_path` of `None` disables the flight recorder.
    """

    verbose: int = 0
    quiet: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    capacity: int = 2000
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        level = logging.WARNING - 10 * self.verbose + 10 * self.quiet
        return max(logging.DEBUG, min(logging.CRITICAL, level))


def _is_project_logger(name: str) -> bool:
    return name == PROJECT_PREFIX or name.startswith(PROJECT_PREFIX + ".")


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[package]`` for loggers outside MODEX.

    MODEX's own records get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if _is_project_logger(record.name):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a RichHandler writing to stderr.

    In debug mode the handler drops to DEBUG and shows timestamps, logger
    names and clickable source locations; otherwise third-party records are
    tagged with their package name.
    """
    # follows click-extra's --color / --no-color
    color_system: ColorSystem | None = "auto" if color else None

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=debug_mode,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a memory-buffered handler that dumps to `path`.

    Args:
        path: File the buffer is written to. Truncated when the handler is
            created; parent directories are created as needed.
        capacity: Number of records kept in memory.
        flush_level: Records at this level or above flush the buffer.
        flush_on_close: Also flush when the handler is closed.

    Returns:
        MemoryHandler: Handler whose target is a `FileHandler` on `path`.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(options: LoggingOptions) -> list[Handler]:
    """Install MODEX's handlers on the root logger and apply logger levels.

    Any handlers already on the root logger are replaced. The root logger
    itself passes everything; the handlers do the filtering.

    Returns:
        The handlers installed, console handler first.
    """
    handlers: list[Handler] = [
        config_console_handler(
            level=options.console_level, debug_mode=options.debug, color=options.color
        )
    ]
    if options.log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=options.log_path,
                capacity=options.capacity,
                flush_on_close=options.force_flush,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in options.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def describe_directories(directories: Directories | None = None) -> dict[str, str]:
    """Map each directory kind to where it resolves, for diagnostics.

    Unresolvable kinds read ``<unresolved>``. A location taken from an
    environment override names the variable, e.g.
    ``/srv/docs (MODEX_DOCUMENT_DIR)``.
    """
    directories = directories or default_directories()
    described = {}
    for kind in DIRECTORY_KINDS:
        try:
            path = getattr(directories, kind)()
        except DirectoryNotFoundError:
            described[kind] = "<unresolved>"
            continue
        if get_directory_override(kind) == path:
            described[kind] = f"{path} ({directory_env_var(kind)})"
        else:
            described[kind] = str(path)
    return described


def log_startup(
    logger: Logger,
    options: LoggingOptions,
    handlers: list[Handler],
    *,
    directories: Directories | None = None,
) -> None:
    """Log a one-line INFO summary, then DEBUG details about the environment."""
    logger.info(
        "modex %s starting: console=%s, flight recorder=%s",
        __version__,
        logging.getLevelName(options.console_level),
        options.log_path if options.log_path is not None else "off",
    )

    logger.debug(
        "Runtime: Python %s on %s %s, pid %d, cwd %s",
        platform.python_version(),
        platform.system(),
        platform.release(),
        os.getpid(),
        Path.cwd(),
    )
    logger.debug("Executable: %s", sys.executable)
    logger.debug("Build: %s", runtime.build() or "<unset>")
    logger.debug(
        "Libraries: %s",
        ", ".join(f"{name}={dist_version(name)}" for name in REPORTED_DISTRIBUTIONS),
    )
    logger.debug("Handlers: %s", ", ".join(type(h).__name__ for h in handlers))
    if options.log_path is not None:
        logger.debug(
            "Flight recorder: capacity=%d, flush_on_close=%s",
            options.capacity,
            options.force_flush,
        )
    levels = ", ".join(
        f"{name}={logging.getLevelName(level)}"
        for name, level in sorted(options.logger_levels.items())
    )
    logger.debug("Logger levels: %s", levels or "<default>")
    for kind, location in describe_directories(directories).items():
        logger.debug("Directory %s: %s", kind, location)
