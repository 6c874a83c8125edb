"""Process-level helpers: delayed shutdown and version reporting."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as dist_version

from modex.config import APP_NAME, get_build

logger = logging.getLogger(__name__)

DEFAULT_KILL_DELAY = 0.5  # seconds


def _terminate() -> None:
    logging.shutdown()
    os._exit(0)  # pylint: disable=protected-access


def kill_app(
    delay: float = DEFAULT_KILL_DELAY,
    *,
    exit_strategy: Callable[[], None] | None = None,
    timer_factory: Callable[..., threading.Timer] = threading.Timer,
) -> threading.Timer:
    """Schedule process termination after `delay` seconds.

    The default exit strategy flushes logging and ends the process with exit
    status 0 without running further cleanup. Pass `exit_strategy` (and, in
    tests, `timer_factory`) to observe the call instead of dying.

    Returns:
        The started timer; `cancel()` it to abort the shutdown.
    """
    logger.info("Terminating in %.2f s", delay)
    timer = timer_factory(delay, exit_strategy or _terminate)
    timer.daemon = True
    timer.start()
    return timer


def ver() -> str | None:
    """Return the installed distribution version, or `None` if not installed."""
    try:
        return dist_version(APP_NAME)
    except PackageNotFoundError:
        return None


def build() -> str | None:
    """Return the build identifier from ``MODEX_BUILD``, or `None`."""
    return get_build()


def version() -> str | None:
    """Return ``"ver: <ver>, build: <build>"``, or `None` if either is unknown."""
    if (v := ver()) is None or (b := build()) is None:
        return None
    return f"ver: {v}, build: {b}"
