"""Configuration utilities for MODEX.

This module centralizes small helpers and constants related to configuration.
MODEX reads nothing but environment variables; there are no config files.
"""

import os
from pathlib import Path

APP_NAME = "modex"

ENV_PREFIX = "MODEX"  # pragma: no mutate
BUILD_ENV_VAR = f"{ENV_PREFIX}_BUILD"  # pragma: no mutate

DIRECTORY_KINDS = ("temporary", "document", "application_support", "library")


def directory_env_var(kind: str) -> str:
    """Return the environment variable that overrides a platform directory.

    Args:
        kind: One of `DIRECTORY_KINDS` (e.g. ``"document"``).

    Returns:
        The variable name, e.g. ``MODEX_DOCUMENT_DIR``.

    Raises:
        ValueError: If `kind` is not a known directory kind.
    """
    if kind not in DIRECTORY_KINDS:
        raise ValueError(f"Unknown directory kind: {kind!r}")
    return f"{ENV_PREFIX}_{kind.upper()}_DIR"


def get_directory_override(kind: str) -> Path | None:
    """Get an override for a platform directory from the environment.

    Returns:
        The overriding path, or `None` when the variable is unset or empty.
    """
    if not (value := os.environ.get(directory_env_var(kind))):
        return None
    return Path(value).expanduser()


def get_build() -> str | None:
    """Get the build identifier from `MODEX_BUILD`, if set."""
    return os.environ.get(BUILD_ENV_VAR) or None
