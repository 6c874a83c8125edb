"""Parsing for the ``-L/--logger-level NAME=LEVEL`` option.

Values may be repeated on the command line or given as one comma/space
separated list (as ``MODEX_LOGGER_LEVELS`` does).
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten `value` into non-empty NAME=LEVEL fragments."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL pairs into a ``{name: level}`` dict.

    The result starts from `DEFAULT_LIB_LEVELS`; later items override earlier
    ones for the same logger name.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL, or LEVEL is not a
            standard logging level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelName(level_name.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = lvl
    return levels
