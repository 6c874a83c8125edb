"""MODEX CLI entry point.

Defines the top-level ``modex`` command (via Click-Extra) and registers its
subcommands.

Currently available commands
- ``modex demo``: record conversions for a sample user.
- ``modex dirs``: resolved platform directories.
- ``modex du PATH``: total size of a directory's immediate entries.

Notes
- The CLI version is sourced from `modex.__version__` and displayed
  automatically by Click-Extra (``--version``).
- The group only configures logging; the subcommands do the work.

Examples
    $ modex --version
    $ modex -vv dirs
    $ modex du ~/Downloads
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from modex import __version__
from modex.config import APP_NAME
from modex.logging import LoggingOptions, configure_logging, log_startup

from .demo import demo
from .fs import dirs, du
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)


HELP = """MODEX command-line interface.

    MODEX is a toolbox of small, stateless helpers for text, sequences,
    JSON/Plist conversions and the filesystem. The commands below exercise
    those helpers from the shell.
    """

DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths on the console).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the file the flight recorder writes to.",
    default=DEFAULT_LOG_PATH,
    envvar="MODEX_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="MODEX_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via MODEX_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "and writes them to --log-path when a WARNING/ERROR occurs, or on exit "
        "if --force-flush is set. Console verbosity is unchanged."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit even without a WARNING.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="MODEX_LOGGER_LEVELS",
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "the console and the flight recorder. Repeatable (e.g. -L modex.filesystem=DEBUG) "
        "or via MODEX_LOGGER_LEVELS (comma/space list)."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def modex(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """MODEX command-line interface."""
    options = LoggingOptions(
        verbose=verbose_count,
        quiet=quiet_count,
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(options)
    log_startup(logger, options, handlers)
    ctx.call_on_close(logging.shutdown)


modex.add_command(demo)
modex.add_command(dirs)
modex.add_command(du)
