"""Fixtures for end-to-end tests of the ``modex`` command.

Provides a Click `CliRunner`, an isolated working directory per test, a
test-only ``log-demo`` command for exercising the logging options, and a guard
that detaches the handlers the CLI installs on the root logger.
"""

import logging
from logging.handlers import MemoryHandler

import click
import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from modex.entrypoints.cli.main import modex

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on a project logger and a third-party logger."""
    logger = logging.getLogger("modex.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


@pytest.fixture
def registered_log_demo():
    """Register ``log-demo`` on the `modex` group for the duration of a test."""
    modex.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        modex.commands.pop("log-demo", None)
        sections = [getattr(modex, "_default_section", None), *getattr(modex, "_sections", [])]
        for section in sections:
            getattr(section, "commands", {}).pop("log-demo", None)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def isolated(runner):
    """Run the test inside `runner.isolated_filesystem()`."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture(autouse=True)
def _restore_logging():
    """Detach the handlers the CLI installs on the root logger after each test."""
    root = logging.getLogger()
    level = root.level
    touched = ("modex.demo", "some.thirdparty", "click_extra")
    yield
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, MemoryHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    for name in touched:
        logging.getLogger(name).setLevel(logging.NOTSET)
