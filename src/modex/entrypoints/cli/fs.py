"""Filesystem commands: ``modex dirs`` and ``modex du``.

Human-oriented notices go to **stderr**; the listing itself goes to stdout so it
can be piped.
"""

from __future__ import annotations

from pathlib import Path

import click

from modex import filesystem
from modex.errors import DirectoryNotFoundError
from modex.interfaces.filesystem import FileSystemError

from .helpers import hyperlink, warn

DIRECTORY_RESOLVERS = {
    "temporary": filesystem.temporary_directory,
    "document": filesystem.document_directory,
    "application_support": filesystem.application_support_directory,
    "library": filesystem.library_directory,
}


@click.command()
def dirs() -> None:
    """Show where the platform directories resolve on this machine."""
    width = max(len(kind) for kind in DIRECTORY_RESOLVERS)
    for kind, resolve in DIRECTORY_RESOLVERS.items():
        try:
            path = resolve()
        except DirectoryNotFoundError as e:
            warn(str(e))
            continue
        click.echo(f"{kind:<{width}}  {hyperlink(path.as_uri(), str(path))}")


@click.command()
@click.argument("path", type=click.Path(file_okay=False, path_type=Path))
def du(path: Path) -> None:
    """Print the total size in bytes of the entries directly inside PATH.

    Subdirectories count with their own entry size; their contents are not
    descended into.
    """
    try:
        total = filesystem.directory_size(path)
    except FileSystemError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"{total}\t{path}")
