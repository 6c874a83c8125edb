"""``modex demo``: show the record conversions on a sample user."""

from __future__ import annotations

from dataclasses import dataclass

import click

from modex.codec import mappings, records
from modex.errors import DirectoryNotFoundError
from modex.interfaces.filesystem import FileSystemError

from .helpers import error, success


@dataclass
class User:
    """Sample record used by the demo."""

    name: str
    age: int


SAMPLE_USER = User(name="Alice", age=25)


@click.command()
@click.option(
    "--save",
    "file_name",
    metavar="FILE_NAME",
    help="Also save the user's JSON to FILE_NAME in the document directory.",
)
def demo(file_name: str | None) -> None:
    """Print a sample user as JSON, dictionary, query string, Base64 and plist."""
    user = SAMPLE_USER

    click.echo(f"JSON:        {records.to_json_string(user)}")
    click.echo("JSON (pretty):")
    click.echo(records.to_json_string(user, pretty_printed=True))
    dictionary = records.to_dictionary(user) or {}
    click.echo(f"Dictionary:  {dictionary}")
    click.echo(f"Query:       {mappings.to_query(dictionary)}")
    click.echo(f"Base64 JSON: {records.to_base64_json(user)}")
    click.echo("Plist (XML):")
    click.echo(records.to_plist_string(user))

    if file_name is None:
        return
    try:
        path = records.save_to_file(user, file_name)
    except (DirectoryNotFoundError, FileSystemError) as e:
        raise click.ClickException(str(e)) from e
    if path is None:
        error(f"Could not encode the user for {file_name}")
        raise click.exceptions.Exit(1)
    success(f"Saved {path}")
