"""User-facing status lines for the MODEX CLI.

Status lines go to stderr so stdout stays clean for command output. Each line
starts with an emoji glyph, or an ASCII stand-in when stderr cannot encode it.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if `character` can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" or the ASCII fallback "[!]"."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Return "✅" or the ASCII fallback "[OK]"."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """Return "❌" or the ASCII fallback "[X]"."""
    return _glyph(ERROR)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr.

    Example:
        ``⚠️  /tmp/x is empty.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr.

    Example:
        ``✅  Saved /home/alice/Documents/user.json``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr.

    Example:
        ``❌  No such file or directory: '/nope'``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
