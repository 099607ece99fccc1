"""Terminal message helpers for the TRACKLY CLI.

Every line goes to stderr so stdout stays clean for tables and piped output.
Glyphs fall back to ASCII on terminals that cannot encode emoji.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if ``character`` can be encoded on stderr."""
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
    """Return "⚠️" when stderr can show it, else "[!]"."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Return "✅" when stderr can show it, else "[OK]"."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """Return "❌" when stderr can show it, else "[X]"."""
    return _glyph(ERROR)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line, e.g. ``⚠️  Signal sig-1 is acknowledged.``"""
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line, e.g. ``✅  Residency committed.``"""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line, e.g. ``❌  Cannot connect to database.``"""
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
