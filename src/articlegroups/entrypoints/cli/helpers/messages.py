"""Terminal message helpers for the articlegroups CLI.

Messages write to stderr so stdout stays free for command results. Each line
starts with a glyph that falls back to ASCII when the terminal encoding
cannot show the emoji.
"""

import click

_GLYPHS = {
    "warn": ("⚠️", "[!]"),
    "success": ("✅", "[OK]"),
    "error": ("❌", "[X]"),
}


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the glyph for *kind* ("warn", "success" or "error").

    Returns:
        str: The emoji when stderr can encode it, otherwise its ASCII fallback.
    """
    emoji, fallback = _GLYPHS[kind]
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  This will delete every article group.``
    """
    click.secho(f"{glyph('warn')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Created group 1.``
    """
    click.secho(f"{glyph('success')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Group 7 not found.``
    """
    click.secho(f"{glyph('error')}  {msg}", fg="red", bold=True, err=True)
