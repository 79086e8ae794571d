"""Command line tokenizing."""
from __future__ import annotations

import shlex


def tokenize(raw: str) -> list[str]:
    """Split a command line into words.

    Quotes group words and are stripped. Input with unbalanced quotes
    falls back to a plain whitespace split, leaving the quote characters
    in place for handlers to clean up.

    Example:
        >>> tokenize('contact "Jane Doe" jane@example.com "Hi there"')
        ['contact', 'Jane Doe', 'jane@example.com', 'Hi there']
    """
    try:
        return shlex.split(raw)
    except ValueError:
        return raw.split()


def split_verb(raw: str) -> tuple[str, list[str]]:
    """Return the lower-cased verb and its arguments (``("", [])`` if blank)."""
    words = tokenize(raw.strip())
    if not words:
        return "", []
    return words[0].lower(), words[1:]


def strip_quotes(value: str) -> str:
    """Remove stray double quotes left behind by the fallback split."""
    return value.replace('"', "")
