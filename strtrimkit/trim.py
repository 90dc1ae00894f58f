"""Trimming of leading and trailing characters from strings."""

from __future__ import annotations

DEFAULT_TRIM_CHARS = " "


def trailing_span(text: str, chars: str) -> int:
    """Return how many characters at the end of ``text`` belong to ``chars``.

    When every character of ``text`` is in ``chars`` the whole length is
    returned. An empty ``chars`` matches nothing.
    """
    if not chars:
        return 0
    return len(text) - len(text.rstrip(chars))


def _leading_span(text: str, chars: str) -> int:
    if not chars:
        return 0
    return len(text) - len(text.lstrip(chars))


def trim(src: str | None, trim_chars: str | None = None) -> str | None:
    """Return a copy of ``src`` without leading and trailing ``trim_chars``.

    ``trim_chars`` defaults to a single space. ``None`` for ``src`` gives
    ``None`` back.
    """
    if src is None:
        return None
    if trim_chars is None:
        trim_chars = DEFAULT_TRIM_CHARS

    leading = _leading_span(src, trim_chars)
    if leading == len(src):
        return ""
    trailing = trailing_span(src, trim_chars)
    return src[leading : len(src) - trailing]