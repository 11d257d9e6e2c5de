"""Text helpers for card and column view records."""

import html
import re
from datetime import datetime
from typing import Final

import pendulum

__all__ = [
    "ELLIPSIS",
    "escape_html",
    "format_simple_date",
    "format_timestamp",
    "highlight_text",
    "truncate_text",
]

ELLIPSIS: Final = "..."

HIGHLIGHT_OPEN: Final = "<mark>"
HIGHLIGHT_CLOSE: Final = "</mark>"

_DATE_FORMATS: Final = {
    "en": "MMM D, YYYY",
    "fr": "D MMM YYYY",
}

_TIMESTAMP_FORMATS: Final = {
    "en": "MMM D, YYYY, hh:mm A",
    "fr": "D MMM YYYY HH:mm",
}

_DEFAULT_LOCALE: Final = "en"


def escape_html(text: str) -> str:
    """Escape characters that are unsafe inside HTML text or attributes."""
    return html.escape(text, quote=True)


def highlight_text(text: str, query: str | None) -> str:
    """Escape text and wrap case-insensitive matches of a query in ``<mark>``.

    Matches are located in the raw text and each segment is escaped on its
    own, so the output keeps the original casing and a query can never match
    inside an escaped entity.

    Args:
        text: Text to render.
        query: Active text filter, or None/empty for no highlighting.

    Returns:
        HTML-safe text with highlighted matches.
    """
    if not query:
        return escape_html(text)

    pattern = re.compile(re.escape(query), re.IGNORECASE)
    parts: list[str] = []
    position = 0
    for match in pattern.finditer(text):
        parts.append(escape_html(text[position : match.start()]))
        parts.append(f"{HIGHLIGHT_OPEN}{escape_html(match.group(0))}{HIGHLIGHT_CLOSE}")
        position = match.end()
    parts.append(escape_html(text[position:]))
    return "".join(parts)


def truncate_text(text: str | None, max_length: int) -> str | None:
    """Cut text at ``max_length`` characters.

    Truncated text loses its trailing whitespace and gains an ellipsis; text
    that already fits is returned unchanged.

    Args:
        text: Text to shorten. None and empty strings are returned as-is.
        max_length: Maximum number of characters kept.

    Returns:
        The possibly shortened text.
    """
    if not text or len(text) <= max_length:
        return text
    return text[:max_length].rstrip() + ELLIPSIS


def format_simple_date(value: datetime | None, locale: str = _DEFAULT_LOCALE) -> str:
    """Format a date for column headers, e.g. ``Dec 31, 2025``.

    Args:
        value: Date to format.
        locale: Display locale ("en" or "fr"); unknown locales use "en".

    Returns:
        The formatted date, or an empty string for None.
    """
    if value is None:
        return ""
    locale = locale if locale in _DATE_FORMATS else _DEFAULT_LOCALE
    return pendulum.instance(value).format(_DATE_FORMATS[locale], locale=locale)


def format_timestamp(value: datetime | None, locale: str = _DEFAULT_LOCALE) -> str:
    """Format a timestamp with time of day, e.g. ``Dec 31, 2025, 02:30 PM``."""
    if value is None:
        return ""
    locale = locale if locale in _TIMESTAMP_FORMATS else _DEFAULT_LOCALE
    return pendulum.instance(value).format(_TIMESTAMP_FORMATS[locale], locale=locale)
