"""
Text helpers for rendering record content into HTML.

Record fields are plain text typed into an admin form, so they are always
escaped before they reach a page.
"""

import html
from datetime import date, datetime


def sanitize_html(text: str) -> str:
    """Escape text so it renders literally inside HTML."""
    return html.escape(text, quote=True)


def format_text(text: str | None) -> str:
    """Sanitize text and turn its line breaks into <br> tags."""
    if not text:
        return ""
    return sanitize_html(text).replace("\n", "<br>")


def format_date(value: date | datetime | str) -> str:
    """
    Long Indian-English date, e.g. "17 October 2026".

    Strings are parsed as ISO-8601 and raise ValueError when they can't be.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    return f"{value.day} {value.strftime('%B')} {value.year}"
