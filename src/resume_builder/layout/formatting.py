"""Text helpers shared by the section renderers."""

from __future__ import annotations

import re

__all__ = [
    "format_date",
    "format_date_range",
    "normalize_url",
    "strip_protocol",
    "tel_href",
]

_MONTH_ABBR = [
    "",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]

# YYYY, YYYY-MM or YYYY-MM-DD, optionally followed by a time part.
_ISO_DATE = re.compile(r"^(\d{4})(?:-(\d{1,2})(?:-(\d{1,2}))?)?(?:[T ].*)?$")

_URL_SCHEMES = ("http://", "https://", "mailto:", "tel:")
_PROTOCOL = re.compile(r"^https?://", re.IGNORECASE)


def format_date(value: str | None) -> str:
    """Return *value* as ``Mon YYYY`` (e.g. ``Jan 2020``).

    A bare year is returned as-is, unparseable input is returned trimmed and
    an empty or missing value yields ``""``.
    """
    if not value or not value.strip():
        return ""
    text = value.strip()
    match = _ISO_DATE.match(text)
    if match is None:
        return text
    year, month = match.group(1), match.group(2)
    if month is None:
        return year
    index = int(month)
    if not 1 <= index <= 12:
        return text
    return f"{_MONTH_ABBR[index]} {year}"


def format_date_range(
    start: str | None,
    end: str | None,
    is_current: bool = False,
) -> str:
    """Return a range like ``Aug 2018 - May 2021``.

    When *is_current* is set the end label is always ``Present``.
    """
    start_str = format_date(start)
    end_str = "Present" if is_current else format_date(end)

    if start_str and end_str:
        return f"{start_str} - {end_str}"
    return start_str or end_str


def normalize_url(url: str) -> str:
    """Prefix ``https://`` unless *url* already carries a known scheme."""
    url = url.strip()
    if not url:
        return ""
    if url.lower().startswith(_URL_SCHEMES):
        return url
    return f"https://{url}"


def strip_protocol(url: str) -> str:
    """Remove a leading ``http://`` or ``https://`` for display."""
    return _PROTOCOL.sub("", url.strip()).rstrip("/")


def tel_href(phone: str) -> str:
    """Build a ``tel:`` link target, dropping whitespace from *phone*."""
    return "tel:" + re.sub(r"\s+", "", phone)
