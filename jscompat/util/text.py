"""Text utility helpers."""

from __future__ import annotations

import re

from ..constants import PARTIAL_SUPPORT_MARKER, UNSUPPORTED

_WHITESPACE_RE = re.compile(r"\s+")
_NON_VERSION_RE = re.compile(r"[^0-9.]")
_LEADING_NUMBER_RE = re.compile(r"^(\d+(?:\.\d*)?|\.\d+)")


def normalize_whitespace(value: str) -> str:
    """Collapse repeated whitespace and trim ends."""
    return _WHITESPACE_RE.sub(" ", value).strip()


def parse_version_floor(value: str | None) -> float | None:
    """Parse a support string like "10.1+" or "11*" into its numeric floor.

    Every character that is not a digit or a period is dropped first, then the
    leading decimal number is taken. "No" and strings with no digits give None.
    """
    if not value or value == UNSUPPORTED:
        return None
    cleaned = _NON_VERSION_RE.sub("", value)
    match = _LEADING_NUMBER_RE.match(cleaned)
    if match is None:
        return None
    return float(match.group(1))


def format_version_floor(value: float) -> str:
    """Format a numeric floor back into a "<number>+" support string."""
    number = str(int(value)) if value.is_integer() else repr(value)
    return f"{number}+"


def support_status(value: str) -> str:
    """Classify a support string as "y" (supported), "a" (partial) or "n"."""
    if value == UNSUPPORTED:
        return "n"
    if PARTIAL_SUPPORT_MARKER in value:
        return "a"
    return "y"


def ellipsize(value: str, width: int) -> str:
    """Shorten long strings while preserving prefix visibility."""
    if width <= 0:
        return ""
    if len(value) <= width:
        return value
    if width <= 1:
        return "…"
    return f"{value[: width - 1]}…"
