"""Constants used across pyjscompat."""

from __future__ import annotations

from typing import Final

BROWSER_SLOTS: Final[tuple[str, ...]] = (
    "chrome",
    "firefox",
    "safari",
    "edge",
    "ie",
)

BROWSER_LABEL_MAP: Final[dict[str, str]] = {
    "chrome": "Chrome",
    "firefox": "Firefox",
    "safari": "Safari",
    "edge": "Edge",
    "ie": "IE",
}

LEGACY_BROWSER: Final[str] = "ie"
UNSUPPORTED: Final[str] = "No"
PARTIAL_SUPPORT_MARKER: Final[str] = "*"

SNIPPET_CONTEXT_LINES: Final[int] = 2
DEFAULT_MAX_SNIPPETS: Final[int] = 3

HASHBANG_PREFIX: Final[str] = "#!"

STATUS_ICON_MAP: Final[dict[str, str]] = {
    "y": "✅",
    "n": "❌",
    "a": "◐",
}

STATUS_STYLE_MAP: Final[dict[str, str]] = {
    "y": "green",
    "n": "red",
    "a": "yellow",
}

PARSE_ERROR_PREFIX: Final[str] = "Failed to parse JavaScript code"
NO_FEATURES_LINE: Final[str] = "No modern JavaScript features detected."
LEGEND_LINE: Final[str] = "✅ Supported  ◐ Partial support (*)  ❌ Not supported"

DEBUG_ENV_VAR: Final[str] = "JSCOMPAT_DEBUG"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 10.0
EMPTY_SOURCE_LINE: Final[str] = "No JavaScript source to analyze."
