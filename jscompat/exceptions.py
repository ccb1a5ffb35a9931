"""Exception types for pyjscompat."""

from __future__ import annotations

from .constants import PARSE_ERROR_PREFIX


class CompatError(Exception):
    """Base exception for expected application errors."""


class SourceParseError(CompatError):
    """Raised when the JavaScript source cannot be turned into a syntax tree."""

    def __init__(
        self,
        diagnostic: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.diagnostic = diagnostic
        self.line = line
        self.column = column
        super().__init__(f"{PARSE_ERROR_PREFIX}: {diagnostic}")


class NetworkError(CompatError):
    """Raised when a network operation fails."""

    def __init__(self, url: str, *, cause: str | None = None) -> None:
        detail = f"Unable to connect to {url}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class RequestTimeoutError(CompatError):
    """Raised when a request times out."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Request timed out for {url}")


class HttpStatusError(CompatError):
    """Raised when a non-200 HTTP response is returned."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"Request failed with HTTP {status_code} for {url}")


class ContentError(CompatError):
    """Raised when a response body is unexpectedly empty."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Received empty script content from {url}")
