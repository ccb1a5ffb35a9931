"""HTTP client layer for analyzing remote scripts."""

from __future__ import annotations

import httpx

from ._version import __version__
from .constants import DEFAULT_TIMEOUT_SECONDS
from .exceptions import ContentError, HttpStatusError, NetworkError, RequestTimeoutError


def _build_headers() -> dict[str, str]:
    return {
        "User-Agent": f"pyjscompat/{__version__}",
        "Accept": "application/javascript, text/javascript, */*;q=0.1",
    }


def is_url(value: str) -> bool:
    return value.startswith("http://") or value.startswith("https://")


def fetch_script(url: str, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> str:
    """Fetch a script body with friendly failures; connect errors are retried once."""
    retry_once = True
    while True:
        try:
            with httpx.Client(
                timeout=timeout, follow_redirects=True, headers=_build_headers()
            ) as client:
                response = client.get(url)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(url) from exc
        except httpx.ConnectError as exc:
            if retry_once:
                retry_once = False
                continue
            raise NetworkError(url, cause=exc.__class__.__name__) from exc
        except httpx.RequestError as exc:
            raise NetworkError(url, cause=exc.__class__.__name__) from exc

        if response.status_code != 200:
            raise HttpStatusError(response.status_code, str(response.url))

        body = response.text
        if not body.strip():
            raise ContentError(str(response.url))
        return body
