"""
HTTP Client

Small synchronous HTTP client used to fetch published key listings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "edsign/0.1.0 (+https://github.com)"


@dataclass
class HttpResponse:
    """
    Response from an HTTP request.
    """
    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)
    url: str = ""
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        """Check if request was successful (2xx status)."""
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        """Get response content as text."""
        return self.content.decode("utf-8", errors="replace")

    def raise_for_status(self) -> None:
        """Raise exception if status is not 2xx."""
        if not self.ok:
            raise HttpError(
                f"HTTP {self.status_code} for {self.url}",
                status_code=self.status_code,
                response=self,
            )


class HttpError(Exception):
    """HTTP request error (transport failure, timeout or non-2xx status)."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[HttpResponse] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class HttpClient:
    """
    HTTP client with a bounded default timeout.

    Usage:
        with HttpClient(timeout=5.0) as client:
            response = client.get("https://github.com/octocat.keys")
            response.raise_for_status()
            listing = response.text
    """

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        """
        Initialize HTTP client.

        Args:
            timeout: Default request timeout in seconds
        """
        self.timeout = timeout
        self._session: Optional[requests.Session] = None

    def _get_session(self) -> requests.Session:
        """Lazy-create the requests session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers["User-Agent"] = DEFAULT_USER_AGENT
        return self._session

    def request(
        self,
        method: str,
        url: str,
        *,
        timeout: Optional[float] = None,
    ) -> HttpResponse:
        """
        Make an HTTP request.

        Args:
            method: HTTP method (GET, HEAD, ...)
            url: Request URL
            timeout: Request timeout, overriding the client default

        Returns:
            HttpResponse with status, content, and headers

        Raises:
            HttpError: On connection failure or timeout
        """
        session = self._get_session()
        effective_timeout = timeout or self.timeout

        logger.debug(f"{method} {url} (timeout={effective_timeout}s)")
        try:
            response = session.request(
                method=method,
                url=url,
                timeout=effective_timeout,
            )
        except requests.Timeout as e:
            raise HttpError(f"Request to {url} timed out after {effective_timeout}s") from e
        except requests.RequestException as e:
            raise HttpError(str(e)) from e

        result = HttpResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
            url=str(response.url),
            elapsed_ms=response.elapsed.total_seconds() * 1000,
        )
        logger.debug(f"{method} {url} -> {result.status_code} in {result.elapsed_ms:.0f}ms")
        return result

    def get(self, url: str, *, timeout: Optional[float] = None) -> HttpResponse:
        """Make a GET request."""
        return self.request("GET", url, timeout=timeout)

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()
