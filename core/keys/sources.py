"""
Key Sources

Where key bytes come from: local files and published GitHub key listings.

The resolver only talks to a KeySourceProvider, so tests can swap the
filesystem and network for an in-memory provider.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from core.http import HttpClient, HttpError
from core.http.client import DEFAULT_TIMEOUT
from core.schemas.errors import KeyNotFoundException, KeySourceUnavailableException

logger = logging.getLogger(__name__)

DEFAULT_GITHUB_BASE_URL = "https://github.com"


class KeySourceProvider(ABC):
    """
    Abstract capability for reading key material.
    """

    @abstractmethod
    def read_key_file(self, path: Path) -> bytes:
        """
        Read raw key file contents.

        Raises:
            KeyNotFoundException: If the file is missing or unreadable.
        """
        ...

    @abstractmethod
    def fetch_key_listing(self, github_user: str) -> str:
        """
        Fetch the newline-separated public key listing of a GitHub user.

        Raises:
            KeySourceUnavailableException: On HTTP errors or timeouts.
        """
        ...


class DefaultKeySourceProvider(KeySourceProvider):
    """
    Reads keys from the local filesystem and GitHub over HTTPS.
    """

    def __init__(
        self,
        *,
        github_base_url: str = DEFAULT_GITHUB_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[HttpClient] = None,
    ) -> None:
        self.github_base_url = github_base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client

    def key_listing_url(self, github_user: str) -> str:
        return f"{self.github_base_url}/{github_user}.keys"

    def read_key_file(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise KeyNotFoundException(
                f"Key file not found: {path}, please specify a key using -k",
                path=str(path),
            ) from e
        except OSError as e:
            raise KeyNotFoundException(
                f"Failed to read key file {path}: {e.strerror or e}",
                path=str(path),
            ) from e

    def fetch_key_listing(self, github_user: str) -> str:
        url = self.key_listing_url(github_user)
        logger.info(f"Fetching public keys for GitHub user {github_user!r}")

        client = self._http_client or HttpClient(timeout=self.timeout)
        try:
            response = client.get(url, timeout=self.timeout)
            response.raise_for_status()
        except HttpError as e:
            raise KeySourceUnavailableException(
                f"Failed to get GitHub keys for {github_user!r}: {e}",
                github_user=github_user,
                details={"url": url, "status_code": e.status_code},
            ) from e
        finally:
            if self._http_client is None:
                client.close()

        return response.text


__all__ = [
    "DEFAULT_GITHUB_BASE_URL",
    "KeySourceProvider",
    "DefaultKeySourceProvider",
]
