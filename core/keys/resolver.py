"""
Key Source Resolver

Decides which key material an operation uses.

Signing:
    -k PATH, else <home>/.ssh/id_ed25519

Verification, first applicable wins:
    1. -k PATH            single public key, GitHub ignored
    2. GitHub mode        every ed25519 key the user publishes
    3. default            <home>/.ssh/id_ed25519.pub

A failing GitHub lookup never falls back to the local key.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from core.keys.decoding import decode_private_key, decode_public_key, parse_key_listing
from core.keys.sources import KeySourceProvider
from core.schemas.errors import (
    KeyFormatException,
    KeyNotFoundException,
    KeySourceUnavailableException,
)

logger = logging.getLogger(__name__)

# Alphanumerics and single inner hyphens, at most 39 characters
GITHUB_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38}$")


@dataclass(frozen=True)
class DefaultKeyPaths:
    """Conventional OpenSSH ed25519 key locations under a home directory."""
    private: Path
    public: Path


def default_key_paths(home: Path) -> DefaultKeyPaths:
    """Default key paths for the given home directory."""
    ssh_dir = Path(home) / ".ssh"
    return DefaultKeyPaths(
        private=ssh_dir / "id_ed25519",
        public=ssh_dir / "id_ed25519.pub",
    )


def choose_github_user(
    cli_user: Optional[str],
    envelope_user: Optional[str],
) -> str:
    """
    Pick the GitHub user whose keys verify an envelope.

    An explicit CLI username takes precedence over the one in the envelope.

    Raises:
        KeySourceUnavailableException: If neither is given or the name is invalid.
    """
    user = cli_user if cli_user is not None else envelope_user
    if user is None:
        raise KeySourceUnavailableException("No GitHub user in message!")
    if not GITHUB_USERNAME_PATTERN.match(user):
        raise KeySourceUnavailableException(
            f"Invalid GitHub username: {user!r}",
            github_user=user,
        )
    return user


class KeySourceResolver:
    """
    Resolves signing keys and candidate verification keys.

    Args:
        provider: Reads key files and fetches GitHub listings
        home: Home directory for default key paths; None when undetectable
        passphrase: Passphrase for encrypted private keys
    """

    def __init__(
        self,
        provider: KeySourceProvider,
        *,
        home: Optional[Path] = None,
        passphrase: Optional[bytes] = None,
    ) -> None:
        self.provider = provider
        self.home = home
        self.passphrase = passphrase

    def _default_paths(self) -> DefaultKeyPaths:
        if self.home is None:
            raise KeyNotFoundException(
                "No home directory detected, please specify key using -k!"
            )
        return default_key_paths(self.home)

    def resolve_signing_key(self, path: Optional[Path] = None) -> Ed25519PrivateKey:
        """
        Load the private key used for signing.

        Raises:
            KeyNotFoundException: If the key file is missing.
            KeyFormatException: If it is not an ed25519 private key.
        """
        key_path = path if path is not None else self._default_paths().private
        logger.debug(f"Loading private key from {key_path}")

        data = self.provider.read_key_file(key_path)
        try:
            return decode_private_key(data, passphrase=self.passphrase)
        except KeyFormatException as e:
            raise KeyFormatException(
                f"Unable to load private key {key_path}: {e.message}",
                path=str(key_path),
            ) from e

    def resolve_public_key(self, path: Path) -> Ed25519PublicKey:
        """Load a single public key from a file."""
        logger.debug(f"Loading public key from {path}")

        data = self.provider.read_key_file(path)
        try:
            return decode_public_key(data)
        except KeyFormatException as e:
            raise KeyFormatException(
                f"Failed to load key at {path}: {e.message}",
                path=str(path),
            ) from e

    def resolve_github_keys(self, github_user: str) -> list[Ed25519PublicKey]:
        """
        Fetch and decode a GitHub user's published ed25519 keys.

        Raises:
            KeySourceUnavailableException: If the fetch fails or yields no
                usable ed25519 key.
        """
        listing = self.provider.fetch_key_listing(github_user)
        keys = parse_key_listing(listing)
        if not keys:
            raise KeySourceUnavailableException(
                f"No ed25519 keys published for GitHub user {github_user!r}",
                github_user=github_user,
            )
        logger.info(f"Found {len(keys)} ed25519 key(s) for GitHub user {github_user!r}")
        return keys

    def resolve_candidate_keys(
        self,
        path: Optional[Path] = None,
        *,
        github: bool = False,
        github_user: Optional[str] = None,
        envelope_user: Optional[str] = None,
    ) -> list[Ed25519PublicKey]:
        """
        Ordered candidate public keys for verification.

        Args:
            path: Explicit public key file; overrides GitHub
            github: Pull keys from GitHub
            github_user: Username given on the command line
            envelope_user: Username embedded in the envelope
        """
        if path is not None:
            return [self.resolve_public_key(path)]

        if github:
            user = choose_github_user(github_user, envelope_user)
            return self.resolve_github_keys(user)

        return [self.resolve_public_key(self._default_paths().public)]


__all__ = [
    "GITHUB_USERNAME_PATTERN",
    "DefaultKeyPaths",
    "default_key_paths",
    "choose_github_user",
    "KeySourceResolver",
]
