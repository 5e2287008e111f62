"""
CLI Dependencies

Builds the key resolver from configuration.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.keys import DefaultKeySourceProvider, KeySourceProvider, KeySourceResolver
from edsign_cli.config import CLIConfig

logger = logging.getLogger(__name__)


def build_provider(config: CLIConfig) -> KeySourceProvider:
    """Filesystem + GitHub key source using the configured endpoint and timeout."""
    return DefaultKeySourceProvider(
        github_base_url=config.github_base_url,
        timeout=config.http_timeout,
    )


def build_resolver(
    config: CLIConfig,
    provider: Optional[KeySourceProvider] = None,
) -> KeySourceResolver:
    """Key resolver bound to the configured home directory and passphrase."""
    home = config.resolve_home()
    if home is None:
        logger.warning("No home directory detected; default key paths unavailable")
    return KeySourceResolver(
        provider or build_provider(config),
        home=home,
        passphrase=config.passphrase_bytes(),
    )
