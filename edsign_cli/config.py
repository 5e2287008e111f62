"""
CLI Configuration

Configuration for the edsign CLI.
Supports environment variables and configuration files.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from core.http.client import DEFAULT_TIMEOUT
from core.keys.sources import DEFAULT_GITHUB_BASE_URL


# Environment variable prefix
ENV_PREFIX = "EDSIGN_"


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # Key sources
    github_base_url: str = DEFAULT_GITHUB_BASE_URL
    http_timeout: float = DEFAULT_TIMEOUT
    home: str | None = None  # overrides the detected home directory
    key_passphrase: str | None = None

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    def resolve_home(self) -> Optional[Path]:
        """Home directory for default key paths, or None if undetectable."""
        if self.home:
            return Path(self.home).expanduser()
        try:
            return Path.home()
        except RuntimeError:
            return None

    def passphrase_bytes(self) -> Optional[bytes]:
        if self.key_passphrase is None:
            return None
        return self.key_passphrase.encode("utf-8")


def load_config_from_env(config: CLIConfig | None = None) -> CLIConfig:
    """Overlay environment variables onto a configuration."""
    config = config or CLIConfig()

    if os.getenv(f"{ENV_PREFIX}GITHUB_BASE_URL"):
        config.github_base_url = os.getenv(f"{ENV_PREFIX}GITHUB_BASE_URL", DEFAULT_GITHUB_BASE_URL)
    if os.getenv(f"{ENV_PREFIX}HTTP_TIMEOUT"):
        config.http_timeout = float(os.getenv(f"{ENV_PREFIX}HTTP_TIMEOUT", str(DEFAULT_TIMEOUT)))
    if os.getenv(f"{ENV_PREFIX}HOME"):
        config.home = os.getenv(f"{ENV_PREFIX}HOME")
    if os.getenv(f"{ENV_PREFIX}KEY_PASSPHRASE") is not None:
        config.key_passphrase = os.getenv(f"{ENV_PREFIX}KEY_PASSPHRASE")

    # Logging
    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config.log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING")
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config.log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")

    return config


def load_config_from_file(path: Path) -> CLIConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")

    config = CLIConfig()

    config.github_base_url = data.get("github_base_url", config.github_base_url)
    config.http_timeout = float(data.get("http_timeout", config.http_timeout))
    config.home = data.get("home", config.home)
    config.key_passphrase = data.get("key_passphrase", config.key_passphrase)

    # Logging
    config.log_level = data.get("log_level", config.log_level)
    config.log_file = data.get("log_file", config.log_file)

    return config


def default_config_paths() -> list[Path]:
    paths = [
        Path.cwd() / "edsign.json",
        Path.cwd() / ".edsign.json",
    ]
    try:
        paths.append(Path.home() / ".config" / "edsign" / "config.json")
    except RuntimeError:
        pass
    return paths


def load_config(config_path: Path | None = None) -> CLIConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file; when given it must exist

    Returns:
        Merged configuration
    """
    config = CLIConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    return load_config_from_env(config)
