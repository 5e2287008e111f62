"""
Pytest configuration and shared fixtures for edsign tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_keys = importlib.import_module("fixtures.keys")

make_private_key = _keys.make_private_key
write_ssh_home = _keys.write_ssh_home


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def signing_key():
    """Provide the default deterministic ed25519 private key."""
    return make_private_key(seed_byte=1)


@pytest.fixture
def other_key():
    """Provide a second, unrelated ed25519 private key."""
    return make_private_key(seed_byte=2)


@pytest.fixture
def cli_env(tmp_path, monkeypatch, signing_key):
    """
    Isolated environment for running the CLI in-process.

    - fake home with ~/.ssh/id_ed25519{,.pub} for signing_key
    - cwd inside tmp_path so no stray edsign.json is picked up
    - EDSIGN_* variables cleared
    """
    for name in [
        "EDSIGN_GITHUB_BASE_URL",
        "EDSIGN_HTTP_TIMEOUT",
        "EDSIGN_HOME",
        "EDSIGN_KEY_PASSPHRASE",
        "EDSIGN_LOG_LEVEL",
        "EDSIGN_LOG_FILE",
    ]:
        monkeypatch.delenv(name, raising=False)

    home = write_ssh_home(tmp_path / "home", signing_key)
    workdir = tmp_path / "work"
    workdir.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("EDSIGN_HOME", str(home))
    monkeypatch.chdir(workdir)
    return home


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
