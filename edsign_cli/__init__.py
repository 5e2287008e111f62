"""
edsign CLI

Sign and verify short messages with ed25519 keys.

Usage:
    python -m edsign_cli sign -m "Hello, world" -g octocat > signed.json
    python -m edsign_cli verify -i signed.json -g
"""

__version__ = "0.1.0"
