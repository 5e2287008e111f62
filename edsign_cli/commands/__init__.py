"""
CLI command modules.
"""

from edsign_cli.commands import sign, verify

__all__ = ["sign", "verify"]
