"""
CLI Sign Command

Sign a message with an ed25519 private key and emit a JSON envelope.

Usage:
    edsign sign -m "Hello, world" [-k KEY] [-g USER] [-p] [-o FILE]
    edsign sign -i message.txt
    echo "Hello" | edsign sign
"""

from __future__ import annotations

import logging
from argparse import Namespace

from core.operations import sign_message
from core.schemas.envelope import serialize_envelope
from edsign_cli.deps import build_resolver
from edsign_cli.message_io import read_message, write_output


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0


def sign_cmd(args: Namespace) -> int:
    """
    Execute the sign command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    resolver = build_resolver(args.cli_config)

    private_key = resolver.resolve_signing_key(args.private_key)
    message = read_message(args.message, args.input)

    envelope = sign_message(message, private_key, github_user=args.github)
    logger.info(f"Signed {len(message)} character message")

    write_output(serialize_envelope(envelope, pretty=args.pretty), args.output)
    return EXIT_SUCCESS
