"""
CLI Verify Command

Verify a JSON envelope against a local public key or a GitHub user's keys.

Usage:
    edsign verify -i signed.json [-k KEY]
    edsign verify -i signed.json -g [--github-user USER]
    edsign sign -m hi | edsign verify
"""

from __future__ import annotations

import logging
from argparse import Namespace

from core.operations import verify_envelope
from core.schemas.envelope import deserialize_envelope
from edsign_cli.deps import build_resolver
from edsign_cli.message_io import read_message


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    A --github-user implies -g. The CLI username wins over the envelope's.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    envelope = deserialize_envelope(read_message(args.message, args.input))

    github = args.github or args.github_user is not None
    resolver = build_resolver(args.cli_config)
    candidates = resolver.resolve_candidate_keys(
        args.public_key,
        github=github,
        github_user=args.github_user,
        envelope_user=envelope.github_user,
    )

    outcome = verify_envelope(envelope, candidates)
    logger.info(f"Verification passed with key {outcome.fingerprint}")

    print("Verified!")
    return EXIT_SUCCESS
