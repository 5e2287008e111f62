"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    edsign sign [-i FILE] [-o FILE] [-m MESSAGE] [-k PRIVATE_KEY] [-g GITHUB_USER] [-p]
    edsign verify [-i FILE] [-m ENVELOPE] [-k PUBLIC_KEY] [-g] [--github-user USER]

Environment Variables:
    EDSIGN_HOME                 Home directory for default keys (default: $HOME)
    EDSIGN_KEY_PASSPHRASE       Passphrase for an encrypted private key
    EDSIGN_GITHUB_BASE_URL      GitHub base URL (default: https://github.com)
    EDSIGN_HTTP_TIMEOUT         Key listing fetch timeout in seconds (default: 10)
    EDSIGN_LOG_LEVEL            Log level (default: WARNING)
    EDSIGN_LOG_FILE             Also write logs to this file
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

from core.schemas.errors import EdsignException, ErrorCodes
from edsign_cli import __version__
from edsign_cli.commands import sign, verify
from edsign_cli.config import load_config


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2
EXIT_KEY_NOT_FOUND = 3
EXIT_KEY_FORMAT_ERROR = 4
EXIT_KEY_SOURCE_UNAVAILABLE = 5
EXIT_ENCODING_ERROR = 6
EXIT_MALFORMED_ENVELOPE = 7

EXIT_CODES: dict[str, int] = {
    ErrorCodes.VERIFICATION_REJECTED: EXIT_VERIFICATION_FAILED,
    ErrorCodes.KEY_NOT_FOUND: EXIT_KEY_NOT_FOUND,
    ErrorCodes.KEY_FORMAT_ERROR: EXIT_KEY_FORMAT_ERROR,
    ErrorCodes.KEY_SOURCE_UNAVAILABLE: EXIT_KEY_SOURCE_UNAVAILABLE,
    ErrorCodes.ENCODING_ERROR: EXIT_ENCODING_ERROR,
    ErrorCodes.MALFORMED_ENVELOPE: EXIT_MALFORMED_ENVELOPE,
}


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="edsign",
        description="Sign and verify messages with ed25519 keys, optionally using keys published on GitHub.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./edsign.json or ~/.config/edsign/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- sign command ---
    sign_parser = subparsers.add_parser(
        "sign",
        help="Sign a message using an ed25519 private key",
        description="Sign a message and print a JSON envelope with the message and its signature.",
    )
    sign_parser.add_argument(
        "-i", "--input",
        type=Path,
        default=None,
        help="File to sign, defaults to stdin if no file is specified or -m is not used",
    )
    sign_parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output of signature, defaults to stdout if no file is specified",
    )
    sign_parser.add_argument(
        "-m", "--message",
        type=str,
        default=None,
        help="Message to sign (overrides -i flag or stdin)",
    )
    sign_parser.add_argument(
        "-k", "--key",
        dest="private_key",
        type=Path,
        default=None,
        help='Path to ed25519 private key, defaults to "$HOME/.ssh/id_ed25519"',
    )
    sign_parser.add_argument(
        "-g", "--github",
        type=str,
        default=None,
        metavar="GITHUB_USER",
        help="GitHub username to couple with the JSON output",
    )
    sign_parser.add_argument(
        "-p", "--pretty",
        action="store_true",
        default=False,
        help="Pretty print the JSON output",
    )
    sign_parser.set_defaults(func=sign.sign_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a message using an ed25519 public key",
        description="Verify a JSON envelope against a public key file or a GitHub user's published keys.",
    )
    verify_parser.add_argument(
        "-i", "--input",
        type=Path,
        default=None,
        help="Envelope file to verify, defaults to stdin if no file is specified or -m is not used",
    )
    verify_parser.add_argument(
        "-m", "--message",
        type=str,
        default=None,
        help="Envelope JSON to verify (overrides -i flag or stdin)",
    )
    verify_parser.add_argument(
        "-k", "--key",
        dest="public_key",
        type=Path,
        default=None,
        help='Path to ed25519 public key, defaults to "$HOME/.ssh/id_ed25519.pub", overrides -g',
    )
    verify_parser.add_argument(
        "-g", "--github",
        action="store_true",
        default=False,
        help="Pull public keys from GitHub for the user named in the envelope",
    )
    verify_parser.add_argument(
        "--github-user",
        type=str,
        default=None,
        help="GitHub user whose keys to use instead of the envelope's (implies -g)",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 2=verification failed, 1 or 3-7 on errors)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    load_dotenv()

    # Load configuration
    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except EdsignException as e:
        logger.debug(f"{e!r}", exc_info=True)
        print(e.message, file=sys.stderr)
        return EXIT_CODES.get(e.code, EXIT_RUNTIME_ERROR)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
