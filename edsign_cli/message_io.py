"""
CLI input/output helpers.

Message input precedence: -m text, then -i file, then stdin.
Output goes to the -o file, else stdout.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from core.crypto.signatures import decode_message


class CLIIOError(Exception):
    """Reading input or writing output failed."""


def read_message(message: Optional[str], input_path: Optional[Path]) -> str:
    """
    Read the text to operate on.

    Raises:
        CLIIOError: If the input file or stdin cannot be read.
        EncodingException: If the bytes are not valid UTF-8.
    """
    if message is not None:
        return message

    if input_path is not None:
        try:
            data = input_path.read_bytes()
        except OSError as e:
            raise CLIIOError(f"Failed to read file {input_path}: {e.strerror or e}") from e
        return decode_message(data)

    try:
        data = sys.stdin.buffer.read()
    except OSError as e:
        raise CLIIOError(f"Failed to read stdin: {e}") from e
    return decode_message(data)


def write_output(text: str, output_path: Optional[Path]) -> None:
    """
    Write text to a file (as-is) or to stdout (with a trailing newline).

    Raises:
        CLIIOError: If the output file cannot be written.
    """
    if output_path is None:
        print(text)
        return

    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise CLIIOError(f"Failed to write to file {output_path}: {e.strerror or e}") from e
