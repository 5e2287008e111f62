"""
Signatures
Ed25519 signing, verification and the signature/message codec.

This module provides:
- Base64 transport encoding for 64-byte signatures
- UTF-8 encoding/decoding for messages
- Detached ed25519 sign/verify over raw message bytes
- first_match(): which candidate key (if any) validates a signature

Security/Determinism Notes:
- ed25519 signing is deterministic; same key and message give the same bytes
- Messages are signed exactly as given, never normalized
"""
from __future__ import annotations

import base64
import binascii
from typing import Optional, Sequence

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from core.schemas.errors import EncodingException

SIGNATURE_LENGTH = 64


def encode_signature(signature: bytes) -> str:
    """
    Encode raw signature bytes as standard (padded) base64.

    Example:
        >>> encode_signature(bytes(64))[:8]
        'AAAAAAAA'
    """
    return base64.b64encode(signature).decode("ascii")


def decode_signature(encoded: str) -> bytes:
    """
    Decode a base64 signature back to its 64 raw bytes.

    Raises:
        EncodingException: If the input is not valid base64 or does not
            decode to exactly 64 bytes.
    """
    try:
        raw = base64.b64decode(encoded.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise EncodingException(f"Signature not proper base64: {e}") from e

    if len(raw) != SIGNATURE_LENGTH:
        raise EncodingException(
            f"Signature must decode to {SIGNATURE_LENGTH} bytes, got {len(raw)}",
            details={"length": len(raw)},
        )
    return raw


def encode_message(message: str) -> bytes:
    """
    UTF-8 bytes of a message.

    Raises:
        EncodingException: If the text holds a lone surrogate.
    """
    try:
        return message.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingException(
            f"Message is not encodable as UTF-8 (character offset {e.start})",
            details={"offset": e.start},
        ) from e


def decode_message(data: bytes) -> str:
    """
    Decode message bytes as UTF-8.

    Raises:
        EncodingException: If the bytes are not valid UTF-8.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingException(
            f"Message is not valid UTF-8 (byte offset {e.start})",
            details={"offset": e.start},
        ) from e


def sign(private_key: Ed25519PrivateKey, message: bytes) -> bytes:
    """Produce the 64-byte detached signature of message."""
    return private_key.sign(message)


def verify(public_key: Ed25519PublicKey, message: bytes, signature: bytes) -> bool:
    """Check a detached signature. Returns False instead of raising."""
    try:
        public_key.verify(signature, message)
    except InvalidSignature:
        return False
    return True


def first_match(
    candidates: Sequence[Ed25519PublicKey],
    message: bytes,
    signature: bytes,
) -> Optional[int]:
    """
    Index of the first candidate key that validates the signature.

    Stops at the first match; later candidates are never checked.

    Returns:
        The matching index, or None if no candidate validates.
    """
    return next(
        (i for i, key in enumerate(candidates) if verify(key, message, signature)),
        None,
    )


__all__ = [
    "SIGNATURE_LENGTH",
    "encode_signature",
    "decode_signature",
    "encode_message",
    "decode_message",
    "sign",
    "verify",
    "first_match",
]
