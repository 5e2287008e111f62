"""
Sign and Verify Operations

Pure functions over already-resolved keys; no file or network access.

    sign_message(message, private_key)      -> Envelope
    verify_envelope(envelope, candidates)   -> VerifyOutcome
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from core.crypto.signatures import (
    decode_signature,
    encode_message,
    encode_signature,
    first_match,
    sign,
)
from core.keys.decoding import key_fingerprint
from core.schemas.envelope import Envelope
from core.schemas.errors import (
    KeySourceUnavailableException,
    VerificationRejectedException,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerifyOutcome:
    """Successful verification: which candidate matched."""
    matched_index: int
    fingerprint: str
    candidates_tried: int


def sign_message(
    message: str,
    private_key: Ed25519PrivateKey,
    github_user: Optional[str] = None,
) -> Envelope:
    """
    Sign a message and wrap it in an envelope.

    The github_user is carried along as-is; it is not checked against the key.
    """
    signature = sign(private_key, encode_message(message))
    return Envelope(
        message=message,
        signature=encode_signature(signature),
        github_user=github_user,
    )


def verify_envelope(
    envelope: Envelope,
    candidates: Sequence[Ed25519PublicKey],
) -> VerifyOutcome:
    """
    Check the envelope signature against each candidate key in order.

    Raises:
        EncodingException: If the signature is not 64 bytes of base64.
        KeySourceUnavailableException: If there are no candidates at all.
        VerificationRejectedException: If no candidate validates.
    """
    signature = decode_signature(envelope.signature)

    if not candidates:
        raise KeySourceUnavailableException("No candidate public keys to verify against")

    index = first_match(candidates, encode_message(envelope.message), signature)
    if index is None:
        logger.info(f"No match among {len(candidates)} candidate key(s)")
        raise VerificationRejectedException(
            details={"candidates": len(candidates)},
        )

    fingerprint = key_fingerprint(candidates[index])
    logger.debug(f"Signature matched candidate {index} ({fingerprint})")
    return VerifyOutcome(
        matched_index=index,
        fingerprint=fingerprint,
        candidates_tried=index + 1,
    )


__all__ = [
    "VerifyOutcome",
    "sign_message",
    "verify_envelope",
]
