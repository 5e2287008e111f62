"""
Core cryptographic utilities.

Ed25519 signing/verification and the signature codec.
"""
from .signatures import (
    SIGNATURE_LENGTH,
    decode_message,
    decode_signature,
    encode_message,
    encode_signature,
    first_match,
    sign,
    verify,
)

__all__ = [
    "SIGNATURE_LENGTH",
    "decode_message",
    "decode_signature",
    "encode_message",
    "encode_signature",
    "first_match",
    "sign",
    "verify",
]
