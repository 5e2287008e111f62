"""
Schemas
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Envelope model and serialization
from .envelope import (
    COMPACT_JSON_SEPARATORS,
    PRETTY_JSON_INDENT,
    Envelope,
    deserialize_envelope,
    serialize_envelope,
)

# Error models and exceptions
from .errors import (
    EdsignError,
    EdsignException,
    EncodingException,
    ErrorCodes,
    KeyFormatException,
    KeyNotFoundException,
    KeySourceUnavailableException,
    MalformedEnvelopeException,
    VerificationRejectedException,
)

__all__ = [
    # Envelope
    "COMPACT_JSON_SEPARATORS",
    "PRETTY_JSON_INDENT",
    "Envelope",
    "deserialize_envelope",
    "serialize_envelope",
    # Errors
    "EdsignError",
    "EdsignException",
    "EncodingException",
    "ErrorCodes",
    "KeyFormatException",
    "KeyNotFoundException",
    "KeySourceUnavailableException",
    "MalformedEnvelopeException",
    "VerificationRejectedException",
]
