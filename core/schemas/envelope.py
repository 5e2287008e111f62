"""
Schemas
File: envelope.py

Purpose: The signed-message envelope and its JSON serialization.

Wire format (UTF-8 JSON, field order fixed):
    {"message": "...", "signature": "<base64>", "github_user": "..."}

`github_user` is omitted when absent. Unknown fields are ignored on read
so newer writers stay readable.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from .errors import MalformedEnvelopeException

# Compact JSON separators - no whitespace
COMPACT_JSON_SEPARATORS: tuple[str, str] = (",", ":")

PRETTY_JSON_INDENT = 2


class Envelope(BaseModel):
    """
    A message together with its detached ed25519 signature.

    The message is the exact signed payload; any trimming or re-encoding
    between sign and verify makes verification fail.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    message: StrictStr = Field(
        ...,
        description="The exact signed payload",
    )
    signature: StrictStr = Field(
        ...,
        description="Standard base64 of the 64-byte ed25519 signature",
    )
    github_user: StrictStr | None = Field(
        default=None,
        description="GitHub username whose published keys can verify this envelope",
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Plain dict in wire order, without absent optional fields."""
        return self.model_dump(exclude_none=True)


def serialize_envelope(envelope: Envelope, pretty: bool = False) -> str:
    """
    Serialize an envelope to JSON text.

    Args:
        envelope: Envelope to serialize
        pretty: Indent with two spaces instead of compact output

    Returns:
        JSON text (no trailing newline)
    """
    data = envelope.to_json_dict()
    if pretty:
        return json.dumps(data, indent=PRETTY_JSON_INDENT, ensure_ascii=False)
    return json.dumps(data, separators=COMPACT_JSON_SEPARATORS, ensure_ascii=False)


def deserialize_envelope(text: str) -> Envelope:
    """
    Parse envelope JSON text.

    Raises:
        MalformedEnvelopeException: If the text is not a JSON object, or
            `message` / `signature` are missing or not strings.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedEnvelopeException(
            f"Failed to parse message as JSON: {e.msg} (line {e.lineno}, column {e.colno})"
        ) from e

    if not isinstance(data, dict):
        raise MalformedEnvelopeException(
            f"Envelope must be a JSON object, got {type(data).__name__}"
        )

    try:
        return Envelope.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field_path = ".".join(str(part) for part in first.get("loc", ()))
        raise MalformedEnvelopeException(
            f"Invalid envelope field '{field_path}': {first.get('msg', 'invalid value')}",
            field_path=field_path or None,
            details={"error_count": e.error_count()},
        ) from e


__all__ = [
    "COMPACT_JSON_SEPARATORS",
    "PRETTY_JSON_INDENT",
    "Envelope",
    "serialize_envelope",
    "deserialize_envelope",
]
