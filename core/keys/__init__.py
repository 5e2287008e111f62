"""
Key resolution: decoding key material and choosing where it comes from.
"""

from .decoding import (
    decode_private_key,
    decode_public_key,
    key_fingerprint,
    parse_key_listing,
    raw_public_bytes,
)
from .resolver import (
    DefaultKeyPaths,
    KeySourceResolver,
    choose_github_user,
    default_key_paths,
)
from .sources import (
    DEFAULT_GITHUB_BASE_URL,
    DefaultKeySourceProvider,
    KeySourceProvider,
)

__all__ = [
    "decode_private_key",
    "decode_public_key",
    "key_fingerprint",
    "parse_key_listing",
    "raw_public_bytes",
    "DefaultKeyPaths",
    "KeySourceResolver",
    "choose_github_user",
    "default_key_paths",
    "DEFAULT_GITHUB_BASE_URL",
    "DefaultKeySourceProvider",
    "KeySourceProvider",
]
