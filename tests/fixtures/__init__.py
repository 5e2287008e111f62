"""
Test fixtures package for edsign tests.

This package provides factory functions for keys, key encodings and an
in-memory key source.

Usage:
    from fixtures import make_private_key, FakeKeySourceProvider

    def test_something():
        key = make_private_key(seed_byte=7)
        provider = FakeKeySourceProvider(listings={"octocat": make_key_listing(key.public_key())})
"""

from .keys import (
    RFC8032_EMPTY_SIGNATURE,
    RFC8032_PUBLIC,
    RFC8032_SECRET,
    FakeKeySourceProvider,
    make_ecdsa_private_key,
    make_key_listing,
    make_private_key,
    make_public_key,
    openssh_private_bytes,
    openssh_public_line,
    pem_private_bytes,
    pem_public_bytes,
    raw_public,
    raw_seed_bytes,
    write_ssh_home,
)

__all__ = [
    "RFC8032_EMPTY_SIGNATURE",
    "RFC8032_PUBLIC",
    "RFC8032_SECRET",
    "FakeKeySourceProvider",
    "make_ecdsa_private_key",
    "make_key_listing",
    "make_private_key",
    "make_public_key",
    "openssh_private_bytes",
    "openssh_public_line",
    "pem_private_bytes",
    "pem_public_bytes",
    "raw_public",
    "raw_seed_bytes",
    "write_ssh_home",
]
