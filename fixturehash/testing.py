"""Assertion helpers for test suites that check SHA-1 fixtures."""

from typing import Optional

from fixturehash.core.hash import (
    BytesLike, HEX_DIGEST_LENGTH, hash_file, hex_digest, is_hex_digest,
)


def assert_hex_digest(text) -> None:
    """Fail unless text is a 40-character lowercase hex digest."""
    if not is_hex_digest(text):
        raise AssertionError(
            f"Expected a {HEX_DIGEST_LENGTH}-character lowercase hex digest, got {text!r}"
        )


def assert_sha1(data: BytesLike, expected: str, length: Optional[int] = None) -> None:
    """
    Fail unless the SHA-1 of data matches expected.

    Args:
        data: Bytes-like object to hash
        expected: Expected hex digest (case insensitive)
        length: Number of leading bytes to hash (default: all of them)
    """
    actual = hex_digest(data, length)
    if actual != expected.lower():
        raise AssertionError(f"SHA-1 mismatch: expected {expected}, got {actual}")


def assert_file_sha1(path, expected: str) -> None:
    """Fail unless the SHA-1 of the file at path matches expected."""
    actual = hash_file(path)
    if actual != expected.lower():
        raise AssertionError(f"SHA-1 mismatch for {path}: expected {expected}, got {actual}")
