"""SHA-1 hash utilities for fixturehash.

Digests are computed by ``hashlib`` and rendered as 40 lowercase hex
characters. SHA-1 is used as a fingerprint for fixtures and cache keys,
never for security.
"""

import hashlib
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

DIGEST_SIZE = 20
HEX_DIGEST_LENGTH = DIGEST_SIZE * 2
EMPTY_SHA1 = 'da39a3ee5e6b4b0d3255bfef95601890afd80709'
DEFAULT_CHUNK_SIZE = 2 ** 20

HEX_ALPHABET = '0123456789abcdef'

# One two-character entry per byte value, high nibble first.
HEX_TABLE = tuple(HEX_ALPHABET[b >> 4] + HEX_ALPHABET[b & 0x0F] for b in range(256))

_NIBBLES = {c: i for i, c in enumerate(HEX_ALPHABET)}
_NIBBLES.update({c.upper(): i for c, i in list(_NIBBLES.items())})


class DigestUnavailableError(RuntimeError):
    """The platform SHA-1 primitive could not be used."""


def _new_sha1():
    try:
        return hashlib.sha1(usedforsecurity=False)
    except ValueError as e:
        # FIPS-restricted OpenSSL builds refuse to construct sha1
        raise DigestUnavailableError(f"SHA-1 is not available: {e}") from e


def _view(data: BytesLike, length: Optional[int]) -> memoryview:
    """Return a flat byte view over the first ``length`` bytes of ``data``."""
    view = memoryview(data).cast('B')
    if length is None:
        return view
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an int, not {type(length).__name__}")
    if length < 0 or length > len(view):
        raise ValueError(f"length {length} out of range for buffer of {len(view)} bytes")
    return view[:length]


def sha1_digest(data: BytesLike, length: Optional[int] = None) -> bytes:
    """
    Compute the raw SHA-1 digest of data.

    Args:
        data: Bytes-like object to hash
        length: Number of leading bytes to hash (default: all of them)

    Returns:
        20-byte digest
    """
    view = _view(data, length)
    digest = _new_sha1()
    digest.update(view)
    return digest.digest()


def hex_encode(digest: BytesLike) -> str:
    """Render bytes as lowercase hex, two characters per byte."""
    return ''.join([HEX_TABLE[b] for b in memoryview(digest).cast('B')])


def hex_decode(text: str) -> bytes:
    """
    Decode a hex string back into bytes, pair by pair.

    Raises:
        ValueError: If text has odd length or contains non-hex characters
    """
    if len(text) % 2:
        raise ValueError(f"Hex string has odd length: {len(text)}")
    out = bytearray()
    for i in range(0, len(text), 2):
        high, low = text[i], text[i + 1]
        if high not in _NIBBLES or low not in _NIBBLES:
            raise ValueError(f"Invalid hex characters at offset {i}: {text[i:i + 2]!r}")
        out.append((_NIBBLES[high] << 4) | _NIBBLES[low])
    return bytes(out)


def hex_digest(data: BytesLike, length: Optional[int] = None) -> str:
    """
    Compute SHA-1 hash of data.

    Args:
        data: Bytes-like object to hash
        length: Number of leading bytes to hash (default: all of them)

    Returns:
        40-character lowercase hex string

    Raises:
        ValueError: If length is negative or longer than data
        DigestUnavailableError: If SHA-1 cannot be used on this platform
    """
    return hex_encode(sha1_digest(data, length))


def hash_string(text: str, encoding: str = 'utf-8') -> str:
    """SHA-1 hex digest of a string's encoded bytes."""
    return hex_digest(text.encode(encoding))


def filename_for_key(key: str) -> str:
    """
    Generate a cache filename for key.

    Filesystems limit filename length and forbid some characters, so the
    key is replaced by its SHA-1 hex digest.
    """
    return hash_string(key)


def hash_stream(stream, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """
    Compute SHA-1 hash of a binary stream, read in blocks until EOF.

    Args:
        stream: Binary file-like object
        chunk_size: Bytes read per block

    Returns:
        40-character hex string
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    digest = _new_sha1()
    for chunk in iter(lambda: stream.read(chunk_size), b''):
        digest.update(chunk)
    return hex_encode(digest.digest())


def hash_file(filepath, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """
    Compute SHA-1 hash of file.

    Args:
        filepath: Path to file
        chunk_size: Bytes read per block

    Returns:
        40-character hex string
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    with open(filepath, 'rb') as f:
        return hash_stream(f, chunk_size)


def is_hex_digest(text) -> bool:
    """Check whether text looks like a SHA-1 hex digest."""
    return (
        isinstance(text, str)
        and len(text) == HEX_DIGEST_LENGTH
        and all(c in HEX_ALPHABET for c in text)
    )
