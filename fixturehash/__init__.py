"""fixturehash - SHA-1 hex digests for test fixtures and cache keys."""

__version__ = '0.1.0'

from fixturehash.core.hash import (
    DIGEST_SIZE,
    HEX_DIGEST_LENGTH,
    EMPTY_SHA1,
    DigestUnavailableError,
    hex_digest,
    sha1_digest,
    hex_encode,
    hex_decode,
    hash_string,
    hash_stream,
    hash_file,
    filename_for_key,
    is_hex_digest,
)

__all__ = [
    'DIGEST_SIZE',
    'HEX_DIGEST_LENGTH',
    'EMPTY_SHA1',
    'DigestUnavailableError',
    'hex_digest',
    'sha1_digest',
    'hex_encode',
    'hex_decode',
    'hash_string',
    'hash_stream',
    'hash_file',
    'filename_for_key',
    'is_hex_digest',
]
