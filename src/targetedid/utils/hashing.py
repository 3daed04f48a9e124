"""
Digest helpers for targeted identifiers.
SHA-1 is kept for parity with identifiers already issued; the secret
salt, not collision resistance, is what hides the inputs.
"""

import hashlib

from cryptography.hazmat.primitives import constant_time

from ..config import HASH_ALGORITHM, IDENTIFIER_LENGTH, STRING_ENCODING

HEX_ALPHABET = frozenset("0123456789abcdef")


def sha1_hex(payload: bytes) -> str:
    """Lowercase hex SHA-1 of an already-encoded payload."""
    if not isinstance(payload, bytes):
        raise TypeError(f"Expected bytes, got {type(payload)}")
    return hashlib.new(HASH_ALGORITHM, payload).hexdigest()


def is_hex_digest(value: str) -> bool:
    """Check that value is a lowercase hex digest of identifier length."""
    if not isinstance(value, str) or len(value) != IDENTIFIER_LENGTH:
        return False
    return HEX_ALPHABET.issuperset(value)


def digests_equal(expected: str, actual: str) -> bool:
    """
    Compare two hex digests in constant time.
    
    Raises:
        TypeError: If either digest is not a str
    """
    if not isinstance(expected, str) or not isinstance(actual, str):
        raise TypeError("Digests must be str")
    
    return constant_time.bytes_eq(
        expected.encode(STRING_ENCODING),
        actual.encode(STRING_ENCODING),
    )
