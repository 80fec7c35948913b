"""
HMAC Pseudorandom Function

This module wraps the HMAC construction used as the pseudorandom function
of PBKDF2, validates keyed-hash algorithm names, and provides the
constant-time comparison used when checking derived keys.
"""

import hmac
import hashlib
from typing import Callable, Union

from ..exceptions import UnsupportedAlgorithm

# Fixed-size digests only; shake_* has no natural output length
_CANDIDATE_ALGORITHMS = (
    'md5', 'sha1', 'sha224', 'sha256', 'sha384', 'sha512',
    'sha512_224', 'sha512_256',
    'sha3_224', 'sha3_256', 'sha3_384', 'sha3_512',
    'blake2b', 'blake2s',
)

SUPPORTED_ALGORITHMS = tuple(
    name for name in _CANDIDATE_ALGORITHMS if name in hashlib.algorithms_available
)


def normalize_algorithm(name: str) -> str:
    """
    Map an algorithm name onto its hashlib spelling.

    Accepts the hashlib names as well as the common hyphenated forms
    ('SHA-256', 'sha3-512', 'SHA-512/256').

    Args:
        name: Algorithm name as supplied by the caller

    Returns:
        The canonical, supported algorithm name

    Raises:
        UnsupportedAlgorithm: If the name does not resolve to a supported algorithm
    """
    if not isinstance(name, str):
        raise UnsupportedAlgorithm(repr(name), SUPPORTED_ALGORITHMS)

    cleaned = name.strip().lower()
    candidates = (
        cleaned,
        cleaned.replace('/', '_').replace('-', '_'),
        cleaned.replace('-', '', 1).replace('/', '_').replace('-', '_'),
    )
    for candidate in candidates:
        if candidate in SUPPORTED_ALGORITHMS:
            return candidate

    raise UnsupportedAlgorithm(name, SUPPORTED_ALGORITHMS)


def digest_size(hash_algo: str) -> int:
    """Return the output size in bytes of the given hash algorithm."""
    return hashlib.new(normalize_algorithm(hash_algo)).digest_size


def new_prf(key: bytes, hash_algo: str = 'sha256') -> Callable[[bytes], bytes]:
    """
    Build a keyed PRF for repeated use with the same key.

    The key schedule of the HMAC is computed once; every call copies the
    keyed state and only hashes the message.

    Args:
        key: The HMAC key
        hash_algo: Any name accepted by normalize_algorithm

    Returns:
        A function mapping a message to its HMAC tag
    """
    keyed = hmac.new(key, None, normalize_algorithm(hash_algo))

    def prf(data: bytes) -> bytes:
        mac = keyed.copy()
        mac.update(data)
        return mac.digest()

    return prf


def constant_time_equal(a: Union[str, bytes], b: Union[str, bytes]) -> bool:
    """
    Compare two strings or byte strings without leaking where they differ.

    Args:
        a: First value
        b: Second value

    Returns:
        True if both values are equal, False otherwise
    """
    if isinstance(a, str):
        a = a.encode('utf-8')
    if isinstance(b, str):
        b = b.encode('utf-8')

    # Use constant-time comparison to prevent timing attacks
    return hmac.compare_digest(a, b)
