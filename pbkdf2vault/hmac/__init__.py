"""
HMAC Package

This package implements the HMAC pseudorandom function used by PBKDF2,
the supported algorithm set, and constant-time comparison.
"""

from .auth import (
    SUPPORTED_ALGORITHMS,
    constant_time_equal,
    digest_size,
    new_prf,
    normalize_algorithm,
)

__all__ = [
    'SUPPORTED_ALGORITHMS', 'constant_time_equal', 'digest_size',
    'new_prf', 'normalize_algorithm',
]
