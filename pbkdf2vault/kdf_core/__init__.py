"""
Key Derivation Function Package

This package implements PBKDF2-HMAC, the password-based key derivation
function at the core of the library.
"""

from .pbkdf2 import derive, derive_hex

__all__ = ['derive', 'derive_hex']
