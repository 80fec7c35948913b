"""
pbkdf2vault - PBKDF2 Password Hashing Library

This library derives fixed-length keys and password verifiers from
low-entropy passwords using PBKDF2-HMAC (RFC 2898), and packs them into
fixed-width salt+hash credential records for storage.

Key Features:
- PBKDF2 with any fixed-size hashlib digest (SHA-1, SHA-2, SHA-3, BLAKE2)
- Salts from a ranked list of strong random sources, never a weak fallback
- Fixed-width printable encoding of salts and keys
- Immutable configuration, loadable from a mapping or the environment
- Constant-time credential verification

"""

from .config import Pbkdf2Config, DEFAULT_CONFIG
from .credential import CredentialEncoder, CredentialRecord, enroll, verify
from .encoding import encode
from .exceptions import (
    EntropySourceUnavailable,
    InvalidConfiguration,
    MalformedCredential,
    Pbkdf2Error,
    UnsupportedAlgorithm,
)
from .hmac import SUPPORTED_ALGORITHMS
from .kdf_core import derive, derive_hex
from .salt_gen import generate_salt, random_bytes

__version__ = '0.1.0'
__author__ = 'pbkdf2vault Team'

__all__ = [
    'Pbkdf2Config', 'DEFAULT_CONFIG',
    'CredentialEncoder', 'CredentialRecord', 'enroll', 'verify',
    'encode',
    'EntropySourceUnavailable', 'InvalidConfiguration', 'MalformedCredential',
    'Pbkdf2Error', 'UnsupportedAlgorithm',
    'SUPPORTED_ALGORITHMS',
    'derive', 'derive_hex',
    'generate_salt', 'random_bytes',
]
