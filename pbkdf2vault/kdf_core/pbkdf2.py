"""
PBKDF2 Key Derivation

This module implements PBKDF2 (PKCS #5 v2.0, RFC 2898) with HMAC as the
pseudorandom function. The derived key is built block by block; each
block is the XOR of every HMAC iterate produced for it.
"""

import struct
import numpy as np
from typing import Union

from ..hmac.auth import digest_size, new_prf, normalize_algorithm

# RFC 2898 section 5.2: dkLen may not exceed (2^32 - 1) * hLen
MAX_BLOCKS = 2 ** 32 - 1


def _to_bytes(value: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(value, str):
        return value.encode('utf-8')
    return bytes(value)


def _derive_block(prf, salt: bytes, iterations: int, block_index: int) -> bytes:
    """
    Compute one block T_i of the derived key.

    Args:
        prf: Keyed HMAC function (see new_prf)
        salt: The salt
        iterations: Number of HMAC iterations
        block_index: 1-based block index, encoded as a 32-bit big endian integer

    Returns:
        T_i = U_1 ^ U_2 ^ ... ^ U_iterations
    """
    u = prf(salt + struct.pack('>I', block_index))
    block = np.frombuffer(u, dtype=np.uint8).copy()

    # Accumulate every iterate, not only the first and last
    for _ in range(1, iterations):
        u = prf(u)
        block ^= np.frombuffer(u, dtype=np.uint8)

    return block.tobytes()


def derive(algorithm: str,
           password: Union[str, bytes],
           salt: Union[str, bytes],
           iterations: int,
           key_length: int) -> bytes:
    """
    Derive a key from a password using PBKDF2-HMAC.

    Args:
        algorithm: Keyed-hash algorithm (e.g. 'sha256', 'sha1', 'sha512')
        password: Password, UTF-8 encoded if given as str
        salt: Salt, UTF-8 encoded if given as str
        iterations: Iteration count (>= 1, recommended >= 1000)
        key_length: Length of the derived key in bytes

    Returns:
        Derived key of exactly key_length bytes

    Raises:
        UnsupportedAlgorithm: If algorithm is not a supported keyed hash
        ValueError: If iterations or key_length is out of range
    """
    algorithm = normalize_algorithm(algorithm)

    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
        raise ValueError(f"Iteration count must be a positive integer, got {iterations!r}")
    if isinstance(key_length, bool) or not isinstance(key_length, int) or key_length < 0:
        raise ValueError(f"Key length must be a non-negative integer, got {key_length!r}")

    # Length in octets of the pseudorandom function output
    h_len = digest_size(algorithm)

    # Number of h_len-octet blocks in the derived key
    num_blocks = -(-key_length // h_len)
    if num_blocks > MAX_BLOCKS:
        raise ValueError("Derived key too long")

    prf = new_prf(_to_bytes(password), algorithm)
    salt = _to_bytes(salt)

    derived_key = bytearray()
    for i in range(1, num_blocks + 1):
        derived_key.extend(_derive_block(prf, salt, iterations, i))

    return bytes(derived_key[:key_length])


def derive_hex(algorithm: str,
               password: Union[str, bytes],
               salt: Union[str, bytes],
               iterations: int,
               key_length: int) -> str:
    """Same as derive(), returning the key as a hex string."""
    return derive(algorithm, password, salt, iterations, key_length).hex()
