"""
Salt Generation

This module draws cryptographically strong random bytes from a ranked
list of sources and turns them into salts. The first source that works
supplies all of the bytes. If none works the call fails; there is no
fallback to a non-cryptographic generator.
"""

import os
import secrets
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from Cryptodome.Random import get_random_bytes

from ..encoding.output import encode
from ..exceptions import EntropySourceUnavailable

logger = logging.getLogger(__name__)

RANDOM_DEVICE = '/dev/urandom'

RandomSource = Tuple[str, Callable[[int], bytes]]


def os_random(byte_count: int) -> bytes:
    """Read from the operating system CSPRNG."""
    return secrets.token_bytes(byte_count)


def cryptodome_random(byte_count: int) -> bytes:
    """Read from the PyCryptodome generator."""
    return get_random_bytes(byte_count)


def device_random(byte_count: int, path: str = RANDOM_DEVICE) -> bytes:
    """Read directly from the system entropy device."""
    if not os.access(path, os.R_OK):
        raise OSError(f"{path} is not readable")
    with open(path, 'rb') as f:
        return f.read(byte_count)


# Ranked: first available wins
RANDOM_SOURCES: List[RandomSource] = [
    ('os', os_random),
    ('pycryptodome', cryptodome_random),
    ('device', device_random),
]


def random_bytes(byte_count: int, sources: Optional[Sequence[RandomSource]] = None) -> bytes:
    """
    Generate cryptographically secure random bytes.

    Args:
        byte_count: Number of bytes to generate
        sources: Ranked (name, function) pairs; defaults to RANDOM_SOURCES

    Returns:
        byte_count random bytes, all from the same source

    Raises:
        ValueError: If byte_count is negative
        EntropySourceUnavailable: If every source fails
    """
    if byte_count < 0:
        raise ValueError(f"Byte count must be non-negative, got {byte_count}")

    if sources is None:
        sources = RANDOM_SOURCES

    tried = []
    for name, source in sources:
        tried.append(name)
        try:
            data = source(byte_count)
        except (OSError, NotImplementedError, ValueError) as e:
            logger.warning("Random source %r unavailable: %s", name, e)
            continue

        if not isinstance(data, (bytes, bytearray)) or len(data) != byte_count:
            logger.warning("Random source %r returned a short read", name)
            continue

        logger.debug("Generated %d random bytes from %r", byte_count, name)
        return bytes(data)

    raise EntropySourceUnavailable(tried)


def generate_salt(byte_count: int, sources: Optional[Sequence[RandomSource]] = None) -> str:
    """
    Generate a salt string of byte_count characters.

    The random bytes are passed through the same output encoding as derived
    keys, so salts and keys concatenate into fixed-width records.

    Args:
        byte_count: Salt length
        sources: Optional ranked sources, see random_bytes()

    Returns:
        The encoded salt
    """
    return encode(random_bytes(byte_count, sources))
