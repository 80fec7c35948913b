"""
PBKDF2 Configuration

This module defines the immutable configuration value shared by the
derivation and credential functions, and the loaders that build it from
a caller-supplied mapping or from environment variables.
"""

import copy
import os
import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional

from ..exceptions import InvalidConfiguration
from ..hmac.auth import normalize_algorithm

logger = logging.getLogger(__name__)

# Default PBKDF2 parameters
DEFAULT_CONFIG = {
    'algorithm': 'sha256',
    'iterations': 1000,   # Number of HMAC rounds per block
    'hash_length': 32,    # Derived key size in bytes
    'salt_length': 32,    # Salt size in bytes
}

RECOMMENDED_MIN_ITERATIONS = 1000

ENV_PREFIX = 'PBKDF2VAULT_'

_INTEGER_FIELDS = ('iterations', 'hash_length', 'salt_length')


def _normalize_value(key: str, value: Any) -> Any:
    """Trim, lowercase and validate a single configuration value."""
    if key == 'algorithm':
        return normalize_algorithm(str(value))

    if isinstance(value, bool):
        raise InvalidConfiguration(f"{key} must be a positive integer, got {value!r}")
    if isinstance(value, int):
        number = value
    else:
        text = str(value).strip().lower()
        try:
            number = int(text)
        except ValueError:
            raise InvalidConfiguration(f"{key} must be a positive integer, got {value!r}") from None

    if number < 1:
        raise InvalidConfiguration(f"{key} must be a positive integer, got {number}")
    return number


def _warn_low_iterations(iterations: int) -> None:
    if iterations < RECOMMENDED_MIN_ITERATIONS:
        logger.warning(
            "PBKDF2 configured with %d iterations; at least %d are recommended",
            iterations, RECOMMENDED_MIN_ITERATIONS,
        )


@dataclass(frozen=True)
class Pbkdf2Config:
    """
    PBKDF2 parameters.

    Instances are frozen; use reconfigure() to obtain a modified copy.
    """
    algorithm: str = DEFAULT_CONFIG['algorithm']
    iterations: int = DEFAULT_CONFIG['iterations']
    hash_length: int = DEFAULT_CONFIG['hash_length']
    salt_length: int = DEFAULT_CONFIG['salt_length']

    def __post_init__(self):
        # Fields set through the constructor get the same checks as from_mapping
        for key in ('algorithm',) + _INTEGER_FIELDS:
            value = _normalize_value(key, getattr(self, key))
            object.__setattr__(self, key, value)

        _warn_low_iterations(self.iterations)

    @property
    def record_length(self) -> int:
        """Length of a combined salt+hash credential string."""
        return self.salt_length + self.hash_length

    def reconfigure(self, conf: Optional[Mapping[str, Any]] = None) -> 'Pbkdf2Config':
        """
        Return a new configuration with the recognized keys of conf applied.

        Args:
            conf: Mapping with any of algorithm, iterations, hash_length, salt_length

        Returns:
            A new Pbkdf2Config; self is left untouched

        Raises:
            UnsupportedAlgorithm: If conf names an unsupported algorithm
            InvalidConfiguration: If a numeric value is not a positive integer
        """
        if not conf:
            return self

        changes = {}
        for key, value in conf.items():
            if key not in DEFAULT_CONFIG:
                logger.debug("Ignoring unrecognized configuration key %r", key)
                continue
            changes[key] = _normalize_value(key, value)

        if not changes:
            return self

        # Copy without re-running __post_init__; values are already normalized
        updated = copy.copy(self)
        for key, value in changes.items():
            object.__setattr__(updated, key, value)

        if 'iterations' in changes and changes['iterations'] != self.iterations:
            _warn_low_iterations(updated.iterations)
        return updated

    @classmethod
    def from_mapping(cls, conf: Optional[Mapping[str, Any]] = None,
                     base: Optional['Pbkdf2Config'] = None) -> 'Pbkdf2Config':
        """
        Build a configuration from a mapping, starting from base or the defaults.
        """
        if base is None:
            base = cls()
        return base.reconfigure(conf)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX,
                 environ: Optional[Mapping[str, str]] = None) -> 'Pbkdf2Config':
        """
        Build a configuration from environment variables.

        Reads <prefix>ALGORITHM, <prefix>ITERATIONS, <prefix>HASH_LENGTH and
        <prefix>SALT_LENGTH; unset variables keep their defaults.

        Args:
            prefix: Variable name prefix
            environ: Mapping to read instead of os.environ

        Returns:
            The resulting configuration
        """
        if environ is None:
            environ = os.environ

        conf = {}
        for key in DEFAULT_CONFIG:
            env_key = prefix + key.upper()
            if env_key in environ:
                conf[key] = environ[env_key]

        return cls.from_mapping(conf)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
