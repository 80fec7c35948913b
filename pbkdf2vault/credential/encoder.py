"""
Credential Encoding

This module turns passwords into storable credential records (salt plus
encoded derived key) and checks passwords against existing records.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from ..config.settings import Pbkdf2Config
from ..encoding.output import encode
from ..exceptions import MalformedCredential
from ..hmac.auth import constant_time_equal
from ..kdf_core.pbkdf2 import derive
from ..salt_gen.random_source import generate_salt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CredentialRecord:
    """
    A derived credential.

    Attributes:
        salt: The encoded salt
        password: The encoded derived key (legacy field name)
        hash: salt + password, the string to store (legacy field name)
    """
    salt: str
    password: str
    hash: str

    @property
    def encoded_key(self) -> str:
        return self.password

    @property
    def combined(self) -> str:
        return self.hash

    def as_dict(self) -> Dict[str, str]:
        return {'salt': self.salt, 'password': self.password, 'hash': self.hash}


class CredentialEncoder:
    """
    Creates and verifies credential records for one PBKDF2 configuration.

    The configuration is fixed for the lifetime of the encoder; reconfigure()
    returns a new encoder instead of changing this one.
    """

    def __init__(self, config: Optional[Pbkdf2Config] = None):
        """
        Initialize the encoder.

        Args:
            config: PBKDF2 parameters (default: Pbkdf2Config())
        """
        self.config = config if config is not None else Pbkdf2Config()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"

    def reconfigure(self, conf: Optional[Mapping[str, Any]] = None) -> 'CredentialEncoder':
        """
        Return an encoder using this configuration with conf applied.

        Raises:
            UnsupportedAlgorithm: If conf names an unsupported algorithm;
                this encoder keeps its configuration
        """
        return type(self)(self.config.reconfigure(conf))

    def _split(self, existing: Union[str, bytes]):
        """
        Split an existing salt or salt+hash string.

        Returns:
            Tuple of (salt, stored_key); stored_key is None for a bare salt

        Raises:
            MalformedCredential: If the length matches neither form
        """
        if isinstance(existing, (bytes, bytearray)):
            try:
                existing = bytes(existing).decode('ascii')
            except UnicodeDecodeError:
                raise MalformedCredential("Credential is not a printable string") from None

        if not isinstance(existing, str):
            raise MalformedCredential(f"Credential must be a string, got {type(existing).__name__}")

        salt_length = self.config.salt_length
        expected = (salt_length, self.config.record_length)

        if len(existing) == salt_length:
            return existing, None
        if len(existing) == self.config.record_length:
            return existing[:salt_length], existing[salt_length:]

        logger.warning("Rejected credential of length %d (expected %d or %d)",
                       len(existing), *expected)
        raise MalformedCredential(
            f"Credential length {len(existing)} matches neither a salt ({expected[0]}) "
            f"nor a salt+hash record ({expected[1]})",
            length=len(existing),
            expected=expected,
        )

    def _build(self, password: Union[str, bytes], salt: str) -> CredentialRecord:
        derived_key = derive(
            self.config.algorithm,
            password,
            salt,
            self.config.iterations,
            self.config.hash_length,
        )
        encoded_key = encode(derived_key)
        return CredentialRecord(salt=salt, password=encoded_key, hash=salt + encoded_key)

    def enroll(self, password: Union[str, bytes]) -> CredentialRecord:
        """
        Create a new credential for a password with a fresh salt.

        Args:
            password: The password

        Returns:
            The credential record; store record.hash

        Raises:
            EntropySourceUnavailable: If no random source is available
        """
        salt = generate_salt(self.config.salt_length)
        logger.debug("Enrolling credential with %s", self.config.algorithm)
        return self._build(password, salt)

    def encrypt(self, password: Union[str, bytes],
                good_hash: Optional[Union[str, bytes]] = None) -> CredentialRecord:
        """
        Compute the credential record of a password.

        Without good_hash a fresh salt is generated, as in enroll(). With a
        salt or a salt+hash string, its salt is reused so the caller can
        compare the resulting record with the stored one.

        Args:
            password: The password
            good_hash: Optional salt or salt+hash string

        Returns:
            The credential record

        Raises:
            MalformedCredential: If good_hash has the wrong length
        """
        if good_hash is None:
            return self.enroll(password)

        salt, _ = self._split(good_hash)
        return self._build(password, salt)

    def verify(self, password: Union[str, bytes],
               existing: Union[str, bytes],
               stored_key: Optional[str] = None) -> bool:
        """
        Check a password against an existing credential.

        Args:
            password: The password to check
            existing: A salt+hash record, or a bare salt
            stored_key: The encoded key to compare with when existing is a bare salt

        Returns:
            True if the password matches, False otherwise

        Raises:
            MalformedCredential: If existing has the wrong length; no key is
                derived in that case
            ValueError: If existing is a bare salt and stored_key is missing,
                or a salt+hash record and stored_key is also given
        """
        salt, expected_key = self._split(existing)

        if expected_key is None:
            if stored_key is None:
                raise ValueError("stored_key is required when verifying against a bare salt")
            expected_key = stored_key
        elif stored_key is not None:
            raise ValueError("stored_key cannot be combined with a salt+hash record")

        record = self._build(password, salt)
        matched = constant_time_equal(record.password, expected_key)
        logger.debug("Credential verification %s", "succeeded" if matched else "failed")
        return matched


def enroll(password: Union[str, bytes], config: Optional[Pbkdf2Config] = None) -> CredentialRecord:
    """Create a credential record with a one-off encoder."""
    return CredentialEncoder(config).enroll(password)


def verify(password: Union[str, bytes],
           existing: Union[str, bytes],
           config: Optional[Pbkdf2Config] = None,
           stored_key: Optional[str] = None) -> bool:
    """Verify a password with a one-off encoder."""
    return CredentialEncoder(config).verify(password, existing, stored_key=stored_key)
