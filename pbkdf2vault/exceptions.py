"""
Exceptions

Errors raised by the key derivation, salt generation and credential
encoding functions. Each one also derives from the built-in exception
the rest of the library raises for the same kind of failure.
"""

from typing import Iterable, Optional, Tuple


class Pbkdf2Error(Exception):
    """Base class for all pbkdf2vault errors."""


class UnsupportedAlgorithm(Pbkdf2Error, ValueError):
    """The requested keyed-hash algorithm is not in the supported set."""

    def __init__(self, algorithm: str, supported: Optional[Iterable[str]] = None):
        self.algorithm = algorithm
        self.supported = tuple(supported) if supported is not None else ()
        message = f"'{algorithm}' hashing is not supported"
        if self.supported:
            message += f" (expected one of: {', '.join(self.supported)})"
        super().__init__(message)


class InvalidConfiguration(Pbkdf2Error, ValueError):
    """A numeric configuration value is missing, non-integer or not positive."""


class EntropySourceUnavailable(Pbkdf2Error, RuntimeError):
    """Every ranked random source failed to produce bytes."""

    def __init__(self, tried: Iterable[str]):
        self.tried = tuple(tried)
        super().__init__(
            "No cryptographically strong random source is available "
            f"(tried: {', '.join(self.tried) or 'none'})"
        )


class MalformedCredential(Pbkdf2Error, ValueError):
    """A stored salt or salt+hash string has an unexpected shape."""

    def __init__(self, message: str, length: Optional[int] = None,
                 expected: Tuple[int, ...] = ()):
        self.length = length
        self.expected = expected
        super().__init__(message)
