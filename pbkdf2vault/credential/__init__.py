"""
Credential Package

This package creates storable salt+hash credential records from
passwords and verifies passwords against them.
"""

from .encoder import CredentialEncoder, CredentialRecord, enroll, verify

__all__ = ['CredentialEncoder', 'CredentialRecord', 'enroll', 'verify']
