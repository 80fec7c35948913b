"""
Salt Generation Package

This package produces cryptographically strong random bytes and
fixed-width salts.
"""

from .random_source import RANDOM_SOURCES, generate_salt, random_bytes

__all__ = ['RANDOM_SOURCES', 'generate_salt', 'random_bytes']
