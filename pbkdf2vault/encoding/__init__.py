"""
Encoding Package

This package maps salts and derived keys onto fixed-width printable
strings.
"""

from .output import encode

__all__ = ['encode']
