"""
Configuration Package

This package holds the immutable PBKDF2 configuration value and its
mapping and environment loaders.
"""

from .settings import Pbkdf2Config, DEFAULT_CONFIG, ENV_PREFIX, RECOMMENDED_MIN_ITERATIONS

__all__ = ['Pbkdf2Config', 'DEFAULT_CONFIG', 'ENV_PREFIX', 'RECOMMENDED_MIN_ITERATIONS']
