"""Utility modules for targetedid."""

from . import encoding
from . import hashing

__all__ = ['encoding', 'hashing']
