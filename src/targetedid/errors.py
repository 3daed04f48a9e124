"""
Domain-specific exceptions for targetedid.
All exceptions are explicit and carry meaningful context.
Messages never contain the secret salt.
"""


class TargetedIDError(Exception):
    """Base exception for all targetedid errors."""
    pass


class ConfigurationError(TargetedIDError):
    """Raised when filter configuration is malformed."""
    pass


class SaltError(ConfigurationError):
    """Raised when the secret salt is unavailable or empty."""
    pass


class MissingAttributeError(TargetedIDError):
    """Raised when the identifying attribute is absent from the request state."""
    pass
