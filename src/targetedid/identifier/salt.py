"""
Secret salt providers.
The salt is injected into the deriver rather than read from global state.
Neither values nor reprs of providers ever expose the salt.
"""

import os
from pathlib import Path

from ..config import SECRET_SALT_ENV
from ..errors import SaltError


class SaltProvider:
    """
    Base class for secret salt sources.
    """
    
    def get_secret_salt(self) -> str:
        """
        Return the secret salt.
        
        Raises:
            SaltError: If the salt is unavailable or empty
        """
        raise NotImplementedError()


class StaticSaltProvider(SaltProvider):
    """Returns a fixed salt supplied at construction."""
    
    def __init__(self, secret_salt: str):
        if not isinstance(secret_salt, str):
            raise SaltError(f"Secret salt must be str, got {type(secret_salt).__name__}")
        if not secret_salt:
            raise SaltError("Secret salt must not be empty")
        
        self._secret_salt = secret_salt
    
    def get_secret_salt(self) -> str:
        return self._secret_salt
    
    def __repr__(self) -> str:
        return "StaticSaltProvider()"


class EnvironmentSaltProvider(SaltProvider):
    """Reads the salt from an environment variable on every call."""
    
    def __init__(self, variable: str = SECRET_SALT_ENV):
        self.variable = variable
    
    def get_secret_salt(self) -> str:
        secret_salt = os.environ.get(self.variable)
        if not secret_salt:
            raise SaltError(f"Environment variable {self.variable} is not set or empty")
        return secret_salt
    
    def __repr__(self) -> str:
        return f"EnvironmentSaltProvider(variable={self.variable!r})"


class FileSaltProvider(SaltProvider):
    """Reads the salt from a file on every call; trailing newlines are stripped."""
    
    def __init__(self, path: str):
        self.path = Path(path)
    
    def get_secret_salt(self) -> str:
        try:
            secret_salt = self.path.read_text(encoding='utf-8').rstrip('\r\n')
        except (OSError, UnicodeDecodeError) as e:
            raise SaltError(f"Cannot read secret salt file {self.path}: {e.__class__.__name__}")
        
        if not secret_salt:
            raise SaltError(f"Secret salt file {self.path} is empty")
        return secret_salt
    
    def __repr__(self) -> str:
        return f"FileSaltProvider(path={str(self.path)!r})"
