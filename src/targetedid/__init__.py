"""
targetedid - Targeted identifier derivation

Derives stable, salted, pseudonymous identifiers unique per
(source party, destination party, user) triple.

Main exports:
- derive: Pure identifier derivation
- encode_party: Party identifier encoding
- IdentifierDeriver: Derivation with an injected salt provider
- TargetedIDFilter: Attribute filter that sets eduPersonTargetedID
"""

from .identifier import (
    IdentifierDeriver,
    derive,
    encode_party,
    encode_party_metadata,
    verify_identifier,
    NameID,
    build_targeted_value,
    SaltProvider,
    StaticSaltProvider,
    EnvironmentSaltProvider,
    FileSaltProvider,
)
from .filter import TargetedIDFilter
from .errors import *
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    'IdentifierDeriver',
    'derive',
    'encode_party',
    'encode_party_metadata',
    'verify_identifier',
    'NameID',
    'build_targeted_value',
    'SaltProvider',
    'StaticSaltProvider',
    'EnvironmentSaltProvider',
    'FileSaltProvider',
    'TargetedIDFilter',
    'setup_logging',
    'TargetedIDError',
    'ConfigurationError',
    'SaltError',
    'MissingAttributeError',
]
