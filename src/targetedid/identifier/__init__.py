"""Targeted identifier derivation for targetedid."""

from .deriver import (
    IdentifierDeriver,
    derive,
    encode_party,
    encode_party_metadata,
    verify_identifier,
)
from .name_id import NameID, TargetedValue, build_targeted_value
from .salt import (
    SaltProvider,
    StaticSaltProvider,
    EnvironmentSaltProvider,
    FileSaltProvider,
)

__all__ = [
    'IdentifierDeriver',
    'derive',
    'encode_party',
    'encode_party_metadata',
    'verify_identifier',
    'NameID',
    'TargetedValue',
    'build_targeted_value',
    'SaltProvider',
    'StaticSaltProvider',
    'EnvironmentSaltProvider',
    'FileSaltProvider',
]
