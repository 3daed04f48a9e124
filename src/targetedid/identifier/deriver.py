"""
Targeted identifier derivation.

The identifier is SHA-1 over a length-prefixed encoding of the source
party, destination party and user identifier, wrapped in the secret salt.
The payload layout is fixed: identifiers already issued depend on it.
"""

from typing import Any, Mapping, Optional

from ..config import (
    UID_HASH_TAG,
    PARTY_FIELD_TAG,
    METADATA_SET_KEY,
    ENTITY_ID_KEY,
    STRING_ENCODING,
)
from ..utils.encoding import length_prefixed
from ..utils.hashing import sha1_hex, digests_equal, is_hex_digest
from .salt import SaltProvider


def encode_party(metadata_set: Optional[str] = None, entity_id: Optional[str] = None) -> str:
    """
    Build the party identifier from federation metadata fields.
    
    Both fields carry the same "set" tag. This is how the format was first
    issued and must not be changed.
    
    Args:
        metadata_set: Metadata-set classifier, or None if absent
        entity_id: Entity identifier, or None if absent
        
    Returns:
        Party identifier; empty if both fields are absent
    """
    party_id = ''
    
    if metadata_set is not None:
        party_id += length_prefixed(metadata_set, PARTY_FIELD_TAG)
    
    if entity_id is not None:
        party_id += length_prefixed(entity_id, PARTY_FIELD_TAG)
    
    return party_id


def encode_party_metadata(metadata: Optional[Mapping[str, Any]]) -> str:
    """
    Build the party identifier from a party metadata mapping.
    
    Args:
        metadata: Mapping that may hold "metadata-set" and "entityid"
        
    Returns:
        Party identifier; empty for None or empty metadata
    """
    if not metadata:
        return ''
    
    return encode_party(
        metadata.get(METADATA_SET_KEY),
        metadata.get(ENTITY_ID_KEY),
    )


def build_payload(secret_salt: str, source_id: str, destination_id: str, user_id: str) -> str:
    """Concatenate the salted, length-prefixed derivation input."""
    return (
        UID_HASH_TAG
        + secret_salt
        + length_prefixed(source_id)
        + length_prefixed(destination_id)
        + length_prefixed(user_id)
        + secret_salt
    )


def derive(secret_salt: str, source_id: str, destination_id: str, user_id: str) -> str:
    """
    Derive the targeted identifier for a (source, destination, user) triple.
    
    All four arguments are required; pass "" for an unknown party. The
    caller must supply a non-empty salt and user ID; this function does
    not validate them.
    
    Args:
        secret_salt: Process-wide secret salt
        source_id: Source party identifier (see encode_party)
        destination_id: Destination party identifier (see encode_party)
        user_id: Value of the user's identifying attribute
        
    Returns:
        40-character lowercase hex string
    """
    if not isinstance(secret_salt, str):
        raise TypeError(f"Expected str for secret_salt, got {type(secret_salt)}")
    
    payload = build_payload(secret_salt, source_id, destination_id, user_id)
    return sha1_hex(payload.encode(STRING_ENCODING))


def verify_identifier(
    candidate: str,
    secret_salt: str,
    source_id: str,
    destination_id: str,
    user_id: str,
) -> bool:
    """
    Check a presented identifier against the one derived from the inputs.
    
    Returns:
        True if candidate matches, False otherwise (including malformed candidates)
    """
    if not is_hex_digest(candidate):
        return False
    
    expected = derive(secret_salt, source_id, destination_id, user_id)
    return digests_equal(expected, candidate)


class IdentifierDeriver:
    """
    Identifier derivation with the secret salt injected.
    """
    
    def __init__(self, salt_provider: SaltProvider):
        """
        Initialize deriver.
        
        Args:
            salt_provider: Source of the secret salt, consulted on every call
        """
        if not isinstance(salt_provider, SaltProvider):
            raise TypeError(f"Expected SaltProvider, got {type(salt_provider)}")
        
        self._salt_provider = salt_provider
    
    def derive(self, user_id: str, *, source_id: str = '', destination_id: str = '') -> str:
        """Derive the targeted identifier using the provider's salt. Party IDs are keyword-only."""
        return derive(
            self._salt_provider.get_secret_salt(),
            source_id,
            destination_id,
            user_id,
        )
    
    def derive_for_parties(
        self,
        user_id: str,
        source: Optional[Mapping[str, Any]] = None,
        destination: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Derive from raw party metadata mappings."""
        return self.derive(
            user_id,
            source_id=encode_party_metadata(source),
            destination_id=encode_party_metadata(destination),
        )
    
    def verify(self, candidate: str, user_id: str, *, source_id: str = '', destination_id: str = '') -> bool:
        """Check a presented identifier in constant time."""
        return verify_identifier(
            candidate,
            self._salt_provider.get_secret_salt(),
            source_id,
            destination_id,
            user_id,
        )
    
    def __repr__(self) -> str:
        return f"IdentifierDeriver(salt_provider={self._salt_provider!r})"
