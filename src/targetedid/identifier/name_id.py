"""
Result wrapping for targeted identifiers.
A result is either the plain identifier string or a qualified NameID.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from ..config import NAMEID_PERSISTENT, ENTITY_ID_KEY


@dataclass(frozen=True)
class NameID:
    """
    Persistent name identifier carrying a targeted identifier.
    """
    value: str
    format: str = NAMEID_PERSISTENT
    name_qualifier: Optional[str] = None
    sp_name_qualifier: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, omitting unset qualifiers."""
        result = {
            'value': self.value,
            'format': self.format,
        }
        if self.name_qualifier is not None:
            result['name_qualifier'] = self.name_qualifier
        if self.sp_name_qualifier is not None:
            result['sp_name_qualifier'] = self.sp_name_qualifier
        return result
    
    def __str__(self) -> str:
        return self.value


TargetedValue = Union[str, NameID]


def build_targeted_value(
    uid: str,
    generate_name_id: bool = False,
    source: Optional[Mapping[str, Any]] = None,
    destination: Optional[Mapping[str, Any]] = None,
) -> TargetedValue:
    """
    Wrap a derived identifier for storage in the attribute bag.
    
    Args:
        uid: Derived identifier
        generate_name_id: Whether to build a NameID instead of a plain string
        source: Source party metadata; its entityid becomes the name qualifier
        destination: Destination party metadata; its entityid becomes the SP name qualifier
        
    Returns:
        uid itself, or a NameID wrapping it
    """
    if not generate_name_id:
        return uid
    
    return NameID(
        value=uid,
        name_qualifier=(source or {}).get(ENTITY_ID_KEY),
        sp_name_qualifier=(destination or {}).get(ENTITY_ID_KEY),
    )
