"""
Attribute filter that adds the eduPersonTargetedID attribute.

The filter selects the user's identifying attribute from the request
state, encodes the source and destination parties, derives the targeted
identifier and stores it, optionally wrapped as a persistent NameID.

Example configuration:
    {'identifyingAttribute': 'uid'}
    {'identifyingAttribute': 'uid', 'attributename': 'mail', 'nameId': True}
"""

import logging
from typing import Any, Dict, Mapping, MutableMapping, Optional

from .config import (
    CONFIG_ATTRIBUTE_NAME,
    CONFIG_NAME_ID,
    CONFIG_IDENTIFYING_ATTRIBUTE,
    STATE_ATTRIBUTES,
    STATE_SOURCE,
    STATE_DESTINATION,
    TARGETED_ID_ATTRIBUTE,
    ENTITY_ID_KEY,
)
from .errors import ConfigurationError, MissingAttributeError
from .identifier import (
    IdentifierDeriver,
    SaltProvider,
    EnvironmentSaltProvider,
    encode_party_metadata,
    build_targeted_value,
)

logger = logging.getLogger(__name__)


def _first_value(value: Any) -> Optional[Any]:
    """Return the first element of a multi-valued attribute, or a single value as-is."""
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


class TargetedIDFilter:
    """
    Generates eduPersonTargetedID from a configured or identifying attribute.
    """
    
    def __init__(
        self,
        config: Mapping[str, Any],
        salt_provider: Optional[SaltProvider] = None,
    ):
        """
        Initialize filter.
        
        Args:
            config: Filter configuration
            salt_provider: Secret salt source; defaults to the environment
            
        Raises:
            ConfigurationError: If the configuration is malformed
        """
        self.attribute: Optional[str] = None
        self.generate_name_id = False
        
        if CONFIG_ATTRIBUTE_NAME in config:
            self.attribute = config[CONFIG_ATTRIBUTE_NAME]
            if not isinstance(self.attribute, str):
                raise ConfigurationError("Invalid attribute name given to TargetedID filter")
        
        if CONFIG_NAME_ID in config:
            self.generate_name_id = config[CONFIG_NAME_ID]
            if not isinstance(self.generate_name_id, bool):
                raise ConfigurationError(f"Invalid value of '{CONFIG_NAME_ID}' option to TargetedID filter")
        
        if CONFIG_IDENTIFYING_ATTRIBUTE not in config:
            raise ConfigurationError(f"Missing mandatory '{CONFIG_IDENTIFYING_ATTRIBUTE}' config setting")
        
        identifying_attribute = config[CONFIG_IDENTIFYING_ATTRIBUTE]
        if not isinstance(identifying_attribute, str) or not identifying_attribute:
            raise ConfigurationError(f"'{CONFIG_IDENTIFYING_ATTRIBUTE}' must be a non-empty string")
        self.identifying_attribute = identifying_attribute
        
        self.deriver = IdentifierDeriver(salt_provider or EnvironmentSaltProvider())
    
    def get_user_id(self, attributes: Mapping[str, Any]) -> str:
        """
        Select the user identifier from the attribute bag.
        
        Raises:
            MissingAttributeError: If the required attribute is absent or empty
        """
        if self.attribute is None:
            if self.identifying_attribute not in attributes:
                raise MissingAttributeError(f"Missing mandatory '{self.identifying_attribute}' attribute")
            user_id = _first_value(attributes[self.identifying_attribute])
            if not user_id:
                raise MissingAttributeError(f"Attribute '{self.identifying_attribute}' has no value")
        else:
            user_id = _first_value(attributes.get(self.attribute))
            if not user_id:
                raise MissingAttributeError(
                    f"Missing attribute '{self.attribute}', which is needed to generate the targeted ID"
                )
        
        return user_id
    
    def process(self, state: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        """
        Add the targeted ID to the request state.
        
        Args:
            state: Request state; must hold an "Attributes" mapping
            
        Returns:
            The same state, with eduPersonTargetedID set
        """
        if STATE_ATTRIBUTES not in state:
            raise MissingAttributeError(f"Request state has no '{STATE_ATTRIBUTES}'")
        
        attributes: Dict[str, Any] = state[STATE_ATTRIBUTES]
        user_id = self.get_user_id(attributes)
        
        source = state.get(STATE_SOURCE)
        destination = state.get(STATE_DESTINATION)
        
        uid = self.deriver.derive(
            user_id,
            source_id=encode_party_metadata(source),
            destination_id=encode_party_metadata(destination),
        )
        
        logger.debug(
            "Derived targeted ID from attribute %s (source=%s, destination=%s)",
            self.attribute or self.identifying_attribute,
            (source or {}).get(ENTITY_ID_KEY, ''),
            (destination or {}).get(ENTITY_ID_KEY, ''),
        )
        
        value = build_targeted_value(uid, self.generate_name_id, source, destination)
        attributes[TARGETED_ID_ATTRIBUTE] = [value]
        return state
