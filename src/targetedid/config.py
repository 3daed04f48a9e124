"""
Configuration constants for targetedid.
These are immutable system constants, not runtime configuration.
"""

# Identifier derivation
HASH_ALGORITHM = "sha1"
UID_HASH_TAG = "uidhashbase"
PARTY_FIELD_TAG = "set"  # shared by both party fields, see encode_party
LENGTH_SEPARATOR = ":"
STRING_ENCODING = "utf-8"
IDENTIFIER_LENGTH = 40  # Hex-encoded SHA-1

# Party metadata keys
METADATA_SET_KEY = "metadata-set"
ENTITY_ID_KEY = "entityid"

# Request state keys
STATE_ATTRIBUTES = "Attributes"
STATE_SOURCE = "Source"
STATE_DESTINATION = "Destination"

# Filter configuration keys
CONFIG_ATTRIBUTE_NAME = "attributename"
CONFIG_NAME_ID = "nameId"
CONFIG_IDENTIFYING_ATTRIBUTE = "identifyingAttribute"

# Output attribute
TARGETED_ID_ATTRIBUTE = "eduPersonTargetedID"

# Name identifier format
NAMEID_PERSISTENT = "urn:oasis:names:tc:SAML:2.0:nameid-format:persistent"

# Environment variables
SECRET_SALT_ENV = "TARGETEDID_SECRET_SALT"
LOG_LEVEL_ENV = "TARGETEDID_LOG_LEVEL"
LOG_FORMAT_ENV = "TARGETEDID_LOG_FORMAT"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"
REDACTED = "[REDACTED]"
