"""Shared constants for the storepolicy package."""

PACKAGE_NAME = "storepolicy"
PACKAGE_VERSION = "0.1.0"

IDENTITY_TYPE_NAME = "IdentityType"
RELATIONSHIP_TYPE_NAME = "Relationship"
PARTITION_TYPE_NAME = "Partition"

STORE_KIND_FILE = "file"
STORE_KIND_DATABASE = "database"
STORE_KIND_DIRECTORY = "directory"

ENV_STRICT = "STOREPOLICY_STRICT"

NO_SUPPORTED_TYPES_MESSAGE = "The store configuration must have at least one supported type."
NO_STORES_MESSAGE = "At least one identity store must be configured."
