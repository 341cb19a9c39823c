"""Capability policy model for identity store configurations.

Build a policy fluently and resolve it into a read-only snapshot::

    from storepolicy import IdentityStoresConfigurationBuilder, Operation, IDENTITY_TYPE

    stores = IdentityStoresConfigurationBuilder()
    stores.file().support_all_features().unsupport_type(IDENTITY_TYPE, Operation.DELETE)
    (policy,) = stores.build()
    policy.supports(IDENTITY_TYPE, Operation.DELETE)  # False
"""

from __future__ import annotations

from .builder import BuilderState, StoreConfigurationBuilder
from .constants import PACKAGE_VERSION as __version__
from .errors import (
    BuilderStateError,
    ConfigurationError,
    InvalidArgumentError,
    StorePolicyError,
    StrictModeViolation,
)
from .model import (
    ALL_OPERATIONS,
    IDENTITY_TYPE,
    PARTITION_TYPE,
    RELATIONSHIP_TYPE,
    ManagedType,
    Operation,
    TypeKind,
    default_identity_model_types,
    identity_type,
    partition_type,
    relationship_type,
)
from .policy import StorePolicy
from .stores import (
    DatabaseStoreConfigurationBuilder,
    DirectoryStoreConfigurationBuilder,
    FileStoreConfigurationBuilder,
    IdentityStoresConfigurationBuilder,
)

__all__ = [
    "ALL_OPERATIONS",
    "BuilderState",
    "BuilderStateError",
    "ConfigurationError",
    "DatabaseStoreConfigurationBuilder",
    "DirectoryStoreConfigurationBuilder",
    "FileStoreConfigurationBuilder",
    "IDENTITY_TYPE",
    "IdentityStoresConfigurationBuilder",
    "InvalidArgumentError",
    "ManagedType",
    "Operation",
    "PARTITION_TYPE",
    "RELATIONSHIP_TYPE",
    "StoreConfigurationBuilder",
    "StorePolicy",
    "StorePolicyError",
    "StrictModeViolation",
    "TypeKind",
    "__version__",
    "default_identity_model_types",
    "identity_type",
    "partition_type",
    "relationship_type",
]
