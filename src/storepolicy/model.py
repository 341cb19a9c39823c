"""Identifiers for managed types and the operations a store may perform on them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple

from storepolicy.constants import (
    IDENTITY_TYPE_NAME,
    PARTITION_TYPE_NAME,
    RELATIONSHIP_TYPE_NAME,
)


class Operation(str, Enum):
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


ALL_OPERATIONS: FrozenSet[Operation] = frozenset(Operation)


class TypeKind(str, Enum):
    ATTRIBUTED = "attributed"
    IDENTITY = "identity"
    RELATIONSHIP = "relationship"
    PARTITION = "partition"


@dataclass(frozen=True)
class ManagedType:
    """Stable identifier for a category of entity an identity store manages.

    Two identifiers are equal when both their name and kind match; builders
    never look inside them beyond hashing and equality.
    """

    name: str
    kind: TypeKind = TypeKind.ATTRIBUTED

    @property
    def is_relationship(self) -> bool:
        return self.kind is TypeKind.RELATIONSHIP

    def __str__(self) -> str:
        return self.name


def identity_type(name: str) -> ManagedType:
    return ManagedType(name, TypeKind.IDENTITY)


def relationship_type(name: str) -> ManagedType:
    return ManagedType(name, TypeKind.RELATIONSHIP)


def partition_type(name: str) -> ManagedType:
    return ManagedType(name, TypeKind.PARTITION)


IDENTITY_TYPE = identity_type(IDENTITY_TYPE_NAME)
RELATIONSHIP_TYPE = relationship_type(RELATIONSHIP_TYPE_NAME)
PARTITION_TYPE = partition_type(PARTITION_TYPE_NAME)


def default_identity_model_types() -> Tuple[ManagedType, ...]:
    """Return the built-in identity, relationship and partition categories."""

    return (IDENTITY_TYPE, RELATIONSHIP_TYPE, PARTITION_TYPE)
