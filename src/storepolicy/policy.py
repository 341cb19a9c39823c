"""Resolved, read-only store policy consulted by identity store implementations."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Tuple

from storepolicy.model import ManagedType, Operation

OperationMap = Mapping[ManagedType, FrozenSet[Operation]]

_EMPTY: FrozenSet[Operation] = frozenset()


def freeze_operation_map(source: Mapping[ManagedType, Any]) -> OperationMap:
    """Copy ``source`` into a read-only mapping of frozen operation sets."""

    return MappingProxyType({key: frozenset(ops) for key, ops in source.items()})


@dataclass(frozen=True)
class StorePolicy:
    """Immutable snapshot produced by a validated store configuration builder.

    A type is permitted an operation only when the operation is listed among its
    supported operations and not listed among its unsupported operations.
    """

    store_kind: str
    supported_types: OperationMap = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    unsupported_types: OperationMap = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    global_relationship_types: FrozenSet[ManagedType] = frozenset()
    self_relationship_types: FrozenSet[ManagedType] = frozenset()
    credential_handlers: Tuple[Any, ...] = ()
    credential_handler_properties: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    context_initializers: Tuple[Any, ...] = ()
    credentials_supported: bool = False

    def __post_init__(self) -> None:
        # Copy caller-supplied collections into read-only snapshots.
        object.__setattr__(self, "supported_types", freeze_operation_map(self.supported_types))
        object.__setattr__(self, "unsupported_types", freeze_operation_map(self.unsupported_types))
        object.__setattr__(
            self, "global_relationship_types", frozenset(self.global_relationship_types)
        )
        object.__setattr__(self, "self_relationship_types", frozenset(self.self_relationship_types))
        object.__setattr__(self, "credential_handlers", tuple(self.credential_handlers))
        object.__setattr__(
            self,
            "credential_handler_properties",
            MappingProxyType(dict(self.credential_handler_properties)),
        )
        object.__setattr__(self, "context_initializers", tuple(self.context_initializers))
        object.__setattr__(self, "credentials_supported", bool(self.credentials_supported))

    def supports(self, managed_type: ManagedType, operation: Operation) -> bool:
        return operation in self.supported_types.get(
            managed_type, _EMPTY
        ) and not self.is_unsupported(managed_type, operation)

    def is_unsupported(self, managed_type: ManagedType, operation: Operation) -> bool:
        return operation in self.unsupported_types.get(managed_type, _EMPTY)

    def supported_operations(self, managed_type: ManagedType) -> FrozenSet[Operation]:
        supported = self.supported_types.get(managed_type, _EMPTY)
        return supported - self.unsupported_operations(managed_type)

    def unsupported_operations(self, managed_type: ManagedType) -> FrozenSet[Operation]:
        return self.unsupported_types.get(managed_type, _EMPTY)

    def supports_type(self, managed_type: ManagedType) -> bool:
        return bool(self.supported_operations(managed_type))

    def is_global_relationship(self, managed_type: ManagedType) -> bool:
        return managed_type in self.global_relationship_types

    def is_self_relationship(self, managed_type: ManagedType) -> bool:
        return managed_type in self.self_relationship_types
