"""Fluent builder that accumulates and resolves an identity store policy."""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, List, Mapping, Optional, Set, Tuple, TypeVar

from storepolicy.constants import NO_SUPPORTED_TYPES_MESSAGE
from storepolicy.env_flags import is_strict_mode
from storepolicy.errors import (
    BuilderStateError,
    ConfigurationError,
    InvalidArgumentError,
    StrictModeViolation,
)
from storepolicy.model import ALL_OPERATIONS, ManagedType, Operation, default_identity_model_types
from storepolicy.policy import OperationMap, StorePolicy, freeze_operation_map

if TYPE_CHECKING:  # pragma: no cover
    from storepolicy.stores import (
        DatabaseStoreConfigurationBuilder,
        DirectoryStoreConfigurationBuilder,
        FileStoreConfigurationBuilder,
        IdentityStoresConfigurationBuilder,
    )

logger = logging.getLogger(__name__)

_S = TypeVar("_S", bound="StoreConfigurationBuilder")


class BuilderState(str, Enum):
    OPEN = "open"
    VALIDATED = "validated"


class StoreConfigurationBuilder:
    """Accumulates the capability policy for a single identity store.

    Declarations are accepted while the builder is ``OPEN``. :meth:`validate`
    moves it to ``VALIDATED``, after which only the read-only accessors and
    :meth:`create` may be used.
    """

    store_kind = "generic"

    def __init__(
        self,
        owner: Optional["IdentityStoresConfigurationBuilder"] = None,
        strict: Optional[bool] = None,
    ) -> None:
        self._owner = owner
        self._strict = strict
        self._state = BuilderState.OPEN
        self._supported_types: Dict[ManagedType, Set[Operation]] = {}
        self._unsupported_types: Dict[ManagedType, Set[Operation]] = {}
        self._global_relationship_types: Set[ManagedType] = set()
        self._self_relationship_types: Set[ManagedType] = set()
        self._credential_handlers: List[Any] = []
        self._credential_handler_properties: Dict[str, Any] = {}
        self._context_initializers: List[Any] = []
        self._support_credentials = False

    # Navigation to sibling store builders is owned by the aggregator.

    def file(self) -> "FileStoreConfigurationBuilder":
        return self._require_owner().file()

    def database(self) -> "DatabaseStoreConfigurationBuilder":
        return self._require_owner().database()

    def directory(self) -> "DirectoryStoreConfigurationBuilder":
        return self._require_owner().directory()

    # Declarations

    def support_type(self: _S, *types: ManagedType) -> _S:
        """Declare ``types`` as supported for every operation.

        Accepts the types as separate arguments or as a single list. Types that
        are already supported keep their current entry; only
        :meth:`unsupport_type` narrows what a type may do.
        """

        self._ensure_open("support_type")
        for managed_type in _require_types(types):
            if managed_type not in self._supported_types:
                self._supported_types[managed_type] = set(ALL_OPERATIONS)
        return self

    def unsupport_type(self: _S, managed_type: ManagedType, *operations: Operation) -> _S:
        """Disable ``operations`` for ``managed_type``.

        Passing no operations (or an empty list) disables all of them. The type
        does not need to have been declared supported.
        """

        self._ensure_open("unsupport_type")
        if not isinstance(managed_type, ManagedType):
            raise InvalidArgumentError("Unsupported type", "must be a ManagedType")
        disabled_operations = _require_operations(operations)
        disabled = self._unsupported_types.setdefault(managed_type, set())
        disabled.update(disabled_operations or ALL_OPERATIONS)
        return self

    def support_global_relationship(self: _S, *types: ManagedType) -> _S:
        self._ensure_open("support_global_relationship")
        relationship_types = _require_types(types)
        self._global_relationship_types.update(relationship_types)
        return self.support_type(*relationship_types)

    def support_self_relationship(self: _S, *types: ManagedType) -> _S:
        self._ensure_open("support_self_relationship")
        relationship_types = _require_types(types)
        self._self_relationship_types.update(relationship_types)
        return self.support_type(*relationship_types)

    def support_all_features(self: _S) -> _S:
        """Support the built-in identity model types and enable credentials."""

        self.support_type(*default_identity_model_types())
        return self.support_credentials(True)

    def add_context_initializer(self: _S, initializer: Any) -> _S:
        self._ensure_open("add_context_initializer")
        self._context_initializers.append(initializer)
        return self

    def set_credential_handler_property(self: _S, name: str, value: Any) -> _S:
        self._ensure_open("set_credential_handler_property")
        self._credential_handler_properties[name] = value
        return self

    def add_credential_handler(self: _S, handler: Any) -> _S:
        self._ensure_open("add_credential_handler")
        self._credential_handlers.append(handler)
        return self

    def support_credentials(self: _S, enabled: bool) -> _S:
        self._ensure_open("support_credentials")
        self._support_credentials = bool(enabled)
        return self

    def read_from(self: _S, policy: StorePolicy) -> _S:
        """Merge the declarations captured by an existing resolved policy.

        Supported entries already present in this builder are kept as they are;
        everything else is merged with the same rules as the declaration calls.
        The credentials flag is taken from ``policy``.
        """

        self._ensure_open("read_from")
        if policy is None:
            raise InvalidArgumentError("Policy")
        for managed_type, operations in policy.supported_types.items():
            if managed_type not in self._supported_types:
                self._supported_types[managed_type] = set(operations)
        for managed_type, operations in policy.unsupported_types.items():
            self._unsupported_types.setdefault(managed_type, set()).update(operations)
        self._global_relationship_types.update(policy.global_relationship_types)
        self._self_relationship_types.update(policy.self_relationship_types)
        self._credential_handlers.extend(policy.credential_handlers)
        self._credential_handler_properties.update(policy.credential_handler_properties)
        self._context_initializers.extend(policy.context_initializers)
        self._support_credentials = policy.credentials_supported
        return self


    # Validation and resolution

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def is_validated(self) -> bool:
        return self._state is BuilderState.VALIDATED

    @property
    def strict(self) -> bool:
        if self._strict is not None:
            return self._strict
        return is_strict_mode()

    def check(self) -> None:
        """Run the validation checks without sealing the builder.

        Raises :class:`ConfigurationError` when no type is supported. In strict
        mode it also raises :class:`StrictModeViolation` when a relationship is
        classified both global and self, or when a type is unsupported without
        ever being declared supported; neither is checked otherwise.
        """

        if not self._supported_types:
            raise ConfigurationError(NO_SUPPORTED_TYPES_MESSAGE)
        if self.strict:
            self._validate_strict()

    def validate(self) -> None:
        """Run :meth:`check` and seal the builder.

        A failed validation leaves the builder open.
        """

        self.check()
        if self._state is BuilderState.OPEN:
            logger.debug(
                "%s store configuration validated with %d supported type(s)",
                self.store_kind,
                len(self._supported_types),
            )
        self._state = BuilderState.VALIDATED


    def create(self) -> StorePolicy:
        """Validate if needed and return the resolved read-only policy."""

        if not self.is_validated:
            self.validate()
        policy = StorePolicy(
            store_kind=self.store_kind,
            supported_types=self.supported_types,
            unsupported_types=self.unsupported_types,
            global_relationship_types=self.global_relationship_types,
            self_relationship_types=self.self_relationship_types,
            credential_handlers=self.credential_handlers,
            credential_handler_properties=self.credential_handler_properties,
            context_initializers=self.context_initializers,
            credentials_supported=self.credentials_supported,
        )
        logger.debug("resolved %s store policy", self.store_kind)
        return policy

    # Read-only views

    @property
    def supported_types(self) -> OperationMap:
        return freeze_operation_map(self._supported_types)

    @property
    def unsupported_types(self) -> OperationMap:
        return freeze_operation_map(self._unsupported_types)

    @property
    def global_relationship_types(self) -> FrozenSet[ManagedType]:
        return frozenset(self._global_relationship_types)

    @property
    def self_relationship_types(self) -> FrozenSet[ManagedType]:
        return frozenset(self._self_relationship_types)

    @property
    def credential_handlers(self) -> Tuple[Any, ...]:
        return tuple(self._credential_handlers)

    @property
    def credential_handler_properties(self) -> Mapping[str, Any]:
        return MappingProxyType(dict(self._credential_handler_properties))

    @property
    def context_initializers(self) -> Tuple[Any, ...]:
        return tuple(self._context_initializers)

    @property
    def credentials_supported(self) -> bool:
        return self._support_credentials

    def _validate_strict(self) -> None:
        overlap = self._global_relationship_types & self._self_relationship_types
        if overlap:
            names = ", ".join(sorted(str(managed_type) for managed_type in overlap))
            raise StrictModeViolation(
                f"Relationship types declared both global and self: {names}"
            )
        orphaned = set(self._unsupported_types) - set(self._supported_types)
        if orphaned:
            names = ", ".join(sorted(str(managed_type) for managed_type in orphaned))
            raise StrictModeViolation(f"Unsupported types were never declared supported: {names}")

    def _ensure_open(self, method: str) -> None:
        if self._state is not BuilderState.OPEN:
            raise BuilderStateError(
                f"{method}() called on a validated {self.store_kind} store configuration"
            )

    def _require_owner(self) -> "IdentityStoresConfigurationBuilder":
        if self._owner is None:
            raise BuilderStateError(
                f"{self.store_kind} store configuration is not attached to an identity stores builder"
            )
        return self._owner


def _require_types(types: Tuple[Any, ...]) -> Tuple[ManagedType, ...]:
    if len(types) == 1 and isinstance(types[0], (list, tuple, set, frozenset)):
        types = tuple(types[0])
    for managed_type in types:
        if managed_type is None:
            raise InvalidArgumentError("Attributed types")
        if not isinstance(managed_type, ManagedType):
            raise InvalidArgumentError("Attributed types", "must be ManagedType instances")
    return types


def _require_operations(operations: Tuple[Any, ...]) -> Tuple[Operation, ...]:
    if len(operations) == 1 and isinstance(operations[0], (list, tuple, set, frozenset)):
        operations = tuple(operations[0])
    resolved: List[Operation] = []
    for operation in operations:
        if operation is None:
            raise InvalidArgumentError("Operation")
        try:
            resolved.append(Operation(operation))
        except ValueError:
            raise InvalidArgumentError(
                "Operation", f"must be one of create, read, update, delete (got {operation!r})"
            ) from None
    return tuple(resolved)
