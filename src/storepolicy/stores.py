"""Store-specific configuration builders and the aggregator that owns them."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple, Type, TypeVar

from storepolicy.builder import StoreConfigurationBuilder
from storepolicy.constants import (
    NO_STORES_MESSAGE,
    STORE_KIND_DATABASE,
    STORE_KIND_DIRECTORY,
    STORE_KIND_FILE,
)
from storepolicy.errors import ConfigurationError
from storepolicy.policy import StorePolicy

logger = logging.getLogger(__name__)

_B = TypeVar("_B", bound=StoreConfigurationBuilder)


class FileStoreConfigurationBuilder(StoreConfigurationBuilder):
    store_kind = STORE_KIND_FILE


class DatabaseStoreConfigurationBuilder(StoreConfigurationBuilder):
    store_kind = STORE_KIND_DATABASE


class DirectoryStoreConfigurationBuilder(StoreConfigurationBuilder):
    store_kind = STORE_KIND_DIRECTORY


class IdentityStoresConfigurationBuilder:
    """Owns one configuration builder per store kind.

    Sub-builders are created on first navigation and handed a reference to
    this aggregator so they can navigate back to their siblings.
    """

    def __init__(self, strict: Optional[bool] = None) -> None:
        self._strict = strict
        self._builders: Dict[str, StoreConfigurationBuilder] = {}

    def file(self) -> FileStoreConfigurationBuilder:
        return self._builder(FileStoreConfigurationBuilder)

    def database(self) -> DatabaseStoreConfigurationBuilder:
        return self._builder(DatabaseStoreConfigurationBuilder)

    def directory(self) -> DirectoryStoreConfigurationBuilder:
        return self._builder(DirectoryStoreConfigurationBuilder)

    @property
    def builders(self) -> Tuple[StoreConfigurationBuilder, ...]:
        return tuple(self._builders.values())

    def build(self) -> Tuple[StorePolicy, ...]:
        """Validate every configured store and return their resolved policies."""

        if not self._builders:
            raise ConfigurationError(NO_STORES_MESSAGE)
        # Check every store before sealing any of them.
        for builder in self._builders.values():
            builder.check()
        for builder in self._builders.values():
            builder.validate()
        policies = tuple(builder.create() for builder in self._builders.values())
        logger.debug("built %d identity store policies", len(policies))
        return policies

    def _builder(self, builder_cls: Type[_B]) -> _B:
        builder = self._builders.get(builder_cls.store_kind)
        if builder is None:
            builder = builder_cls(owner=self, strict=self._strict)
            self._builders[builder_cls.store_kind] = builder
        return builder  # type: ignore[return-value]
