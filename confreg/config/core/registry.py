"""
Configuration registry for declared configuration items.

The registry holds every item declared by the application's modules, indexed
both by registration key and by (section, name), and forwards value storage
and retrieval to a single provider. One registry is built by the entry point
and passed to the modules that need configuration access.
"""

from typing import Any, Dict, List, Optional

from .item import ConfigurationItem, ConfigurationItemContainer
from .provider import ConfigProvider, ItemCollection
from confreg.core.exceptions import (
    ConfregError,
    DuplicateItemError,
    DuplicateKeyError,
    ItemNotFoundError,
    ProviderAlreadySetError,
    ProviderNotConfiguredError,
    RegistrationError
)
from confreg.logger import get_confreg_logger


class ConfigRegistry:
    """
    Central registry for declared configuration items.

    A provider must be installed, either at construction or through
    ``set_provider``, before ``initialize`` or any value operation is used.
    Registration does not need a provider.
    """

    def __init__(self, provider: Optional[ConfigProvider] = None):
        self.logger = get_confreg_logger().bind(component="ConfigRegistry")

        self._provider: Optional[ConfigProvider] = None
        self._items: Dict[str, ConfigurationItem] = {}
        self._collection: ItemCollection = {}

        if provider is not None:
            self.set_provider(provider)

    @property
    def provider(self) -> Optional[ConfigProvider]:
        return self._provider

    def set_provider(self, provider: ConfigProvider):
        """
        Install the provider backing this registry.

        Raises:
            ProviderAlreadySetError: If a provider was installed before
        """
        if self._provider is not None:
            raise ProviderAlreadySetError(type(self._provider).__name__)

        self._provider = provider
        self.logger.info("Provider installed", provider_type=type(provider).__name__)

    def register_items(self, container: ConfigurationItemContainer):
        """
        Register every item declared by ``container``.

        All collisions in the batch are collected and raised together once
        the batch is done; items that did not collide stay registered.

        Raises:
            RegistrationError: If any key or (section, name) pair was already taken
        """
        errors: List[ConfregError] = []

        for key, item in container.get_configuration_items().items():
            errors.extend(self._add_item(key, item))

        if errors:
            self.logger.error("Configuration items rejected", errors=[str(e) for e in errors])
            raise RegistrationError(errors)

    def register_item(self, key: str, item: ConfigurationItem):
        """
        Register a single item.

        Raises:
            DuplicateKeyError: If ``key`` is taken
            DuplicateItemError: If the item's (section, name) pair is taken
            RegistrationError: If both are taken
        """
        errors = self._add_item(key, item)
        if len(errors) == 1:
            raise errors[0]
        if errors:
            raise RegistrationError(errors)

    def initialize(self):
        """Let the provider prepare its storage for the registered items."""
        provider = self._require_provider()
        self.logger.info("Initializing configuration", items=len(self._items))
        provider.initialize(self._collection)

    def set_value(self, key: str, value: Any):
        provider = self._require_provider()
        provider.set_value(self.get_item(key), value)

    def get_string(self, key: str) -> str:
        provider = self._require_provider()
        return provider.get_string(self.get_item(key))

    def get_int(self, key: str) -> int:
        provider = self._require_provider()
        return provider.get_int(self.get_item(key))

    def get_float(self, key: str) -> float:
        provider = self._require_provider()
        return provider.get_float(self.get_item(key))

    def get_bool(self, key: str) -> bool:
        provider = self._require_provider()
        return provider.get_bool(self.get_item(key))

    def get_item(self, key: str) -> ConfigurationItem:
        """
        Get the item registered under ``key``.

        Raises:
            ItemNotFoundError: If nothing is registered under ``key``
        """
        try:
            return self._items[key]
        except KeyError:
            raise ItemNotFoundError(key) from None

    def get_collection(self) -> ItemCollection:
        """Registered items grouped by section, then by item name."""
        return self._collection

    def keys(self) -> List[str]:
        return list(self._items.keys())

    def __contains__(self, key: str) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def _require_provider(self) -> ConfigProvider:
        if self._provider is None:
            raise ProviderNotConfiguredError()
        return self._provider

    def _add_item(self, key: str, item: ConfigurationItem) -> List[ConfregError]:
        """
        Check and insert one item. Returns the collisions found, empty on success.

        Both checks always run so every collision is reported, but the item
        goes into neither map unless both pass. A key collision therefore never
        leaves the item in the section map (or the reverse), and the two maps
        always hold the same items.
        """
        errors: List[ConfregError] = []
        section = item.storage_section
        name = item.storage_name

        if key in self._items:
            errors.append(DuplicateKeyError(key))

        section_map = self._collection.get(section, {})
        if name in section_map:
            errors.append(DuplicateItemError(key, item.section, item.name))

        if errors:
            return errors

        self._items[key] = item
        self._collection.setdefault(section, {})[name] = item
        item.freeze()
        self.logger.debug("Configuration item registered", key=key, section=section, name=name)
        return errors
