"""
Declared configuration items.

Modules describe the settings they need as ``ConfigurationItem`` objects and
hand them to the registry through a ``ConfigurationItemContainer``.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from confreg.core.exceptions import FrozenItemError

# Default section name (must be lower-case).
DEFAULT_SECTION = "default"


def normalize_section(section: str) -> str:
    """Fold a section name to its storage form."""
    if not section:
        return DEFAULT_SECTION
    return section.lower()


def normalize_option(option: str) -> str:
    """Fold an option name to its storage form."""
    return option.lower()


class ConfigurationItem:
    """
    A declared configuration slot.

    ``section`` and ``name`` identify the item inside the provider. They are
    frozen once the item is registered, since the registry indexes items by
    them. ``friendly_name`` and ``default_value`` may change at any time.
    """

    def __init__(self, section: str, name: str, friendly_name: str = "", default_value: Any = None):
        self._section = section
        self._name = name
        self.friendly_name = friendly_name or name
        self.default_value = default_value
        self._frozen = False

    @property
    def section(self) -> str:
        return self._section

    @section.setter
    def section(self, value: str):
        if self._frozen:
            raise FrozenItemError("section", self._section, self._name)
        self._section = value

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        if self._frozen:
            raise FrozenItemError("name", self._section, self._name)
        self._name = value

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self):
        """Lock ``section`` and ``name``. Called by the registry on registration."""
        self._frozen = True

    @property
    def storage_section(self) -> str:
        return normalize_section(self._section)

    @property
    def storage_name(self) -> str:
        return normalize_option(self._name)

    def __repr__(self):
        return (f"ConfigurationItem(section={self._section!r}, name={self._name!r}, "
                f"default_value={self.default_value!r})")


class ConfigurationItemContainer(ABC):
    """Anything that declares a batch of items for registration."""

    @abstractmethod
    def get_configuration_items(self) -> Dict[str, ConfigurationItem]:
        """Return the items to register, keyed by registration key."""
        pass


class StaticItemContainer(ConfigurationItemContainer):
    """Container over a fixed mapping of registration key to item."""

    def __init__(self, items: Dict[str, ConfigurationItem]):
        self._items = dict(items)

    def get_configuration_items(self) -> Dict[str, ConfigurationItem]:
        return self._items
