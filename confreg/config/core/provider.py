"""
Configuration provider base classes and implementations.

A provider stores the values behind the items declared in a registry. The
registry only ever talks to the ``ConfigProvider`` interface, so providers
are swappable without touching the registry.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from confreg.config.core.item import ConfigurationItem, normalize_option, normalize_section
from confreg.core.exceptions import (
    OptionNotFoundError,
    SectionNotFoundError,
    ValueParseError
)
from confreg.logger import get_confreg_logger

# Section -> item name -> item, as handed over by the registry.
ItemCollection = Dict[str, Dict[str, ConfigurationItem]]

# Strings accepted as bool.
BOOL_STRINGS = {
    "t": True,
    "true": True,
    "y": True,
    "yes": True,
    "on": True,
    "1": True,
    "f": False,
    "false": False,
    "n": False,
    "no": False,
    "off": False,
    "0": False,
}

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE
)


def format_value(value: Any) -> str:
    """Render a value the way it is stored."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_int(value: str, section: str, option: str) -> int:
    if not _INT_PATTERN.fullmatch(value):
        raise ValueParseError("int", value, section, option)
    return int(value)


def parse_float(value: str, section: str, option: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(value):
        raise ValueParseError("float", value, section, option)
    return float(value)


def parse_bool(value: str, section: str, option: str) -> bool:
    try:
        return BOOL_STRINGS[value.lower()]
    except KeyError:
        raise ValueParseError("bool", value, section, option) from None


class ConfigProvider(ABC):
    """
    Abstract base class for configuration providers.

    Subclasses store raw strings and implement ``initialize``, ``set_value``
    and ``get_raw_string``. The typed getters are shared and parse the raw
    string, raising ``ValueParseError`` without touching stored state.
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = get_confreg_logger().bind(component=f"ConfigProvider_{name}")

    @abstractmethod
    def initialize(self, collection: ItemCollection):
        """Prepare storage and seed defaults for every declared item."""
        pass

    @abstractmethod
    def set_value(self, item: ConfigurationItem, value: Any):
        """Store ``value`` for ``item``."""
        pass

    @abstractmethod
    def get_raw_string(self, section: str, option: str) -> str:
        """Return the stored string for ``option`` in ``section``."""
        pass

    def get_string(self, item: ConfigurationItem) -> str:
        return self.get_raw_string(item.section, item.name)

    def get_int(self, item: ConfigurationItem) -> int:
        raw = self.get_raw_string(item.section, item.name)
        return parse_int(raw, item.section, item.name)

    def get_float(self, item: ConfigurationItem) -> float:
        raw = self.get_raw_string(item.section, item.name)
        return parse_float(raw, item.section, item.name)

    def get_bool(self, item: ConfigurationItem) -> bool:
        raw = self.get_raw_string(item.section, item.name)
        return parse_bool(raw, item.section, item.name)


class RuntimeConfigProvider(ConfigProvider):
    """
    Runtime configuration provider that keeps config in memory.

    Values live in ``data``, a map of lowercased section names to maps of
    lowercased option names to raw strings.
    """

    def __init__(self, initial_data: Optional[Dict[str, Dict[str, Any]]] = None, name: str = "runtime"):
        super().__init__(name)
        self.data: Dict[str, Dict[str, str]] = {}
        for section, options in (initial_data or {}).items():
            self.add_section(section)
            for option, value in options.items():
                self.add_option(section, option, format_value(value))

    def initialize(self, collection: ItemCollection):
        """Seed every declared item missing from memory with its default."""
        added = self._seed_defaults(collection)
        self.logger.debug("Provider initialized", seeded=added)
        return added

    def set_value(self, item: ConfigurationItem, value: Any):
        section = item.storage_section
        option = item.storage_name

        if section not in self.data:
            self.logger.warning("Section not found", section=section, option=option)
            raise SectionNotFoundError(section, option)

        self.data[section][option] = format_value(value)

    def get_raw_string(self, section: str, option: str) -> str:
        section = normalize_section(section)
        option = normalize_option(option)

        if section not in self.data:
            raise SectionNotFoundError(section, option)
        if option not in self.data[section]:
            raise OptionNotFoundError(section, option)
        return self.data[section][option]

    def add_section(self, section: str) -> bool:
        """
        Add a new section.

        Returns:
            True if the section was created, False if it already existed
        """
        section = normalize_section(section)

        if section in self.data:
            return False
        self.data[section] = {}
        return True

    def add_option(self, section: str, option: str, value: str) -> bool:
        """
        Add or overwrite an option, creating its section if needed.

        Returns:
            True if the option was inserted, False if an existing value was overwritten
        """
        self.add_section(section)

        section = normalize_section(section)
        option = normalize_option(option)

        inserted = option not in self.data[section]
        self.data[section][option] = value
        return inserted

    def sections(self) -> List[str]:
        return list(self.data.keys())

    def options(self, section: str) -> List[str]:
        section = normalize_section(section)
        if section not in self.data:
            raise SectionNotFoundError(section)
        return list(self.data[section].keys())

    def _seed_defaults(self, collection: ItemCollection) -> int:
        """Add defaults for declared items not present yet. Returns how many were added."""
        added = 0
        for section, items in collection.items():
            self.add_section(section)

            for item in items.values():
                if item.storage_name not in self.data[normalize_section(section)]:
                    self.add_option(section, item.name, format_value(item.default_value))
                    self.logger.debug("Seeded default value", section=section, option=item.storage_name)
                    added += 1
        return added
