"""
Environment variable backed configuration provider.
"""

import os
import re
from typing import Any, MutableMapping, Optional

from confreg.config.core.item import ConfigurationItem, normalize_option, normalize_section
from confreg.config.core.provider import ConfigProvider, ItemCollection, format_value
from confreg.core.exceptions import OptionNotFoundError

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]")


class EnvConfigProvider(ConfigProvider):
    """
    Provider storing each item in an environment variable.

    The variable for an item is ``<prefix><SECTION>_<NAME>``, upper-cased,
    with any non-alphanumeric character replaced by ``_``. Sections have no
    existence of their own here, so only ``OptionNotFoundError`` is raised on
    lookups.
    """

    def __init__(self, prefix: str = "CONFREG_", environ: Optional[MutableMapping[str, str]] = None):
        super().__init__("env")
        self.prefix = prefix
        self.environ = environ if environ is not None else os.environ

    def variable_name(self, section: str, option: str) -> str:
        section = _UNSAFE_CHARS.sub("_", normalize_section(section))
        option = _UNSAFE_CHARS.sub("_", normalize_option(option))
        return f"{self.prefix}{section}_{option}".upper()

    def initialize(self, collection: ItemCollection) -> int:
        """Export the default of every declared item whose variable is unset."""
        added = 0
        for section, items in collection.items():
            for item in items.values():
                variable = self.variable_name(section, item.name)
                if variable not in self.environ:
                    self.environ[variable] = format_value(item.default_value)
                    added += 1

        self.logger.info("Environment configuration initialized", prefix=self.prefix, seeded=added)
        return added

    def set_value(self, item: ConfigurationItem, value: Any):
        self.environ[self.variable_name(item.section, item.name)] = format_value(value)

    def get_raw_string(self, section: str, option: str) -> str:
        variable = self.variable_name(section, option)
        try:
            return self.environ[variable].strip()
        except KeyError:
            raise OptionNotFoundError(normalize_section(section), normalize_option(option)) from None
