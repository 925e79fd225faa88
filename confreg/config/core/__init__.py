"""
Core configuration management components.

This module provides the foundational components for configuration management:
- ConfigurationItem: A declared, typed configuration slot
- ConfigRegistry: Central registry for declared items
- ConfigProvider: Abstract provider interface and the in-memory implementation
"""

from .item import (
    DEFAULT_SECTION, ConfigurationItem, ConfigurationItemContainer, StaticItemContainer,
    normalize_section, normalize_option
)
from .provider import (
    ConfigProvider, RuntimeConfigProvider, ItemCollection, BOOL_STRINGS, format_value
)
from .registry import ConfigRegistry

__all__ = [
    # Items
    'DEFAULT_SECTION',
    'ConfigurationItem',
    'ConfigurationItemContainer',
    'StaticItemContainer',
    'normalize_section',
    'normalize_option',

    # Registry
    'ConfigRegistry',

    # Providers
    'ConfigProvider',
    'RuntimeConfigProvider',
    'ItemCollection',
    'BOOL_STRINGS',
    'format_value'
]
