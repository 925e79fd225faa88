"""
Configuration registry and providers.

This module provides:
- Core registry, item and provider infrastructure
- File (INI) and environment variable providers
"""

from typing import Optional

# Core infrastructure
from .core import (
    DEFAULT_SECTION, ConfigurationItem, ConfigurationItemContainer, StaticItemContainer,
    ConfigRegistry, ConfigProvider, RuntimeConfigProvider
)

# Providers
from .providers import IniConfigProvider, EnvConfigProvider

from confreg.settings import Config


# Convenience functions
def create_ini_registry(ini_path: Optional[str] = None) -> ConfigRegistry:
    """Create a registry backed by an INI file, defaulting to ``Config.INI_PATH``."""
    return ConfigRegistry(IniConfigProvider(ini_path or Config.INI_PATH))


__all__ = [
    # Core infrastructure
    'DEFAULT_SECTION',
    'ConfigurationItem',
    'ConfigurationItemContainer',
    'StaticItemContainer',
    'ConfigRegistry',
    'ConfigProvider',
    'RuntimeConfigProvider',

    # Providers
    'IniConfigProvider',
    'EnvConfigProvider',

    # Convenience functions
    'create_ini_registry'
]
