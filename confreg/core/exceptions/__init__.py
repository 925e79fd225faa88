"""
Core exceptions for the confreg package.

This module provides all exception classes used throughout confreg,
with a clear inheritance hierarchy.
"""

# Base exceptions
from .base import (
    ConfregError,
    ConfigurationError,
    NotFoundError
)

# Registry and provider exceptions
from .configuration import (
    ProviderNotConfiguredError,
    ProviderAlreadySetError,
    ConfigStorageError,
    FrozenItemError,
    IniReadError,
    GetError,
    SectionNotFoundError,
    OptionNotFoundError,
    ValueParseError,
    MaxDepthReachedError,
    ItemNotFoundError,
    DuplicateKeyError,
    DuplicateItemError,
    RegistrationError
)

__all__ = [
    # Base exceptions
    'ConfregError',
    'ConfigurationError',
    'NotFoundError',
    
    # Registry and provider exceptions
    'ProviderNotConfiguredError',
    'ProviderAlreadySetError',
    'ConfigStorageError',
    'FrozenItemError',
    'IniReadError',
    'GetError',
    'SectionNotFoundError',
    'OptionNotFoundError',
    'ValueParseError',
    'MaxDepthReachedError',
    'ItemNotFoundError',
    'DuplicateKeyError',
    'DuplicateItemError',
    'RegistrationError'
]
