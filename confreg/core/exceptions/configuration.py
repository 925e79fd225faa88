"""
Registry and provider exceptions for the confreg package.

Two tiers are used. Setup misuse and unreadable storage raise
``ConfigurationError`` subclasses that callers are not expected to recover
from. Lookups, parsing and registration collisions raise errors that the
caller inspects and handles.
"""

from typing import List, Optional

from .base import ConfregError, ConfigurationError, NotFoundError
from ..enums import GetErrorReason, ReadErrorReason


# Setup / fatal errors
class ProviderNotConfiguredError(ConfigurationError):
    """Raised when the registry is used before a provider is installed."""
    
    def __init__(self):
        super().__init__(
            reason="No configuration provider defined. Use set_provider to set one."
        )


class ProviderAlreadySetError(ConfigurationError):
    """Raised when a second provider is installed on the same registry."""
    
    def __init__(self, provider_type: str = None):
        self.provider_type = provider_type
        super().__init__(config_value=provider_type, reason="configuration provider has already been set")


class ConfigStorageError(ConfigurationError):
    """Raised when the backing storage cannot be opened or written."""
    
    def __init__(self, path: str, error: Exception = None):
        self.path = path
        self.error = error
        reason = f"unable to access configuration storage '{path}'"
        if error is not None:
            reason += f" ({error})"
        super().__init__(reason=reason)


class FrozenItemError(ConfigurationError):
    """Raised when the identity of a registered item is changed."""
    
    def __init__(self, attribute: str, section: str, name: str):
        self.attribute = attribute
        self.section = section
        self.name = name
        super().__init__(
            config_key=f"{section}.{name}",
            reason=f"'{attribute}' cannot be changed once the item is registered"
        )


class IniReadError(ConfregError):
    """Raised when an INI file cannot be parsed."""
    
    def __init__(self, reason: ReadErrorReason, line: str = "", path: Optional[str] = None):
        self.reason = reason
        self.line = line
        self.path = path
        if reason is ReadErrorReason.BLANK_SECTION:
            message = "empty section name not allowed"
        else:
            message = f"could not parse line: {line}"
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


# Lookup errors
class GetError(ConfregError):
    """Base exception for value lookup failures."""
    
    reason: GetErrorReason = None
    
    def __init__(self, message: str, section: str = "", option: str = ""):
        self.section = section
        self.option = option
        super().__init__(message)


class SectionNotFoundError(GetError):
    """Raised when a section does not exist."""
    
    reason = GetErrorReason.SECTION_NOT_FOUND
    
    def __init__(self, section: str, option: str = ""):
        super().__init__(f"section '{section}' not found", section, option)


class OptionNotFoundError(GetError):
    """Raised when an option does not exist in an existing section."""
    
    reason = GetErrorReason.OPTION_NOT_FOUND
    
    def __init__(self, section: str, option: str):
        super().__init__(f"option '{option}' not found in section '{section}'", section, option)


class ValueParseError(GetError):
    """Raised when a stored value cannot be parsed as the requested type."""
    
    reason = GetErrorReason.COULD_NOT_PARSE
    
    def __init__(self, value_type: str, value: str, section: str, option: str):
        self.value_type = value_type
        self.value = value
        super().__init__(
            f"could not parse {value_type} value '{value}' (section '{section}', option '{option}')",
            section, option
        )


class MaxDepthReachedError(GetError):
    """Raised when option references keep expanding past the depth limit."""
    
    reason = GetErrorReason.MAX_DEPTH_REACHED
    
    def __init__(self, section: str, option: str, depth: int):
        self.depth = depth
        super().__init__(
            f"possible cycle while unfolding variables: max depth of {depth} reached",
            section, option
        )


class ItemNotFoundError(NotFoundError):
    """Raised when no item is registered under a key."""
    
    def __init__(self, key: str):
        self.key = key
        super().__init__("ConfigurationItem", key)


# Registration errors
class DuplicateKeyError(ConfregError):
    """Raised when a registration key is already taken."""
    
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"ConfigurationItem with key '{key}' has already been added.")


class DuplicateItemError(ConfregError):
    """Raised when a (section, name) pair is already registered."""
    
    def __init__(self, key: str, section: str, name: str):
        self.key = key
        self.section = section
        self.name = name
        super().__init__(f"ConfigurationItem '{name}' in section '{section}' already exists.")


class RegistrationError(ConfregError):
    """Aggregate of every collision found while registering a batch."""
    
    def __init__(self, errors: List[ConfregError]):
        self.errors = list(errors)
        super().__init__("\n".join(str(e) for e in self.errors))
    
    @property
    def keys(self) -> List[str]:
        """Keys of the items that were rejected."""
        return [e.key for e in self.errors]
