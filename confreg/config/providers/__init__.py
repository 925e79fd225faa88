"""
Concrete configuration providers.

- IniConfigProvider: values persisted in an INI file
- EnvConfigProvider: values held in environment variables
"""

from .ini import IniConfigProvider, strip_comments
from .env import EnvConfigProvider

__all__ = [
    'IniConfigProvider',
    'EnvConfigProvider',
    'strip_comments'
]
