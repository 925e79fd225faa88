"""
Core enums for the confreg package.
"""

from .configuration import (
    GetErrorReason,
    ReadErrorReason
)

__all__ = [
    'GetErrorReason',
    'ReadErrorReason'
]
