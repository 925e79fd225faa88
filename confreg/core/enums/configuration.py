"""
Configuration-related enums for the confreg package.
"""

from enum import Enum


class GetErrorReason(Enum):
    """Why a value lookup failed."""
    SECTION_NOT_FOUND = "section_not_found"
    OPTION_NOT_FOUND = "option_not_found"
    MAX_DEPTH_REACHED = "max_depth_reached"
    COULD_NOT_PARSE = "could_not_parse"


class ReadErrorReason(Enum):
    """Why an INI file could not be read."""
    BLANK_SECTION = "blank_section"
    COULD_NOT_PARSE = "could_not_parse"
