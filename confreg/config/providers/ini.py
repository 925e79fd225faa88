"""
INI file backed configuration provider.

File format::

    [section]
    option=value
    other: value ; inline comment
    multiline=first line
    second line

    [other section]
    ...

Section and option names are case-insensitive and stored lowercased. Lines
starting with ``#``, ``;`` or ``rem`` are comments; `` ;``/`` #`` (space or
tab before the marker) start an inline comment. A line without a separator
continues the value of the previous option.
"""

import os
import re
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from confreg.config.core.item import DEFAULT_SECTION, ConfigurationItem, normalize_option
from confreg.config.core.provider import ItemCollection, RuntimeConfigProvider
from confreg.core.enums import ReadErrorReason
from confreg.core.exceptions import ConfigStorageError, IniReadError, MaxDepthReachedError

# Created files are world readable/writable, subject to the process umask.
FILE_MODE = 0o777

# Maximum allowed depth when recursively substituting option references.
MAX_EXPANSION_DEPTH = 200

COMMENT_PREFIXES = ("#", ";")
INLINE_COMMENT_MARKERS = (" ;", "\t;", " #", "\t#")

_SEPARATOR = re.compile(r"[=:]")
_REFERENCE = re.compile(r"%\(([a-zA-Z0-9_.\-]+)\)s")


def strip_comments(line: str) -> str:
    """Cut an inline comment off ``line``. Markers must follow whitespace."""
    for marker in INLINE_COMMENT_MARKERS:
        index = line.find(marker)
        if index != -1:
            line = line[:index]
    return line


class IniConfigProvider(RuntimeConfigProvider):
    """
    File-based configuration provider that reads and writes an INI file.

    The in-memory ``data`` map mirrors the file after every write. The whole
    file is rewritten on each ``set_value``.
    """

    def __init__(self, ini_path: Union[str, Path], name: str = "ini"):
        super().__init__(name=name)
        self.ini_path = Path(ini_path)

    def initialize(self, collection: ItemCollection) -> int:
        """
        Load the file, creating it if absent, and seed declared defaults.

        The file is only rewritten when at least one default was added.

        Returns:
            Number of options seeded from defaults

        Raises:
            ConfigStorageError: If the file cannot be opened
            IniReadError: If the file is malformed
        """
        self.reload()

        added = self._seed_defaults(collection)
        if added:
            self.write()

        self.logger.info("INI configuration initialized", path=str(self.ini_path), seeded=added)
        return added

    def reload(self):
        """Replace the in-memory state with the file contents."""
        with self._open(os.O_RDONLY, "r") as f:
            self.read(f)

    def set_value(self, item: ConfigurationItem, value: Any):
        super().set_value(item, value)
        self.write()

    def get_expanded_string(self, item: ConfigurationItem) -> str:
        """
        Get the value of ``item`` with ``%(option)s`` references substituted.

        References resolve against the item's section first, then the default
        section. Unknown references are left untouched.

        Raises:
            MaxDepthReachedError: If references keep resolving past the depth limit
        """
        section = item.storage_section
        value = self.get_raw_string(item.section, item.name)

        for _ in range(MAX_EXPANSION_DEPTH):
            resolved = False

            def substitute(match):
                nonlocal resolved
                reference = self._find_reference(section, match.group(1))
                if reference is None:
                    return match.group(0)
                resolved = True
                return reference

            value = _REFERENCE.sub(substitute, value)
            if not resolved:
                return value

        raise MaxDepthReachedError(section, item.storage_name, MAX_EXPANSION_DEPTH)

    def read(self, lines: Iterable[str]):
        """
        Parse INI ``lines`` and replace ``data`` with the result.

        ``data`` is left untouched when parsing fails.

        Raises:
            IniReadError: On an option outside any section or a malformed line
        """
        path = str(self.ini_path)
        parsed = RuntimeConfigProvider(name=self.name)
        section: Optional[str] = None
        option = ""

        for raw_line in lines:
            line = raw_line.strip()

            if not line:
                continue

            if line.startswith(COMMENT_PREFIXES) or line[:3].lower() == "rem":
                continue

            if line[0] == "[" and line[-1] == "]":
                option = ""  # reset multi-line value
                section = line[1:-1].strip()
                if section:
                    parsed.add_section(section)
                continue

            if not section:
                self.logger.error("Option outside of a section", path=path, line=line)
                raise IniReadError(ReadErrorReason.BLANK_SECTION, line, path)

            match = _SEPARATOR.search(line)
            if match and match.start() > 0:
                option = line[:match.start()].strip()
                value = strip_comments(line[match.start() + 1:]).strip()
                parsed.add_option(section, option, value)
            elif option:
                previous = parsed.get_raw_string(section, option)
                value = strip_comments(line).strip()
                parsed.add_option(section, option, previous + "\n" + value)
            else:
                self.logger.error("Unparsable line", path=path, line=line)
                raise IniReadError(ReadErrorReason.COULD_NOT_PARSE, line, path)

        self.data = parsed.data

    def write(self):
        """Rewrite the whole file from ``data``."""
        lines: List[str] = []
        for section, options in self.data.items():
            if section == DEFAULT_SECTION and not options:
                continue  # skip default section if empty
            lines.append(f"[{section}]\n")
            for option, value in options.items():
                lines.append(f"{option}={value}\n")
            lines.append("\n")

        with self._open(os.O_WRONLY | os.O_TRUNC, "w") as f:
            f.write("".join(lines))

        self.logger.debug("INI file written", path=str(self.ini_path), sections=len(self.data))

    def _find_reference(self, section: str, name: str) -> Optional[str]:
        name = normalize_option(name)
        for candidate in (section, DEFAULT_SECTION):
            options = self.data.get(candidate, {})
            if name in options:
                return options[name]
        return None

    def _open(self, flags: int, mode: str):
        try:
            self.ini_path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self.ini_path, flags | os.O_CREAT, FILE_MODE)
        except OSError as e:
            self.logger.critical("Cannot open configuration file", path=str(self.ini_path), error=str(e))
            raise ConfigStorageError(str(self.ini_path), e) from e
        # Bytes that are not valid UTF-8 survive a read/write cycle unchanged.
        return open(fd, mode, encoding="utf-8", errors="surrogateescape")
