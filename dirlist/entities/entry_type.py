"""
Entry type domain entity.
"""

import stat
from enum import IntEnum
from typing import Union


class EntryType(IntEnum):
    """
    Kind of filesystem object a directory entry refers to.

    Values are the POSIX ``d_type`` bytes reported by ``readdir``.
    """

    UNKNOWN = 0
    NAMED_PIPE = 1
    CHARACTER_DEVICE = 2
    DIRECTORY = 4
    BLOCK_DEVICE = 6
    REGULAR_FILE = 8
    SYMLINK = 10
    SOCKET = 12

    @classmethod
    def from_value(cls, value: Union["EntryType", int]) -> "EntryType":
        """
        Map a raw ``d_type`` value to an entry type.

        Args:
            value: Raw type byte or an existing EntryType

        Returns:
            The matching EntryType, or UNKNOWN for values outside the defined set
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return cls.UNKNOWN

    @classmethod
    def from_mode(cls, mode: int) -> "EntryType":
        """
        Map an ``st_mode`` value (as returned by ``os.lstat``) to an entry type.

        Args:
            mode: File mode bits

        Returns:
            The matching EntryType, or UNKNOWN for unrecognized formats
        """
        return _MODE_FORMATS.get(stat.S_IFMT(mode), cls.UNKNOWN)

    @property
    def option_name(self) -> str:
        """Lower-case, dash separated name used on the command line."""
        return self.name.lower().replace("_", "-")


_MODE_FORMATS = {
    stat.S_IFIFO: EntryType.NAMED_PIPE,
    stat.S_IFCHR: EntryType.CHARACTER_DEVICE,
    stat.S_IFDIR: EntryType.DIRECTORY,
    stat.S_IFBLK: EntryType.BLOCK_DEVICE,
    stat.S_IFREG: EntryType.REGULAR_FILE,
    stat.S_IFLNK: EntryType.SYMLINK,
    stat.S_IFSOCK: EntryType.SOCKET,
}

_SHORT_NAMES = {
    EntryType.BLOCK_DEVICE: "block-device-type",
    EntryType.CHARACTER_DEVICE: "character-device-type",
    EntryType.DIRECTORY: "directory-type",
    EntryType.NAMED_PIPE: "named-pipe-type",
    EntryType.SYMLINK: "symlink-type",
    EntryType.REGULAR_FILE: "regular-file-type",
    EntryType.SOCKET: "socket-type",
    EntryType.UNKNOWN: "unknown-type",
}

_LONG_DESCRIPTIONS = {
    EntryType.BLOCK_DEVICE: "Block Device",
    EntryType.CHARACTER_DEVICE: "Character Device",
    EntryType.DIRECTORY: "Directory",
    EntryType.NAMED_PIPE: "Named Pipe",
    EntryType.SYMLINK: "Symbolic Link",
    EntryType.REGULAR_FILE: "Regular File",
    EntryType.SOCKET: "UNIX Domain Socket",
    EntryType.UNKNOWN: "Unknown File Type",
}


def describe_type(entry_type: EntryType | int) -> str:
    """Return the short symbolic name of an entry type, e.g. ``directory-type``."""
    return _SHORT_NAMES[EntryType.from_value(entry_type)]


def describe_type_long(entry_type: EntryType | int) -> str:
    """Return a human-readable phrase for an entry type, e.g. ``Regular File``."""
    return _LONG_DESCRIPTIONS[EntryType.from_value(entry_type)]


def parse_entry_type(name: str) -> EntryType:
    """
    Parse a command-line type name such as ``regular-file`` into an EntryType.

    Raises:
        ValueError: If the name does not match any entry type
    """
    normalized = name.strip().lower().replace("_", "-")
    for entry_type in EntryType:
        if entry_type.option_name == normalized:
            return entry_type
    raise ValueError(f"Unknown entry type: {name}")
