"""
Directory entry domain entity.
"""

from dataclasses import dataclass

from dirlist.entities.entry_type import EntryType, describe_type, describe_type_long
from dirlist.exceptions import PreconditionError


@dataclass
class DirectoryEntry:
    """One item of a directory as reported by the operating system."""

    name: str
    entry_type: EntryType = EntryType.UNKNOWN

    def __post_init__(self):
        if isinstance(self.entry_type, bool) or not isinstance(self.entry_type, int):
            raise PreconditionError(
                f"entry_type must be an EntryType or int, got {type(self.entry_type).__name__}"
            )
        self.entry_type = EntryType.from_value(self.entry_type)

    def copy(self) -> "DirectoryEntry":
        """Return an independent copy of this entry."""
        return DirectoryEntry(name=self.name, entry_type=self.entry_type)

    def is_type(self, entry_type: EntryType) -> bool:
        return self.entry_type == entry_type

    def to_display(self) -> str:
        """
        Return the display form with undecodable name bytes replaced by U+FFFD.

        ``os.scandir`` keeps non UTF-8 bytes of a file name as lone surrogates,
        which cannot be written to a text stream. ``name`` itself is left as is.
        """
        return str(self).encode("utf-8", "surrogateescape").decode("utf-8", "replace")

    def __str__(self) -> str:
        """Display form: ``<name> [<short name>/<long description>]``."""
        return (
            f"{self.name} "
            f"[{describe_type(self.entry_type)}/{describe_type_long(self.entry_type)}]"
        )
