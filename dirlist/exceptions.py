"""
Custom exceptions for the directory listing library.
"""


class DirlistError(Exception):
    """Base exception class for directory listing errors."""

    pass


class DirectoryReadError(DirlistError):
    """Exception raised when a directory cannot be opened or enumerated."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class AllocationError(DirlistError):
    """Exception raised when storage for a collection cannot be allocated."""

    pass


class PreconditionError(DirlistError, ValueError):
    """Exception raised when an operation is called with invalid arguments."""

    pass


class CollectionReleasedError(DirlistError):
    """Exception raised when a released collection is used again."""

    pass


class ConfigurationError(DirlistError):
    """Exception raised for configuration errors."""

    pass
