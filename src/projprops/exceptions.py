"""Custom exception types for projprops operations."""


class ProjPropsError(Exception):
    """Base exception for all projprops operations."""


class FileOperationError(ProjPropsError):
    """Raised when file I/O operations fail."""


class ParseError(ProjPropsError):
    """Raised when a properties line is not a ``key=value`` pair."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(f"Line {line_number} is not a key=value pair: {line!r}")
        self.line_number = line_number
        self.line = line


class ReferenceNotFoundError(ProjPropsError):
    """Raised when a library reference to remove is not present."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Could not find library reference: {value}")
        self.value = value


class InvalidPropertyError(ProjPropsError, ValueError):
    """Raised when a key or value cannot be written as a single ``key=value`` line."""
