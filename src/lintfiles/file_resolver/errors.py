"""
Exceptions raised during file resolution.

Filesystem faults are not wrapped: `OSError` and its subclasses propagate
unchanged from the underlying calls.
"""


class FileResolverError(Exception):
    """Base exception for all file resolution errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown file resolution error occurred."


class IgnoreFileError(FileResolverError):
    """Raised when an ignore file cannot be read or holds an invalid rule."""

    @property
    def default_message(self) -> str:
        return "Cannot read ignore file."
