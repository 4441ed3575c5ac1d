"""Exceptions raised while checking bond files."""

from typing import Optional


class BondCheckError(Exception):
    """Base exception for all bond checking errors."""


class MissingInputError(BondCheckError):
    """Raised when the user file or the draw file is missing."""

    def __init__(self, message: str = "Both files are required"):
        super().__init__(message)


class UnsupportedFormatError(BondCheckError):
    """Raised when a file extension is not a recognized bond list format."""

    def __init__(self, extension: str, filename: Optional[str] = None):
        self.extension = extension
        self.filename = filename
        super().__init__(f"Unsupported file type: {extension or '(none)'}")


class ParseFailureError(BondCheckError):
    """Raised when the underlying format reader fails on a file."""

    def __init__(self, filename: str, cause: Exception):
        self.filename = filename
        self.cause = cause
        super().__init__(f"Failed to parse {filename}: {cause}")


class FileTooLargeError(BondCheckError):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, filename: str, limit: int):
        self.filename = filename
        self.limit = limit
        super().__init__(f"File {filename} exceeds the upload limit of {limit} bytes")
