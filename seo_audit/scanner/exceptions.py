class ScannerError(Exception):
    """Base exception for all scanner-related errors."""


class DirectoryNotFoundError(ScannerError):
    """Raised when the scan root is missing or not a directory."""


class FileReadError(ScannerError):
    """Raised when a file cannot be read from disk."""
