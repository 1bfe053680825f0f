"""Custom exception types for bibscan operations."""


class BibscanError(Exception):
    """Base exception for all bibscan operations."""


class ScanError(BibscanError):
    """Raised when an entry cannot be scanned into tokens."""


class UnterminatedContentError(ScanError):
    """Raised when input ends with characters that were never closed into a token."""

    def __init__(self, remaining: str) -> None:
        super().__init__(f"Unterminated content at end of input: {remaining!r}")
        self.remaining = remaining


class InvalidDataError(BibscanError):
    """Raised when serialized token data fails validation."""
