"""BibTeX entry scanner package."""

import logging

from .config import ScannerConfig
from .exceptions import BibscanError, InvalidDataError, ScanError, UnterminatedContentError
from .scanner import Scanner, scan
from .tokens import Token, TokenKind, render_tokens

# Install a NullHandler to avoid emitting logs unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BibscanError",
    "InvalidDataError",
    "ScanError",
    "Scanner",
    "ScannerConfig",
    "Token",
    "TokenKind",
    "UnterminatedContentError",
    "render_tokens",
    "scan",
]
