"""Scanner configuration for bibscan operations."""

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class ScannerConfig:
    """Behaviour switches for the entry scanner."""

    track_brace_depth: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ScannerConfig":
        """Create configuration from parsed command-line arguments.

        Args:
            args: Namespace produced by the ``bibscan`` argument parser

        Returns:
            ScannerConfig with the switches the user enabled
        """
        return cls(track_brace_depth=getattr(args, "track_brace_depth", False))
