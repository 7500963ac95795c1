#!/usr/bin/env python3
"""
Configuration for Aphairesis

Holds the run settings that select between confirmation modes and display
variants. Built once from the command line at startup and never persisted.
"""

from dataclasses import dataclass

from auxiliary import DEFAULT_TIMESTAMP_FORMAT


@dataclass
class RemoverConfig:
    """Configuration for a single Aphairesis run"""

    bulk_mode: bool = False
    binary_units: bool = True
    warn_on_listing_errors: bool = True
    confirm_scan: bool = True
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    name_max_length: int = 60

    @classmethod
    def from_args(cls, args) -> "RemoverConfig":
        """Create from parsed command line arguments"""
        return cls(bulk_mode=bool(getattr(args, "all", False)))

    @classmethod
    def default(cls) -> "RemoverConfig":
        """Create default configuration"""
        return cls()
