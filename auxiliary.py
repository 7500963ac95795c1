#!/usr/bin/env python3
"""
Auxiliary utility functions for Aphairesis

Provides formatting helpers shared by the lister, the console UI and the
deletion report.
"""

import pathlib
from datetime import datetime
from typing import Optional

SIZE_UNITS = "KMGTPE"

DEFAULT_TIMESTAMP_FORMAT = "%b %d, %Y %H:%M"


def unit_exponent(size_bytes: int) -> tuple[float, int]:
    """Divide by 1024 until the quotient drops below 1024

    Args:
        size_bytes: Size in bytes

    Returns:
        Tuple of (quotient, number of divisions). The number of divisions
        never exceeds the length of SIZE_UNITS.
    """
    remaining = size_bytes
    exponent = 0
    while remaining >= 1024 and exponent < len(SIZE_UNITS):
        remaining //= 1024
        exponent += 1
    return size_bytes / 1024**exponent, exponent


def format_bytes(size_bytes: int, binary_units: bool = True) -> str:
    """Format byte size into human-readable string

    Args:
        size_bytes: Size in bytes to format
        binary_units: Use "KiB" style labels, otherwise "KB" (same 1024 divisor)

    Returns:
        Formatted string like "1.2 GiB", "345.0 MiB", "12.0 KiB", or "789 B"
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    value, exponent = unit_exponent(size_bytes)
    suffix = "iB" if binary_units else "B"
    return f"{value:.1f} {SIZE_UNITS[exponent - 1]}{suffix}"


def format_timestamp(moment: datetime, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """Format a modification time like "Jan 02, 2006 15:04" """
    return moment.strftime(fmt)


def format_path_for_display(path: str, home_path: Optional[str] = None) -> str:
    """Format file path for display by replacing home directory with ~

    Args:
        path: File path to format
        home_path: Home directory path (defaults to platform home)

    Returns:
        Path with home directory replaced by ~ if applicable
    """
    if home_path is None:
        home_path = str(pathlib.Path.home())

    if home_path in ("", "/"):
        return path
    if path == home_path or path.startswith(home_path.rstrip("/") + "/"):
        return "~" + path[len(home_path.rstrip("/")) :]
    return path


def truncate_path(path: str, max_length: int = 50) -> str:
    """Truncate long names for table display

    Args:
        path: Path or name to truncate
        max_length: Maximum length before truncation

    Returns:
        Truncated string with ... in the middle if too long
    """
    if len(path) <= max_length:
        return path

    available = max(max_length - 3, 0)  # "..."
    start_len = available // 2
    end_len = available - start_len
    tail = path[-end_len:] if end_len > 0 else ""

    return f"{path[:start_len]}...{tail}"
