#!/usr/bin/env python3
"""
Entry Lister

Reads a single directory level and converts the raw filesystem entries into
immutable Entry values. Children whose metadata cannot be read are skipped
without aborting the listing.
"""

import os
import pathlib
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Optional


@dataclass(frozen=True)
class Entry:
    """One filesystem item discovered by a single listing pass"""

    path: pathlib.Path
    size: int
    is_directory: bool
    modified_at: datetime
    marked_for_deletion: bool = False

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def type_label(self) -> str:
        return "directory" if self.is_directory else "file"

    @property
    def short_label(self) -> str:
        return "Dir" if self.is_directory else "File"

    def marked(self) -> "Entry":
        """Return a copy of this entry marked for deletion"""
        if self.marked_for_deletion:
            return self
        return replace(self, marked_for_deletion=True)


def _entry_from_stat(path: pathlib.Path, stat_result: os.stat_result, is_directory: bool) -> Entry:
    return Entry(
        path=path,
        size=stat_result.st_size,
        is_directory=is_directory,
        modified_at=datetime.fromtimestamp(stat_result.st_mtime),
    )


def list_entries(
    directory: pathlib.Path, warning_callback: Optional[Callable[[str], None]] = None
) -> list[Entry]:
    """List the direct children of a directory

    Args:
        directory: Directory to read (not recursed into)
        warning_callback: Called with a message for every child whose
            metadata could not be read. Such children are skipped either way.

    Returns:
        Entries in the order the directory read produced them

    Raises:
        OSError: If the directory itself cannot be opened or read
    """
    entries: list[Entry] = []

    with os.scandir(directory) as it:
        for dir_entry in it:
            try:
                # Symlinks are never treated as directories, so removal
                # only ever takes the link itself
                is_directory = dir_entry.is_dir(follow_symlinks=False)
                stat_result = dir_entry.stat(follow_symlinks=False)
            except OSError as e:
                if warning_callback:
                    warning_callback(f"Could not get info for '{dir_entry.name}': {e}")
                continue

            entries.append(_entry_from_stat(pathlib.Path(directory) / dir_entry.name, stat_result, is_directory))

    return entries


def stat_entry(path: pathlib.Path) -> Entry:
    """Build an Entry for a single target path

    Symlinks are followed, so a linked file reports the size and time of
    the file it points to.

    Raises:
        OSError: If the metadata query fails
    """
    stat_result = path.stat()
    return _entry_from_stat(path, stat_result, path.is_dir())
