#!/usr/bin/env python3
"""
File Operations Module

Removes listed entries one at a time: directories recursively, everything
else directly. Each removal is independent; failures are recorded and the
batch moves on to the next entry.
"""

import shutil
from dataclasses import dataclass, field
from typing import Callable, Optional

from entry_lister import Entry


@dataclass
class OperationResult:
    """Result of removing one entry"""

    entry: Entry
    success: bool
    error_message: Optional[str] = None

    @property
    def identifier(self) -> str:
        return self.entry.name


@dataclass
class DeletionReport:
    """Outcome of a batch of removals"""

    successful: list[OperationResult] = field(default_factory=list)
    failed: list[OperationResult] = field(default_factory=list)
    requested_count: int = 0
    interrupted: bool = False

    @property
    def success_count(self) -> int:
        return len(self.successful)

    @property
    def failure_count(self) -> int:
        return len(self.failed)

    @property
    def attempted_count(self) -> int:
        return self.success_count + self.failure_count

    @property
    def untouched_count(self) -> int:
        return self.requested_count - self.attempted_count

    def failure_details(self) -> list[tuple[str, str]]:
        """(name, error) pairs for every failed removal"""
        return [(result.identifier, result.error_message or "unknown error") for result in self.failed]


class FileOperations:
    """Removal handler for listed entries"""

    def __init__(
        self,
        progress_callback: Optional[Callable[[str], None]] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ):
        """Initialize with optional progress callback and stop check

        should_stop is consulted between removals only, never during one.
        """
        self.progress_callback = progress_callback
        self.should_stop = should_stop

    def execute_operation(self, entry: Entry) -> OperationResult:
        """Remove a single entry"""
        try:
            if entry.is_directory:
                shutil.rmtree(entry.path)
            else:
                entry.path.unlink()
            return OperationResult(entry=entry, success=True)

        except OSError as e:
            return OperationResult(entry=entry, success=False, error_message=str(e))

    def execute_batch_operations(self, entries: list[Entry]) -> DeletionReport:
        """Remove every entry and collect the outcomes"""
        report = DeletionReport(requested_count=len(entries))

        for i, entry in enumerate(entries):
            if self.should_stop and self.should_stop():
                report.interrupted = True
                break

            if self.progress_callback:
                self.progress_callback(f"Deleting {entry.name} ({i + 1}/{len(entries)})")

            result = self.execute_operation(entry)

            if result.success:
                report.successful.append(result)
            else:
                report.failed.append(result)

        return report
