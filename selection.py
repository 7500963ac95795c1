#!/usr/bin/env python3
"""
Selection Workflow

Drives either the bulk (all-or-nothing) confirmation or the per-entry
interactive pass over a listing, and hands the marked entries back as an
explicit SelectionResult.
"""

from dataclasses import dataclass, field

from rich.markup import escape

from auxiliary import format_bytes, format_timestamp, truncate_path
from console_ui import ConsoleUI
from entry_lister import Entry
from remover_config import RemoverConfig

ENTRY_TABLE_COLUMNS = ["Type", "Name", "Size", "Modified"]


@dataclass
class SelectionResult:
    """Entries offered to the user and the subset they marked"""

    entries: list[Entry] = field(default_factory=list)
    marked: list[Entry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.marked

    @property
    def marked_count(self) -> int:
        return len(self.marked)


def build_entry_rows(entries: list[Entry], config: RemoverConfig, show_checkmarks: bool = False) -> list[list[str]]:
    """Turn entries into table rows (Type, Name, Size, Modified)"""
    rows = []
    for entry in entries:
        name = escape(truncate_path(entry.name, config.name_max_length))
        if show_checkmarks and entry.marked_for_deletion:
            name = f"[green]{name} ✓[/green]"
        rows.append(
            [
                entry.short_label,
                name,
                format_bytes(entry.size, config.binary_units),
                format_timestamp(entry.modified_at, config.timestamp_format),
            ]
        )
    return rows


class SelectionWorkflow:
    """Collects the user's deletion choices for one listing"""

    def __init__(self, ui: ConsoleUI, config: RemoverConfig):
        self.ui = ui
        self.config = config

    def show_entries(self, entries: list[Entry], show_checkmarks: bool = False):
        self.ui.show_table(ENTRY_TABLE_COLUMNS, build_entry_rows(entries, self.config, show_checkmarks))

    def select(self, entries: list[Entry]) -> SelectionResult:
        """Run the configured selection mode over the entries"""
        if self.config.bulk_mode:
            return self.select_all(entries)
        return self.select_interactively(entries)

    def select_all(self, entries: list[Entry]) -> SelectionResult:
        """Ask once whether to delete every entry"""
        result = SelectionResult(entries=list(entries))
        if not entries:
            return result

        self.ui.print_bold("\nItems found:")
        self.show_entries(entries)

        if self.ui.confirm(f"Delete all [bold]{len(entries)}[/bold] items shown above?"):
            result.marked = [entry.marked() for entry in entries]
        return result

    def select_interactively(self, entries: list[Entry]) -> SelectionResult:
        """Ask about each entry in listing order; every entry gets exactly one prompt"""
        result = SelectionResult(entries=list(entries))
        if not entries:
            return result

        self.ui.print_bold("\nSelect items to delete (y/N):")
        self.show_entries(entries)

        total = len(entries)
        for index, entry in enumerate(entries, 1):
            question = (
                f"[{index}/{total}] Delete {entry.type_label} [cyan]{escape(entry.name)}[/cyan]"
                f" ({format_bytes(entry.size, self.config.binary_units)})?"
            )
            if self.ui.confirm(question):
                result.marked.append(entry.marked())

        if result.marked:
            self.ui.print_bold("\nItems marked for deletion:")
            self.show_entries(result.marked, show_checkmarks=True)

        return result

