#!/usr/bin/env python3
"""
Aphairesis — Ancient Greek ἀφαίρεσις (taking away, removal)

An interactive removal tool. Lists one level of a directory (or inspects a
single file), lets the user confirm deletions item by item or all at once,
then removes the chosen entries and reports what succeeded and what failed.

Usage:
    aphairesis                  # Review the current directory item by item
    aphairesis <path>           # Review <path> item by item
    aphairesis <path> --all     # One confirmation for everything in <path>
    aphairesis <file>           # Inspect and optionally delete a single file
"""

import argparse
import os
import pathlib
import signal
import sys
from contextlib import contextmanager
from typing import Optional

from rich.markup import escape

from auxiliary import format_bytes, format_path_for_display, format_timestamp
from console_ui import ConsoleUI
from entry_lister import Entry, list_entries, stat_entry
from file_operations import DeletionReport, FileOperations
from remover_config import RemoverConfig
from selection import SelectionWorkflow

__version__ = "0.1.7"


class FatalError(Exception):
    """The target path cannot be used; nothing has been modified"""


class Aphairesis:
    """Main application class for the Aphairesis removal tool."""

    def __init__(self, args: argparse.Namespace, ui: Optional[ConsoleUI] = None):
        self.args = args
        self.config = RemoverConfig.from_args(args)
        self.ui = ui or ConsoleUI()
        self.selection = SelectionWorkflow(self.ui, self.config)
        self._shutdown_requested = False

    # -- signal handling ----------------------------------------------------

    def _signal_handler(self, signum, frame):
        if self._shutdown_requested:
            sys.exit(1)
        self._shutdown_requested = True
        self.ui.print_warning("Shutdown requested, finishing the current removal... press Ctrl+C again to force quit.")

    @contextmanager
    def _deferred_interrupts(self):
        """Turn Ctrl+C into a stop request while removals are running"""
        self._shutdown_requested = False
        previous = {signal.SIGINT: signal.signal(signal.SIGINT, self._signal_handler)}
        if hasattr(signal, "SIGTERM"):
            previous[signal.SIGTERM] = signal.signal(signal.SIGTERM, self._signal_handler)
        try:
            yield
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)

    # -- target resolution --------------------------------------------------

    def resolve_target(self, raw_path: str) -> pathlib.Path:
        """Make the target absolute and check that it exists and is readable

        The path is made absolute without resolving symlinks, but the checks
        follow them: a link to a directory is handled as that directory.
        """
        try:
            path = pathlib.Path(os.path.abspath(raw_path))
        except (OSError, ValueError) as e:
            raise FatalError(f"Failed to get absolute path for '{raw_path}': {e}") from e

        try:
            path.stat()
        except FileNotFoundError as e:
            raise FatalError(f"Path does not exist: {path}") from e
        except (OSError, ValueError) as e:
            raise FatalError(f"Failed to access path: {path} ({e})") from e

        if not os.access(path, os.R_OK):
            raise FatalError(f"Path is not readable: {path}")

        return path

    # -- single file --------------------------------------------------------

    def handle_single_file(self, path: pathlib.Path) -> bool:
        """Show one file, ask once, delete it. Returns True if it was deleted."""
        self.ui.print_header("FILE:", format_path_for_display(str(path)))

        try:
            entry = stat_entry(path)
        except OSError as e:
            raise FatalError(f"Failed to access path: {path} ({e})") from e

        self.ui.show_table(
            ["Name", "Size", "Modified"],
            [
                [
                    escape(entry.name),
                    format_bytes(entry.size, self.config.binary_units),
                    format_timestamp(entry.modified_at, self.config.timestamp_format),
                ]
            ],
        )

        if not self.ui.confirm(f"Do you want to delete the file [cyan]{escape(entry.name)}[/cyan]?"):
            self.ui.print_notice("Operation aborted by user.")
            return False

        result = FileOperations().execute_operation(entry)
        if result.success:
            self.ui.print_success(f"✓ Success: Deleted file: {escape(str(path))}")
            return True

        self.ui.print_error(f"✗ Failed: Failed to delete file: {escape(result.error_message or '')}")
        return False

    # -- directory ----------------------------------------------------------

    def scan(self, directory: pathlib.Path) -> list[Entry]:
        """Read the directory behind a spinner"""
        warning_callback = self.ui.print_warning if self.config.warn_on_listing_errors else None

        with self.ui.spinner(f"Reading directory [cyan]{escape(directory.name or str(directory))}[/cyan]..."):
            try:
                return list_entries(directory, warning_callback)
            except OSError as e:
                raise FatalError(f"Failed to read directory: {e}") from e

    def handle_directory(self, directory: pathlib.Path) -> Optional[DeletionReport]:
        """List, select and delete. Returns the report if any removal was attempted."""
        display = format_path_for_display(str(directory))
        self.ui.print_header("DIRECTORY:", display)

        if self.config.confirm_scan and not self.ui.confirm(
            f"Scan and potentially delete items within [cyan]{escape(display)}[/cyan]?"
        ):
            self.ui.print_notice("Operation aborted by user.")
            return None

        entries = self.scan(directory)
        if not entries:
            self.ui.print_notice(f"No files or subdirectories found to delete in {escape(display)}")
            return None

        selection = self.selection.select(entries)
        if selection.is_empty:
            self.ui.print_notice("No items selected for deletion.")
            return None

        return self.delete_selected(selection.marked)

    # -- deletion -----------------------------------------------------------

    def delete_selected(self, marked: list[Entry]) -> Optional[DeletionReport]:
        """Ask for final confirmation, then remove every marked entry"""
        if not marked:
            self.ui.print_notice("Nothing selected to delete.")
            return None

        self.ui.console.print()
        if not self.ui.confirm(f"Proceed with deleting these [bold]{len(marked)}[/bold] items?"):
            self.ui.print_notice("Operation aborted by user.")
            return None

        with self._deferred_interrupts():
            with self.ui.spinner("Deleting items...") as set_status:
                operations = FileOperations(
                    progress_callback=lambda message: set_status(escape(message)),
                    should_stop=lambda: self._shutdown_requested,
                )
                report = operations.execute_batch_operations(marked)

        self.summary(report)
        return report

    def summary(self, report: DeletionReport):
        """Show final execution results."""
        self.ui.console.print()
        self.ui.show_operation_summary(report.success_count, report.failure_details())
        if report.interrupted:
            self.ui.print_warning(f"Deletion interrupted, {report.untouched_count} items were left untouched.")

    # -- main entry point ----------------------------------------------------

    def run(self) -> int:
        try:
            path = self.resolve_target(getattr(self.args, "path", None) or ".")
            if path.is_dir():
                self.handle_directory(path)
            else:
                self.handle_single_file(path)
        except FatalError as e:
            self.ui.print_error(f"✗ Error: {escape(str(e))}")
            return 1
        return 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aphairesis",
        description="Aphairesis — list a directory and interactively delete its items",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  aphairesis ~/Downloads          # Confirm each item in ~/Downloads
  aphairesis ~/Downloads --all    # Confirm everything with a single answer
  aphairesis notes.txt            # Inspect and optionally delete one file
        """,
    )
    parser.add_argument(
        "path", nargs="?", default=".", help="Directory or file to inspect (default: current directory)"
    )
    parser.add_argument(
        "--all", action="store_true", help="Skip individual confirmations and ask to delete all items at once"
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s v{__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    app = Aphairesis(args)
    try:
        return app.run()
    except KeyboardInterrupt:
        app.ui.console.print()
        app.ui.print_notice("Interrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
