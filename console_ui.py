#!/usr/bin/env python3
"""
Console UI Module using Rich

Provides the console interface for Aphairesis: styled messages, entry
tables, a cosmetic activity spinner and the line-oriented yes/no prompt.
Output and input streams are injectable so the workflow can be driven
without a real terminal.
"""

import sys
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TextIO

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.prompt import Confirm, InvalidResponse
from rich.table import Table
from rich.text import TextType


class LineConfirm(Confirm):
    """Yes/no prompt that defaults to no and only accepts complete lines

    A final line cut off by end of input is treated as a read failure, not
    as an answer.
    """

    choices = ["y", "yes", "n", "no"]
    validate_error_message = "[prompt.invalid]Invalid input. Please enter 'y' or 'n'."
    prompt_suffix = " [y/N]: "

    @classmethod
    def get_input(cls, console: Console, prompt: TextType, password: bool, stream: Optional[TextIO] = None) -> str:
        line = console.input(prompt, password=password, stream=stream if stream is not None else sys.stdin)
        if not line.endswith("\n"):
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def process_response(self, value: str) -> bool:
        value = value.strip().casefold()
        if value == "":
            return False
        if value not in self.choices:
            raise InvalidResponse(self.validate_error_message)
        return value in ("y", "yes")


class ConsoleUI:
    """Console UI handler using Rich"""

    def __init__(
        self,
        force_terminal: Optional[bool] = None,
        file: Optional[TextIO] = None,
        input_stream: Optional[TextIO] = None,
        width: Optional[int] = None,
    ):
        """Initialize console with optional terminal forcing and stream overrides"""
        self.console = Console(force_terminal=force_terminal, file=file, width=width, highlight=False)
        self._input_stream = input_stream

    @property
    def input_stream(self) -> TextIO:
        return self._input_stream if self._input_stream is not None else sys.stdin

    # Basic styled output methods
    def print_success(self, message: str):
        """Print success message in green"""
        self.console.print(message, style="green")

    def print_error(self, message: str):
        """Print error message in red"""
        self.console.print(message, style="red bold")

    def print_warning(self, message: str):
        """Print warning message in yellow (message is printed verbatim)"""
        self.console.print(f"⚠ Warning: {escape(message)}", style="yellow")

    def print_notice(self, message: str):
        """Print a neutral notice in yellow (aborts, no-op outcomes)"""
        self.console.print(message, style="yellow")

    def print_bold(self, message: str):
        """Print a bold section label"""
        self.console.print(message, style="bold")

    def print_header(self, title: str, subtitle: Optional[str] = None):
        """Print a header with optional subtitle"""
        if subtitle:
            header_text = f"[bold]{title}[/bold] [cyan]{escape(subtitle)}[/cyan]"
        else:
            header_text = f"[bold]{title}[/bold]"

        panel = Panel(header_text, box=box.ROUNDED, padding=(0, 1), expand=False)
        self.console.print(panel)

    # Tables
    def show_table(self, columns: list[str], rows: list[list[str]], empty_message: str = " (No items to display) "):
        """Render rows in a bordered table with a line between rows

        Cells may contain Rich markup; callers escape user-controlled text.
        """
        if not rows:
            self.print_notice(empty_message)
            return

        table = Table(box=box.ROUNDED, show_lines=True)
        for column in columns:
            justify = "right" if column == "Size" else "left"
            table.add_column(column, justify=justify, no_wrap=True)

        for row in rows:
            table.add_row(*row)

        self.console.print()
        self.console.print(table)
        self.console.print()

    # Activity spinner
    def create_activity_progress(self) -> Progress:
        """Create a Rich progress context manager for activity-only display (no counts)"""
        return Progress(
            SpinnerColumn(style="cyan"),
            TextColumn("{task.description}"),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        )

    @contextmanager
    def spinner(self, description: str) -> Iterator[Callable[[str], None]]:
        """Show a spinner while the enclosed block runs

        Yields a function that replaces the spinner text. The spinner only
        redraws; it never touches the caller's data.
        """
        progress = self.create_activity_progress()
        with progress:
            task = progress.add_task(description, total=None)
            yield lambda text: progress.update(task, description=text)

    # Reports
    def show_operation_summary(
        self, successful_count: int, failed: list[tuple[str, str]], operation_name: str = "delete"
    ):
        """Show summary of completed operations"""
        if successful_count:
            self.print_success(f"✓ Successfully {operation_name}d {successful_count} items.")

        if failed:
            self.print_error(f"✗ Failed to {operation_name} {len(failed)} items:")
            for name, error in failed:
                self.console.print(f"  - [cyan]{escape(name)}[/cyan]: {escape(error)}")

    # Interactive prompts
    def confirm(self, question: str) -> bool:
        """Ask a yes/no question, defaulting to no

        Re-prompts on anything that is not a recognised answer. A closed,
        failing or truncated input stream counts as "no".
        """
        try:
            return LineConfirm.ask(
                question,
                default=False,
                console=self.console,
                show_default=False,
                show_choices=False,
                stream=self.input_stream,
            )
        except (EOFError, OSError, ValueError) as e:
            self.console.print()
            self.print_warning(f"Error reading input: {e}. Assuming No.")
            return False
