"""Pytest bootstrap for local source imports and console fixtures.

The flat modules live at the repository root; make sure they import from
here even when the ``pytest`` script runs with a different sys.path.
"""

import io
import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)

if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)

from console_ui import ConsoleUI  # noqa: E402
from entry_lister import Entry  # noqa: E402


class ScriptedConsole:
    """ConsoleUI wired to in-memory streams"""

    def __init__(self, answers: str = ""):
        self.output = io.StringIO()
        self.input = io.StringIO(answers)
        self.ui = ConsoleUI(file=self.output, input_stream=self.input, width=200)

    @property
    def text(self) -> str:
        return self.output.getvalue()


@pytest.fixture
def scripted():
    """Factory for a ConsoleUI that reads the given answers"""

    def make(answers: str = "") -> ScriptedConsole:
        return ScriptedConsole(answers)

    return make


@pytest.fixture
def populated_dir(tmp_path):
    """Directory with three files of known sizes and one subdirectory"""
    (tmp_path / "small.txt").write_bytes(b"x" * 500)
    (tmp_path / "medium.bin").write_bytes(b"x" * 2048)
    (tmp_path / "large.bin").write_bytes(b"x" * 1048576)
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "inner.txt").write_text("inner", encoding="utf-8")
    return tmp_path


def make_entry(path: Path, size: int = 0, is_directory: bool = False) -> Entry:
    return Entry(path=path, size=size, is_directory=is_directory, modified_at=datetime(2024, 1, 2, 3, 4))


def listing_names(directory: Path) -> set:
    return set(os.listdir(directory))
