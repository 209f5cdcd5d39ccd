# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Shared fixtures for reporter tests."""

import re
from io import StringIO

import pytest
from rich.console import Console

from ttyreporter.reporter import TTYReporter


_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def strip_ansi(text: str) -> str:
    """Strip ANSI escape codes from text for easier assertions."""
    return _ANSI_ESCAPE.sub('', text)


class FakeSink:
    """In-memory terminal: keeps the lines currently on screen and every call made."""

    def __init__(self, interactive: bool = True):
        self.interactive = interactive
        self.screen: list[str] = []
        self.ops: list[tuple] = []

    @property
    def is_interactive(self) -> bool:
        return self.interactive

    def write_line(self, text: str) -> None:
        self.ops.append(("write", text))
        self.screen.append(text)

    def move_up(self) -> None:
        self.ops.append(("up",))

    def clear_line(self) -> None:
        self.ops.append(("clear",))
        # Cursor sits on the line just moved up to, which is always the last one
        self.screen.pop()

    @property
    def plain(self) -> list[str]:
        return [strip_ansi(line) for line in self.screen]


@pytest.fixture
def sink():
    return FakeSink()


@pytest.fixture
def make_reporter(sink):
    """Build a reporter writing to the fake sink."""
    def factory(**options) -> TTYReporter:
        return TTYReporter(sink, **options)
    return factory


@pytest.fixture
def captured_console(monkeypatch):
    """Console that captures output to a string buffer."""
    monkeypatch.setenv("TERM", "xterm-256color")
    output = StringIO()
    console = Console(file=output, force_terminal=True, width=120)
    return console, output
