# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Output sinks: where reporter lines go, and how the cursor moves back over them."""

from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.control import Control, ControlType

# Erase the entire current line without moving the cursor
_ERASE_LINE = Control((ControlType.ERASE_IN_LINE, 2))
_CURSOR_UP = Control.move(0, -1)


@runtime_checkable
class OutputSink(Protocol):
    """Line-oriented output with relative cursor control."""

    @property
    def is_interactive(self) -> bool: ...

    def write_line(self, text: str) -> None: ...

    def move_up(self) -> None: ...

    def clear_line(self) -> None: ...


class ConsoleSink:
    """OutputSink backed by a Rich console.

    Lines are written to the console's file as-is: they already carry their
    own ANSI styling, and Rich markup or wrapping would change their width.
    """

    def __init__(self, console: Console):
        self.console = console

    @property
    def is_interactive(self) -> bool:
        return self.console.is_terminal

    def write_line(self, text: str) -> None:
        file = self.console.file
        file.write(text + "\n")
        file.flush()

    def move_up(self) -> None:
        self.console.control(_CURSOR_UP)

    def clear_line(self) -> None:
        self.console.control(_ERASE_LINE)
