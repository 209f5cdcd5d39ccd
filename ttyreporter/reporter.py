# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Live terminal reporter driven by test lifecycle events."""

import logging
from typing import Optional, Union

from rich.console import Console

from ttyreporter.box import indent
from ttyreporter.config import ReporterConfig
from ttyreporter.errors import EventSequenceError, NonInteractiveOutputError, ReporterClosedError
from ttyreporter.events import (
    AssertEvent,
    BailOutEvent,
    CommentEvent,
    EndEvent,
    Event,
    TestEvent,
    UnknownEvent,
)
from ttyreporter.footer import ScoreFooter
from ttyreporter.formatters import format_stack, format_time, format_value
from ttyreporter.palette import blue, bright_red, green, italic, low_white, red, warning
from ttyreporter.sink import ConsoleSink, OutputSink
from ttyreporter.state import ReporterState, TestFrame
from ttyreporter.summary import make_state, render_summary

logger = logging.getLogger(__name__)

ANONYMOUS_TEST = "anonymous test"


class TTYReporter:
    """
    Renders test progress on an interactive terminal.

    Each call to process() erases the score footer, writes the lines for the
    event and draws the footer again, so the running totals always stay on
    the last line. The end of the root test prints the summary instead and
    closes the reporter, as does a bail-out.

    Usage:
        reporter = TTYReporter(Console(), failure_only=True)
        for event in events:
            reporter.process(event)
    """

    def __init__(
        self,
        output: Optional[Union[Console, OutputSink]] = None,
        config: Optional[ReporterConfig] = None,
        **options,
    ):
        if output is None:
            output = Console()
        self.sink: OutputSink = ConsoleSink(output) if isinstance(output, Console) else output
        if not self.sink.is_interactive:
            raise NonInteractiveOutputError(
                "TTYReporter works only with interactive terminal output."
            )

        self.config = (config or ReporterConfig()).with_overrides(**options)
        self.state = ReporterState()
        self.footer = ScoreFooter(self.sink)
        self.closed = False

        self.footer.draw(self.state)

    def out(self, text: str, depth: Optional[int] = None) -> None:
        """Write one content line, indented for the given (default: current) depth."""
        depth = self.state.depth if depth is None else depth
        self.sink.write_line(indent(depth - 1) + text)
        self.state.lines += 1

    def process(self, event: Union[Event, UnknownEvent]) -> None:
        """Render a single event.

        Raises:
            ReporterClosedError: If the run already ended or bailed out
            EventSequenceError: If an end event has no open test
        """
        if self.closed:
            raise ReporterClosedError(
                f"Reporter is closed; cannot process {getattr(event, 'type', event)!r} event"
            )
        logger.debug(f"[PROCESS] type={getattr(event, 'type', None)} depth={self.state.depth}")

        self.footer.erase()

        if isinstance(event, TestEvent):
            self._on_test(event)
        elif isinstance(event, EndEvent):
            if self._on_end(event):
                return
        elif isinstance(event, CommentEvent):
            if not self.config.failure_only:
                self.out(blue(italic(event.name or "empty comment")))
        elif isinstance(event, BailOutEvent):
            self._on_bail_out(event)
            return
        elif isinstance(event, AssertEvent):
            self._on_assert(event)
        else:
            logger.warning(f"Ignoring event of unknown type: {getattr(event, 'type', event)!r}")

        self.footer.draw(self.state)

    def _on_test(self, event: TestEvent) -> None:
        state = self.state
        if state.depth and not self.config.failure_only:
            self.out("○ " + (event.name or ANONYMOUS_TEST))
        state.depth += 1
        state.test_counter += 1
        state.frames.append(TestFrame(name=event.name, lines=state.lines))

    def _on_end(self, event: EndEvent) -> bool:
        """Close the current test. Returns True when the run is over."""
        state = self.state
        if not state.frames:
            # Restore the footer before failing
            self.footer.draw(state)
            raise EventSequenceError(f"End of {event.name or ANONYMOUS_TEST!r} without an open test")
        state.frames.pop()
        state.depth -= 1

        if state.depth:
            if not self.config.failure_only:
                text = ("✗" if event.fail else "✓") + " " + (event.name or ANONYMOUS_TEST)
                text = (bright_red if event.fail else green)(text)
                text += make_state(event.data)
                if self.config.show_time:
                    text += low_white(" - " + format_time(event.diff_time))
                self.out(text)
            return False

        logger.debug(f"[SUMMARY] tests={state.test_counter} asserts={event.data.asserts} fail={event.fail}")
        for line in render_summary(event, state, self.config.show_banner):
            self.out(line)
        self.closed = True
        return True

    def _on_bail_out(self, event: BailOutEvent) -> None:
        text = "Bail out!"
        if event.name:
            text += " " + event.name
        self.out(warning(text))
        self.closed = True

    def _on_assert(self, event: AssertEvent) -> None:
        state = self.state
        config = self.config
        is_failed = event.fail and not event.todo

        if is_failed:
            state.failed_asserts += 1
        else:
            state.successful_asserts += 1
        if event.todo:
            state.todo_asserts += 1
        if config.renumber_asserts:
            state.assert_counter += 1

        if not is_failed and config.failure_only:
            return

        index = state.assert_counter if config.renumber_asserts else event.id
        text = "✗" if event.fail else "✓"
        if index is not None:
            text += " " + str(index)
        if event.skip:
            text += " SKIP"
        elif event.todo:
            text += " TODO"
        if event.name:
            text += " " + event.name
        if not event.skip:
            text = (red if is_failed else green)(text)
        if config.show_time:
            text += low_white(" - " + format_time(event.diff_time))
        if event.fail and event.at:
            text += low_white(" - " + event.at)

        frame = state.current_frame
        if config.failure_only and frame is not None and not frame.fail:
            frame.fail = True
            self.out(bright_red("✗ " + (frame.name or ANONYMOUS_TEST)), depth=state.depth - 1)
        self.out(text)

        if event.fail and config.show_data:
            self._show_data(event)

    def _show_data(self, event: AssertEvent) -> None:
        data = event.data or {}
        self.out(low_white("  operator: ") + str(event.operator))
        if "expected" in data:
            self.out(low_white("  expected: ") + format_value(data["expected"]))
        if "actual" in data:
            self.out(low_white("  actual:   ") + format_value(data["actual"]))

        actual = data.get("actual")
        stack = format_stack(actual if isinstance(actual, BaseException) else event.marker)
        if stack:
            self.out(low_white("  stack: |-"))
            for line in stack.split("\n"):
                self.out(low_white("    " + line))
