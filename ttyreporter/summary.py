# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Final report rendered when the root test ends, plus the per-test badge."""

from ttyreporter.box import draw_border, normalize, pad, pad_left, stack_horizontally
from ttyreporter.events import EndEvent, TestTotals
from ttyreporter.formatters import format_number, format_time
from ttyreporter.palette import (
    FAILURE_STYLE,
    RESET,
    SUCCESS_STYLE,
    black_bg,
    blue,
    bright_white,
    bright_yellow,
    green,
    low_white,
    red,
)
from ttyreporter.state import ReporterState

STAT_LABELS = ["tests:", "asserts:", "  passed:", "  failed:", "  skipped:", "  todo:", "time:"]

# One styler per stats row; todo is left unstyled
_STAT_STYLES = [bright_white, bright_yellow, green, red, blue, None, low_white]


def make_state(totals: TestTotals) -> str:
    """Compact passed/failed/skipped badge shown after a finished nested test."""
    success = totals.passed
    if not success and not totals.failed and not totals.skipped:
        return ""
    text = " "
    if success:
        text += f"{SUCCESS_STYLE} {format_number(success)} "
    else:
        text += black_bg(f" {format_number(success)} ")
    if totals.failed:
        text += f"{FAILURE_STYLE} {format_number(totals.failed)} "
    else:
        text += black_bg(f" {format_number(totals.failed)} ")
    if totals.skipped:
        text += black_bg(blue(f" {format_number(totals.skipped)} "))
    return text + RESET


def success_percentage(totals: TestTotals, failed: bool) -> str:
    """Share of passed assertions as shown in the status box."""
    if not failed:
        return "100%"
    if totals.asserts <= 0:
        return "0%"
    return format_number(totals.passed / totals.asserts * 100, 1) + "%"


def render_banner(event: EndEvent, state: ReporterState) -> str:
    """One-line summary used when the panel is turned off."""
    totals = event.data
    return black_bg(
        "  "
        + ("⛔" if event.fail else "♥️")
        + "   "
        + bright_white("tests: " + format_number(state.test_counter))
        + ", "
        + bright_yellow("asserts: " + format_number(totals.asserts))
        + ", "
        + green("passed: " + format_number(totals.passed))
        + ", "
        + red("failed: " + format_number(totals.failed))
        + ", "
        + blue("skipped: " + format_number(totals.skipped))
        + ", "
        + "todo: " + format_number(state.todo_asserts)
        + ", "
        + low_white("time: " + format_time(event.diff_time))
        + "  "
    )


def _status_box(event: EndEvent) -> list[str]:
    paint = FAILURE_STYLE if event.fail else SUCCESS_STYLE
    box = ["Summary: " + ("fail" if event.fail else "pass")]
    box = pad(box, 0, 2)
    box = draw_border(box)
    box = pad(box, 0, 3)
    box = normalize([*box, "", "Passed: " + success_percentage(event.data, event.fail)], " ", "center")
    box = pad(box, 2, 0)
    box = [paint + line + RESET for line in box]
    return pad_left(box, 2)


def _stats_box(event: EndEvent, state: ReporterState) -> list[str]:
    totals = event.data
    values = normalize(
        [
            format_number(state.test_counter),
            format_number(totals.asserts),
            format_number(totals.passed),
            format_number(totals.failed),
            format_number(totals.skipped),
            format_number(state.todo_asserts),
            format_time(event.diff_time),
        ],
        " ",
        "left",
    )
    values = pad_left(values, 1)
    box = stack_horizontally(normalize(STAT_LABELS), values)
    box = [style(row) if style else row for style, row in zip(_STAT_STYLES, box)]
    box = pad(box, 1, 3)
    return [black_bg(row) for row in box]


def render_panel(event: EndEvent, state: ReporterState) -> list[str]:
    """Status box and stats box side by side, framed by blank lines."""
    box = stack_horizontally(_status_box(event), _stats_box(event, state))
    return ["", *box, ""]


def render_summary(event: EndEvent, state: ReporterState, show_banner: bool = True) -> list[str]:
    if show_banner:
        return render_panel(event, state)
    return [render_banner(event, state)]
