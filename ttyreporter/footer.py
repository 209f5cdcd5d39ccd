# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""The live score line pinned to the bottom of the reporter output."""

from ttyreporter.palette import FAILURE_STYLE, RESET, SUCCESS_STYLE
from ttyreporter.sink import OutputSink
from ttyreporter.state import ReporterState


def render_footer(state: ReporterState) -> str:
    return (
        f"{SUCCESS_STYLE}  {state.successful_asserts}  "
        f"{FAILURE_STYLE}  {state.failed_asserts}  {RESET}"
    )


class ScoreFooter:
    """
    Keeps the running pass/fail totals as the last physical line.

    The footer owns exactly one line at the end of the output. Before any
    content is written it is erased; afterwards it is drawn again below the
    new content.
    """

    def __init__(self, sink: OutputSink):
        self.sink = sink
        self.visible = False

    def draw(self, state: ReporterState) -> None:
        self.sink.write_line(render_footer(state))
        self.visible = True

    def erase(self) -> None:
        if not self.visible:
            return
        self.sink.move_up()
        self.sink.clear_line()
        self.visible = False
