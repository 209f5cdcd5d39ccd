# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Terminal styling for reporter output.

Every styler wraps text in an SGR start sequence and the matching reset,
so styled fragments can be nested inside each other (for example a blue
value on a black background) without one reset clearing the other.

The two paint styles are open-ended: they switch to a solid 256-colour
background with bold bright white text and stay active until ``RESET``.
"""

from dataclasses import dataclass

from rich.color import Color


RESET = "\x1b[0m"

BOLD = "1"
DIM = "2"
ITALIC = "3"


def _sgr(*codes: str) -> str:
    return "\x1b[" + ";".join(codes) + "m"


def _fg(name: str) -> tuple[str, ...]:
    return Color.parse(name).get_ansi_codes(foreground=True)


def _bg(name: str) -> tuple[str, ...]:
    return Color.parse(name).get_ansi_codes(foreground=False)


@dataclass(frozen=True)
class Styler:
    """Wraps text in a start sequence and its matching reset."""
    start: str
    end: str

    def __call__(self, text: object = "") -> str:
        return f"{self.start}{'' if text is None else text}{self.end}"


red = Styler(_sgr(*_fg("red")), _sgr("39"))
green = Styler(_sgr(*_fg("bright_green")), _sgr("39"))
blue = Styler(_sgr(*_fg("bright_blue")), _sgr("39"))
black_bg = Styler(_sgr(*_bg("black")), _sgr("49"))
low_white = Styler(_sgr(DIM, *_fg("white")), _sgr("22", "39"))
bright_white = Styler(_sgr(BOLD, *_fg("bright_white")), _sgr("22", "39"))
bright_yellow = Styler(_sgr(BOLD, *_fg("bright_yellow")), _sgr("22", "39"))
bright_red = Styler(_sgr(*_fg("bright_red")), _sgr("39"))
warning = Styler(_sgr(*_bg("red"), BOLD, *_fg("white")), _sgr("22", "39", "49"))
italic = Styler(_sgr(ITALIC), _sgr("23"))


def _to_level(channel: float) -> int:
    """Map a 0-255 channel onto the 0-5 axis of the xterm colour cube."""
    return round(max(0, min(255, channel)) / 255 * 5)


def build_color(r: float, g: float, b: float) -> int:
    """Return the 256-colour palette index of the cube entry nearest to an RGB triple."""
    return 16 + 36 * _to_level(r) + 6 * _to_level(g) + _to_level(b)


def paint_style(r: float, g: float, b: float) -> str:
    """Solid background for the given RGB triple, with bold bright white text."""
    background = Color.from_ansi(build_color(r, g, b)).get_ansi_codes(foreground=False)
    return _sgr(*background, BOLD, *_fg("bright_white"))


SUCCESS_STYLE = paint_style(0, 32, 0)
FAILURE_STYLE = paint_style(64, 0, 0)
