# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Layout primitives for rectangular blocks of terminal text.

A box is a list of lines that share one visible width. Styling sequences
do not count towards the width, so styled boxes can be padded and stacked
like plain ones.
"""

from rich.box import SQUARE
from rich.text import Text


def visible_width(line: str) -> int:
    """Terminal cell width of a line, ignoring ANSI styling sequences."""
    return Text.from_ansi(line).cell_len


def box_width(box: list[str]) -> int:
    return max((visible_width(line) for line in box), default=0)


def indent(depth: int, unit: str = "  ") -> str:
    """Indentation for the given nesting level."""
    return unit * max(0, depth)


def normalize(lines: list[str], fill: str = " ", align: str = "left") -> list[str]:
    """Pad every line to the widest visible width.

    Args:
        lines: Lines to normalize
        fill: Single character used for padding
        align: "left", "center" or "right"

    Returns:
        New list of lines sharing one visible width
    """
    if align not in ("left", "center", "right"):
        raise ValueError(f"Unknown alignment: {align}")

    width = box_width(lines)
    result = []
    for line in lines:
        diff = width - visible_width(line)
        if align == "left":
            result.append(line + fill * diff)
        elif align == "right":
            result.append(fill * diff + line)
        else:
            left = diff // 2
            result.append(fill * left + line + fill * (diff - left))
    return result


def pad(box: list[str], vertical: int, horizontal: int, fill: str = " ") -> list[str]:
    """Surround a box with blank lines above/below and fill columns left/right."""
    side = fill * horizontal
    rows = [side + line + side for line in box]
    blank = fill * box_width(rows)
    return [blank] * vertical + rows + [blank] * vertical


def pad_left(box: list[str], count: int, fill: str = " ") -> list[str]:
    side = fill * count
    return [side + line for line in box]


def draw_border(box: list[str]) -> list[str]:
    """Wrap a box in a square frame."""
    width = box_width(box)
    rows = [SQUARE.mid_left + line + SQUARE.mid_right for line in box]
    return [SQUARE.get_top([width]), *rows, SQUARE.get_bottom([width])]


def stack_horizontally(left: list[str], right: list[str]) -> list[str]:
    """Place two boxes side by side, extending the shorter one with blank lines."""
    height = max(len(left), len(right))
    left = left + [" " * box_width(left)] * (height - len(left))
    right = right + [" " * box_width(right)] * (height - len(right))
    return [a + b for a, b in zip(left, right)]
