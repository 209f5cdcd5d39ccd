# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Tests for the box layout primitives."""

import pytest

from ttyreporter.box import (
    box_width,
    draw_border,
    indent,
    normalize,
    pad,
    pad_left,
    stack_horizontally,
    visible_width,
)
from ttyreporter.palette import SUCCESS_STYLE, RESET, black_bg, green, red


class TestVisibleWidth:
    """Width ignores styling sequences."""

    def test_plain(self):
        assert visible_width("abc") == 3

    def test_styled(self):
        assert visible_width(red("abc")) == 3
        assert visible_width(SUCCESS_STYLE + "  12  " + RESET) == 6

    def test_empty(self):
        assert visible_width("") == 0
        assert box_width([]) == 0


class TestNormalize:
    """Lines are padded to the widest visible width."""

    def test_left(self):
        assert normalize(["a", "abc"]) == ["a  ", "abc"]

    def test_right(self):
        assert normalize(["a", "abc"], " ", "right") == ["  a", "abc"]

    def test_center_puts_extra_fill_on_the_right(self):
        assert normalize(["a", "abcd"], ".", "center") == [".a..", "abcd"]

    def test_styled_lines_use_visible_width(self):
        result = normalize([green("ab"), "abcd"])
        assert result[0] == green("ab") + "  "
        assert all(visible_width(line) == 4 for line in result)

    def test_unknown_alignment(self):
        with pytest.raises(ValueError, match="Unknown alignment"):
            normalize(["a"], " ", "justify")

    @pytest.mark.parametrize("box,align", [
        (["a", "abc", ""], "left"),
        (["x", "wider line"], "center"),
        ([red("err"), "ok", black_bg(green("pass!"))], "right"),
        ([], "left"),
    ])
    def test_idempotent(self, box, align):
        once = normalize(box, " ", align)
        assert normalize(once, " ", align) == once


class TestPadding:
    """Padding on all sides and on the left only."""

    def test_pad(self):
        assert pad(["ab"], 1, 2) == ["      ", "  ab  ", "      "]

    def test_pad_with_fill(self):
        assert pad(["ab"], 0, 1, "-") == ["-ab-"]

    def test_pad_styled_blank_lines_use_visible_width(self):
        box = pad([red("ab")], 1, 0)
        assert box[0] == "  "

    def test_pad_left(self):
        assert pad_left(["a", "b"], 2) == ["  a", "  b"]


class TestBorderAndStacking:
    """Frames and side-by-side composition."""

    def test_draw_border(self):
        assert draw_border(["ab", "cd"]) == ["┌──┐", "│ab│", "│cd│", "└──┘"]

    def test_stack_pads_shorter_left(self):
        assert stack_horizontally(["a"], ["xy", "zw"]) == ["axy", " zw"]

    def test_stack_pads_shorter_right(self):
        result = stack_horizontally(["a", "b", "c"], ["xyz"])
        assert result == ["axyz", "b   ", "c   "]
        assert box_width(result) == 4

    def test_indent(self):
        assert indent(0) == ""
        assert indent(2) == "    "
        assert indent(-1) == ""
