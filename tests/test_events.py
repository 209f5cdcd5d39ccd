# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Tests for event dataclasses and wire decoding."""

import pytest

from ttyreporter.errors import EventFormatError
from ttyreporter.events import (
    AssertEvent,
    BailOutEvent,
    CommentEvent,
    EndEvent,
    RemoteError,
    TestEvent,
    TestTotals,
    UnknownEvent,
    event_from_dict,
    read_events,
)


class TestTestTotals:

    def test_passed(self):
        assert TestTotals(asserts=10, failed=3, skipped=2).passed == 5

    def test_defaults(self):
        assert TestTotals().passed == 0


class TestEventFromDict:
    """Decoding of the engine's event mappings."""

    def test_test(self):
        assert event_from_dict({"type": "test", "name": "root"}) == TestEvent(name="root")

    def test_end(self):
        event = event_from_dict({
            "type": "end",
            "name": "child",
            "fail": True,
            "data": {"asserts": 4, "failed": 1, "skipped": 1, "extra": "ignored"},
            "diffTime": 12.5,
        })
        assert event == EndEvent(
            name="child", fail=True, data=TestTotals(4, 1, 1), diff_time=12.5
        )

    def test_end_without_data(self):
        assert event_from_dict({"type": "end"}).data == TestTotals()

    def test_comment_and_bail_out(self):
        assert event_from_dict({"type": "comment", "name": "note"}) == CommentEvent(name="note")
        assert event_from_dict({"type": "bail-out", "name": "disk full"}) == BailOutEvent(name="disk full")

    def test_assert(self):
        event = event_from_dict({
            "type": "assert",
            "name": "values match",
            "id": 7,
            "fail": True,
            "operator": "equal",
            "data": {"expected": 1, "actual": 2},
            "diffTime": 0.25,
            "at": "test_x.js:10:5",
        })
        assert isinstance(event, AssertEvent)
        assert event.id == 7
        assert event.fail is True
        assert event.skip is False and event.todo is False
        assert event.data == {"expected": 1, "actual": 2}
        assert event.diff_time == 0.25
        assert event.at == "test_x.js:10:5"

    @pytest.mark.parametrize("marker,expected", [
        ("Error: x\n    at y", "Error: x\n    at y"),
        ({"stack": "Error: z"}, "Error: z"),
        ({"message": "no stack"}, None),
        (None, None),
    ])
    def test_assert_marker(self, marker, expected):
        event = event_from_dict({"type": "assert", "marker": marker})
        assert event.marker == expected

    def test_assert_actual_error_object(self):
        """A serialized error as actual keeps its name, message and trace."""
        event = event_from_dict({
            "type": "assert",
            "fail": True,
            "data": {"actual": {"name": "TypeError", "message": "x is undefined",
                                "stack": "TypeError: x is undefined\n    at body (t.js:3:1)"}},
        })
        actual = event.data["actual"]
        assert isinstance(actual, RemoteError)
        assert actual.name == "TypeError"
        assert actual.message == "x is undefined"
        assert actual.stack == "TypeError: x is undefined\n    at body (t.js:3:1)"

    def test_assert_actual_mapping_without_stack_is_a_value(self):
        event = event_from_dict({"type": "assert", "data": {"actual": {"name": "plain"}}})
        assert event.data["actual"] == {"name": "plain"}

    @pytest.mark.parametrize("raw,field", [
        ({"type": "end", "data": {"asserts": None}}, "asserts"),
        ({"type": "end", "data": {"failed": "many"}}, "failed"),
        ({"type": "end", "data": {"skipped": [1]}}, "skipped"),
        ({"type": "assert", "diffTime": "slow"}, "diffTime"),
        ({"type": "test", "diffTime": {"ms": 1}}, "diffTime"),
    ])
    def test_wrongly_typed_field(self, raw, field):
        with pytest.raises(EventFormatError, match=f"Invalid {field}"):
            event_from_dict(raw)

    def test_unknown_type(self):
        event = event_from_dict({"type": "plan", "count": 3})
        assert event == UnknownEvent(type="plan", raw={"type": "plan", "count": 3})

    def test_missing_type(self):
        with pytest.raises(EventFormatError, match="no type"):
            event_from_dict({"name": "x"})

    def test_not_a_mapping(self):
        with pytest.raises(EventFormatError, match="must be an object"):
            event_from_dict(["test"])

    def test_wire_tags(self):
        assert [cls.type for cls in (TestEvent, EndEvent, CommentEvent, BailOutEvent, AssertEvent)] == [
            "test", "end", "comment", "bail-out", "assert",
        ]


class TestReadEvents:
    """JSON Lines decoding."""

    def test_skips_blank_lines(self):
        lines = ['{"type": "test", "name": "a"}\n', "\n", '{"type": "end", "name": "a"}\n']
        events = list(read_events(lines))
        assert [event.type for event in events] == ["test", "end"]

    def test_bad_json_reports_line_number(self):
        lines = ['{"type": "test"}', "{not json"]
        with pytest.raises(EventFormatError) as exc_info:
            list(read_events(lines))
        assert exc_info.value.line_number == 2
        assert str(exc_info.value).startswith("line 2: Invalid JSON")

    @pytest.mark.parametrize("line", [
        '{"type": "end", "data": {"asserts": null}}',
        '{"type": "assert", "diffTime": "slow"}',
    ])
    def test_wrongly_typed_field_reports_line_number(self, line):
        with pytest.raises(EventFormatError) as exc_info:
            list(read_events(['{"type": "test"}', line]))
        assert exc_info.value.line_number == 2
        assert str(exc_info.value).startswith("line 2: Invalid ")

    def test_missing_type_reports_line_number(self):
        with pytest.raises(EventFormatError, match="line 1: Event has no type"):
            list(read_events(['{"name": "x"}']))
