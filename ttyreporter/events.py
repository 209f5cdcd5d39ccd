# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Lifecycle events emitted by a test-execution engine.

The five event kinds form a tagged union (``Event``). Each kind carries only
the fields it needs and exposes its wire tag as the ``type`` class attribute.
Anything else decodes to ``UnknownEvent`` so a reporter can decide how to
treat it.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, Iterator, Mapping, Optional, Union

from ttyreporter.errors import EventFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TestTotals:
    """Aggregate counters reported when a test ends."""
    __test__ = False  # not a pytest test class
    asserts: int = 0
    failed: int = 0
    skipped: int = 0

    @property
    def passed(self) -> int:
        return self.asserts - self.failed - self.skipped


@dataclass(frozen=True)
class TestEvent:
    """A test has started."""
    __test__ = False
    type: ClassVar[str] = "test"
    name: Optional[str] = None


@dataclass(frozen=True)
class EndEvent:
    """A test has finished; ``data`` holds its totals."""
    type: ClassVar[str] = "end"
    name: Optional[str] = None
    fail: bool = False
    data: TestTotals = field(default_factory=TestTotals)
    diff_time: float = 0.0  # milliseconds


@dataclass(frozen=True)
class CommentEvent:
    type: ClassVar[str] = "comment"
    name: Optional[str] = None


@dataclass(frozen=True)
class BailOutEvent:
    """The engine gave up; no more events follow."""
    type: ClassVar[str] = "bail-out"
    name: Optional[str] = None


@dataclass(frozen=True)
class AssertEvent:
    """Outcome of a single assertion.

    ``data`` may hold ``expected`` and/or ``actual``. An exception stored as
    ``actual`` carries its own stack trace; otherwise ``marker`` (an exception
    or a rendered trace string) is used.
    """
    type: ClassVar[str] = "assert"
    name: Optional[str] = None
    fail: bool = False
    id: Optional[int] = None
    skip: bool = False
    todo: bool = False
    operator: Optional[str] = None
    data: Mapping[str, Any] = field(default_factory=dict)
    diff_time: float = 0.0  # milliseconds
    at: Optional[str] = None
    marker: Optional[Union[BaseException, str]] = None


@dataclass(frozen=True)
class UnknownEvent:
    """An event whose tag is not one of the five known kinds."""
    type: str
    raw: Mapping[str, Any] = field(default_factory=dict)


Event = Union[TestEvent, EndEvent, CommentEvent, BailOutEvent, AssertEvent]


class RemoteError(Exception):
    """An error raised inside the engine, decoded from its serialized form."""
    def __init__(self, name: str = "Error", message: str = "", stack: Optional[str] = None):
        super().__init__(message)
        self.name = name
        self.message = message
        self.stack = stack


def _coerce(value: Any, convert, field_name: str):
    try:
        return convert(value)
    except (TypeError, ValueError) as e:
        raise EventFormatError(f"Invalid {field_name}: {value!r}") from e


def _totals_from(data: Any) -> TestTotals:
    if not isinstance(data, Mapping):
        return TestTotals()
    return TestTotals(
        asserts=_coerce(data.get("asserts", 0), int, "asserts"),
        failed=_coerce(data.get("failed", 0), int, "failed"),
        skipped=_coerce(data.get("skipped", 0), int, "skipped"),
    )


def _actual_from(actual: Any) -> Any:
    # A serialized error object carries its own trace; anything else is a plain value
    if isinstance(actual, Mapping) and isinstance(actual.get("stack"), str):
        return RemoteError(
            name=str(actual.get("name") or "Error"),
            message=str(actual.get("message") or ""),
            stack=actual["stack"],
        )
    return actual


def _marker_from(marker: Any) -> Optional[str]:
    # On the wire a marker is either the trace itself or an object with a "stack" key
    if isinstance(marker, str):
        return marker
    if isinstance(marker, Mapping) and isinstance(marker.get("stack"), str):
        return marker["stack"]
    return None


def event_from_dict(raw: Mapping[str, Any]) -> Union[Event, UnknownEvent]:
    """Decode a wire-format event mapping.

    Args:
        raw: Mapping using the engine's keys (``type``, ``name``, ``diffTime``, ...)

    Returns:
        The matching event dataclass, or ``UnknownEvent`` for an unrecognized tag

    Raises:
        EventFormatError: If the mapping has no ``type`` or a field has the wrong type
    """
    if not isinstance(raw, Mapping):
        raise EventFormatError(f"Event must be an object, got {type(raw).__name__}")
    event_type = raw.get("type")
    if not event_type:
        raise EventFormatError("Event has no type")

    name = raw.get("name")
    diff_time = _coerce(raw.get("diffTime", raw.get("diff_time", 0)) or 0, float, "diffTime")

    if event_type == TestEvent.type:
        return TestEvent(name=name)
    if event_type == EndEvent.type:
        return EndEvent(
            name=name,
            fail=bool(raw.get("fail", False)),
            data=_totals_from(raw.get("data")),
            diff_time=diff_time,
        )
    if event_type == CommentEvent.type:
        return CommentEvent(name=name)
    if event_type == BailOutEvent.type:
        return BailOutEvent(name=name)
    if event_type == AssertEvent.type:
        data = dict(raw["data"]) if isinstance(raw.get("data"), Mapping) else {}
        if "actual" in data:
            data["actual"] = _actual_from(data["actual"])
        return AssertEvent(
            name=name,
            fail=bool(raw.get("fail", False)),
            id=raw.get("id"),
            skip=bool(raw.get("skip", False)),
            todo=bool(raw.get("todo", False)),
            operator=raw.get("operator"),
            data=data,
            diff_time=diff_time,
            at=raw.get("at"),
            marker=_marker_from(raw.get("marker")),
        )
    return UnknownEvent(type=str(event_type), raw=dict(raw))


def read_events(lines: Iterable[str]) -> Iterator[Union[Event, UnknownEvent]]:
    """Decode a JSON Lines stream of events, skipping blank lines."""
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            raw = json.loads(line)
        except json.JSONDecodeError as e:
            raise EventFormatError(f"Invalid JSON: {e.msg}", line_number) from e
        try:
            yield event_from_dict(raw)
        except EventFormatError as e:
            raise EventFormatError(str(e), line_number) from e
