# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""ttyreporter - live terminal rendering of test execution events.

A test-execution engine feeds lifecycle events (test start/end, assertions,
comments, bail-out) to a TTYReporter one at a time. The reporter prints
nested progress lines, keeps a running score pinned to the last terminal
line and finishes with a summary panel.

Submodules:
- events: Event dataclasses and JSON Lines decoding
- reporter: TTYReporter, the event consumer
- summary: Final report and per-test badge
- footer: Pinned score line
- box, palette, formatters: Text layout, styling and stringification
- config: Configuration loading from YAML
- cli: Command-line replay of recorded event streams
"""

from ttyreporter.config import ReporterConfig
from ttyreporter.errors import (
    EventFormatError,
    EventSequenceError,
    NonInteractiveOutputError,
    ReporterClosedError,
    ReporterError,
)
from ttyreporter.events import (
    AssertEvent,
    BailOutEvent,
    CommentEvent,
    EndEvent,
    Event,
    RemoteError,
    TestEvent,
    TestTotals,
    UnknownEvent,
    event_from_dict,
    read_events,
)
from ttyreporter.reporter import TTYReporter
from ttyreporter.sink import ConsoleSink, OutputSink

__version__ = "0.1.0"

__all__ = [
    "AssertEvent",
    "BailOutEvent",
    "CommentEvent",
    "ConsoleSink",
    "EndEvent",
    "Event",
    "EventFormatError",
    "EventSequenceError",
    "NonInteractiveOutputError",
    "OutputSink",
    "ReporterClosedError",
    "ReporterConfig",
    "RemoteError",
    "ReporterError",
    "TTYReporter",
    "TestEvent",
    "TestTotals",
    "UnknownEvent",
    "event_from_dict",
    "read_events",
]
