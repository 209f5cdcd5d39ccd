# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Stringification of counters, durations and assertion values."""

import traceback
from typing import Optional

from rich.pretty import pretty_repr

from ttyreporter.events import RemoteError


def format_number(value: float, precision: int = 0) -> str:
    """Format a number with thousands separators and fixed precision."""
    return f"{value:,.{precision}f}"


def format_time(ms: Optional[float]) -> str:
    """Format a duration given in milliseconds.

    Examples:
        12.5 -> "12.500ms"
        1500 -> "1.500s"
        75000 -> "1m 15.000s"
    """
    ms = ms or 0
    if ms < 1000:
        return format_number(ms, 3) + "ms"
    seconds = ms / 1000
    if seconds < 60:
        return format_number(seconds, 3) + "s"
    minutes, seconds = divmod(seconds, 60)
    return f"{int(minutes)}m {format_number(seconds, 3)}s"


def format_value(value: object) -> str:
    """Render an expected/actual value on a single line."""
    if isinstance(value, BaseException):
        message = str(value)
        name = value.name if isinstance(value, RemoteError) else type(value).__name__
        return f"{name}: {message}" if message else name
    # A very wide max_width keeps containers on one line
    return pretty_repr(value, max_width=1_000_000)


def format_stack(value: object) -> Optional[str]:
    """Extract a stack trace from an exception or a pre-rendered trace string."""
    if isinstance(value, RemoteError):
        return value.stack or None
    if isinstance(value, BaseException):
        if value.__traceback__ is None:
            return None
        return "".join(
            traceback.format_exception(type(value), value, value.__traceback__)
        ).rstrip("\n")
    if isinstance(value, str) and value:
        return value
    return None
