# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Exceptions raised by the reporter."""

from typing import Optional


class ReporterError(Exception):
    """Base class for reporter errors."""
    pass


class NonInteractiveOutputError(ReporterError):
    """Raised at construction when the output cannot move the cursor."""
    pass


class ReporterClosedError(ReporterError):
    """Raised when an event arrives after a bail-out or the final summary."""
    pass


class EventSequenceError(ReporterError):
    """Raised when an ``end`` event has no open test to close."""
    pass


class EventFormatError(ReporterError):
    """Raised when wire input cannot be decoded into an event."""
    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
