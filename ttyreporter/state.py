# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Mutable bookkeeping owned by a single reporter instance."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TestFrame:
    """One currently open test."""
    __test__ = False

    name: Optional[str]
    lines: int  # content lines emitted before the test opened
    fail: bool = False  # failure header already emitted (failure-only mode)


@dataclass
class ReporterState:
    """Counters and open-test stack for one run."""
    depth: int = 0
    test_counter: int = -1  # the root test is not counted
    assert_counter: int = 0
    successful_asserts: int = 0
    failed_asserts: int = 0
    todo_asserts: int = 0
    lines: int = 0
    frames: list[TestFrame] = field(default_factory=list)

    @property
    def current_frame(self) -> Optional[TestFrame]:
        return self.frames[-1] if self.frames else None

    @property
    def total_asserts(self) -> int:
        return self.successful_asserts + self.failed_asserts
