# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Reporter configuration with Pydantic validation and env var substitution."""

import os
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field


class ReporterConfig(BaseModel):
    """Display options for TTYReporter.

    Keys may be given in snake_case or in the engine's camelCase
    (``renumberAsserts``, ``failureOnly``, ...).
    """
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    renumber_asserts: bool = Field(default=False, alias="renumberAsserts")  # local sequential ids
    failure_only: bool = Field(default=False, alias="failureOnly")
    show_banner: bool = Field(default=True, alias="showBanner")  # panel summary vs one line
    show_time: bool = Field(default=True, alias="showTime")
    show_data: bool = Field(default=False, alias="showData")  # operator/expected/actual/stack

    def with_overrides(self, **overrides) -> "ReporterConfig":
        """Return a validated copy with the given fields replaced."""
        if not overrides:
            return self
        return ReporterConfig.model_validate({**self.model_dump(), **overrides})

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ReporterConfig":
        """Load config from YAML file with env var substitution."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            raw_content = f.read()

        # Substitute environment variables: ${VAR_NAME}
        substituted = _substitute_env_vars(raw_content)

        data = yaml.safe_load(substituted) or {}
        return cls.model_validate(data)


def _substitute_env_vars(content: str) -> str:
    """Replace ${VAR_NAME} with environment variable values."""
    pattern = re.compile(r'\$\{([^}]+)\}')

    def replacer(match: re.Match) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ValueError(f"Environment variable not set: {var_name}")
        return value

    return pattern.sub(replacer, content)
