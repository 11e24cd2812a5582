"""Configuration for the command runner."""

import sys
from collections.abc import Mapping, Sequence

from pydantic import BaseModel, Field


class CommandRunnerConfig(BaseModel):
    """Configuration for the command runner.

    Each unit is run as ``[*command, unit]``, so the default runs units
    with the current Python interpreter.
    """

    command: Sequence[str] = Field(default_factory=lambda: (sys.executable,))
    cwd: str | None = None
    env: Mapping[str, str] | None = None
