"""Configuration models for sessions and the harness."""

from collections.abc import Mapping, Sequence
from enum import IntEnum, StrEnum
from typing import Any

from pydantic import Field

from tap_harness.models.base import Model


class TraceMode(IntEnum):
    """How much of the call stack a failed assertion records."""

    NONE = 0
    FAILURE_SITE = 1
    FULL_STACK = 2


class TapVersion(IntEnum):
    """Supported TAP versions. Version 13 is accepted but renders as 12."""

    V12 = 12
    V13 = 13


class Verbosity(StrEnum):
    """Amount of per-unit reporting the harness logs."""

    NONE = "none"
    SUMMARY = "summary"
    DETAILS = "details"
    DEBUG = "debug"

    @property
    def level(self) -> int:
        """Ordering of verbosity settings, NONE being lowest."""
        return list(Verbosity).index(self)

    def at_least(self, other: "Verbosity") -> bool:
        """Return True if this verbosity includes ``other``."""
        return self.level >= other.level


class SessionConfig(Model):
    """Defaults applied to a new Session."""

    plan: int = Field(default=0, ge=0, description="Planned assertions (0 = unplanned)")
    trace: TraceMode = Field(
        default=TraceMode.NONE, description="Stack trace detail for failures"
    )
    version: TapVersion = Field(default=TapVersion.V12, description="TAP version")
    verbosity: Verbosity = Field(
        default=Verbosity.SUMMARY, description="Reporting verbosity"
    )


class DirectoryEntry(Model):
    """A directory of units to add to the harness."""

    path: str = Field(..., description="Directory containing test units")
    extensions: Sequence[str] = Field(
        default=("py",), description="Unit file extensions, without leading dot"
    )


class HarnessConfig(Model):
    """Complete harness configuration loaded from a YAML file."""

    runner: str = Field(default="python", description="Unit runner entry-point key")
    runner_config: Mapping[str, Any] = Field(
        default_factory=dict, description="Options for the runner's config model"
    )
    directories: Sequence[DirectoryEntry] = Field(
        default_factory=list, description="Directories to scan for units"
    )
    units: Sequence[str] = Field(
        default_factory=list, description="Individual units to run"
    )
    plan: bool = Field(default=True, description="Plan the aggregate for all units")
    exclude_todo: bool = Field(
        default=True, description="Do not count TODO failures against a unit"
    )
    verbosity: Verbosity = Field(
        default=Verbosity.SUMMARY, description="Reporting verbosity"
    )
