"""Counts-only test results."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsSuccess(Protocol):
    """Anything that can report whether its tests succeeded."""

    def success(self, exclude_todo: bool = True) -> bool:
        """Return True if all tests passed and the plan was met."""


@dataclass(frozen=True, kw_only=True)
class ResultSummary:
    """Summary counts for a test run.

    Produced by the TAP parser, or returned directly by a unit that does not
    use a Session.
    """

    planned: int = 0
    ran: int = 0
    failed: int = 0
    skipped: int = 0
    todo: int = 0

    def success(self, exclude_todo: bool = True) -> bool:
        """Return True if nothing failed and the plan (if any) was met."""
        failed = self.failed - self.todo if exclude_todo else self.failed
        return failed == 0 and (self.planned == 0 or self.planned == self.ran)
