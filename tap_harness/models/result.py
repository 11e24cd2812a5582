"""Models for individual assertion results."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, kw_only=True)
class StackFrame:
    """One frame of a captured call stack."""

    file: str
    line: int
    function: str
    class_name: str | None = None


@dataclass(frozen=True, kw_only=True)
class ComparisonDetails:
    """Values recorded by a failed comparison, for diagnostics."""

    got: Any
    wanted: Any
    comparator: str | None = None
    stringify: bool = True


@dataclass(frozen=True, kw_only=True)
class ResultLog:
    """Outcome of a single assertion.

    Skipped results are always passes and TODO results are always failures;
    both carry the reason in ``reason``.
    """

    ok: bool
    skipped: bool = False
    todo: bool = False
    reason: str = ""
    description: str | None = None
    directive: Any = None
    comparison: ComparisonDetails | None = None
    trace_level: int = 0
    stack_trace: tuple[StackFrame, ...] | None = None
    full_trace: bool = False

    @property
    def reported_frame(self) -> StackFrame | None:
        """Frame of the caller that made the assertion, if a trace was kept."""
        if not self.stack_trace:
            return None
        return self.stack_trace[min(self.trace_level, len(self.stack_trace) - 1)]
