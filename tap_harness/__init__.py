"""TAP test assertions, reporting and harness."""

from tap_harness.comparators import Comparator
from tap_harness.errors import (
    FunctionalNotStartedError,
    RunnerNotFoundError,
    TapHarnessError,
    UnitExitError,
    UnsupportedTapVersionError,
)
from tap_harness.harness import Harness, UnitExecution
from tap_harness.models.config import (
    SessionConfig,
    TapVersion,
    TraceMode,
    Verbosity,
)
from tap_harness.models.result import ComparisonDetails, ResultLog, StackFrame
from tap_harness.models.summary import ResultSummary, SupportsSuccess
from tap_harness.outcome import CatchPolicy
from tap_harness.session import Session
from tap_harness.tap import TAPParser, parse_tap
from tap_harness.types import TypeRegistry

__all__ = [
    "CatchPolicy",
    "Comparator",
    "ComparisonDetails",
    "FunctionalNotStartedError",
    "Harness",
    "ResultLog",
    "ResultSummary",
    "RunnerNotFoundError",
    "Session",
    "SessionConfig",
    "StackFrame",
    "SupportsSuccess",
    "TAPParser",
    "TapHarnessError",
    "TapVersion",
    "TraceMode",
    "TypeRegistry",
    "UnitExecution",
    "UnitExitError",
    "UnsupportedTapVersionError",
    "Verbosity",
    "parse_tap",
]
