"""Exceptions raised by the library.

Only configuration problems are raised to callers; assertion failures and
unit faults are recorded in a session instead.
"""


class TapHarnessError(Exception):
    """Base class for errors raised by tap_harness."""


class UnsupportedTapVersionError(TapHarnessError, ValueError):
    """Raised when a TAP version other than 12 or 13 is requested."""


class RunnerNotFoundError(TapHarnessError):
    """Raised when a unit runner is not found."""


class FunctionalNotStartedError(TapHarnessError, RuntimeError):
    """Raised when the functional interface is used before start()."""


class UnitExitError(TapHarnessError):
    """Raised when a unit exits with a non-zero status."""
