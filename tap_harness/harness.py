"""Test harness running units and aggregating their outcomes."""

import io
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from tap_harness.models.config import SessionConfig, Verbosity
from tap_harness.models.result import ResultLog
from tap_harness.models.summary import SupportsSuccess
from tap_harness.runners.base import UnitRunner
from tap_harness.session import Session
from tap_harness.tap import parse_tap

log = logging.getLogger(__name__)

STATUS_SYMBOLS = {
    True: "✓",
    False: "✗",
}


@dataclass(frozen=True, kw_only=True)
class UnitExecution:
    """What running one unit produced."""

    unit: str
    output: str
    result: object | None = None
    error: Exception | None = None


@dataclass(kw_only=True)
class Harness:
    """Runs test units in order and records one pass/fail per unit.

    A unit passes when the result object it returns reports success, or,
    failing that, when the TAP text it printed parses as a success. A unit
    that raises is recorded as a failure and the run carries on.
    """

    runner: UnitRunner
    config: SessionConfig = field(default_factory=SessionConfig)
    units: list[str] = field(default_factory=list)
    session: Session = field(init=False, repr=False)
    outputs: dict[str, str] = field(default_factory=dict, init=False, repr=False)
    results: dict[str, object | None] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.session = Session(self.config)

    def add_unit(self, unit: str) -> "Harness":
        """Add a unit to run, if the runner can find it."""
        if self.runner.exists(unit):
            self.units.append(unit)
        else:
            log.debug("Ignoring missing unit %s", unit)
        return self

    def add_directory(
        self, directory: str, extensions: Sequence[str] = ("py",)
    ) -> "Harness":
        """Add every unit in a directory whose name has one of the extensions."""
        found = self.runner.list_units(directory, extensions)
        log.debug("Found %d unit(s) in %s", len(found), directory)
        self.units.extend(found)
        return self

    def run(self, plan: bool = True, exclude_todo: bool = True) -> "Harness":
        """Run every registered unit in order.

        Args:
            plan: Plan the aggregate session for the number of units
            exclude_todo: Do not count TODO failures against a unit

        Returns:
            The harness itself

        """
        if plan:
            self.session.plan(len(self.units))
        log.info("Running %d unit(s)...", len(self.units))
        for unit in self.units:
            self.run_unit(unit, exclude_todo)
        return self

    def run_unit(self, unit: str, exclude_todo: bool = True) -> UnitExecution:
        """Run one unit and record whether it succeeded.

        Output is captured into a buffer owned by this call. Exceptions from
        the unit are recorded as a failure naming the unit, never re-raised.
        """
        result: object | None = None
        error: Exception | None = None
        passed = False

        with io.StringIO() as buffer:
            try:
                result = self.runner.execute(unit, buffer)
            except Exception as e:  # noqa: BLE001
                error = e
                log.error("Unit %s raised: %s", unit, e, exc_info=e)
            output = buffer.getvalue()

        self.outputs[unit] = output
        self.results[unit] = result

        if error is None and isinstance(result, SupportsSuccess):
            try:
                passed = result.success(exclude_todo)
            except Exception as e:  # noqa: BLE001
                error = e
                log.error("Result of unit %s raised: %s", unit, e, exc_info=e)

        if error is not None:
            entry = self.session.fail(unit, str(error) or type(error).__name__)
        elif isinstance(result, SupportsSuccess):
            entry = self.session.ok(passed, unit)
        elif output.strip():
            summary = parse_tap(output)
            if self.config.verbosity.at_least(Verbosity.DEBUG):
                log.debug("Unit %s parsed as %s", unit, summary)
            entry = self.session.ok(summary.success(exclude_todo), unit)
        else:
            entry = self.session.fail(unit, "nothing returned from test")

        self._report(unit, entry, output)
        return UnitExecution(unit=unit, output=output, result=result, error=error)

    def _report(self, unit: str, entry: ResultLog, output: str) -> None:
        verbosity = self.config.verbosity
        if not verbosity.at_least(Verbosity.SUMMARY):
            return
        log.info("%s %s", STATUS_SYMBOLS[entry.ok], unit)
        if not entry.ok and verbosity.at_least(Verbosity.DETAILS) and output:
            log.info("Output of %s:\n%s", unit, output.rstrip())

    def success(self, exclude_todo: bool = True) -> bool:
        """Return True if every unit passed and all planned units ran."""
        return self.session.success(exclude_todo)

    def summary(self) -> str:
        """TAP document with one line per unit."""
        return self.session.tap()

    def tap(self) -> str:
        """TAP document with one line per unit."""
        return self.session.tap()

    def as_session(self) -> Session:
        """The aggregate session, for nesting suites."""
        return self.session

    def planned(self) -> int:
        return self.session.planned()

    def ran(self) -> int:
        return self.session.ran()

    def failed(self, exclude_todo: bool = False) -> int:
        return self.session.failed(exclude_todo)

    def skipped(self) -> int:
        return self.session.skipped()

    def are_todo(self) -> int:
        return self.session.are_todo()
