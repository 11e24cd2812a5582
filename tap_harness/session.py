"""Assertion session: records results and renders them as TAP."""

import logging
import pickle
from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import Any

from tap_harness.comparators import Comparator, compare
from tap_harness.errors import UnsupportedTapVersionError
from tap_harness.models.config import SessionConfig, TapVersion, TraceMode
from tap_harness.models.result import ComparisonDetails, ResultLog
from tap_harness.outcome import CatchPolicy, Returned, invoke
from tap_harness.tap import encode_json, render_diagnostic, render_tap
from tap_harness.trace import capture_stack
from tap_harness.types import TypeRegistry

log = logging.getLogger(__name__)


class Session:
    """Accumulates assertion results for one test unit.

    Every assertion funnels into ``ok()``. Derived assertions run one call
    level deeper so that stack traces report the line that called them
    rather than the helper itself.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        *,
        types: TypeRegistry | None = None,
    ) -> None:
        """Create a session.

        Args:
            config: Plan, trace mode and TAP version defaults; verbosity is
                read by the harness only
            types: Registry used by ``is_type()``; defaults to the built-in
                category tags

        """
        config = config or SessionConfig()
        self.types = types or TypeRegistry()
        self.call_depth = 0
        self._planned = config.plan
        self._trace_mode = config.trace
        self._tap_version = config.version
        self._ran = 0
        self._failed = 0
        self._skipped = 0
        self._todo = 0
        self._logs: list[ResultLog | str] = []

    def __repr__(self) -> str:
        return (
            f"Session(planned={self._planned}, ran={self._ran}, "
            f"failed={self._failed}, skipped={self._skipped}, todo={self._todo})"
        )

    # Configuration

    def plan(self, count: int) -> "Session":
        """Set the number of planned assertions. Below 1 means unplanned."""
        self._planned = max(count, 0)
        return self

    def trace(self, mode: TraceMode = TraceMode.FAILURE_SITE) -> "Session":
        """Set how much of the call stack failed assertions record."""
        self._trace_mode = TraceMode(mode)
        return self

    def version(self, version: int | None = None) -> "TapVersion | Session":
        """Get the TAP version, or set it when ``version`` is given.

        Raises:
            UnsupportedTapVersionError: If the version is not 12 or 13

        """
        if version is None:
            return self._tap_version
        try:
            self._tap_version = TapVersion(version)
        except ValueError:
            raise UnsupportedTapVersionError(
                f"Invalid TAP version {version}, must be 12 or 13"
            ) from None
        return self

    # Queries

    def planned(self) -> int:
        return self._planned

    def ran(self) -> int:
        return self._ran

    def failed(self, exclude_todo: bool = False) -> int:
        """Number of failed assertions, optionally not counting TODO ones."""
        return self._failed - self._todo if exclude_todo else self._failed

    def skipped(self) -> int:
        return self._skipped

    def are_todo(self) -> int:
        return self._todo

    @property
    def logs(self) -> tuple[ResultLog | str, ...]:
        """Results and raw diagnostics in the order they were recorded."""
        return tuple(self._logs)

    def success(self, exclude_todo: bool = True) -> bool:
        """Return True if nothing failed and the plan (if any) was met."""
        return self.failed(exclude_todo) == 0 and (
            self._planned == 0 or self._planned == self._ran
        )

    # Assertions

    @contextmanager
    def _nested(self) -> Generator[None]:
        self.call_depth += 1
        try:
            yield
        finally:
            self.call_depth -= 1

    def _record(
        self,
        test: bool,
        description: str | None = None,
        directive: Any = None,
        *,
        skipped: bool = False,
        todo: bool = False,
        reason: str | None = None,
        comparison: ComparisonDetails | None = None,
    ) -> ResultLog:
        self._ran += 1
        stack_trace = None
        if not test:
            self._failed += 1
            if self._trace_mode is not TraceMode.NONE:
                stack_trace = capture_stack(skip=1)
            log.debug("Assertion %d failed: %s", self._ran, description)
        if skipped:
            self._skipped += 1
        if todo:
            self._todo += 1

        entry = ResultLog(
            ok=bool(test),
            skipped=skipped,
            todo=todo,
            reason=reason if isinstance(reason, str) else "",
            description=description,
            directive=directive,
            comparison=comparison if not test else None,
            trace_level=self.call_depth,
            stack_trace=stack_trace,
            full_trace=self._trace_mode is TraceMode.FULL_STACK,
        )
        self._logs.append(entry)
        return entry

    def ok(
        self, test: bool, description: str | None = None, directive: Any = None
    ) -> ResultLog:
        """Record an assertion that passes if ``test`` is true."""
        with self._nested():
            return self._record(test, description, directive)

    def fail(self, description: str | None = None, directive: Any = None) -> ResultLog:
        """Record a failed assertion."""
        with self._nested():
            return self.ok(False, description, directive)

    def pass_(self, description: str | None = None, directive: Any = None) -> ResultLog:
        """Record a passed assertion."""
        with self._nested():
            return self.ok(True, description, directive)

    def dies(
        self,
        func: Callable[[], Any],
        description: str | None = None,
        catch: CatchPolicy = CatchPolicy.ALL,
    ) -> ResultLog:
        """Pass if calling ``func`` raises an exception accepted by ``catch``.

        The raised exception, if any, becomes the result's directive.
        """
        outcome = invoke(func)
        directive = None if isinstance(outcome, Returned) else outcome.exception
        with self._nested():
            return self._record(catch.accepts(outcome), description, directive)

    def cmp(
        self,
        got: Any,
        want: Any,
        comparator: Comparator | str,
        description: str | None = None,
        stringify: bool = True,
    ) -> ResultLog:
        """Compare ``got`` against ``want`` with a comparator or its alias.

        Unknown comparators always fail. On failure, both values and the
        comparator are kept for the diagnostics; ``stringify`` renders the
        values as JSON.
        """
        test = compare(got, want, comparator)
        details = ComparisonDetails(
            got=got, wanted=want, comparator=str(comparator), stringify=stringify
        )
        with self._nested():
            return self._record(test, description, comparison=details)

    def is_(
        self,
        got: Any,
        want: Any,
        description: str | None = None,
        stringify: bool = True,
    ) -> ResultLog:
        """Pass if ``got`` and ``want`` are identical (same type and value)."""
        with self._nested():
            return self.cmp(got, want, Comparator.IDENTICAL, description, stringify)

    def isnt(
        self,
        got: Any,
        want: Any,
        description: str | None = None,
        stringify: bool = True,
    ) -> ResultLog:
        """Pass if ``got`` and ``want`` are not identical."""
        with self._nested():
            return self.cmp(
                got, want, Comparator.NOT_IDENTICAL, description, stringify
            )

    def is_json(self, got: Any, want: Any, description: str | None = None) -> ResultLog:
        """Pass if both values encode to the same JSON text.

        Mapping keys are encoded in insertion order, so equal mappings built
        in a different order do not match.
        """
        with self._nested():
            return self.is_(encode_json(got), encode_json(want), description, False)

    def is_serialized(
        self,
        got: Any,
        want: Any,
        description: str | None = None,
        raw_output: bool = False,
    ) -> ResultLog:
        """Pass if both values pickle to the same bytes.

        On failure the diagnostics show the pickled data (hex) when
        ``raw_output`` is set, otherwise the values themselves.
        """
        try:
            got_data = pickle.dumps(got)
            want_data = pickle.dumps(want)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            with self._nested():
                return self._record(False, description, e)

        test = got_data == want_data
        if raw_output:
            details = ComparisonDetails(
                got=got_data.hex(), wanted=want_data.hex(), stringify=False
            )
        else:
            details = ComparisonDetails(got=got, wanted=want, stringify=True)
        with self._nested():
            return self._record(test, description, comparison=details)

    def is_type(self, got: Any, want: str, description: str | None = None) -> ResultLog:
        """Pass if ``got`` is of the named type, base class or capability."""
        with self._nested():
            return self._record(self.types.matches(got, want), description)

    def skip(self, reason: str | None = None, description: str | None = None) -> ResultLog:
        """Record a skipped assertion, which counts as a pass."""
        with self._nested():
            return self._record(True, description, skipped=True, reason=reason)

    def todo(self, reason: str | None = None, description: str | None = None) -> ResultLog:
        """Record a TODO assertion, which counts as a failure."""
        with self._nested():
            return self._record(False, description, todo=True, reason=reason)

    def diag(self, message: Any) -> "Session":
        """Add a raw diagnostic line. Strings are kept verbatim, others JSON."""
        self._logs.append(render_diagnostic(message))
        return self

    # Rendering

    def tap(self) -> str:
        """Render all results as a TAP document."""
        return render_tap(
            self._logs,
            planned=self._planned,
            ran=self._ran,
            failed=self._failed,
            skipped=self._skipped,
        )
