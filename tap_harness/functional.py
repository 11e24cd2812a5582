"""Module-level assertion functions bound to a current Session.

Usage in a test file::

    from tap_harness import functional as t

    t.start()
    t.plan(2)
    t.ok(1 == 1, "ok()")
    t.is_("a", "a", "is_(str,str)")
    print(t.get_tap(), end="")
    result = t.test_instance()

See the Session method of the same name for details of each function.
"""

from collections.abc import Callable
from typing import Any

from tap_harness.comparators import Comparator
from tap_harness.errors import FunctionalNotStartedError
from tap_harness.models.config import SessionConfig, TapVersion, TraceMode
from tap_harness.models.result import ResultLog
from tap_harness.outcome import CatchPolicy
from tap_harness.session import Session

_current: Session | None = None


def start(config: SessionConfig | None = None) -> Session:
    """Start a new current Session and return it."""
    global _current
    _current = Session(config)
    # Reported frames skip the forwarding function below.
    _current.call_depth += 1
    return _current


def test_instance() -> Session:
    """The current Session.

    Raises:
        FunctionalNotStartedError: If start() has not been called

    """
    if _current is None:
        raise FunctionalNotStartedError("call start() before using the functional API")
    return _current


def plan(count: int) -> Session:
    return test_instance().plan(count)


def trace(mode: TraceMode = TraceMode.FAILURE_SITE) -> Session:
    return test_instance().trace(mode)


def version(version: int | None = None) -> TapVersion | Session:
    return test_instance().version(version)


def ok(test: bool, description: str | None = None, directive: Any = None) -> ResultLog:
    return test_instance().ok(test, description, directive)


def fail(description: str | None = None, directive: Any = None) -> ResultLog:
    return test_instance().fail(description, directive)


def pass_(description: str | None = None, directive: Any = None) -> ResultLog:
    return test_instance().pass_(description, directive)


def dies(
    func: Callable[[], Any],
    description: str | None = None,
    catch: CatchPolicy = CatchPolicy.ALL,
) -> ResultLog:
    return test_instance().dies(func, description, catch)


def cmp_ok(
    got: Any,
    want: Any,
    comparator: Comparator | str,
    description: str | None = None,
    stringify: bool = True,
) -> ResultLog:
    return test_instance().cmp(got, want, comparator, description, stringify)


def is_(
    got: Any, want: Any, description: str | None = None, stringify: bool = True
) -> ResultLog:
    return test_instance().is_(got, want, description, stringify)


def isnt(
    got: Any, want: Any, description: str | None = None, stringify: bool = True
) -> ResultLog:
    return test_instance().isnt(got, want, description, stringify)


def is_json(got: Any, want: Any, description: str | None = None) -> ResultLog:
    return test_instance().is_json(got, want, description)


def is_serialized(
    got: Any, want: Any, description: str | None = None, raw_output: bool = False
) -> ResultLog:
    return test_instance().is_serialized(got, want, description, raw_output)


def is_type(got: Any, want: str, description: str | None = None) -> ResultLog:
    return test_instance().is_type(got, want, description)


def skip(reason: str | None = None, description: str | None = None) -> ResultLog:
    return test_instance().skip(reason, description)


def todo(reason: str | None = None, description: str | None = None) -> ResultLog:
    return test_instance().todo(reason, description)


def diag(message: Any) -> Session:
    return test_instance().diag(message)


def get_tap() -> str:
    """TAP output of the current Session."""
    return test_instance().tap()
