"""Classification of what happens when a callable is invoked."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

ERROR_TYPES: tuple[type[Exception], ...] = (
    ArithmeticError,
    AssertionError,
    AttributeError,
    ImportError,
    MemoryError,
    NameError,
    RecursionError,
    SyntaxError,
    SystemError,
    TypeError,
)
"""Programming and interpreter errors. Other exceptions are recoverable."""


@dataclass(frozen=True, kw_only=True)
class Returned:
    """The callable returned normally."""

    value: Any


@dataclass(frozen=True, kw_only=True)
class ExceptionRaised:
    """The callable raised a recoverable exception."""

    exception: Exception


@dataclass(frozen=True, kw_only=True)
class ErrorRaised:
    """The callable raised a programming or interpreter error."""

    exception: Exception


type Outcome = Returned | ExceptionRaised | ErrorRaised


class CatchPolicy(Enum):
    """Which raised categories count as a success for Session.dies()."""

    ALL = "all"
    EXCEPTIONS_ONLY = "exceptions"
    ERRORS_ONLY = "errors"

    def accepts(self, outcome: Outcome) -> bool:
        """Return True if the outcome satisfies this policy."""
        match outcome:
            case ExceptionRaised():
                return self is not CatchPolicy.ERRORS_ONLY
            case ErrorRaised():
                return self is not CatchPolicy.EXCEPTIONS_ONLY
            case _:
                return False


def invoke(func: Callable[[], Any]) -> Outcome:
    """Call ``func`` with no arguments and classify the result."""
    try:
        value = func()
    except ERROR_TYPES as e:
        return ErrorRaised(exception=e)
    except Exception as e:  # noqa: BLE001
        return ExceptionRaised(exception=e)
    return Returned(value=value)
