"""Comparison operators available to Session.cmp()."""

import logging
from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Any

log = logging.getLogger(__name__)


class Comparator(StrEnum):
    """Comparison operators, valued by their symbolic token."""

    IDENTICAL = "==="
    NOT_IDENTICAL = "!=="
    LOOSE_EQ = "=="
    LOOSE_NE = "!="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="


ALIASES: Mapping[str, Comparator] = {
    "===": Comparator.IDENTICAL,
    "is": Comparator.IDENTICAL,
    "!==": Comparator.NOT_IDENTICAL,
    "isnt": Comparator.NOT_IDENTICAL,
    "==": Comparator.LOOSE_EQ,
    "eq": Comparator.LOOSE_EQ,
    "!=": Comparator.LOOSE_NE,
    "ne": Comparator.LOOSE_NE,
    "<": Comparator.LT,
    "lt": Comparator.LT,
    ">": Comparator.GT,
    "gt": Comparator.GT,
    "<=": Comparator.LE,
    "le": Comparator.LE,
    "lte": Comparator.LE,
    ">=": Comparator.GE,
    "ge": Comparator.GE,
    "gte": Comparator.GE,
}


def identical(got: Any, want: Any) -> bool:
    """Strict equality: same type and equal value, recursively for containers.

    Dict key order is significant. Any value is identical to itself.
    """
    if got is want:
        return True
    if type(got) is not type(want):
        return False
    if isinstance(got, list | tuple):
        return len(got) == len(want) and all(
            identical(g, w) for g, w in zip(got, want, strict=True)
        )
    if isinstance(got, dict):
        return list(got) == list(want) and all(
            identical(got[key], want[key]) for key in got
        )
    return bool(got == want)


OPERATIONS: Mapping[Comparator, Callable[[Any, Any], bool]] = {
    Comparator.IDENTICAL: identical,
    Comparator.NOT_IDENTICAL: lambda got, want: not identical(got, want),
    Comparator.LOOSE_EQ: lambda got, want: bool(got == want),
    Comparator.LOOSE_NE: lambda got, want: bool(got != want),
    Comparator.LT: lambda got, want: bool(got < want),
    Comparator.GT: lambda got, want: bool(got > want),
    Comparator.LE: lambda got, want: bool(got <= want),
    Comparator.GE: lambda got, want: bool(got >= want),
}


def resolve(token: Comparator | str) -> Comparator | None:
    """Look up a comparator by member, token or alias."""
    if isinstance(token, Comparator):
        return token
    return ALIASES.get(token)


def compare(got: Any, want: Any, token: Comparator | str) -> bool:
    """Evaluate ``got <token> want``.

    Unknown tokens and comparisons that raise count as a false result.
    """
    if (comparator := resolve(token)) is None:
        log.debug("Unknown comparator %r", token)
        return False
    try:
        return OPERATIONS[comparator](got, want)
    except Exception as e:  # noqa: BLE001
        log.debug("Comparison %r %s %r raised %s", got, comparator, want, e)
        return False
