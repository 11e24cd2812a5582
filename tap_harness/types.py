"""Type-name matching for Session.is_type()."""

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

type TypeCheck = Callable[[Any], bool]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, str | bytes | bytearray
    )


CATEGORIES: Mapping[str, TypeCheck] = {
    "null": lambda value: value is None,
    "bool": lambda value: isinstance(value, bool),
    "int": lambda value: isinstance(value, int),
    "float": lambda value: isinstance(value, float),
    "string": lambda value: isinstance(value, str),
    "bytes": lambda value: isinstance(value, bytes | bytearray),
    "sequence": _is_sequence,
    "mapping": lambda value: isinstance(value, Mapping),
    "callable": callable,
    "iterable": lambda value: isinstance(value, Iterable),
}


def class_names(value: Any) -> set[str]:
    """Names of the value's class and all of its base classes.

    Each class contributes its name, its qualified name and its
    module-qualified name.
    """
    names: set[str] = set()
    for cls in type(value).__mro__:
        names.update(
            {cls.__name__, cls.__qualname__, f"{cls.__module__}.{cls.__qualname__}"}
        )
    return names


@dataclass(kw_only=True)
class TypeRegistry:
    """Named capabilities a value can be checked against.

    Starts with the built-in category tags. Further capabilities are
    registered explicitly, e.g. ``registry.register("Closeable", io.IOBase)``.
    Names are matched case-sensitively.
    """

    checks: dict[str, TypeCheck] = field(default_factory=lambda: dict(CATEGORIES))

    def register(self, name: str, *types: type) -> "TypeRegistry":
        """Register ``name`` as satisfied by instances of any of ``types``."""
        self.checks[name] = lambda value: isinstance(value, types)
        return self

    def matches(self, value: Any, name: str) -> bool:
        """Return True if ``value`` is of the type or capability ``name``."""
        if (check := self.checks.get(name)) is not None and check(value):
            return True
        return name in class_names(value)
