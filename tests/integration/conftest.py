"""Fixtures for integration tests."""

import textwrap
from pathlib import Path
from typing import Protocol

import pytest


class WriteUnitFn(Protocol):
    """Protocol for unit file creation function."""

    def __call__(self, name: str, source: str) -> Path:
        """Write a unit file and return its path."""


@pytest.fixture
def unit_dir(tmp_path: Path) -> Path:
    """Create an empty directory for test units."""
    path = tmp_path / "t"
    path.mkdir()
    return path


@pytest.fixture
def write_unit(unit_dir: Path) -> WriteUnitFn:
    """Return a function that writes test units into the unit directory."""

    def _write(name: str, source: str) -> Path:
        path = unit_dir / name
        path.write_text(textwrap.dedent(source).lstrip())
        return path

    return _write


@pytest.fixture
def passing_unit(write_unit: WriteUnitFn) -> Path:
    """A unit that builds a passing session with the functional interface."""
    return write_unit(
        "passing.py",
        """
        from tap_harness import functional as t

        t.start()
        t.plan(2)
        t.ok(True, "truth")
        t.is_(1 + 1, 2, "sum")
        print(t.get_tap(), end="")
        result = t.test_instance()
        """,
    )


@pytest.fixture
def failing_unit(write_unit: WriteUnitFn) -> Path:
    """A unit that prints failing TAP without returning a result."""
    return write_unit(
        "failing.py",
        """
        print("1..2")
        print("ok 1 - first")
        print("not ok 2 - second")
        """,
    )


@pytest.fixture
def raising_unit(write_unit: WriteUnitFn) -> Path:
    """A unit that prints a passing line and then raises."""
    return write_unit(
        "raising.py",
        """
        print("ok 1 - before")
        raise RuntimeError("unit blew up")
        """,
    )
