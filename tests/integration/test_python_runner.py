"""Tests for the Python file runner."""

import io
import sys
from pathlib import Path

import pytest

from tap_harness.errors import UnitExitError
from tap_harness.runners.python import PythonFileRunner, PythonFileRunnerConfig
from tap_harness.session import Session

from .conftest import WriteUnitFn


def execute(unit: Path, config: PythonFileRunnerConfig | None = None) -> tuple[object, str]:
    out = io.StringIO()
    with PythonFileRunner.from_config(config or PythonFileRunnerConfig()) as runner:
        result = runner.execute(str(unit), out)
    return result, out.getvalue()


def test_returns_result_global(passing_unit: Path) -> None:
    """Returns the unit's session and captures its output."""
    result, output = execute(passing_unit)

    assert isinstance(result, Session)
    assert result.success() is True
    assert output == "1..2\nok 1 - truth\nok 2 - sum\n"


def test_no_result_global(failing_unit: Path) -> None:
    """Returns None when the unit defines no result."""
    result, output = execute(failing_unit)

    assert result is None
    assert output == "1..2\nok 1 - first\nnot ok 2 - second\n"


def test_custom_result_name(write_unit: WriteUnitFn) -> None:
    """Reads the result from the configured global."""
    unit = write_unit("custom.py", "outcome = 'custom'\n")

    result, _ = execute(unit, PythonFileRunnerConfig(result_name="outcome"))

    assert result == "custom"


def test_propagates_exceptions(raising_unit: Path) -> None:
    """Lets the unit's exception through, keeping what it printed."""
    out = io.StringIO()

    with (
        PythonFileRunner.from_config(PythonFileRunnerConfig()) as runner,
        pytest.raises(RuntimeError, match="unit blew up"),
    ):
        runner.execute(str(raising_unit), out)

    assert out.getvalue() == "ok 1 - before\n"


def test_clean_exit(write_unit: WriteUnitFn) -> None:
    """Treats a zero exit status as finishing without a result."""
    unit = write_unit("exits.py", "import sys\nprint('ok 1')\nsys.exit(0)\n")

    result, output = execute(unit)

    assert result is None
    assert output == "ok 1\n"


def test_failing_exit(write_unit: WriteUnitFn) -> None:
    """Raises UnitExitError for a non-zero exit status."""
    unit = write_unit("exits.py", "import sys\nsys.exit(3)\n")

    with pytest.raises(UnitExitError, match="exited with status 3"):
        execute(unit)


def test_runs_as_main_with_argv(write_unit: WriteUnitFn) -> None:
    """Runs the unit as __main__ with its path as the only argument."""
    unit = write_unit(
        "main.py",
        """
        import sys

        result = (__name__, list(sys.argv))
        """,
    )

    result, _ = execute(unit)

    assert result == ("__main__", [str(unit)])


def test_imports_from_unit_directory(write_unit: WriteUnitFn) -> None:
    """Lets a unit import helper modules that sit beside it."""
    write_unit("tap_helpers_for_unit.py", "VALUE = 7\n")
    unit = write_unit(
        "imports.py",
        "from tap_helpers_for_unit import VALUE\nresult = VALUE\n",
    )

    result, _ = execute(unit)

    assert result == 7
    sys.modules.pop("tap_helpers_for_unit", None)


def test_restores_interpreter_state(passing_unit: Path) -> None:
    """Restores sys.argv and sys.path after the runner is done."""
    argv, path = sys.argv[:], sys.path[:]

    execute(passing_unit)

    assert sys.argv == argv
    assert sys.path == path
