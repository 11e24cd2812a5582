"""End-to-end tests running real units through the harness."""

from pathlib import Path

from tap_harness.harness import Harness
from tap_harness.runners.command import CommandRunner, CommandRunnerConfig
from tap_harness.runners.python import PythonFileRunner, PythonFileRunnerConfig

from .conftest import WriteUnitFn


class TestPythonHarness:
    """Tests for the harness with the Python file runner."""

    def test_runs_directory(
        self,
        unit_dir: Path,
        passing_unit: Path,
        failing_unit: Path,
        raising_unit: Path,
    ) -> None:
        """Runs every unit in the directory and isolates the raising one."""
        with PythonFileRunner.from_config(PythonFileRunnerConfig()) as runner:
            harness = Harness(runner=runner).add_directory(str(unit_dir)).run()

        assert harness.summary() == (
            "1..3\n"
            f"not ok 1 - {failing_unit}\n"
            f"ok 2 - {passing_unit}\n"
            f"not ok 3 - {raising_unit} # unit blew up\n"
            "# Failed 2 tests out of 3\n"
        )
        assert harness.outputs[str(raising_unit)] == "ok 1 - before\n"

    def test_nested_harness(
        self, write_unit: WriteUnitFn, unit_dir: Path, passing_unit: Path
    ) -> None:
        """Uses a harness returned by a unit as that unit's result."""
        suite = unit_dir / "suite"
        suite.mkdir()
        (suite / "inner.py").write_text(passing_unit.read_text())
        outer = write_unit(
            "outer.py",
            f"""
            from tap_harness.harness import Harness
            from tap_harness.runners.python import PythonFileRunner, PythonFileRunnerConfig

            with PythonFileRunner.from_config(PythonFileRunnerConfig()) as runner:
                result = Harness(runner=runner).add_directory({str(suite)!r}).run()
            """,
        )

        with PythonFileRunner.from_config(PythonFileRunnerConfig()) as runner:
            harness = Harness(runner=runner).add_unit(str(outer)).run()

        assert harness.success() is True
        inner = harness.results[str(outer)]
        assert isinstance(inner, Harness)
        assert inner.ran() == 1

    def test_todo_units(self, write_unit: WriteUnitFn) -> None:
        """Passes a unit whose only failures are TODO, unless asked not to."""
        unit = write_unit(
            "todo.py",
            """
            from tap_harness.session import Session

            result = Session().plan(2)
            result.pass_("done")
            result.todo("not yet", "pending")
            """,
        )

        with PythonFileRunner.from_config(PythonFileRunnerConfig()) as runner:
            lenient = Harness(runner=runner).add_unit(str(unit)).run()
            strict = Harness(runner=runner).add_unit(str(unit)).run(exclude_todo=False)

        assert lenient.success() is True
        assert strict.success() is False


class TestCommandHarness:
    """Tests for the harness with the command runner."""

    def test_judges_by_output(
        self, unit_dir: Path, passing_unit: Path, failing_unit: Path
    ) -> None:
        """Parses each process's TAP output."""
        with CommandRunner.from_config(CommandRunnerConfig()) as runner:
            harness = Harness(runner=runner).add_directory(str(unit_dir)).run()

        assert harness.ran() == 2
        assert harness.failed() == 1
        assert harness.outputs[str(passing_unit)] == "1..2\nok 1 - truth\nok 2 - sum\n"

    def test_silent_unit_fails(self, write_unit: WriteUnitFn) -> None:
        """Fails a process that printed nothing."""
        unit = write_unit("silent.py", "pass\n")

        with CommandRunner.from_config(CommandRunnerConfig()) as runner:
            harness = Harness(runner=runner).add_unit(str(unit)).run()

        assert harness.tap() == (
            f"1..1\nnot ok 1 - {unit} # nothing returned from test\n"
            "# Failed 1 test out of 1\n"
        )
