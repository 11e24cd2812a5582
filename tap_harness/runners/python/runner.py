"""Runner executing Python test files in-process."""

import logging
import runpy
import sys
from collections.abc import Generator
from contextlib import contextmanager, redirect_stdout
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from tap_harness.errors import UnitExitError
from tap_harness.runners.base import UnitRunner
from tap_harness.runners.python.config import PythonFileRunnerConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class PythonFileRunner(UnitRunner):
    """Executes Python test files as ``__main__`` in the current process.

    A unit's result object is the module global named by
    ``config.result_name``, typically the Session it built. Everything the
    unit prints goes to the harness's output sink.
    """

    config: PythonFileRunnerConfig

    @classmethod
    @contextmanager
    def from_config(
        cls, config: PythonFileRunnerConfig
    ) -> Generator["PythonFileRunner", None, None]:
        """Create runner, restoring sys.argv and sys.path when done."""
        saved_argv, saved_path = sys.argv[:], sys.path[:]
        try:
            yield cls(config=config)
        finally:
            sys.argv[:] = saved_argv
            sys.path[:] = saved_path

    def execute(self, unit: str, out: TextIO) -> object | None:
        """Run the file and return its result global, if it defined one."""
        log.debug("Executing Python unit %s", unit)
        sys.argv[:] = [unit]
        unit_dir = str(Path(unit).resolve().parent)
        if self.config.add_unit_dir_to_path:
            sys.path.insert(0, unit_dir)
        try:
            with redirect_stdout(out):
                namespace = runpy.run_path(unit, run_name="__main__")
        except SystemExit as e:
            if e.code not in (None, 0):
                raise UnitExitError(f"{unit} exited with status {e.code}") from e
            return None
        finally:
            if self.config.add_unit_dir_to_path and unit_dir in sys.path:
                sys.path.remove(unit_dir)
        return namespace.get(self.config.result_name)
