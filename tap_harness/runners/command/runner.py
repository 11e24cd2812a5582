"""Runner executing test units as subprocesses."""

import logging
import os
import subprocess
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TextIO

from tap_harness.runners.base import UnitRunner
from tap_harness.runners.command.config import CommandRunnerConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class CommandRunner(UnitRunner):
    """Runs each unit as a separate process and captures its TAP output.

    Processes cannot hand back a result object, so the harness always
    judges these units by parsing their standard output.
    """

    config: CommandRunnerConfig

    @classmethod
    @contextmanager
    def from_config(
        cls, config: CommandRunnerConfig
    ) -> Generator["CommandRunner", None, None]:
        """Create runner."""
        yield cls(config=config)

    def execute(self, unit: str, out: TextIO) -> object | None:
        """Run the unit and copy its standard output to ``out``."""
        args = [*self.config.command, unit]
        env = {**os.environ, **self.config.env} if self.config.env else None
        log.debug("Executing command: %s", " ".join(args))

        completed = subprocess.run(
            args,
            cwd=self.config.cwd,
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )
        out.write(completed.stdout)

        if completed.returncode != 0:
            log.debug("Unit %s exited with status %d", unit, completed.returncode)
        if completed.stderr:
            log.debug("Unit %s stderr: %s", unit, completed.stderr.strip())
        return None
