"""Command runner module."""

from tap_harness.runners.command.config import CommandRunnerConfig
from tap_harness.runners.command.manifest import command_runner_manifest
from tap_harness.runners.command.runner import CommandRunner

__all__ = ["CommandRunner", "CommandRunnerConfig", "command_runner_manifest"]
