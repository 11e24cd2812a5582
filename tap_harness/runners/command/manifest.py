"""Command runner manifest."""

from tap_harness.runners.command.config import CommandRunnerConfig
from tap_harness.runners.command.runner import CommandRunner
from tap_harness.runners.manifest import RunnerManifest

command_runner_manifest = RunnerManifest(
    config_cls=CommandRunnerConfig,
    runner_factory=CommandRunner.from_config,
)
