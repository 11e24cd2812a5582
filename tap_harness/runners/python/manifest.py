"""Python file runner manifest."""

from tap_harness.runners.manifest import RunnerManifest
from tap_harness.runners.python.config import PythonFileRunnerConfig
from tap_harness.runners.python.runner import PythonFileRunner

python_runner_manifest = RunnerManifest(
    config_cls=PythonFileRunnerConfig,
    runner_factory=PythonFileRunner.from_config,
)
