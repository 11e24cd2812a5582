"""Python file runner module."""

from tap_harness.runners.python.config import PythonFileRunnerConfig
from tap_harness.runners.python.manifest import python_runner_manifest
from tap_harness.runners.python.runner import PythonFileRunner

__all__ = ["PythonFileRunner", "PythonFileRunnerConfig", "python_runner_manifest"]
