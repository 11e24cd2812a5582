"""Runner manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass

from pydantic import BaseModel

from tap_harness.runners.base import UnitRunner


@dataclass(frozen=True, kw_only=True)
class RunnerManifest[ConfigT: BaseModel]:
    """Manifest describing a runner plugin.

    Holds the configuration class and the factory that builds a runner from
    it, so runners can be selected by key and configured from JSON or YAML.
    """

    config_cls: type[ConfigT]
    runner_factory: Callable[[ConfigT], AbstractContextManager[UnitRunner]]
