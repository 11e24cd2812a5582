"""Loading of unit runners from entry points."""

import logging
from importlib.metadata import entry_points
from typing import Any

from tap_harness.errors import RunnerNotFoundError
from tap_harness.runners.manifest import RunnerManifest

ENTRY_POINT_GROUP = "tap_harness.runners"

log = logging.getLogger(__name__)


def load_runner_manifest(key: str) -> RunnerManifest[Any]:
    """Load a runner manifest by key.

    Args:
        key: The runner key as registered in pyproject.toml
             (e.g., "python", "command")

    Returns:
        The runner manifest instance

    Raises:
        RunnerNotFoundError: If no runner with the given key is found, or the
            entry point does not hold a runner manifest

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest = entry.load()
            if not isinstance(manifest, RunnerManifest):
                raise RunnerNotFoundError(
                    f"Entry point '{key}' ({entry.value}) is not a runner manifest"
                )
            log.debug("Loaded runner '%s' from %s", key, entry.value)
            return manifest

    available = sorted(e.name for e in entries)
    raise RunnerNotFoundError(
        f"Runner '{key}' not found. Available runners: {available}"
    )
