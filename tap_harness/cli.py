"""CLI entry point for the TAP test harness."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from tap_harness.config_loader import load_harness_config
from tap_harness.harness import Harness
from tap_harness.models.config import (
    DirectoryEntry,
    HarnessConfig,
    SessionConfig,
    Verbosity,
)
from tap_harness.runners.loading import load_runner_manifest

DEFAULT_DIRECTORY = "test"

LOG_LEVELS = {
    Verbosity.NONE: logging.WARNING,
    Verbosity.SUMMARY: logging.INFO,
    Verbosity.DETAILS: logging.INFO,
    Verbosity.DEBUG: logging.DEBUG,
}


def build_config(
    config_path: Path | None,
    directories: Sequence[str],
    extensions: Sequence[str],
    units: Sequence[str],
    runner: str | None = None,
    runner_config_json: str | None = None,
    plan: bool | None = None,
    exclude_todo: bool | None = None,
    verbosity: Verbosity | None = None,
) -> HarnessConfig:
    """Combine an optional configuration file with command line options.

    Directories and units from the command line are added to those in the
    file; other options replace the file's values when given. With nothing
    to run at all, the ``test`` directory is used.
    """
    config = load_harness_config(config_path) if config_path else HarnessConfig()

    update: dict[str, object] = {
        "directories": [
            *config.directories,
            *(DirectoryEntry(path=d, extensions=tuple(extensions)) for d in directories),
        ],
        "units": [*config.units, *units],
    }
    if runner is not None:
        update["runner"] = runner
    if runner_config_json is not None:
        update["runner_config"] = json.loads(runner_config_json)
    if plan is not None:
        update["plan"] = plan
    if exclude_todo is not None:
        update["exclude_todo"] = exclude_todo
    if verbosity is not None:
        update["verbosity"] = verbosity

    if not update["directories"] and not update["units"]:
        update["directories"] = [
            DirectoryEntry(path=DEFAULT_DIRECTORY, extensions=tuple(extensions))
        ]

    return HarnessConfig.model_validate({**config.model_dump(), **update})


def run(config: HarnessConfig) -> int:
    """Run the configured units, print the TAP summary and return exit code."""
    log = logging.getLogger("tap_harness")

    log.info("Loading runner: %s", config.runner)
    manifest = load_runner_manifest(config.runner)
    runner_config = manifest.config_cls(**config.runner_config)

    with manifest.runner_factory(runner_config) as runner:
        harness = Harness(
            runner=runner, config=SessionConfig(verbosity=config.verbosity)
        )
        for directory in config.directories:
            harness.add_directory(directory.path, directory.extensions)
        for unit in config.units:
            harness.add_unit(unit)

        harness.run(plan=config.plan, exclude_todo=config.exclude_todo)

    print(harness.summary(), end="")

    if harness.success():
        log.info("All %d unit(s) passed", harness.ran())
        return 0

    log.info("%d of %d unit(s) failed", harness.failed(), harness.ran())
    return 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run TAP test units and report an aggregate result"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML harness configuration file",
    )
    parser.add_argument(
        "--dir",
        action="append",
        default=[],
        dest="directories",
        help="Directory of test units (repeatable)",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=None,
        dest="extensions",
        help="Extension of test units in --dir, without the dot (default: py)",
    )
    parser.add_argument(
        "--unit",
        action="append",
        default=[],
        dest="units",
        help="Individual test unit (repeatable)",
    )
    parser.add_argument(
        "--runner",
        default=None,
        help="Runner key (python, command)",
    )
    parser.add_argument(
        "--runner-config",
        default=None,
        help="JSON configuration for the runner",
    )
    parser.add_argument(
        "--no-plan",
        action="store_false",
        dest="plan",
        default=None,
        help="Do not plan the aggregate for the number of units",
    )
    parser.add_argument(
        "--include-todo",
        action="store_false",
        dest="exclude_todo",
        default=None,
        help="Count TODO failures against a unit",
    )
    parser.add_argument(
        "--verbosity",
        type=Verbosity,
        choices=list(Verbosity),
        default=None,
        help="Per-unit reporting on stderr (default: summary)",
    )

    args = parser.parse_args()

    config = build_config(
        config_path=args.config,
        directories=args.directories,
        extensions=args.extensions or ["py"],
        units=args.units,
        runner=args.runner,
        runner_config_json=args.runner_config,
        plan=args.plan,
        exclude_todo=args.exclude_todo,
        verbosity=args.verbosity,
    )

    logging.basicConfig(
        level=LOG_LEVELS[config.verbosity],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(config))


if __name__ == "__main__":  # pragma: no cover
    main()
