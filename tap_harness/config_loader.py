"""Harness configuration loader for YAML files."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from tap_harness.models.config import HarnessConfig


def load_harness_config(config_path: Path) -> HarnessConfig:
    """Load and validate a harness configuration file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Validated harness configuration

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty, not valid YAML, or fails validation

    """
    if not config_path.is_file():
        raise FileNotFoundError(f"Harness configuration not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty harness configuration: {config_path}")

    try:
        return HarnessConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(
            f"Invalid harness configuration schema in {config_path}: {e}"
        ) from e
