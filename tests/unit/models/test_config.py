"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from tap_harness.models.config import (
    HarnessConfig,
    SessionConfig,
    TraceMode,
    Verbosity,
)
from tap_harness.testing.factories import SessionConfigFactory


class TestVerbosity:
    """Tests for Verbosity ordering."""

    @pytest.mark.parametrize(
        ("verbosity", "other", "expected"),
        [
            (Verbosity.NONE, Verbosity.SUMMARY, False),
            (Verbosity.SUMMARY, Verbosity.SUMMARY, True),
            (Verbosity.DETAILS, Verbosity.SUMMARY, True),
            (Verbosity.SUMMARY, Verbosity.DETAILS, False),
            (Verbosity.DEBUG, Verbosity.DETAILS, True),
        ],
    )
    def test_at_least(
        self, verbosity: Verbosity, other: Verbosity, expected: bool
    ) -> None:
        """Orders verbosity settings from none to debug."""
        assert verbosity.at_least(other) is expected


class TestSessionConfig:
    """Tests for SessionConfig."""

    def test_defaults(self) -> None:
        """Defaults to unplanned, untraced, summary verbosity."""
        config = SessionConfig()

        assert config.plan == 0
        assert config.trace is TraceMode.NONE
        assert config.version == 12
        assert config.verbosity is Verbosity.SUMMARY

    def test_rejects_negative_plan(self) -> None:
        """Rejects a negative plan."""
        with pytest.raises(ValidationError):
            SessionConfig(plan=-1)

    def test_rejects_unknown_version(self) -> None:
        """Rejects TAP versions other than 12 and 13."""
        with pytest.raises(ValidationError):
            SessionConfig(version=14)  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        """Cannot be modified after creation."""
        config = SessionConfigFactory.build()

        with pytest.raises(ValidationError):
            config.plan = 3  # type: ignore[misc]


class TestHarnessConfig:
    """Tests for HarnessConfig."""

    def test_defaults(self) -> None:
        """Defaults to the Python runner with nothing to run."""
        config = HarnessConfig()

        assert config.runner == "python"
        assert config.directories == []
        assert config.units == []
        assert config.plan is True
        assert config.exclude_todo is True

    def test_parses_directories(self) -> None:
        """Builds directory entries from plain data."""
        config = HarnessConfig.model_validate(
            {"directories": [{"path": "test"}, {"path": "t", "extensions": ["t"]}]}
        )

        assert [d.path for d in config.directories] == ["test", "t"]
        assert [list(d.extensions) for d in config.directories] == [["py"], ["t"]]

    def test_rejects_unknown_keys(self) -> None:
        """Rejects keys it does not know."""
        with pytest.raises(ValidationError):
            HarnessConfig.model_validate({"runnner": "python"})
