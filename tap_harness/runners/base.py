"""Abstract base class for unit runners."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO


@dataclass(frozen=True, kw_only=True)
class UnitRunner(ABC):
    """Lists and executes test units on behalf of the harness.

    A unit is identified by a path string. The default listing and existence
    checks work on plain files; runners only need to know how to execute one.
    """

    def exists(self, unit: str) -> bool:
        """Check whether ``unit`` names a runnable unit."""
        return Path(unit).is_file()

    def list_units(self, directory: str, extensions: Sequence[str]) -> Sequence[str]:
        """List the units in a directory, sorted by name.

        Args:
            directory: Directory to scan (not recursive)
            extensions: Accepted extensions without the leading dot. An entry
                may hold several alternatives separated by ``|``

        Returns:
            Paths of matching files; empty if the directory does not exist

        """
        path = Path(directory)
        if not path.is_dir():
            return []

        suffixes = tuple(
            f".{ext.lstrip('.')}"
            for entry in extensions
            for ext in entry.split("|")
            if ext.strip()
        )
        return [
            str(entry)
            for entry in sorted(path.iterdir())
            if entry.is_file() and entry.name.endswith(suffixes)
        ]

    @abstractmethod
    def execute(self, unit: str, out: TextIO) -> object | None:
        """Execute a unit.

        Args:
            unit: Unit identifier as returned by ``list_units``
            out: Sink that receives everything the unit prints

        Returns:
            The result object the unit produced, or None

        Raises:
            Exception: Whatever the unit raised; the harness records it

        """
