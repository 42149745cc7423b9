"""Run configuration — describe a sort once, load it from JSON, run it.

A ``SortConfig`` names everything needed to reproduce a run: how many
light disks, which algorithm, and whether to stop early.  Configs can
be built in code or loaded from a small JSON file::

    {"light_count": 4, "algorithm": "lawnmower", "early_exit": false}

Missing keys fall back to defaults.  Anything unreadable or invalid
raises ``ConfigError`` so callers have a single exception to handle.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING

from alternating_disks.row import DiskRow
from alternating_disks.sorters import Algorithm, get_sorter

if TYPE_CHECKING:
    from pathlib import Path

    from alternating_disks.logging import Logger
    from alternating_disks.result import SortResult


class ConfigError(ValueError):
    """Raise when a run configuration cannot be loaded or is invalid."""


@dataclass(frozen=True)
class SortConfig:
    """A reproducible description of one sorting run."""

    light_count: int
    algorithm: Algorithm = Algorithm.LEFT_TO_RIGHT
    early_exit: bool = False

    def __post_init__(self) -> None:
        """Validate field values.

        Raises:
            ConfigError: If any field is out of range or of the wrong type.

        """
        # bool is an int subclass; a light count of True is a mistake
        if (
            isinstance(self.light_count, bool)
            or not isinstance(self.light_count, int)
            or self.light_count < 1
        ):
            msg = f"light_count must be a positive integer, got {self.light_count!r}"
            raise ConfigError(msg)
        if not isinstance(self.early_exit, bool):
            msg = f"early_exit must be true or false, got {self.early_exit!r}"
            raise ConfigError(msg)
        try:
            algorithm = Algorithm(self.algorithm)
        except ValueError as e:
            known = ", ".join(a.value for a in Algorithm)
            msg = f"Unknown algorithm {self.algorithm!r}. Use {known}."
            raise ConfigError(msg) from e
        object.__setattr__(self, "algorithm", algorithm)


def load_config(path: Path) -> SortConfig:
    """Load a ``SortConfig`` from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, is not a JSON object,
            or holds invalid values.

    """
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        msg = f"Cannot load config: {e}"
        raise ConfigError(msg) from e
    if not isinstance(data, dict):
        msg = f"Config must be a JSON object, got {type(data).__name__}"
        raise ConfigError(msg)
    return SortConfig(
        light_count=data.get("light_count", 1),
        algorithm=data.get("algorithm", Algorithm.LEFT_TO_RIGHT),
        early_exit=data.get("early_exit", False),
    )


def run(config: SortConfig, *, logger: Logger | None = None) -> SortResult:
    """Build the alternating row described by *config* and sort it."""
    sorter = get_sorter(config.algorithm, early_exit=config.early_exit, logger=logger)
    return sorter.sort(DiskRow(config.light_count))
