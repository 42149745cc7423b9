"""Sorting algorithms for the alternating disks puzzle.

Both algorithms share one move: find a dark disk standing immediately
left of a light disk and swap them.  Each such swap fixes exactly one
*inversion* (a dark disk somewhere left of a light disk), so every
algorithm built from this move performs the same number of swaps on
the same input.  They differ only in how many comparisons they spend
finding them.

Algorithms:
    - ``LeftToRightSorter`` — bubble-sort style.  Sweep left to right,
      swapping every (dark, light) pair, and repeat once per disk.
    - ``LawnmowerSorter`` — sweep right to left, carrying a light disk
      toward the front.  After pass ``a`` position ``a`` is settled, so
      the next sweep stops one disk earlier.

Both run a fixed number of passes (one per disk) so their pass and
swap counts are reproducible.  ``early_exit=True`` stops after the
first pass without a swap instead; swap counts and final rows are
unchanged, only ``passes`` shrinks.

All sorters implement the ``SortAlgorithm`` protocol — the Strategy
pattern, so callers can pick one by name via ``get_sorter``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from alternating_disks.logging import LogLevel
from alternating_disks.result import SortResult
from alternating_disks.row import DiskColor

if TYPE_CHECKING:
    from alternating_disks.logging import Logger
    from alternating_disks.row import DiskRow


class Algorithm(StrEnum):
    """Names of the available sorting algorithms."""

    LEFT_TO_RIGHT = "left_to_right"
    LAWNMOWER = "lawnmower"


class SortAlgorithm(Protocol):
    """Interface every sorting algorithm must satisfy."""

    @property
    def name(self) -> Algorithm:
        """Return the algorithm's registry name."""
        ...  # pragma: no cover

    def sort(self, before: DiskRow) -> SortResult:
        """Sort a copy of *before* and return the result.

        The input row is never modified.
        """
        ...  # pragma: no cover


def _swap_if_inverted(
    row: DiskRow,
    left_index: int,
    *,
    logger: Logger | None,
    source: str,
    step: int,
) -> bool:
    """Swap the pair at *left_index* if it reads (dark, light).

    Returns:
        True if a swap was made.

    """
    pair = (row.get(left_index), row.get(left_index + 1))
    if pair != (DiskColor.DARK, DiskColor.LIGHT):
        return False
    row.swap(left_index)
    if logger is not None:
        logger.log(
            LogLevel.DEBUG,
            f"swap {left_index}<->{left_index + 1}: {row.render()}",
            source=source,
            step=step,
        )
    return True


def _summarise(logger: Logger | None, result: SortResult, *, source: str) -> SortResult:
    """Write the end-of-run summary entry, then hand the result back."""
    if logger is not None:
        logger.log(
            LogLevel.INFO,
            f"sorted {len(result.after)} disks with {result.swap_count} swaps"
            f" in {result.passes} passes",
            source=source,
            step=result.passes,
        )
    return result


class LeftToRightSorter:
    """Repeated left-to-right sweeps, one per disk in the row.

    Each sweep walks indices ``0 .. n-2`` and swaps every (dark, light)
    pair it meets.  A light disk moves at most one place left per
    sweep and none starts more than ``n`` places from its goal, so
    ``n`` sweeps always finish the job.
    """

    def __init__(self, *, early_exit: bool = False, logger: Logger | None = None) -> None:
        """Create a left-to-right sorter.

        Args:
            early_exit: Stop after the first sweep that makes no swap.
            logger: Optional trace log for swaps and the run summary.

        """
        self._early_exit = early_exit
        self._logger = logger

    @property
    def name(self) -> Algorithm:
        """Return the registry name."""
        return Algorithm.LEFT_TO_RIGHT

    @property
    def early_exit(self) -> bool:
        """Return whether sweeping stops once a sweep makes no swap."""
        return self._early_exit

    def sort(self, before: DiskRow) -> SortResult:
        """Sort a copy of *before* with left-to-right sweeps."""
        row = before.copy()
        total = row.total_count
        swaps = 0
        passes = 0
        for step in range(1, total + 1):
            passes = step
            swapped = 0
            for i in range(total - 1):
                if _swap_if_inverted(row, i, logger=self._logger, source=self.name, step=step):
                    swapped += 1
            swaps += swapped
            if self._early_exit and not swapped:
                break
        return _summarise(self._logger, SortResult(row, swaps, passes=passes), source=self.name)


class LawnmowerSorter:
    """Right-to-left sweeps with a rising lower bound.

    Pass ``a`` walks ``b`` from the last index down to ``a + 1`` and
    swaps ``(b - 1, b)`` whenever it holds (dark, light).  Each sweep
    drags the nearest light disk into position ``a``, so the scanned
    window shrinks by one from the left every pass.

    The sweep always runs in the same direction; only the bound moves.
    """

    def __init__(self, *, early_exit: bool = False, logger: Logger | None = None) -> None:
        """Create a lawnmower sorter.

        Args:
            early_exit: Stop after the first sweep that makes no swap.
            logger: Optional trace log for swaps and the run summary.

        """
        self._early_exit = early_exit
        self._logger = logger

    @property
    def name(self) -> Algorithm:
        """Return the registry name."""
        return Algorithm.LAWNMOWER

    @property
    def early_exit(self) -> bool:
        """Return whether sweeping stops once a sweep makes no swap."""
        return self._early_exit

    def sort(self, before: DiskRow) -> SortResult:
        """Sort a copy of *before* with shrinking right-to-left sweeps."""
        row = before.copy()
        total = row.total_count
        swaps = 0
        passes = 0
        for a in range(total):
            passes = a + 1
            swapped = 0
            for b in range(total - 1, a, -1):
                left = b - 1
                if _swap_if_inverted(row, left, logger=self._logger, source=self.name, step=passes):
                    swapped += 1
            swaps += swapped
            if self._early_exit and not swapped:
                break
        return _summarise(self._logger, SortResult(row, swaps, passes=passes), source=self.name)


_REGISTRY: dict[Algorithm, type[LeftToRightSorter | LawnmowerSorter]] = {
    Algorithm.LEFT_TO_RIGHT: LeftToRightSorter,
    Algorithm.LAWNMOWER: LawnmowerSorter,
}


def get_sorter(
    algorithm: Algorithm | str,
    *,
    early_exit: bool = False,
    logger: Logger | None = None,
) -> SortAlgorithm:
    """Return a sorter for *algorithm* (an ``Algorithm`` or its value).

    Raises:
        ValueError: If the name does not match a known algorithm.

    """
    try:
        key = Algorithm(algorithm)
    except ValueError:
        known = ", ".join(a.value for a in Algorithm)
        msg = f"Unknown algorithm {algorithm!r}. Use {known}."
        raise ValueError(msg) from None
    return _REGISTRY[key](early_exit=early_exit, logger=logger)


def sort_left_to_right(
    before: DiskRow,
    *,
    early_exit: bool = False,
    logger: Logger | None = None,
) -> SortResult:
    """Sort *before* with the left-to-right algorithm."""
    return LeftToRightSorter(early_exit=early_exit, logger=logger).sort(before)


def sort_lawnmower(
    before: DiskRow,
    *,
    early_exit: bool = False,
    logger: Logger | None = None,
) -> SortResult:
    """Sort *before* with the lawnmower algorithm."""
    return LawnmowerSorter(early_exit=early_exit, logger=logger).sort(before)


def compare_algorithms(
    before: DiskRow,
    *,
    early_exit: bool = False,
    logger: Logger | None = None,
) -> dict[Algorithm, SortResult]:
    """Run every algorithm on the same input and collect the results.

    Returns:
        A mapping from algorithm name to its result, in registry order.

    """
    return {
        name: get_sorter(name, early_exit=early_exit, logger=logger).sort(before)
        for name in _REGISTRY
    }
