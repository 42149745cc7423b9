"""Sort results — the final row plus how much work it took."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from alternating_disks.row import DiskRow


class SortResult:
    """Immutable outcome of running a sorting algorithm.

    The result owns a private copy of the final row.  Reading ``after``
    hands out a fresh copy each time, so nothing a caller does can
    change what the result recorded.

    Args:
        after: The row as the algorithm left it.
        swap_count: Number of adjacent swaps performed.
        passes: Number of outer passes the algorithm ran.

    """

    __slots__ = ("_after", "_passes", "_swap_count")

    def __init__(self, after: DiskRow, swap_count: int, *, passes: int = 0) -> None:
        """Snapshot the final row and record the counters.

        Raises:
            ValueError: If either counter is negative.

        """
        if swap_count < 0 or passes < 0:
            msg = f"Counters must be non-negative (swaps={swap_count}, passes={passes})"
            raise ValueError(msg)
        object.__setattr__(self, "_after", after.copy())
        object.__setattr__(self, "_swap_count", swap_count)
        object.__setattr__(self, "_passes", passes)

    def __setattr__(self, name: str, value: object) -> None:
        """Reject every assignment once constructed."""
        msg = f"SortResult is immutable (cannot set {name!r})"
        raise AttributeError(msg)

    @property
    def after(self) -> DiskRow:
        """Return a copy of the final row."""
        return self._after.copy()

    @property
    def swap_count(self) -> int:
        """Return the number of adjacent swaps performed."""
        return self._swap_count

    @property
    def passes(self) -> int:
        """Return the number of outer passes run."""
        return self._passes

    def __eq__(self, other: object) -> bool:
        """Results are equal when row and both counters match."""
        if not isinstance(other, SortResult):
            return NotImplemented
        return (self._after, self._swap_count, self._passes) == (
            other._after,
            other._swap_count,
            other._passes,
        )

    def __hash__(self) -> int:
        """Hash on the rendered row and counters."""
        return hash((self._after.render(), self._swap_count, self._passes))

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return (
            f"SortResult(after={self._after.render()!r}, "
            f"swap_count={self._swap_count}, passes={self._passes})"
        )
