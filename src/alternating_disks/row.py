"""Disk rows — the state of the alternating disks puzzle.

A row holds ``2n`` disks, ``n`` light and ``n`` dark.  The puzzle starts
with the colors alternating, dark first::

    D L D L D L

and the goal is to move every light disk to the left and every dark disk
to the right, using nothing but swaps of two neighbouring disks::

    L L L D D D

Think of it like a queue of people in two team shirts: the only way to
rearrange them is for two people standing next to each other to trade
places.

Design choices:
    - **StrEnum for colors** so each member doubles as its render token
      (``"L"`` / ``"D"``).
    - **Out-of-range access raises** ``IndexError``; it never returns a
      sentinel.
    - **Counts are derived, not tracked.**  The light/dark balance is
      fixed at construction and ``swap`` preserves it, so both counts
      are half the row length.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class DiskColor(StrEnum):
    """The color of a single disk."""

    LIGHT = "L"
    DARK = "D"


class DiskRow:
    """A mutable, balanced row of light and dark disks.

    Supports indexed reads, adjacent swaps, and the two structural
    checks the puzzle cares about: is the row alternating (the start
    state) and is it sorted (the goal state).
    """

    def __init__(self, light_count: int) -> None:
        """Create an alternating row, dark disk first.

        Args:
            light_count: Number of light disks (the row holds twice as
                many disks in total).

        Raises:
            ValueError: If *light_count* is not positive.

        """
        if light_count < 1:
            msg = f"Row needs at least one light disk, got {light_count}"
            raise ValueError(msg)
        self._colors: list[DiskColor] = [
            DiskColor.DARK if i % 2 == 0 else DiskColor.LIGHT for i in range(light_count * 2)
        ]

    @classmethod
    def from_colors(cls, colors: Iterable[DiskColor | str]) -> DiskRow:
        """Build a row from an explicit sequence of colors.

        Accepts ``DiskColor`` members or their tokens (``"L"``/``"D"``).

        Raises:
            ValueError: If the sequence is empty, has odd length, has
                unequal light and dark counts, or contains an unknown
                token.

        """
        palette = [DiskColor(c) for c in colors]
        if not palette or len(palette) % 2:
            msg = f"Row length must be even and positive, got {len(palette)}"
            raise ValueError(msg)
        lights = palette.count(DiskColor.LIGHT)
        if lights * 2 != len(palette):
            msg = f"Row must be balanced, got {lights} light of {len(palette)} disks"
            raise ValueError(msg)
        row = cls(lights)
        row._colors = palette
        return row

    @property
    def total_count(self) -> int:
        """Return the number of disks in the row."""
        return len(self._colors)

    @property
    def light_count(self) -> int:
        """Return the number of light disks (half the row)."""
        return self.total_count // 2

    @property
    def dark_count(self) -> int:
        """Return the number of dark disks (same as light)."""
        return self.light_count

    def is_index(self, i: int) -> bool:
        """Return True if *i* is a valid position in the row."""
        return 0 <= i < self.total_count

    def get(self, index: int) -> DiskColor:
        """Return the color at *index*.

        Raises:
            IndexError: If *index* is outside the row.

        """
        if not self.is_index(index):
            msg = f"Disk index {index} out of range (row has {self.total_count} disks)"
            raise IndexError(msg)
        return self._colors[index]

    def swap(self, left_index: int) -> None:
        """Exchange the disk at *left_index* with its right neighbour.

        Raises:
            IndexError: If either *left_index* or ``left_index + 1`` is
                outside the row.

        """
        right_index = left_index + 1
        if not (self.is_index(left_index) and self.is_index(right_index)):
            msg = f"Cannot swap at {left_index} (row has {self.total_count} disks)"
            raise IndexError(msg)
        colors = self._colors
        colors[left_index], colors[right_index] = colors[right_index], colors[left_index]

    def render(self) -> str:
        """Return the row as space-separated tokens, e.g. ``"D L D L"``."""
        return " ".join(color.value for color in self._colors)

    def is_alternating(self) -> bool:
        """Return True if the row is in the alternating start state.

        Index 0 must be dark, and every following disk must differ
        from its left neighbour.  Even indices are dark and odd
        indices are light.
        """
        if self.get(0) is not DiskColor.DARK:
            return False
        return all(
            color is (DiskColor.DARK if i % 2 == 0 else DiskColor.LIGHT)
            for i, color in enumerate(self._colors)
        )

    def is_sorted(self) -> bool:
        """Return True if every light disk sits left of every dark disk."""
        split = self.light_count
        lights_ok = all(c is DiskColor.LIGHT for c in self._colors[:split])
        return lights_ok and all(c is DiskColor.DARK for c in self._colors[split:])

    def copy(self) -> DiskRow:
        """Return an independent copy of this row."""
        return DiskRow.from_colors(self._colors)

    def __eq__(self, other: object) -> bool:
        """Rows are equal when their colors match at every index."""
        if not isinstance(other, DiskRow):
            return NotImplemented
        return self._colors == other._colors

    def __len__(self) -> int:
        """Return the number of disks in the row."""
        return len(self._colors)

    def __iter__(self) -> Iterator[DiskColor]:
        """Iterate over the colors from left to right."""
        return iter(list(self._colors))

    def __str__(self) -> str:
        """Return the rendered token string."""
        return self.render()

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return f"DiskRow({self.render()!r})"
