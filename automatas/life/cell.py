"""A cell of Conway's Game of Life (rule 23/3)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Tuple

Position = Tuple[int, int]

# Offsets to the eight neighbours: NW, W, SW, S, SE, E, NE, N.
_NEIGHBOUR_OFFSETS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
)


class _BorderLike(Protocol):
    def get_cell(self, lattice: Any, position: Position) -> Cell: ...


class _LatticeLike(Protocol):
    border: _BorderLike


@dataclass
class Cell:
    """A cell at a (row, column) position with state 0 (dead) or 1 (alive)."""

    position: Position = (0, 0)
    state: int = 0
    _next: int = field(default=0, repr=False, compare=False)

    def next_state(self, lattice: _LatticeLike) -> int:
        """Compute and remember the next state under rule 23/3 without applying it.

        Neighbours are looked up through the lattice's border, so cells beyond
        the edge are resolved by whatever border the lattice uses.
        """
        row, col = self.position
        alive = sum(
            lattice.border.get_cell(lattice, (row + dr, col + dc)).state
            for dr, dc in _NEIGHBOUR_OFFSETS
        )
        if self.state == 1:
            self._next = 1 if alive in (2, 3) else 0
        else:
            self._next = 1 if alive == 3 else 0
        return self._next

    def update_state(self) -> None:
        """Apply the state computed by the last call to next_state."""
        self.state = self._next

    def __str__(self) -> str:
        return " " if self.state == 0 else "X"