"""One-dimensional elementary cellular automaton (rule 110)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from typing import Iterator, Union

StrPath = Union[str, "PathLike[str]"]


class Border(Enum):
    """How the lattice treats the cells beyond its two ends."""

    OPEN = "open"
    PERIODIC = "periodic"


@dataclass
class Cell:
    """A single cell: its position in the lattice and its current state."""

    position: int = 0
    state: int = 0
    _next: int = field(default=0, repr=False, compare=False)

    def left_neighbour(self, lattice: Lattice) -> Cell:
        """Return the cell to the left, honouring the lattice border."""
        left = self.position - 1
        if lattice.border is Border.OPEN and self.position == 0:
            return Cell(left, int(lattice.temperature))
        return lattice.cell(left % len(lattice))

    def right_neighbour(self, lattice: Lattice) -> Cell:
        """Return the cell to the right, honouring the lattice border."""
        right = self.position + 1
        if lattice.border is Border.OPEN and self.position == len(lattice) - 1:
            return Cell(right, int(lattice.temperature))
        return lattice.cell(right % len(lattice))

    def next_state(self, lattice: Lattice) -> int:
        """Compute and remember the next state without applying it."""
        left = self.left_neighbour(lattice).state
        right = self.right_neighbour(lattice).state
        centre = self.state
        self._next = (centre + right + centre * right + left * centre * right) % 2
        return self._next

    def update_state(self) -> None:
        """Apply the state computed by the last call to next_state."""
        self.state = self._next

    def __str__(self) -> str:
        return " " if self.state == 0 else "X"


def _read_cells(filename: StrPath) -> list[Cell]:
    with open(filename, encoding="utf-8") as handle:
        line = handle.readline().rstrip("\r\n")
    return [Cell(index, ord(char) - ord("0")) for index, char in enumerate(line)]


class Lattice:
    """A row of cells evolving under rule 110."""

    def __init__(
        self,
        size: int = 1,
        border: Border | str = Border.PERIODIC,
        temperature: bool = False,
    ) -> None:
        if size <= 0:
            raise ValueError(f"lattice size must be positive, got {size}")
        self.border = Border(border)
        self.temperature = bool(temperature)
        self.cells: list[Cell] = [Cell(index) for index in range(size)]
        self.initial_setting()

    @classmethod
    def from_file(
        cls,
        filename: StrPath,
        border: Border | str = Border.PERIODIC,
        temperature: bool = False,
    ) -> Lattice:
        """Build a lattice from the first line of a file of cell digits."""
        cells = _read_cells(filename)
        lattice = cls.__new__(cls)
        lattice.border = Border(border)
        lattice.temperature = bool(temperature)
        lattice.cells = cells
        return lattice

    def load(self, filename: StrPath) -> None:
        """Replace the cells with those read from a file, keeping the border."""
        self.cells = _read_cells(filename)

    def cell(self, position: int) -> Cell:
        """Return the cell at a position inside the lattice."""
        if not 0 <= position < len(self.cells):
            raise IndexError(f"position {position} outside lattice of size {len(self.cells)}")
        return self.cells[position]

    def initial_setting(self) -> None:
        """Reset every cell to dead except the one in the middle."""
        self.cells = [Cell(index, 0) for index in range(len(self.cells))]
        if self.cells:
            self.cells[len(self.cells) // 2].state = 1

    def next_generation(self) -> None:
        """Advance every cell one generation at once."""
        for cell in self.cells:
            cell.next_state(self)
        for cell in self.cells:
            cell.update_state()

    def alive_cells(self) -> int:
        """Number of cells in state 1."""
        return sum(1 for cell in self.cells if cell.state == 1)

    def dead_cells(self) -> int:
        """Number of cells in state 0."""
        return sum(1 for cell in self.cells if cell.state == 0)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __str__(self) -> str:
        return "[" + "".join(str(cell) for cell in self.cells) + "]"