"""Two-colour tape on which a Langton ant walks."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Union

StrPath = Union[str, "PathLike[str]"]


@dataclass
class Tape:
    """A rectangular grid of cells, each white (0) or black (1)."""

    size_x: int
    size_y: int
    grid: list[list[int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size_x <= 0 or self.size_y <= 0:
            raise ValueError("El tamaño de la cinta debe ser positivo")
        self.grid = [[0] * self.size_x for _ in range(self.size_y)]

    @classmethod
    def from_file(cls, size_x: int, size_y: int, filename: StrPath) -> Tape:
        """Build a tape and blacken the cells listed as coordinate pairs in a file."""
        tape = cls(size_x, size_y)
        tape.load_cells(Path(filename).read_text(encoding="utf-8"))
        return tape

    def is_valid_position(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside the tape."""
        return 0 <= x < self.size_x and 0 <= y < self.size_y

    def _check(self, x: int, y: int) -> None:
        if not self.is_valid_position(x, y):
            raise IndexError("Posición fuera de los límites de la cinta")

    def get(self, x: int, y: int) -> int:
        """Colour of the cell at (x, y)."""
        self._check(x, y)
        return self.grid[y][x]

    def set(self, x: int, y: int, value: int) -> None:
        """Set the colour of the cell at (x, y)."""
        self._check(x, y)
        self.grid[y][x] = value

    def render_cell(self, x: int, y: int) -> str:
        """One-character picture of the cell: 'X' for black, a space otherwise."""
        self._check(x, y)
        return "X" if self.grid[y][x] == 1 else " "

    def load_cells(self, text: str) -> None:
        """Blacken every in-bounds cell given as whitespace-separated x y pairs.

        Reading stops at the first token that is not an integer.
        """
        tokens = iter(text.split())
        for x_token, y_token in zip(tokens, tokens):
            try:
                x, y = int(x_token), int(y_token)
            except ValueError:
                break
            if self.is_valid_position(x, y):
                self.set(x, y, 1)

    def save(self, filename: StrPath, ant_x: int, ant_y: int, ant_direction: int) -> None:
        """Write size, ant and black cells in the configuration file format."""
        lines = [
            f"{self.size_x} {self.size_y}",
            f"{ant_x} {ant_y} {int(ant_direction)}",
        ]
        lines.extend(
            f"{x} {y}"
            for y, row in enumerate(self.grid)
            for x, value in enumerate(row)
            if value == 1
        )
        Path(filename).write_text("\n".join(lines) + "\n", encoding="utf-8")