"""Multi-colour tape for generalised Langton ants."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import Iterable, Tuple, Union

StrPath = Union[str, "PathLike[str]"]
AntInfo = Tuple[str, int, int, int]

_RESET = " \033[0m"


class Color(IntEnum):
    """Cell colours, in the order an ant cycles through them."""

    WHITE = 0
    BLACK = 1
    RED = 2
    GREEN = 3
    BLUE = 4
    YELLOW = 5
    MAGENTA = 6
    CYAN = 7


_ANSI = {
    Color.WHITE: "\033[47m",
    Color.BLACK: "\033[40m",
    Color.RED: "\033[41m",
    Color.GREEN: "\033[42m",
    Color.BLUE: "\033[44m",
    Color.YELLOW: "\033[43m",
    Color.MAGENTA: "\033[45m",
    Color.CYAN: "\033[46m",
}

_DIRECTION_SYMBOL = {0: "<", 1: ">", 2: "^", 3: "v"}


@dataclass
class Tape:
    """A rectangular grid of cells, each holding a colour below number_colors."""

    size_x: int
    size_y: int
    number_colors: int
    grid: list[list[int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size_x <= 0 or self.size_y <= 0:
            raise ValueError("El tamaño de la cinta debe ser positivo")
        if self.number_colors < 2:
            raise ValueError("El número de colores debe ser al menos 2")
        self.grid = [[int(Color.WHITE)] * self.size_x for _ in range(self.size_y)]

    @classmethod
    def from_file(cls, size_x: int, size_y: int, number_colors: int, filename: StrPath) -> Tape:
        """Build a tape and colour the cells listed as x y colour triples in a file."""
        tape = cls(size_x, size_y, number_colors)
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
        """Set the colour at (x, y), wrapped into the range of available colours."""
        self._check(x, y)
        self.grid[y][x] = value % self.number_colors

    def render_cell(self, x: int, y: int) -> str:
        """Picture of the cell: a space for white, a coloured block otherwise."""
        self._check(x, y)
        value = self.grid[y][x]
        if value == Color.WHITE:
            return " "
        try:
            ansi = _ANSI[Color(value)]
        except ValueError:
            ansi = _ANSI[Color.WHITE]
        return ansi + _RESET

    def load_cells(self, text: str) -> None:
        """Colour every in-bounds cell given as whitespace-separated x y colour triples.

        Reading stops at the first token that is not an integer.
        """
        tokens = iter(text.split())
        for x_token, y_token, colour_token in zip(tokens, tokens, tokens):
            try:
                x, y, colour = int(x_token), int(y_token), int(colour_token)
            except ValueError:
                break
            if self.is_valid_position(x, y):
                self.set(x, y, colour)

    def save(self, filename: StrPath, ants: Iterable[AntInfo]) -> None:
        """Write size, ants and coloured cells in the configuration file format.

        Each ant is given as a (type, x, y, direction) tuple.
        """
        ant_specs = [
            f"{kind} {x} {y} {_DIRECTION_SYMBOL.get(int(direction), '>')}"
            for kind, x, y, direction in ants
        ]
        lines = [
            f"{self.size_x} {self.size_y} {self.number_colors}",
            " ; ".join(ant_specs),
        ]
        lines.extend(
            f"{x} {y} {value}"
            for y, row in enumerate(self.grid)
            for x, value in enumerate(row)
            if value != Color.WHITE
        )
        Path(filename).write_text("\n".join(lines) + "\n", encoding="utf-8")