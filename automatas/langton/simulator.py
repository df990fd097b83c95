"""Interactive simulation of a single Langton ant on a finite tape."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path
from typing import TextIO, Union

from automatas.langton.ant import Ant, Direction
from automatas.langton.tape import Tape

StrPath = Union[str, "PathLike[str]"]

_CLEAR = "\033[2J\033[H"


def _ask(stdin: TextIO, stdout: TextIO, message: str) -> str | None:
    stdout.write(message)
    stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


class Simulator:
    """A tape, an ant on it, and a step counter."""

    def __init__(
        self,
        size_x: int,
        size_y: int,
        ant_x: int,
        ant_y: int,
        ant_direction: Direction | int,
    ) -> None:
        self.steps = 0
        self.tape = Tape(size_x, size_y)
        self.ant = Ant(ant_x, ant_y, Direction(ant_direction), self.tape)

    @classmethod
    def from_file(cls, filename: StrPath) -> Simulator:
        """Load a simulation from a configuration file."""
        return cls.parse(Path(filename).read_text(encoding="utf-8"))

    @classmethod
    def parse(cls, text: str) -> Simulator:
        """Build a simulation from configuration text.

        The text holds the tape size, then the ant's x, y and direction,
        then the coordinates of the black cells.
        """
        tokens = text.split()
        try:
            size_x, size_y, ant_x, ant_y, direction = (int(t) for t in tokens[:5])
        except ValueError as error:
            raise ValueError("configuración mal formada") from error
        simulator = cls(size_x, size_y, ant_x, ant_y, direction)
        simulator.tape.load_cells(" ".join(tokens[5:]))
        return simulator

    def step(self) -> None:
        """Move the ant once, unless it has already left the tape."""
        if not self.is_finished():
            self.ant.move()
            self.steps += 1

    def is_finished(self) -> bool:
        """Whether the ant has left the tape."""
        return self.ant.is_out_of_bounds()

    def save_state(self, filename: StrPath) -> None:
        """Write the current state in the configuration file format."""
        self.tape.save(filename, self.ant.x, self.ant.y, int(self.ant.direction))

    def render(self) -> str:
        """Picture of the tape with the ant drawn on it."""
        width = self.tape.size_x
        border = "+" + "-" * width + "+"
        lines = [
            "=== Hormiga de Langton ===",
            f"Paso: {self.steps}",
            f"Hormiga en posición ({self.ant.x}, {self.ant.y})",
            "",
            border,
        ]
        for y in range(self.tape.size_y):
            row = "".join(
                str(self.ant) if (x, y) == (self.ant.x, self.ant.y) else self.tape.render_cell(x, y)
                for x in range(width)
            )
            lines.append(f"|{row}|")
        lines.append(border)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def _save_interactively(self, stdin: TextIO, stdout: TextIO) -> bool:
        filename = _ask(stdin, stdout, "Introduzca el nombre del fichero para guardar: ")
        if filename is None:
            return False
        try:
            self.save_state(filename)
        except OSError as error:
            print(f"Error al guardar: {error}", file=sys.stderr)
        else:
            stdout.write(f"Estado guardado correctamente en {filename}\n")
        return True

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Step through the simulation interactively until the ant leaves or the user quits."""
        stdin = sys.stdin if stdin is None else stdin
        stdout = sys.stdout if stdout is None else stdout

        while not self.is_finished():
            stdout.write(_CLEAR)
            stdout.write(self.render())
            answer = _ask(
                stdin, stdout, "\nPresiona ENTER para continuar, 's' para guardar, 'q' para salir: "
            )
            if answer is None or answer in ("q", "Q"):
                break
            if answer in ("s", "S"):
                if self._save_interactively(stdin, stdout):
                    _ask(stdin, stdout, "Presiona ENTER para continuar...")
                continue
            self.step()

        if self.is_finished():
            stdout.write(_CLEAR)
            stdout.write(self.render())
            stdout.write("\n¡La hormiga ha salido de los límites de la cinta!\n")

        answer = _ask(stdin, stdout, "\n¿Desea guardar el estado final? (s/n): ")
        if answer in ("s", "S"):
            self._save_interactively(stdin, stdout)