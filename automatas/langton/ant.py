"""The classic Langton ant."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from automatas.langton.tape import Tape


class Direction(IntEnum):
    """Heading of the ant; values match the configuration file format."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3


_TURN_LEFT = {
    Direction.LEFT: Direction.DOWN,
    Direction.RIGHT: Direction.UP,
    Direction.UP: Direction.LEFT,
    Direction.DOWN: Direction.RIGHT,
}

_TURN_RIGHT = {
    Direction.LEFT: Direction.UP,
    Direction.RIGHT: Direction.DOWN,
    Direction.UP: Direction.RIGHT,
    Direction.DOWN: Direction.LEFT,
}

_STEP = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

_SYMBOL = {
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
    Direction.UP: "^",
    Direction.DOWN: "v",
}


@dataclass
class Ant:
    """An ant at (x, y) with a heading, walking on a tape."""

    x: int
    y: int
    direction: Direction
    tape: Tape = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        self.direction = Direction(self.direction)

    def move(self) -> None:
        """One step: on white paint black and turn left, on black paint white
        and turn right, then advance. Does nothing once off the tape."""
        if not self.tape.is_valid_position(self.x, self.y):
            return
        colour = self.tape.get(self.x, self.y)
        if colour == 0:
            self.tape.set(self.x, self.y, 1)
            self.direction = _TURN_LEFT[self.direction]
        elif colour == 1:
            self.tape.set(self.x, self.y, 0)
            self.direction = _TURN_RIGHT[self.direction]
        dx, dy = _STEP[self.direction]
        self.x += dx
        self.y += dy

    def is_out_of_bounds(self) -> bool:
        """Whether the ant has left the tape."""
        return not self.tape.is_valid_position(self.x, self.y)

    def __str__(self) -> str:
        return _SYMBOL[self.direction]