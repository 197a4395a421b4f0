"""Integer grid geometry: positions and the four cardinal headings.

Coordinates are (x, y) with (0, 0) at top-left; x grows to the right, y grows
down. Under that convention ``right()`` turns a heading 90 degrees clockwise
on screen and ``left()`` 90 degrees counter-clockwise:

    position + direction       = one step away from position
    position + direction * n   = n steps away from position
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def __add__(self, other: Union["Position", "Direction"]) -> "Position":
        if isinstance(other, Position):
            return Position(self.x + other.x, self.y + other.y)
        if isinstance(other, Direction):
            return Position(self.x + other.dx, self.y + other.dy)
        return NotImplemented

    def __sub__(self, other: Union["Position", "Direction"]) -> "Position":
        if isinstance(other, Position):
            return Position(self.x - other.x, self.y - other.y)
        if isinstance(other, Direction):
            return Position(self.x - other.dx, self.y - other.dy)
        return NotImplemented


@dataclass(frozen=True)
class Direction:
    """One of the four unit vectors; rotations are pure permutations of them."""

    dx: int
    dy: int

    def __post_init__(self) -> None:
        if abs(self.dx) + abs(self.dy) != 1:
            raise ValueError(f"Direction must be a unit vector, got ({self.dx}, {self.dy})")

    def left(self) -> "Direction":
        return Direction(self.dy, -self.dx)

    def right(self) -> "Direction":
        return Direction(-self.dy, self.dx)

    def reverse(self) -> "Direction":
        return Direction(-self.dx, -self.dy)

    def __mul__(self, steps: int) -> Position:
        if not isinstance(steps, int):
            return NotImplemented
        return Position(self.dx * steps, self.dy * steps)

    __rmul__ = __mul__

    @property
    def name(self) -> str:
        return _NAMES[(self.dx, self.dy)]


UP = Direction(0, -1)
DOWN = Direction(0, 1)
LEFT = Direction(-1, 0)
RIGHT = Direction(1, 0)

CARDINALS = (UP, RIGHT, DOWN, LEFT)

_NAMES = {(0, -1): "up", (0, 1): "down", (-1, 0): "left", (1, 0): "right"}

__all__ = ["Position", "Direction", "UP", "DOWN", "LEFT", "RIGHT", "CARDINALS"]
