from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from ..errors import OutOfBounds
from .geometry import Position
from .tiles import CHAR_TILES, TileState

logger = logging.getLogger(__name__)


class Grid:
    """A fixed-size, bounds-checked tile store for one generation run.

    Cells live in a flat list addressed by ``y * width + x`` and every cell
    starts out UNKNOWN. All reads and writes go through ``get``/``set`` (or the
    named mutators built on ``set``), which reject coordinates outside
    [0, width) x [0, height) with OutOfBounds instead of wrapping around.

    The grid does not police tile transitions; keeping Permawall cells intact
    is the job of the generators that write to it.
    """

    __slots__ = ("_w", "_h", "_cells")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Grid dimensions must be positive")
        self._w = int(width)
        self._h = int(height)
        self._cells: List[TileState] = [TileState.UNKNOWN] * (self._w * self._h)
        logger.debug("Initialized Grid %dx%d", self._w, self._h)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    # ---- Bounds ----------------------------------------------------------
    def is_within(self, pos: Position) -> bool:
        return 0 <= pos.x < self._w and 0 <= pos.y < self._h

    def in_bounds(self, pos: Position) -> bool:
        """Strict interior: excludes the outer ring so a wall always fits around pos."""
        return 1 <= pos.x < self._w - 1 and 1 <= pos.y < self._h - 1

    def in_bounds_or_border(self, pos: Position) -> bool:
        """Interior plus the outer ring."""
        return self.is_within(pos)

    def is_border(self, pos: Position) -> bool:
        return self.is_within(pos) and not self.in_bounds(pos)

    def _index(self, pos: Position) -> int:
        if not self.is_within(pos):
            raise OutOfBounds(
                f"Coordinates out of bounds: ({pos.x}, {pos.y}) for grid {self._w}x{self._h}"
            )
        return pos.y * self._w + pos.x

    # ---- Access ----------------------------------------------------------
    def get(self, pos: Position) -> TileState:
        return self._cells[self._index(pos)]

    def set(self, pos: Position, state: TileState) -> None:
        if not isinstance(state, TileState):
            raise TypeError("state must be a TileState enum member")
        self._cells[self._index(pos)] = state

    def is_wall_like(self, pos: Position) -> bool:
        return self.get(pos).is_wall_like

    def is_permawall(self, pos: Position) -> bool:
        return self.get(pos) is TileState.PERMAWALL

    # ---- Mutators --------------------------------------------------------
    def dig(self, pos: Position) -> None:
        self.set(pos, TileState.FLOOR)

    def fill(self, pos: Position) -> None:
        self.set(pos, TileState.WALL)

    def make_door(self, pos: Position) -> None:
        self.set(pos, TileState.DOOR)

    def make_permawall(self, pos: Position) -> None:
        self.set(pos, TileState.PERMAWALL)

    # ---- Export / Compare -----------------------------------------------
    def count(self, state: TileState) -> int:
        return self._cells.count(state)

    def positions(self, state: TileState) -> List[Position]:
        return [
            Position(i % self._w, i // self._w)
            for i, cell in enumerate(self._cells)
            if cell is state
        ]

    def to_lines(self) -> List[str]:
        rows: List[str] = []
        for y in range(self._h):
            row = self._cells[y * self._w:(y + 1) * self._w]
            rows.append("".join(cell.char for cell in row))
        return rows

    def to_text(self) -> str:
        """Text form consumed by the image renderer: one line per row, each newline-terminated."""
        return "".join(line + "\n" for line in self.to_lines())

    def snapshot(self) -> Tuple[TileState, ...]:
        """Hashable copy of every cell, for equality checks in tests."""
        return tuple(self._cells)

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "Grid":
        """Rebuild a grid from its text rows.

        Permawall cannot be told apart from Wall in text, so '#' reads back as WALL.
        """
        if not lines:
            raise ValueError("lines must not be empty")
        width = len(lines[0])
        if width == 0:
            raise ValueError("line width must be positive")
        for i, row in enumerate(lines):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")

        grid = cls(width, len(lines))
        for y, row in enumerate(lines):
            for x, ch in enumerate(row):
                try:
                    state = CHAR_TILES[ch]
                except KeyError:
                    raise ValueError(f"Unknown tile character {ch!r} at ({x}, {y})") from None
                grid.set(Position(x, y), state)
        return grid

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        return cls.from_lines(text.splitlines())

    def __repr__(self) -> str:
        return f"Grid(width={self._w}, height={self._h})"


__all__ = ["Grid"]
