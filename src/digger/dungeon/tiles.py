from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet


class TileState(Enum):
    """Discrete state of one grid cell.

    UNKNOWN cells have never been visited; for placement checks they behave
    like solid rock, exactly as WALL and PERMAWALL do.
    """

    UNKNOWN = 0
    FLOOR = 1
    WALL = 2
    PERMAWALL = 3  # Room corner; never re-carved once set
    DOOR = 4

    @property
    def is_wall_like(self) -> bool:
        return self in WALL_LIKE_TILES

    @property
    def char(self) -> str:
        return TILE_CHARS[self]


WALL_LIKE_TILES: FrozenSet[TileState] = frozenset(
    {TileState.UNKNOWN, TileState.WALL, TileState.PERMAWALL}
)

TILE_CHARS: Dict[TileState, str] = {
    TileState.UNKNOWN: " ",
    TileState.FLOOR: ".",
    TileState.WALL: "#",
    TileState.PERMAWALL: "#",
    TileState.DOOR: "+",
}

# Permawall renders as '#' and reads back as plain Wall.
CHAR_TILES: Dict[str, TileState] = {
    " ": TileState.UNKNOWN,
    ".": TileState.FLOOR,
    "#": TileState.WALL,
    "+": TileState.DOOR,
}

__all__ = ["TileState", "WALL_LIKE_TILES", "TILE_CHARS", "CHAR_TILES"]
