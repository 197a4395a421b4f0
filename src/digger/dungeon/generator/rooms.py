from __future__ import annotations

import logging
from typing import Iterator

from ..geometry import Direction, Position
from ..growth import GrowthPoint
from .base import NOT_PLACED, FeatureGenerator, Placement

logger = logging.getLogger(__name__)


class RoomGenerator(FeatureGenerator):
    """Rectangular rooms entered through one wall.

    Layout relative to ``heading`` (drawn here facing up)::

        C######C
        #......#  ^
        #......#  | size_y
        #......#  v
        C####+#C
         <---->
         size_x
        <--->
        entrance_offset

    ``C`` is the corner the footprint is measured from (all four corners become
    Permawall), ``+`` the entrance. The footprint check may reach the grid
    border because the border cells only ever receive wall.
    """

    def try_place(self, entrance: Position, heading: Direction) -> Placement:
        s = self.settings
        size_x = self.rng.randint(s.room_min_size, s.room_max_size)
        size_y = self.rng.randint(s.room_min_size, s.room_max_size)
        entrance_offset = self.rng.randint(1, size_x)

        right = heading.right()
        corner = entrance + heading.left() * entrance_offset

        # Check the area to see if any of it has already been dug
        for pos in self._rect(corner, heading, size_x + 2, size_y + 2):
            if not self.grid.in_bounds_or_border(pos):
                return NOT_PLACED
            if not self.grid.is_wall_like(pos) and pos != entrance:
                return NOT_PLACED

        for pos in self._rect(corner, heading, size_x + 2, size_y + 2):
            if not self.grid.is_permawall(pos):
                self.grid.fill(pos)

        self.grid.make_permawall(corner)
        self.grid.make_permawall(corner + right * (size_x + 1))
        self.grid.make_permawall(corner + heading * (size_y + 1))
        self.grid.make_permawall(corner + right * (size_x + 1) + heading * (size_y + 1))

        for pos in self._rect(corner + heading + right, heading, size_x, size_y):
            self.grid.dig(pos)

        self.grid.make_door(entrance)

        growth = (
            GrowthPoint(corner + heading * self.rng.randint(1, size_y), heading.left()),
            GrowthPoint(
                corner + heading * (size_y + 1) + right * self.rng.randint(1, size_x), heading
            ),
            GrowthPoint(
                corner + right * (size_x + 1) + heading * self.rng.randint(1, size_y), right
            ),
        )
        logger.debug(
            "Room %dx%d dug at entrance (%d,%d) heading %s",
            size_x, size_y, entrance.x, entrance.y, heading.name,
        )
        return Placement(True, growth)

    @staticmethod
    def _rect(origin: Position, heading: Direction, across: int, along: int) -> Iterator[Position]:
        """Row-major walk: rows step along ``heading``, cells step along ``heading.right()``."""
        right = heading.right()
        for row in range(along):
            start = origin + heading * row
            for col in range(across):
                yield start + right * col


__all__ = ["RoomGenerator"]
