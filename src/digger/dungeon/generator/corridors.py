from __future__ import annotations

import logging

from ..geometry import Direction, Position
from ..growth import GrowthPoint
from .base import NOT_PLACED, FeatureGenerator, Placement

logger = logging.getLogger(__name__)


class CorridorGenerator(FeatureGenerator):
    """Straight one-wide passages that must run into existing open space.

    Walking forward from the entrance, the first non-wall cell on the centre
    line is an intersection: the corridor is cut short there. Corridors that
    never meet anything are dead ends and are rejected before digging.
    """

    def try_place(self, entrance: Position, heading: Direction) -> Placement:
        grid = self.grid
        length = self.rng.randint(self.settings.corridor_min_length, self.settings.corridor_max_length)
        left, right = heading.left(), heading.right()

        found_intersect = False
        pos = entrance
        for step in range(length):
            pos = pos + heading
            if not grid.in_bounds(pos):
                return NOT_PLACED
            if not grid.is_wall_like(pos):
                found_intersect = True
                length = step
                break
            if not grid.is_wall_like(pos + left) or not grid.is_wall_like(pos + right) or grid.is_permawall(pos):
                return NOT_PLACED

        # One cell or less would leave two doors back to back
        if length <= 1:
            return NOT_PLACED
        if not found_intersect:
            return NOT_PLACED

        pos = entrance
        for _ in range(length):
            pos = pos + heading
            grid.dig(pos)
            for flank in (pos + left, pos + right):
                if not grid.is_permawall(flank):
                    grid.fill(flank)
            ahead = pos + heading
            if not grid.in_bounds(ahead) or not grid.is_wall_like(ahead):
                break

        ahead = pos + heading
        if not grid.in_bounds(ahead) or grid.is_wall_like(ahead):
            # Seal the end; it opens up again if something later connects here
            grid.fill(pos)
            logger.debug("Corridor from (%d,%d) sealed at (%d,%d)", entrance.x, entrance.y, pos.x, pos.y)
            return Placement(True, (GrowthPoint(pos, heading, produces_door=False),))

        grid.make_door(pos)
        logger.debug("Corridor from (%d,%d) joined open space at (%d,%d)", entrance.x, entrance.y, pos.x, pos.y)
        return Placement(True)


__all__ = ["CorridorGenerator"]
