"""Worklist-driven dig loop.

Generation starts from a single door on the bottom edge of the map and grows
outward: each iteration takes one pending growth point at random, tries to
attach a room or a corridor to it, and queues whatever new growth points the
placement proposes. Nothing is ever undone; a growth point that cannot be used
after ``max_tries`` attempts is simply dropped. The run ends when the worklist
is empty.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import GenerationSettings
from ..rng import RandomSource
from .generator import CorridorGenerator, Placement, RoomGenerator
from .generator.base import NOT_PLACED
from .geometry import LEFT, RIGHT, UP, Direction, Position
from .grid import Grid
from .growth import GrowthPoint, IntSource, Worklist

logger = logging.getLogger(__name__)

# Values of the per-attempt feature draw
ROOM, CORRIDOR = 0, 1


@dataclass
class GenerationReport:
    """Counters collected over one run."""

    seed: Optional[int] = None
    rooms: int = 0
    corridors: int = 0
    dropped: int = 0
    iterations: int = 0


class Digger:
    """Owns the worklist for one run and dispatches to the feature generators."""

    def __init__(self, grid: Grid, rng: IntSource, settings: Optional[GenerationSettings] = None) -> None:
        self.grid = grid
        self.rng = rng
        self.settings = settings or GenerationSettings()
        self.worklist = Worklist()
        self.report = GenerationReport(seed=getattr(rng, "seed", None))
        self._generators = {
            ROOM: RoomGenerator(grid, rng, self.settings),
            CORRIDOR: CorridorGenerator(grid, rng, self.settings),
        }

    @property
    def entrance(self) -> Position:
        return Position(self.grid.width // 2, self.grid.height - 1)

    def seed(self) -> GrowthPoint:
        """Open the map entrance on the bottom edge and queue it, heading up."""
        entrance = self.entrance
        point = GrowthPoint(entrance, UP, produces_door=True)
        self.worklist.push(point)
        self.grid.make_door(entrance)
        self.grid.fill(entrance + RIGHT)
        self.grid.fill(entrance + LEFT)
        logger.debug("Seeded entrance at (%d,%d)", entrance.x, entrance.y)
        return point

    def try_growth(self, position: Position, heading: Direction) -> Placement:
        """Try a room or a corridor up to ``max_tries`` times; stop at the first that fits."""
        for _ in range(self.settings.max_tries):
            choice = self.rng.randint(0, 1)
            placement = self._generators[choice].try_place(position, heading)
            if placement:
                if choice == ROOM:
                    self.report.rooms += 1
                else:
                    self.report.corridors += 1
                return placement
        return NOT_PLACED

    def step(self) -> bool:
        """Drain one growth point. Returns True if something was dug from it."""
        point = self.worklist.pop_random(self.rng)
        self.report.iterations += 1
        origin = point.position

        # A later room may have turned this cell into one of its corners
        if self.grid.is_permawall(origin):
            logger.debug("Dropping growth point at (%d,%d): sealed as room corner", origin.x, origin.y)
            self.report.dropped += 1
            return False

        placement = self.try_growth(origin, point.heading)
        if not placement:
            logger.debug("Dropping growth point at (%d,%d) heading %s", origin.x, origin.y, point.heading.name)
            self.report.dropped += 1
            return False

        if point.produces_door:
            self.grid.make_door(origin)
        elif self.grid.is_wall_like(origin):
            self.grid.dig(origin)
        self.worklist.extend(placement.growth_points)
        return True

    def drain(self) -> None:
        while self.worklist:
            self.step()

    def run(self) -> GenerationReport:
        self.seed()
        self.drain()
        logger.info(
            "Dig complete: %d rooms, %d corridors, %d growth points dropped over %d iterations",
            self.report.rooms, self.report.corridors, self.report.dropped, self.report.iterations,
        )
        return self.report


def generate(settings: GenerationSettings) -> Tuple[Grid, GenerationReport]:
    """Run one full generation from settings; returns the finished grid and its report."""
    settings.validate()
    logger.info("Generating %dx%d map", settings.width, settings.height)
    grid = Grid(settings.width, settings.height)
    rng = RandomSource(settings.seed)
    report = Digger(grid, rng, settings).run()
    return grid, report


__all__ = ["Digger", "GenerationReport", "generate"]
