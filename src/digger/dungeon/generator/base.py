from __future__ import annotations

from abc import ABC, abstractmethod
from typing import NamedTuple, Optional, Tuple

from ...config import GenerationSettings
from ..geometry import Direction, Position
from ..grid import Grid
from ..growth import GrowthPoint, IntSource


class Placement(NamedTuple):
    """Outcome of one placement attempt; truthy only when something was dug."""

    placed: bool
    growth_points: Tuple[GrowthPoint, ...] = ()

    def __bool__(self) -> bool:
        return self.placed


NOT_PLACED = Placement(False)


class FeatureGenerator(ABC):
    """Abstract base for features dug against an entrance cell.

    Implementations validate their whole footprint before writing a single
    tile, so a failed attempt leaves the grid untouched. New growth points are
    returned to the caller rather than queued here.
    """

    def __init__(self, grid: Grid, rng: IntSource, settings: Optional[GenerationSettings] = None) -> None:
        self.grid = grid
        self.rng = rng
        self.settings = settings or GenerationSettings()

    @abstractmethod
    def try_place(self, entrance: Position, heading: Direction) -> Placement:
        """Attempt one placement facing ``heading`` from ``entrance``."""
        raise NotImplementedError
