from .digger import Digger, GenerationReport, generate
from .geometry import DOWN, LEFT, RIGHT, UP, Direction, Position
from .grid import Grid
from .growth import GrowthPoint, Worklist
from .tiles import TileState

__all__ = [
    "Digger",
    "GenerationReport",
    "generate",
    "Direction",
    "Position",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "Grid",
    "GrowthPoint",
    "Worklist",
    "TileState",
]
