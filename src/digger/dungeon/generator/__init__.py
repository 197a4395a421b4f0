from .base import FeatureGenerator, Placement
from .corridors import CorridorGenerator
from .rooms import RoomGenerator

__all__ = ["FeatureGenerator", "Placement", "RoomGenerator", "CorridorGenerator"]
