from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Protocol

from .geometry import Direction, Position


class IntSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class GrowthPoint:
    """A pending place to attach more structure.

    ``heading`` points away from the existing structure. When growth from here
    succeeds the origin cell becomes a Door if ``produces_door`` is set,
    otherwise plain Floor (used for sealed corridor ends).
    """

    position: Position
    heading: Direction
    produces_door: bool = True


class Worklist:
    """Unordered pool of growth points drained in uniformly random order.

    Removal keeps the remaining points in insertion order, so a given sequence
    of drawn indices always selects the same points.
    """

    def __init__(self, points: Iterable[GrowthPoint] = ()) -> None:
        self._points: List[GrowthPoint] = list(points)

    def push(self, point: GrowthPoint) -> None:
        self._points.append(point)

    def extend(self, points: Iterable[GrowthPoint]) -> None:
        self._points.extend(points)

    def pop_random(self, rng: IntSource) -> GrowthPoint:
        if not self._points:
            raise IndexError("pop from empty Worklist")
        index = rng.randint(0, len(self._points) - 1)
        return self._points.pop(index)

    def __len__(self) -> int:
        return len(self._points)

    def __bool__(self) -> bool:
        return bool(self._points)

    def __iter__(self) -> Iterator[GrowthPoint]:
        return iter(list(self._points))

    def __repr__(self) -> str:
        return f"Worklist(size={len(self._points)})"


__all__ = ["GrowthPoint", "Worklist", "IntSource"]
