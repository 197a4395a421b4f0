from collections import deque

import pytest

from digger.config import GenerationSettings
from digger.dungeon.digger import CORRIDOR, ROOM, Digger, generate
from digger.dungeon.generator import CorridorGenerator, RoomGenerator
from digger.dungeon.geometry import CARDINALS, UP, Position
from digger.dungeon.grid import Grid
from digger.dungeon.growth import GrowthPoint
from digger.dungeon.tiles import TileState
from digger.rng import RandomSource

SEEDS = [1, 7, 42, 2024, "run-abc"]


class MonitoredGrid(Grid):
    """Grid that records any write that would change a Permawall cell."""

    def __init__(self, width, height):
        super().__init__(width, height)
        self.violations = []
        self.writes = 0

    def set(self, pos, state):
        if self.is_within(pos) and self.get(pos) is TileState.PERMAWALL and state is not TileState.PERMAWALL:
            self.violations.append((pos, state))
        self.writes += 1
        super().set(pos, state)


class RecordingRandom(RandomSource):
    def __init__(self, seed):
        super().__init__(seed)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return super().randint(a, b)


def _run(width, height, seed, settings=None):
    grid = Grid(width, height)
    report = Digger(grid, RandomSource(seed), settings).run()
    return grid, report


def test_seeding_opens_entrance_before_draining():
    grid = Grid(20, 20)
    digger = Digger(grid, RandomSource(1234))
    point = digger.seed()

    assert point == GrowthPoint(Position(10, 19), UP, produces_door=True)
    assert grid.get(Position(10, 19)) is TileState.DOOR
    assert grid.get(Position(9, 19)) is TileState.WALL
    assert grid.get(Position(11, 19)) is TileState.WALL
    assert len(digger.worklist) == 1
    assert grid.count(TileState.UNKNOWN) == 400 - 3


@pytest.mark.parametrize("seed", SEEDS)
def test_border_never_floor_or_door_except_entrance(seed):
    grid, _report = _run(40, 25, seed)
    entrance = Position(20, 24)
    for y in range(grid.height):
        for x in range(grid.width):
            pos = Position(x, y)
            if grid.is_border(pos) and pos != entrance:
                assert grid.get(pos) not in (TileState.FLOOR, TileState.DOOR), pos
    assert grid.get(entrance) is TileState.DOOR


@pytest.mark.parametrize("seed", SEEDS)
def test_permawall_never_changes(seed):
    grid = MonitoredGrid(50, 30)
    report = Digger(grid, RandomSource(seed)).run()
    assert grid.violations == []
    assert grid.writes > 0
    if report.rooms:
        assert grid.count(TileState.PERMAWALL) >= 4


@pytest.mark.parametrize("seed", SEEDS)
def test_every_open_cell_is_reachable_from_entrance(seed):
    grid, _report = _run(50, 30, seed)
    start = Position(25, 29)
    seen = {start}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        for d in CARDINALS:
            nxt = pos + d
            if nxt in seen or not grid.is_within(nxt) or grid.is_wall_like(nxt):
                continue
            seen.add(nxt)
            queue.append(nxt)
    open_cells = set(grid.positions(TileState.FLOOR)) | set(grid.positions(TileState.DOOR))
    assert open_cells <= seen


def test_generation_produces_rooms_and_corridors():
    grid, report = _run(80, 40, 42)
    assert report.rooms > 0
    assert report.iterations == report.rooms + report.corridors + report.dropped
    assert grid.count(TileState.FLOOR) > 0
    assert grid.count(TileState.DOOR) > 1


def test_text_output_shape():
    grid, _report = _run(33, 17, 5)
    text = grid.to_text()
    lines = text.split("\n")
    assert lines[-1] == ""
    assert len(lines[:-1]) == 17
    assert all(len(line) == 33 for line in lines[:-1])
    assert set(text) <= set(" .#+\n")


def test_unusable_growth_point_dropped_after_max_tries():
    grid = Grid(4, 4)
    rng = RecordingRandom(99)
    settings = GenerationSettings(width=4, height=4, max_tries=3)
    digger = Digger(grid, rng, settings)
    digger.seed()
    after_seed = grid.snapshot()

    digger.drain()

    assert grid.snapshot() == after_seed
    assert digger.report.dropped == 1
    assert digger.report.iterations == 1
    assert digger.report.rooms == digger.report.corridors == 0
    assert rng.calls[0] == (0, 0)
    assert rng.calls.count((0, 1)) == 3


def test_growth_point_sealed_as_permawall_is_dropped_without_draws(scripted):
    grid = Grid(10, 10)
    origin = Position(5, 5)
    grid.make_permawall(origin)
    rng = scripted([0])
    digger = Digger(grid, rng)
    digger.worklist.push(GrowthPoint(origin, UP))

    assert digger.step() is False
    assert rng.calls == [(0, 0)]
    assert grid.get(origin) is TileState.PERMAWALL
    assert digger.report.dropped == 1


def test_successful_growth_finalizes_origin_as_door(scripted):
    grid = Grid(20, 20)
    origin = Position(10, 15)
    grid.fill(origin)
    # pop index, choose room, room draws
    rng = scripted([0, 0, 3, 3, 2, 1, 1, 1])
    digger = Digger(grid, rng)
    digger.worklist.push(GrowthPoint(origin, UP))

    assert digger.step() is True
    assert grid.get(origin) is TileState.DOOR
    assert len(digger.worklist) == 3
    assert digger.report.rooms == 1


def test_successful_growth_from_sealed_end_becomes_floor(scripted):
    grid = Grid(12, 7)
    origin = Position(2, 3)
    grid.fill(origin)
    grid.dig(Position(6, 3))
    # pop index, choose corridor, corridor length
    rng = scripted([0, 1, 6])
    digger = Digger(grid, rng)
    digger.worklist.push(GrowthPoint(origin, UP.right(), produces_door=False))

    assert digger.step() is True
    assert grid.get(origin) is TileState.FLOOR
    assert grid.get(Position(5, 3)) is TileState.DOOR
    assert digger.report.corridors == 1
    assert not digger.worklist


def test_generate_validates_and_reports_seed():
    grid, report = generate(GenerationSettings(width=30, height=20, seed=11))
    assert (grid.width, grid.height) == (30, 20)
    assert report.seed == 11


@pytest.mark.parametrize("seed", SEEDS)
def test_report_counts_match_generator_successes(monkeypatch, seed):
    placed = {"room": 0, "corridor": 0}

    def counting(name, original):
        def try_place(self, entrance, heading):
            placement = original(self, entrance, heading)
            if placement:
                placed[name] += 1
            return placement
        return try_place

    monkeypatch.setattr(RoomGenerator, "try_place", counting("room", RoomGenerator.try_place))
    monkeypatch.setattr(CorridorGenerator, "try_place", counting("corridor", CorridorGenerator.try_place))

    _grid, report = _run(60, 30, seed)

    assert report.rooms == placed["room"]
    assert report.corridors == placed["corridor"]


def test_corridor_after_failed_room_is_counted_as_corridor(scripted):
    grid = Grid(12, 7)
    origin = Position(2, 3)
    grid.fill(origin)
    grid.dig(Position(6, 3))
    # pop index; room 6x6 cannot fit in a 7-row grid; then corridor of length 6
    rng = scripted([0, ROOM, 6, 6, 1, CORRIDOR, 6])
    digger = Digger(grid, rng)
    digger.worklist.push(GrowthPoint(origin, UP.right(), produces_door=False))

    assert digger.step() is True
    assert digger.report.rooms == 0
    assert digger.report.corridors == 1
