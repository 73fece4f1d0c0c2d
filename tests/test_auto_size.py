import random
import uuid

import pytest

from mapgen.generators.area import build_base_area
from mapgen.generators.context import GenerationContext
from mapgen.generators.layout import CellType, Rect, Room
from mapgen.pipeline import AutoSizer, GenerationState, estimate_initial_size, occupancy_score
from mapgen.settings import GenerationSettings


def _fake_attempt(settings, occupancy, sizes, room_count=0):
    def build(width, height):
        grid_map = build_base_area(width, height)
        grid_map.cells[:round(occupancy * grid_map.area)] = CellType.FLOOR.value
        for i in range(room_count):
            grid_map.rooms.append(Room(id=i + 1, uid=uuid.UUID(int=i + 1),
                                       bounds=Rect(2 + 6 * i, 2, 4, 4), block_id=1))
        sizes.append((grid_map.width, grid_map.height))
        return GenerationState(settings=settings, grid_map=grid_map,
                               context=GenerationContext(rng=random.Random(0)))
    return build


def test_occupancy_score_is_distance_outside_band():
    assert occupancy_score(0.3, 0.25, 0.45) == 0.0
    assert occupancy_score(0.1, 0.25, 0.45) == pytest.approx(0.15)
    assert occupancy_score(0.55, 0.25, 0.45) == 0.55 - 0.45


def test_initial_size_from_room_count():
    assert estimate_initial_size(GenerationSettings()) == (101, 76)
    assert estimate_initial_size(GenerationSettings(rooms_count=0)) == (20, 20)


def test_stops_at_first_attempt_in_band():
    settings = GenerationSettings()
    sizes = []
    best = AutoSizer(settings, _fake_attempt(settings, 0.3, sizes)).run()

    assert len(sizes) == 1
    assert best.index == 1
    assert best.score == 0.0


def test_dense_maps_grow_until_attempts_run_out():
    settings = GenerationSettings(auto_size_max_attempts=4)
    sizes = []
    sizer = AutoSizer(settings, _fake_attempt(settings, 0.9, sizes))
    best = sizer.run()

    assert len(sizes) == 4
    widths = [w for w, _ in sizes]
    assert widths == sorted(widths) and widths[0] < widths[-1]
    assert 1 <= best.index <= 4
    assert sizer.decisions[0].endswith("too dense, resizing x1.15")
    assert "resizing" not in sizer.decisions[3]
    assert sizer.decisions[-1].startswith("Auto-size kept attempt ")


def test_sparse_maps_shrink():
    settings = GenerationSettings(auto_size_max_attempts=3)
    sizes = []
    sizer = AutoSizer(settings, _fake_attempt(settings, 0.05, sizes))
    sizer.run()

    assert sizes[1][0] < sizes[0][0]
    assert "too sparse" in sizer.decisions[0]


def test_lone_doorless_room_does_not_force_growth():
    settings = GenerationSettings()
    sizes = []
    sizer = AutoSizer(settings, _fake_attempt(settings, 0.3, sizes, room_count=1))
    best = sizer.run()

    assert len(sizes) == 1
    assert best.rooms_without_doors == 0
    assert sizer.decisions[0].endswith("within band")


def test_doorless_rooms_in_band_still_grow():
    settings = GenerationSettings(auto_size_max_attempts=2)
    sizes = []
    sizer = AutoSizer(settings, _fake_attempt(settings, 0.3, sizes, room_count=2))
    sizer.run()

    assert len(sizes) == 2
    assert sizer.decisions[0].endswith("2 rooms without doors, resizing x1.15")
