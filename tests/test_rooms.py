import random

from mapgen.generators.area import build_base_area
from mapgen.generators.bsp import split_blocks
from mapgen.generators.context import GenerationContext
from mapgen.generators.layout import CellType, Rect
from mapgen.generators.layout.layout_types import Block
from mapgen.generators.rooms import RoomPacker, pack_rooms
from mapgen.settings import GenerationSettings, normalize_settings


def _packed(seed, **overrides):
    settings, _ = normalize_settings(GenerationSettings(**overrides))
    context = GenerationContext.from_seed(seed)
    grid_map = build_base_area(120, 80)
    split_blocks(grid_map, settings.blocks_count, settings.min_block_size_units,
                 settings.split_bias, context.rng)
    rooms = pack_rooms(grid_map, settings, context)
    return grid_map, rooms, settings


def test_rooms_respect_padding_and_block_interiors():
    grid_map, rooms, settings = _packed(21, rooms_count=20, padding_units=2)

    assert 0 < len(rooms) <= 20
    for i, room in enumerate(rooms):
        b = grid_map.block_by_id(room.block_id).bounds
        r = room.bounds
        assert r.x >= b.x + 1 and r.right <= b.right - 1
        assert r.y >= b.y + 1 and r.bottom <= b.bottom - 1
        assert 4 <= r.width <= 14 and 4 <= r.height <= 12
        for other in rooms[i + 1:]:
            assert not r.intersects(other.bounds.expand(settings.padding_units))


def test_rooms_are_painted_as_floor():
    grid_map, rooms, _ = _packed(5, rooms_count=12)
    assert grid_map.count(CellType.FLOOR) == sum(r.bounds.area for r in rooms)
    for room in rooms:
        assert grid_map.get_cell(room.bounds.x, room.bounds.y) == CellType.FLOOR


def test_room_ids_are_sequential_from_one():
    grid_map, rooms, _ = _packed(9, rooms_count=15)
    assert [r.id for r in rooms] == list(range(1, len(rooms) + 1))
    assert len({r.uid for r in rooms}) == len(rooms)
    assert grid_map.rooms == rooms


def test_tech_rooms_are_the_first_placed():
    _, rooms, _ = _packed(13, rooms_count=20, tech_rooms_min=5, tech_rooms_max=5)
    tags = [r.is_tech for r in rooms]
    assert tags == [True] * min(5, len(rooms)) + [False] * (len(rooms) - min(5, len(rooms)))


def test_packing_is_deterministic():
    _, first, _ = _packed(77, rooms_count=18)
    _, second, _ = _packed(77, rooms_count=18)
    assert [(r.bounds, r.uid) for r in first] == [(r.bounds, r.uid) for r in second]


def test_no_blocks_means_no_rooms():
    settings = GenerationSettings()
    grid_map = build_base_area(60, 60)
    assert pack_rooms(grid_map, settings, GenerationContext.from_seed(1)) == []


def test_block_too_small_for_a_room_is_skipped():
    settings = GenerationSettings()
    grid_map = build_base_area(40, 40)
    packer = RoomPacker(grid_map, settings, GenerationContext(rng=random.Random(1)))
    assert packer.try_place(Block(id=1, bounds=Rect(2, 2, 5, 30))) is None
