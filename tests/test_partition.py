import random

from mapgen.generators.area import build_base_area
from mapgen.generators.bsp import BLOCK_MARGIN, BlockPartitioner, SplitDirection, interior_rect, split_blocks
from mapgen.generators.layout import Rect


def test_partition_tiles_the_area():
    area = Rect(2, 2, 116, 76)
    rects = BlockPartitioner(16, 0.5).partition(area, 6, random.Random(4))

    assert 1 < len(rects) <= 6
    assert sum(r.area for r in rects) == area.area
    for i, rect in enumerate(rects):
        assert rect.width >= 16 and rect.height >= 16
        assert rect.x >= area.x and rect.right <= area.right
        assert rect.y >= area.y and rect.bottom <= area.bottom
        for other in rects[i + 1:]:
            assert not rect.intersects(other)


def test_partition_stops_when_nothing_can_split():
    area = Rect(0, 0, 20, 20)
    assert BlockPartitioner(16).partition(area, 5, random.Random(1)) == [area]


def test_partition_of_zero_blocks_is_empty():
    assert BlockPartitioner(16).partition(Rect(0, 0, 100, 100), 0, random.Random(1)) == []


def test_split_direction_follows_the_splittable_axis():
    partitioner = BlockPartitioner(10, split_bias=1.0)
    rng = random.Random(0)
    assert partitioner.choose_direction(Rect(0, 0, 15, 40), rng) == SplitDirection.HORIZONTAL
    assert partitioner.choose_direction(Rect(0, 0, 40, 15), rng) == SplitDirection.VERTICAL


def test_split_halves_respect_minimum_size():
    partitioner = BlockPartitioner(10)
    rng = random.Random(8)
    for _ in range(50):
        left, right = partitioner.split_rect(Rect(0, 0, 20, 5), rng)
        assert left.width == 10 and right.width == 10


def test_split_blocks_attaches_numbered_blocks():
    grid_map = build_base_area(120, 80)
    blocks = split_blocks(grid_map, 4, 16, 0.5, random.Random(11))

    assert grid_map.blocks == blocks
    assert [b.id for b in blocks] == list(range(1, len(blocks) + 1))
    assert interior_rect(grid_map) == Rect(BLOCK_MARGIN, BLOCK_MARGIN, 116, 76)
