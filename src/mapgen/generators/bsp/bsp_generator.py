#!/usr/bin/env python3
"""
BSP (Binary Space Partitioning) Block Partitioner

Splits the map interior into rectangular blocks that scope room placement
and gate scattering. Splitting is breadth-first over a flat list: the first
rectangle large enough to split is replaced by its two halves until the
target block count is reached or nothing can be split any more.

Author: idTech Map Generator
License: MIT
"""

import logging
import random
from typing import List
from enum import Enum, auto

from ..layout.layout_types import Block, GridMap, Rect

logger = logging.getLogger(__name__)


# Cells kept free between the map edge and the partitioned interior
BLOCK_MARGIN = 2


class SplitDirection(Enum):
    """Direction for BSP splitting"""
    HORIZONTAL = auto()  # Split along Y axis
    VERTICAL = auto()    # Split along X axis


class BlockPartitioner:
    """
    Recursive rectangle splitter producing non-overlapping blocks.

    Args:
        min_block_size: Smallest width/height a block may have
        split_bias: Probability of a vertical split when both are possible
    """

    def __init__(self, min_block_size: int, split_bias: float = 0.5):
        self.min_block_size = min_block_size
        self.split_bias = split_bias

    def can_split(self, rect: Rect) -> bool:
        limit = 2 * self.min_block_size
        return rect.width >= limit or rect.height >= limit

    def choose_direction(self, rect: Rect, rng: random.Random) -> SplitDirection:
        limit = 2 * self.min_block_size
        vertical = rng.random() < self.split_bias
        if rect.width < limit:
            vertical = False
        if rect.height < limit:
            vertical = True
        return SplitDirection.VERTICAL if vertical else SplitDirection.HORIZONTAL

    def split_rect(self, rect: Rect, rng: random.Random) -> List[Rect]:
        """
        Split one rectangle in two.

        The offset is uniform in [M, dim - M], so both halves are at least M.
        """
        m = self.min_block_size
        direction = self.choose_direction(rect, rng)
        if direction == SplitDirection.VERTICAL:
            offset = rng.randint(m, rect.width - m)
            return [Rect(rect.x, rect.y, offset, rect.height),
                    Rect(rect.x + offset, rect.y, rect.width - offset, rect.height)]
        offset = rng.randint(m, rect.height - m)
        return [Rect(rect.x, rect.y, rect.width, offset),
                Rect(rect.x, rect.y + offset, rect.width, rect.height - offset)]

    def partition(self, area: Rect, target_count: int, rng: random.Random) -> List[Rect]:
        """
        Partition an area into at most ``target_count`` rectangles.

        Args:
            area: Rectangle to partition
            target_count: Desired number of rectangles; <= 0 yields none
            rng: The run's random source

        Returns:
            List of rectangles in split order
        """
        if target_count <= 0 or area.width <= 0 or area.height <= 0:
            return []

        rects = [area]
        while len(rects) < target_count:
            index = next((i for i, r in enumerate(rects) if self.can_split(r)), None)
            if index is None:
                logger.debug("Partition exhausted at %d of %d blocks", len(rects), target_count)
                break
            parent = rects.pop(index)
            rects.extend(self.split_rect(parent, rng))
        return rects


def interior_rect(grid_map: GridMap) -> Rect:
    """The map area available to blocks"""
    return Rect(BLOCK_MARGIN, BLOCK_MARGIN,
                grid_map.width - 2 * BLOCK_MARGIN, grid_map.height - 2 * BLOCK_MARGIN)


def split_blocks(grid_map: GridMap, block_count: int, min_block_size: int,
                 split_bias: float, rng: random.Random) -> List[Block]:
    """
    Partition the map interior into blocks and attach them to the map.

    Returns:
        The created blocks, ids starting at 1
    """
    partitioner = BlockPartitioner(min_block_size, split_bias)
    rects = partitioner.partition(interior_rect(grid_map), block_count, rng)
    blocks = [Block(id=i + 1, bounds=rect) for i, rect in enumerate(rects)]
    grid_map.blocks.extend(blocks)
    return blocks
