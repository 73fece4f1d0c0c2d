"""
BSP (Binary Space Partitioning) Module

This module provides the block partitioner that splits the map interior
into rectangular blocks.
"""

from .bsp_generator import (
    BlockPartitioner,
    SplitDirection,
    split_blocks,
    interior_rect,
    BLOCK_MARGIN
)

__all__ = [
    'BlockPartitioner',
    'SplitDirection',
    'split_blocks',
    'interior_rect',
    'BLOCK_MARGIN'
]

__version__ = '1.0.0'
