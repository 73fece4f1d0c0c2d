"""
Layout Types Module for 2D Map Generation

This module provides the grid map model and the rasterization helpers the
generation stages paint it with.
"""

from .layout_types import (
    GridMap,
    Block,
    Room,
    Gate,
    Door,
    Corridor,
    Point,
    Rect,
    CellType,
    Direction,
    RoomType,
    GateType,
    LayoutConverter,
    TRAVERSABLE_CELLS,
    MIN_MAP_SIZE,
    MAX_MAP_SIZE
)
from .rasterize import (
    footprint_radius,
    trace_polyline,
    compress_path,
    paint_polyline
)

__all__ = [
    'GridMap',
    'Block',
    'Room',
    'Gate',
    'Door',
    'Corridor',
    'Point',
    'Rect',
    'CellType',
    'Direction',
    'RoomType',
    'GateType',
    'LayoutConverter',
    'TRAVERSABLE_CELLS',
    'MIN_MAP_SIZE',
    'MAX_MAP_SIZE',
    'footprint_radius',
    'trace_polyline',
    'compress_path',
    'paint_polyline'
]

__version__ = '1.0.0'
