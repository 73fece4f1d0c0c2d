"""
mapgen - procedural 2D level layout generator.

Produces a grid map of blocks, rooms, doors, gates and corridors from a
GenerationSettings value and a seed.

Example:
    from mapgen import LayoutConverter, default_settings, generate_map

    result = generate_map(default_settings(), seed=1337)
    print(LayoutConverter.to_ascii(result.map))
"""

from .generators.layout import CellType, GridMap, LayoutConverter
from .pipeline import GenerationResult, MapGenerator, PipelineError, generate_map
from .settings import Era, GenerationSettings, Setting, default_settings
from .validation import check_map

__all__ = [
    'CellType',
    'GridMap',
    'LayoutConverter',
    'GenerationResult',
    'MapGenerator',
    'PipelineError',
    'generate_map',
    'Era',
    'GenerationSettings',
    'Setting',
    'default_settings',
    'check_map',
]

__version__ = '1.0.0'
