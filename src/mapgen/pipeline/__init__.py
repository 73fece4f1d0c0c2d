"""
Map Generation Pipeline Module.

Provides the generation entry point, the auto-sizer and the pass framework.
"""

from .automated_pipeline import (
    MapGenerator,
    GenerationResult,
    PipelineStage,
    PipelineError,
    generate_map,
)
from .auto_size import AutoSizer, SizeAttempt, estimate_initial_size, occupancy_score
from .generation_state import GenerationState

__all__ = [
    # Pipeline core
    'MapGenerator',
    'GenerationResult',
    'PipelineStage',
    'PipelineError',
    'generate_map',
    # Auto size
    'AutoSizer',
    'SizeAttempt',
    'estimate_initial_size',
    'occupancy_score',
    # State
    'GenerationState',
]
