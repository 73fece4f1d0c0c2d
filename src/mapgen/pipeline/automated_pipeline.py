"""
Automated map generation pipeline.

Normalizes the settings, seeds one random source for the whole call and
runs the generation passes, either once at the configured size, under the
occupancy-driven auto-sizer, or through the fixed train layout.
"""

import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..generators.area import build_base_area
from ..generators.context import GenerationContext
from ..generators.layout.layout_types import GridMap, LayoutConverter, MIN_MAP_SIZE
from ..settings.generation_settings import GenerationSettings
from ..settings.normalizer import normalize_settings
from .auto_size import AutoSizer
from .generation_state import GenerationState
from .passes import (
    ConnectivityPass,
    CorridorPass,
    FixedLayoutPass,
    GatePass,
    MapPass,
    PartitionPass,
    PassConfig,
    RoomGraphPass,
    RoomPackingPass,
    TrunkPass,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PipelineStage(Enum):
    SETTINGS = "settings"
    LAYOUT = "layout"
    AUTO_SIZE = "auto_size"
    FIXED_LAYOUT = "fixed_layout"
    COMPLETE = "complete"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class PipelineError(Exception):
    pass


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass
class GenerationResult:
    """
    Output of one generation call.

    Attributes:
        grid_map: The produced map (cell grid frozen)
        settings: The normalized settings that were used
        warnings: Every clamp, auto-size and repair decision, in order
        metrics: Seed, pass counters, layout statistics and timing
    """
    grid_map: Optional[GridMap] = None
    settings: Optional[GenerationSettings] = None
    warnings: List[str] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def map(self) -> Optional[GridMap]:
        return self.grid_map

    @property
    def total_time(self) -> float:
        return self.metrics.get("total_time", 0.0)

    def add_warning(self, warning: str, stage: Optional[PipelineStage] = None):
        if stage:
            warning = f"[{stage.value}] {warning}"
        self.warnings.append(warning)


# ---------------------------------------------------------------------------
# Main pipeline
# ---------------------------------------------------------------------------

class MapGenerator:
    """Generates a map from a settings value."""

    def standard_passes(self, settings: GenerationSettings) -> List[Tuple[MapPass, PassConfig]]:
        return [
            (PartitionPass(), PassConfig()),
            (TrunkPass(), PassConfig()),
            (GatePass(), PassConfig()),
            (RoomPackingPass(), PassConfig()),
            (RoomGraphPass(), PassConfig()),
            (CorridorPass(), PassConfig()),
            (ConnectivityPass(), PassConfig(enabled=settings.validate_connectivity)),
        ]

    def fixed_layout_passes(self, settings: GenerationSettings) -> List[Tuple[MapPass, PassConfig]]:
        return [
            (FixedLayoutPass(), PassConfig()),
            (ConnectivityPass(), PassConfig(enabled=settings.validate_connectivity)),
        ]

    def _run_passes(self, state: GenerationState,
                    passes: Sequence[Tuple[MapPass, PassConfig]]) -> GenerationState:
        for map_pass, config in passes:
            result = map_pass.run(state, config)
            if not result.success:
                raise PipelineError(f"Pass '{map_pass.name}' failed: {'; '.join(result.errors)}")
            state.warnings.extend(f"[{map_pass.name}] {w}" for w in result.warnings)
            state.metrics.update(result.metrics)
        return state

    def run_attempt(self, settings: GenerationSettings, width: int, height: int,
                    rng: random.Random, fixed_layout: bool = False) -> GenerationState:
        """
        Run one full attempt on a fresh map and context.

        Args:
            settings: Normalized settings
            width: Map width (clamped to [20, 500])
            height: Map height (clamped to [20, 500])
            rng: The call's random source
            fixed_layout: Use the train layout instead of the standard passes
        """
        grid_map = build_base_area(width, height, settings.grid_step)
        state = GenerationState(settings=settings, grid_map=grid_map,
                                context=GenerationContext(rng=rng))
        passes = self.fixed_layout_passes(settings) if fixed_layout else self.standard_passes(settings)
        return self._run_passes(state, passes)

    def generate(self, settings: Optional[GenerationSettings] = None,
                 seed: Optional[int] = None) -> GenerationResult:
        """
        Generate a map.

        Args:
            settings: Raw settings; defaults are used when omitted
            seed: Explicit seed; defaults to ``settings.seed``

        Returns:
            GenerationResult with the frozen map and all warnings
        """
        start_time = time.time()
        settings, setting_warnings = normalize_settings(settings or GenerationSettings())
        result = GenerationResult(settings=settings)
        for warning in setting_warnings:
            result.add_warning(warning, PipelineStage.SETTINGS)

        actual_seed = settings.seed if seed is None else seed
        rng = random.Random(actual_seed)
        result.metrics['seed'] = actual_seed
        logger.info("Generation seed: %d", actual_seed)

        if settings.is_fixed_layout:
            logger.info("Fixed layout: %dx%d", settings.map_width_units, settings.map_height_units)
            state = self.run_attempt(settings, settings.map_width_units,
                                     settings.map_height_units, rng, fixed_layout=True)
        elif settings.auto_map_size:
            state = self._generate_auto_sized(settings, rng, result)
        else:
            logger.info("Starting map generation: %d rooms, %dx%d", settings.rooms_count,
                        settings.map_width_units, settings.map_height_units)
            state = self.run_attempt(settings, settings.map_width_units,
                                     settings.map_height_units, rng)

        result.warnings.extend(state.warnings)
        result.metrics.update(state.metrics)
        state.grid_map.freeze()
        result.grid_map = state.grid_map

        stats = LayoutConverter.layout_stats(state.grid_map)
        result.metrics['stats'] = stats
        result.metrics['total_time'] = time.time() - start_time
        logger.info("Map complete: %dx%d, %d rooms, %d doors, occupancy %.3f in %.2fs",
                    stats['width'], stats['height'], stats['room_count'], stats['door_count'],
                    stats['occupancy'], result.metrics['total_time'])
        return result

    def _generate_auto_sized(self, settings: GenerationSettings, rng: random.Random,
                             result: GenerationResult) -> GenerationState:
        sizer = AutoSizer(settings, lambda w, h: self.run_attempt(settings, w, h, rng))
        best = sizer.run()
        for decision in sizer.decisions:
            result.add_warning(decision, PipelineStage.AUTO_SIZE)
        result.metrics['auto_size_attempts'] = len(sizer.attempts)

        if best is None:
            result.add_warning("No auto-size attempt produced a map; using a minimal base map",
                               PipelineStage.AUTO_SIZE)
            return GenerationState(settings=settings,
                                   grid_map=build_base_area(MIN_MAP_SIZE, MIN_MAP_SIZE, settings.grid_step),
                                   context=GenerationContext(rng=rng))
        return best.state


def generate_map(settings: Optional[GenerationSettings] = None,
                 seed: Optional[int] = None) -> GenerationResult:
    """Convenience wrapper around ``MapGenerator().generate``."""
    return MapGenerator().generate(settings, seed)
