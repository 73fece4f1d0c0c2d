"""
Occupancy-driven auto-sizer.

Runs whole generation attempts at candidate sizes, scores each map by how
far its occupancy falls outside the target band and keeps the best one.
Dense maps grow by GROW_FACTOR, sparse maps shrink by SHRINK_FACTOR.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..generators.area import clamp_map_size
from ..settings.generation_settings import GenerationSettings
from .generation_state import GenerationState

logger = logging.getLogger(__name__)


GROW_FACTOR = 1.15
SHRINK_FACTOR = 0.9

# Mean packed room area for rooms drawn from [4,14] x [4,12]
EXPECTED_ROOM_AREA = 72
# Corridor length budgeted per room
EXPECTED_CORRIDOR_LENGTH = 12


def occupancy_score(occupancy: float, band_min: float, band_max: float) -> float:
    """Distance of the occupancy outside [band_min, band_max]; 0 inside"""
    if occupancy < band_min:
        return band_min - occupancy
    if occupancy > band_max:
        return occupancy - band_max
    return 0.0


def estimate_initial_size(settings: GenerationSettings) -> Tuple[int, int]:
    """
    Size expected to land the target room count in the middle of the band.

    Returns:
        (width, height), each clamped to [20, 500]
    """
    per_room = EXPECTED_ROOM_AREA + EXPECTED_CORRIDOR_LENGTH * settings.corridor_width_units
    target = (settings.target_occupancy_min + settings.target_occupancy_max) / 2.0
    area = max(1.0, settings.rooms_count * per_room / target)
    aspect = settings.auto_size_aspect_ratio
    width = clamp_map_size(round(math.sqrt(area * aspect)))
    height = clamp_map_size(round(math.sqrt(area / aspect)))
    return width, height


@dataclass
class SizeAttempt:
    """One auto-size iteration."""
    index: int
    width: int
    height: int
    occupancy: float
    score: float
    rooms_without_doors: int
    state: GenerationState

    @property
    def rank(self) -> Tuple[float, int]:
        return (self.score, self.rooms_without_doors)


class AutoSizer:
    """
    Drives generation attempts until the occupancy band is met.

    Args:
        settings: Normalized settings
        build_attempt: Callable running one full attempt at (width, height)
    """

    def __init__(self, settings: GenerationSettings,
                 build_attempt: Callable[[int, int], GenerationState]):
        self.settings = settings
        self.build_attempt = build_attempt
        self.attempts: List[SizeAttempt] = []
        self.decisions: List[str] = []

    def _measure(self, index: int, width: int, height: int) -> SizeAttempt:
        state = self.build_attempt(width, height)
        occupancy = state.grid_map.occupancy()
        score = occupancy_score(occupancy, self.settings.target_occupancy_min,
                                self.settings.target_occupancy_max)
        return SizeAttempt(index, state.grid_map.width, state.grid_map.height,
                           occupancy, score, state.rooms_without_doors, state)

    def _decide(self, attempt: SizeAttempt, last: bool) -> Optional[float]:
        """Record the decision for an attempt; returns the resize factor or None to stop"""
        s = self.settings
        summary = (f"Auto-size attempt {attempt.index}: {attempt.width}x{attempt.height}, "
                   f"occupancy {attempt.occupancy:.3f}")
        if attempt.score == 0 and attempt.rooms_without_doors == 0:
            self.decisions.append(f"{summary}, within band")
            return None

        if attempt.occupancy < s.target_occupancy_min:
            reason, factor = "too sparse", SHRINK_FACTOR
        elif attempt.occupancy > s.target_occupancy_max:
            reason, factor = "too dense", GROW_FACTOR
        else:
            reason, factor = f"{attempt.rooms_without_doors} rooms without doors", GROW_FACTOR

        if last:
            self.decisions.append(f"{summary}, {reason}")
            return None
        self.decisions.append(f"{summary}, {reason}, resizing x{factor}")
        return factor

    def run(self) -> Optional[SizeAttempt]:
        """
        Run up to ``auto_size_max_attempts`` attempts.

        Returns:
            The best attempt, or None if no attempt ran
        """
        width, height = estimate_initial_size(self.settings)
        best: Optional[SizeAttempt] = None
        max_attempts = self.settings.auto_size_max_attempts

        for index in range(1, max_attempts + 1):
            attempt = self._measure(index, width, height)
            self.attempts.append(attempt)
            logger.debug("Auto-size attempt %d: %dx%d occupancy=%.3f score=%.3f doorless=%d",
                         index, attempt.width, attempt.height, attempt.occupancy,
                         attempt.score, attempt.rooms_without_doors)

            if best is None or attempt.rank < best.rank:
                best = attempt

            factor = self._decide(attempt, last=index == max_attempts)
            if factor is None:
                break
            width = clamp_map_size(round(width * factor))
            height = clamp_map_size(round(height * factor))

        if best is not None:
            self.decisions.append(
                f"Auto-size kept attempt {best.index}: {best.width}x{best.height}, "
                f"occupancy {best.occupancy:.3f}")
        return best
