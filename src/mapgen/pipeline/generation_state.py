"""
Generation state passed between pipeline passes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..generators.connectivity.room_graph import RoomGraph
from ..generators.context import GenerationContext
from ..generators.layout.layout_types import GridMap
from ..settings.generation_settings import GenerationSettings
from ..validation.connectivity import ConnectivityReport


@dataclass
class GenerationState:
    """
    Everything one generation attempt produces.

    Attributes:
        settings: Normalized settings of the call
        grid_map: Map being built (fresh per attempt)
        context: Id counter and the call's random source
        graph: Planned room connections, once the graph pass ran
        connectivity: Validator report, once the connectivity pass ran
        warnings: Warnings raised by passes, in order
        metrics: Counters recorded by passes
    """
    settings: GenerationSettings
    grid_map: GridMap
    context: GenerationContext
    graph: Optional[RoomGraph] = None
    connectivity: Optional[ConnectivityReport] = None
    warnings: List[str] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def rng(self):
        return self.context.rng

    @property
    def rooms_without_doors(self) -> int:
        """Doorless rooms; a lone room needs no door"""
        if len(self.grid_map.rooms) <= 1:
            return 0
        return sum(1 for room in self.grid_map.rooms if not room.doors)
