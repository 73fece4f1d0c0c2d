"""
Composable generation passes.
"""

from .base import MapPass, PassConfig, PassResult
from .structure_passes import (
    PartitionPass,
    TrunkPass,
    GatePass,
    RoomPackingPass,
    FixedLayoutPass,
)
from .connection_passes import RoomGraphPass, CorridorPass, ConnectivityPass

__all__ = [
    'MapPass',
    'PassConfig',
    'PassResult',
    'PartitionPass',
    'TrunkPass',
    'GatePass',
    'RoomPackingPass',
    'FixedLayoutPass',
    'RoomGraphPass',
    'CorridorPass',
    'ConnectivityPass',
]
