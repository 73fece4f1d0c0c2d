"""
Gate placer: scatters access points on block boundaries.
"""

import random
from typing import List

from .layout.layout_types import Block, CellType, Gate, GateType, GridMap, Point


def random_boundary_point(block: Block, rng: random.Random) -> Point:
    """Uniform point on a uniformly chosen side (left, right, top, bottom)"""
    b = block.bounds
    side = rng.randrange(4)
    if side == 0:
        return Point(b.x, rng.randrange(b.y, b.bottom))
    if side == 1:
        return Point(b.right, rng.randrange(b.y, b.bottom))
    if side == 2:
        return Point(rng.randrange(b.x, b.right), b.y)
    return Point(rng.randrange(b.x, b.right), b.bottom)


def add_gate(grid_map: GridMap, block: Block, position: Point,
             gate_type: GateType = GateType.STANDARD) -> Gate:
    """Record a gate and force-mark its cell"""
    gate = Gate(block_id=block.id, position=position, gate_type=gate_type)
    block.gates.append(gate)
    grid_map.gates.append(gate)
    x, y = position.as_cell()
    grid_map.set_cell(x, y, CellType.GATE)
    return gate


def place_gates(grid_map: GridMap, gates_min: int, gates_max: int,
                rng: random.Random) -> List[Gate]:
    gates = []
    for block in grid_map.blocks:
        for _ in range(rng.randint(gates_min, gates_max)):
            gates.append(add_gate(grid_map, block, random_boundary_point(block, rng)))
    return gates
