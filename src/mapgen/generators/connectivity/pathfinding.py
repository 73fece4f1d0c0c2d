"""
Grid pathfinding for corridor routing.

Two strategies over a caller-supplied walkability predicate:

- ``l_route``: straight or single-bend path, tried first because it is
  cheap and produces clean corridors.
- ``astar``: 4-connected A* with a turn penalty and a bias towards reusing
  existing corridor cells.
"""

import heapq
import itertools
from typing import Callable, Dict, List, Optional, Tuple

Cell = Tuple[int, int]
CellPredicate = Callable[[int, int], bool]

TURN_PENALTY = 0.2
REUSE_BONUS = 0.2

# Fixed neighbor order keeps searches deterministic
DIRECTIONS_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def straight_run(start: Cell, end: Cell) -> List[Cell]:
    """Cells of an axis-aligned run, both ends included"""
    (x0, y0), (x1, y1) = start, end
    if x0 != x1 and y0 != y1:
        raise ValueError(f"run {start} -> {end} is not axis-aligned")
    length = max(abs(x1 - x0), abs(y1 - y0))
    sx = (x1 > x0) - (x1 < x0)
    sy = (y1 > y0) - (y1 < y0)
    return [(x0 + sx * i, y0 + sy * i) for i in range(length + 1)]


def l_route(start: Cell, goal: Cell, walkable: CellPredicate) -> Optional[List[Cell]]:
    """
    Try the two single-bend routes, pivot (start x, goal y) first.

    Returns:
        Cells from start to goal, or None if both routes are blocked
    """
    if start == goal:
        return [start]
    for pivot in ((start[0], goal[1]), (goal[0], start[1])):
        path = straight_run(start, pivot) + straight_run(pivot, goal)[1:]
        if all(walkable(x, y) for x, y in path[1:]):
            return path
    return None


def astar(start: Cell, goal: Cell, walkable: CellPredicate,
          is_corridor: CellPredicate) -> Optional[List[Cell]]:
    """
    4-connected A* from start to goal.

    Step cost is 1, plus TURN_PENALTY when the heading changes, minus
    REUSE_BONUS when entering an existing corridor cell. The heuristic is
    the Manhattan distance to the goal.

    Returns:
        Cells from start to goal, or None if the goal is unreachable
    """
    if start == goal:
        return [start]

    counter = itertools.count()
    start_state = (start[0], start[1], -1)
    open_heap = [(manhattan(start, goal), next(counter), 0.0, start_state)]
    best_cost: Dict[Tuple[int, int, int], float] = {start_state: 0.0}
    came_from: Dict[Tuple[int, int, int], Tuple[int, int, int]] = {}
    closed = set()

    while open_heap:
        _, _, cost, state = heapq.heappop(open_heap)
        if state in closed:
            continue
        closed.add(state)
        x, y, heading = state

        if (x, y) == goal:
            path = [(x, y)]
            while state in came_from:
                state = came_from[state]
                path.append((state[0], state[1]))
            path.reverse()
            return path

        for d, (dx, dy) in enumerate(DIRECTIONS_4):
            nx, ny = x + dx, y + dy
            if not walkable(nx, ny):
                continue
            step = 1.0
            if heading != -1 and d != heading:
                step += TURN_PENALTY
            if is_corridor(nx, ny):
                step -= REUSE_BONUS
            next_state = (nx, ny, d)
            next_cost = cost + step
            if next_state in closed or next_cost >= best_cost.get(next_state, float('inf')):
                continue
            best_cost[next_state] = next_cost
            came_from[next_state] = state
            heapq.heappush(open_heap,
                           (next_cost + manhattan((nx, ny), goal), next(counter), next_cost, next_state))

    return None
