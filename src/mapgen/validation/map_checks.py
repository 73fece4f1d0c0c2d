"""
Map invariant checks.

Validates a generated map for structural consistency:
- Door exits open onto Corridor/Door/Gate (DOOR-001)
- Doors are adjacent to their rooms (DOOR-002)
- No corridor cell inside a room (CORR-001)
- Padded rooms do not overlap (ROOM-001)
- Rooms lie inside their block (ROOM-002)
- Rooms have doors (ROOM-003)
- Rooms are reachable (CONN-001)
"""

import logging
from typing import List

from ..generators.layout.layout_types import CellType, GridMap, TRAVERSABLE_CELLS
from ..settings.generation_settings import GenerationSettings
from .connectivity import reachable_room_ids
from .core import ValidationIssue, ValidationResult, ValidationStage, ValidationError
from .rules import CONN_001, CORR_001, DOOR_001, DOOR_002, ROOM_001, ROOM_002, ROOM_003, ValidationRule

logger = logging.getLogger(__name__)


def _issue(rule: ValidationRule, room_id=None, cell=None, **kwargs) -> ValidationIssue:
    return ValidationIssue(
        severity=rule.severity,
        code=rule.code,
        message=rule.format_message(room_id=room_id, cell=cell, **kwargs),
        remediation=rule.format_remediation(),
        room_id=room_id,
        cell=cell,
    )


def check_doors(grid_map: GridMap) -> List[ValidationIssue]:
    """Check door adjacency and that every door opens onto a passable cell."""
    issues = []
    for room in grid_map.rooms:
        for door in room.doors:
            cell = door.position.as_cell()
            x, y = cell
            adjacent = any(room.bounds.contains(x + dx, y + dy)
                           for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)))
            if room.bounds.contains(x, y) or not adjacent:
                issues.append(_issue(DOOR_002, room.id, cell))
            exit_type = grid_map.get_cell(*door.exit_cell.as_cell())
            if exit_type not in TRAVERSABLE_CELLS:
                name = exit_type.name if exit_type else "outside the map"
                issues.append(_issue(DOOR_001, room.id, cell, cell_type=name))
    return issues


def check_corridors_clear_of_rooms(grid_map: GridMap) -> List[ValidationIssue]:
    issues = []
    array = grid_map.as_array()
    for room in grid_map.rooms:
        b = room.bounds
        count = int((array[b.y:b.bottom, b.x:b.right] == CellType.CORRIDOR.value).sum())
        if count:
            issues.append(_issue(CORR_001, room.id, count=count))
    return issues


def check_room_placement(grid_map: GridMap, padding: int = 0) -> List[ValidationIssue]:
    """Check padded overlap between rooms and containment in their blocks."""
    issues = []
    rooms = grid_map.rooms
    for i, room in enumerate(rooms):
        for other in rooms[i + 1:]:
            if room.bounds.intersects(other.bounds.expand(padding)):
                issues.append(_issue(ROOM_001, room.id, other_id=other.id, padding=padding))
        block = grid_map.block_by_id(room.block_id)
        if block is not None:
            b, r = block.bounds, room.bounds
            if r.x < b.x or r.y < b.y or r.right > b.right or r.bottom > b.bottom:
                issues.append(_issue(ROOM_002, room.id, block_id=block.id))
        if not room.doors and len(rooms) > 1:
            issues.append(_issue(ROOM_003, room.id))
    return issues


def placement_padding(settings: GenerationSettings) -> int:
    """Padding to check rooms against; fixed layouts place rooms one cell apart"""
    return 0 if settings.is_fixed_layout else settings.padding_units


def check_reachability(grid_map: GridMap) -> List[ValidationIssue]:
    if len(grid_map.rooms) <= 1:
        return []
    reached = reachable_room_ids(grid_map)
    return [_issue(CONN_001, room.id) for room in grid_map.rooms if room.id not in reached]


def check_map(grid_map: GridMap, padding: int = 0, fail_fast: bool = False) -> ValidationResult:
    """
    Run every map check.

    Args:
        grid_map: Map to check (read only)
        padding: Room padding the map was packed with
        fail_fast: Raise ValidationError when any FAIL issue is found

    Returns:
        ValidationResult with all findings
    """
    result = ValidationResult(stage=ValidationStage.FINAL)
    for issues in (check_doors(grid_map),
                   check_corridors_clear_of_rooms(grid_map),
                   check_room_placement(grid_map, padding),
                   check_reachability(grid_map)):
        for issue in issues:
            result.add_issue(issue)

    logger.debug("Map checks: %d issue(s), passed=%s", len(result.issues), result.passed)
    if fail_fast and result.failed:
        raise ValidationError(result)
    return result
