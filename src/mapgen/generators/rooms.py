"""
Room packer: randomized, retry-based rectangle packing inside blocks.
"""

import logging
from typing import List, Optional

from ..settings.generation_settings import GenerationSettings
from .context import GenerationContext
from .layout.layout_types import Block, CellType, GridMap, Rect, Room, RoomType

logger = logging.getLogger(__name__)


MIN_ROOM_SIZE = 4
MAX_ROOM_WIDTH = 14
MAX_ROOM_HEIGHT = 12


class RoomPacker:
    """
    Places rooms block by block in rounds.

    Each round visits the shuffled blocks once and tries to place one room
    per block. Packing ends when the target is reached or a full round adds
    nothing.
    """

    def __init__(self, grid_map: GridMap, settings: GenerationSettings,
                 context: GenerationContext):
        self.grid_map = grid_map
        self.settings = settings
        self.context = context
        self.tech_target = 0

    def fits(self, candidate: Rect) -> bool:
        """True if the candidate clears every placed room by the padding"""
        padding = self.settings.padding_units
        return not any(candidate.intersects(room.bounds.expand(padding))
                       for room in self.grid_map.rooms)

    def random_rect(self, block: Block) -> Optional[Rect]:
        rng = self.context.rng
        b = block.bounds
        max_w = min(MAX_ROOM_WIDTH, b.width - 2)
        max_h = min(MAX_ROOM_HEIGHT, b.height - 2)
        w = rng.randint(MIN_ROOM_SIZE, max_w)
        h = rng.randint(MIN_ROOM_SIZE, max_h)
        if b.x + 1 >= b.right - w or b.y + 1 >= b.bottom - h:
            return None
        return Rect(rng.randrange(b.x + 1, b.right - w),
                    rng.randrange(b.y + 1, b.bottom - h), w, h)

    def try_place(self, block: Block) -> Optional[Room]:
        b = block.bounds
        if min(MAX_ROOM_WIDTH, b.width - 2) < MIN_ROOM_SIZE or \
                min(MAX_ROOM_HEIGHT, b.height - 2) < MIN_ROOM_SIZE:
            return None

        for _ in range(self.settings.attempts_per_room):
            candidate = self.random_rect(block)
            if candidate is None or not self.fits(candidate):
                continue
            return self.accept(block, candidate)
        return None

    def accept(self, block: Block, bounds: Rect) -> Room:
        room_type = RoomType.TECH_ROOM if len(self.grid_map.rooms) < self.tech_target \
            else RoomType.GENERIC
        room = Room(id=self.context.new_room_id(), uid=self.context.new_uid(),
                    bounds=bounds, block_id=block.id, room_type=room_type)
        self.grid_map.fill_rect(bounds, CellType.FLOOR)
        self.grid_map.rooms.append(room)
        block.rooms.append(room)
        return room

    def pack(self) -> List[Room]:
        if not self.grid_map.blocks:
            return []

        rng = self.context.rng
        target = rng.randint(self.settings.rooms_total_min, self.settings.rooms_total_max)
        self.tech_target = rng.randint(self.settings.tech_rooms_min, self.settings.tech_rooms_max)

        order = list(self.grid_map.blocks)
        rng.shuffle(order)

        placed: List[Room] = []
        while len(placed) < target:
            placed_this_round = False
            for block in order:
                if len(placed) >= target:
                    break
                room = self.try_place(block)
                if room is not None:
                    placed.append(room)
                    placed_this_round = True
            if not placed_this_round:
                break

        logger.debug("Packed %d of %d rooms (%d tech)", len(placed), target,
                     sum(1 for r in placed if r.is_tech))
        return placed


def pack_rooms(grid_map: GridMap, settings: GenerationSettings,
               context: GenerationContext) -> List[Room]:
    return RoomPacker(grid_map, settings, context).pack()
