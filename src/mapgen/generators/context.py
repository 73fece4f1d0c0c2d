"""
Per-attempt generation context.
"""

import random
import uuid
from dataclasses import dataclass


@dataclass
class GenerationContext:
    """
    Owns the room id counter and the run's random source.

    A fresh context is created for every generation attempt; all attempts of
    one call share the same ``random.Random`` instance so the whole call
    consumes a single seeded sequence.
    """
    rng: random.Random
    next_room_id: int = 1

    @classmethod
    def from_seed(cls, seed: int) -> 'GenerationContext':
        return cls(rng=random.Random(seed))

    def new_room_id(self) -> int:
        room_id = self.next_room_id
        self.next_room_id += 1
        return room_id

    def new_uid(self) -> uuid.UUID:
        """UUID drawn from the run's random source, so it is reproducible"""
        return uuid.UUID(int=self.rng.getrandbits(128), version=4)
