from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BreedCounter:
    count: int = 0
    latest_id: int = 0

    def has_capacity(self, limit: int) -> bool:
        return self.count < limit

    def advance(self) -> int:
        """Issue the next identifier. Capacity must be checked by the caller."""
        self.latest_id += 1
        self.count += 1
        return self.latest_id
