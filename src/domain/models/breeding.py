from __future__ import annotations

from dataclasses import dataclass

from src.domain.value_objects.breed_status import BreedStatus
from src.domain.value_objects.identity import Identity

# Times, durations and ids are stored in signed 64-bit columns
MAX_INT64 = 2**63 - 1


@dataclass(slots=True)
class Breeding:
    id: int
    owner: Identity
    parent_a: str
    parent_b: str
    start_time: int
    end_time: int
    withdrawn: bool = False

    @classmethod
    def create(
        cls,
        breed_id: int,
        owner: Identity,
        parent_a: str,
        parent_b: str,
        start_time: int,
        duration: int,
    ) -> Breeding:
        return cls(
            id=breed_id,
            owner=owner,
            parent_a=parent_a,
            parent_b=parent_b,
            start_time=start_time,
            end_time=start_time + duration,
            withdrawn=False,
        )

    def status_at(self, now: int) -> BreedStatus:
        if self.withdrawn:
            return BreedStatus.SETTLED
        if now < self.end_time:
            return BreedStatus.PENDING
        return BreedStatus.MATURED

    def has_parent(self, parent_id: str) -> bool:
        return parent_id in (self.parent_a, self.parent_b)

    def mark_withdrawn(self) -> None:
        if self.withdrawn:
            raise ValueError(f"Breeding {self.id} already withdrawn")
        self.withdrawn = True
