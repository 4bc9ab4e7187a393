from __future__ import annotations

from typing import Protocol

from src.domain.models.breed_counter import BreedCounter


class BreedCounterRepository(Protocol):
    async def get(self) -> BreedCounter | None: ...

    async def save(self, counter: BreedCounter) -> BreedCounter: ...

    async def claim(self, limit: int) -> BreedCounter | None:
        """Advance the counter in place while fewer than ``limit`` ids were issued.

        Returns the advanced counter, or None when the limit is reached.
        """
        ...
