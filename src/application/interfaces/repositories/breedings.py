from __future__ import annotations

from typing import Protocol

from src.domain.models.breeding import Breeding
from src.domain.value_objects.identity import Identity


class BreedingsRepository(Protocol):
    async def add(self, breeding: Breeding) -> Breeding: ...

    async def settle(self, breed_id: int) -> Breeding | None:
        """Flag an open record as withdrawn; None when it is missing or already settled."""
        ...

    async def get(self, breed_id: int) -> Breeding | None: ...

    async def list_all(self, owner: Identity | None = None) -> list[Breeding]:
        """All records in creation order, optionally only those owned by ``owner``."""
        ...

    async def count(self, owner: Identity | None = None) -> int: ...

    async def count_by_withdrawn(self, withdrawn: bool) -> int: ...

    async def count_by_parent(self, parent_id: str) -> int: ...
