from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breeding import Breeding


async def execute(uow: UnitOfWork, breed_id: int) -> Breeding | None:
    return await uow.breedings.get(breed_id)
