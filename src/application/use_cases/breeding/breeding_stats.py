from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork


async def count_for_parent(uow: UnitOfWork, parent_id: str) -> int:
    """How many breedings used ``parent_id`` as either parent."""
    return await uow.breedings.count_by_parent(parent_id)


async def count_open(uow: UnitOfWork) -> int:
    return await uow.breedings.count_by_withdrawn(False)


async def count_settled(uow: UnitOfWork) -> int:
    return await uow.breedings.count_by_withdrawn(True)
