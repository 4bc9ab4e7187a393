"""Sorted, paginated views over the breeding records.

Records are enumerated in creation order and sorted in memory with a stable sort
on ``start_time``, so records that started at the same moment keep their creation
order in both directions. Pagination never fails on out-of-range windows: an
offset past the end yields an empty page and a window running over the end is
truncated to the available tail.
"""

from __future__ import annotations

from typing import Iterable

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breeding import Breeding
from src.domain.value_objects.identity import Identity
from src.domain.value_objects.sort_order import SortOrder


def sort_breedings(breedings: Iterable[Breeding], sort: str | SortOrder | None) -> list[Breeding]:
    order = SortOrder.parse(sort)
    if order is SortOrder.DESCENDING:
        # Negated key keeps ties in creation order, unlike reverse=True
        return sorted(breedings, key=lambda b: -b.start_time)
    return sorted(breedings, key=lambda b: b.start_time)


def paginate(items: list[Breeding], count: int, offset: int) -> list[Breeding]:
    if count < 0 or offset < 0:
        raise ValidationError(
            "count and offset must not be negative",
            details={"count": count, "offset": offset},
        )
    if offset >= len(items):
        return []
    return items[offset : offset + count]


async def list_breedings(
    uow: UnitOfWork,
    count: int,
    offset: int = 0,
    sort: str | SortOrder | None = SortOrder.ASCENDING,
) -> list[Breeding]:
    records = await uow.breedings.list_all()
    return paginate(sort_breedings(records, sort), count, offset)


async def list_owner_breedings(
    uow: UnitOfWork,
    owner: Identity,
    count: int,
    offset: int = 0,
    sort: str | SortOrder | None = SortOrder.ASCENDING,
) -> list[Breeding]:
    records = await uow.breedings.list_all(owner=owner)
    return paginate(sort_breedings(records, sort), count, offset)


async def breedings_length(uow: UnitOfWork) -> int:
    return await uow.breedings.count()


async def owner_breedings_length(uow: UnitOfWork, owner: Identity) -> int:
    return await uow.breedings.count(owner=owner)
