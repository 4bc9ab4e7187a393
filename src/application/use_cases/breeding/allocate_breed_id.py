from __future__ import annotations

from src.application.errors import CapacityExceeded, InvalidState
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.ledger import get_config
from src.domain.models.breed_counter import BreedCounter


async def _load_counter(uow: UnitOfWork) -> BreedCounter:
    counter = await uow.breed_counter.get()
    if counter is None:
        raise InvalidState("Ledger not initialized")
    return counter


async def next_id(uow: UnitOfWork) -> int:
    """Mint the next breeding identifier.

    The counter is advanced but not committed; the enclosing operation decides
    whether the allocation survives.
    """
    state = await get_config.execute(uow)
    limit = state.config.breed_count_limit
    counter = await uow.breed_counter.claim(limit)
    if counter is None:
        current = await _load_counter(uow)
        raise CapacityExceeded(
            "Maximum breed count reached",
            details={"limit": limit, "count": current.count},
        )
    return counter.latest_id


async def current_count(uow: UnitOfWork) -> int:
    counter = await _load_counter(uow)
    return counter.count
