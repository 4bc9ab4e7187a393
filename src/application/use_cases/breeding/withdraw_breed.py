from __future__ import annotations

import logging

from src.application.errors import InvalidState, NotFound, Unauthorized
from src.application.events.models import BreedSettledEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breeding import Breeding
from src.domain.value_objects.identity import Identity

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, caller: Identity, breed_id: int, now: int) -> Breeding:
    breeding = await uow.breedings.get(breed_id)
    if breeding is None:
        raise NotFound(f"Breeding {breed_id} not found")
    if breeding.owner != caller:
        raise Unauthorized("Only the breeding owner can withdraw it")
    if now < breeding.end_time:
        raise InvalidState(
            "Breeding has not matured yet",
            details={"end_time": breeding.end_time, "now": now},
        )
    if breeding.withdrawn:
        raise InvalidState("Breeding already withdrawn")

    # Conditional settle; a concurrent withdrawal leaves nothing to update
    settled = await uow.breedings.settle(breeding.id)
    if settled is None:
        raise InvalidState("Breeding already withdrawn")
    uow.add_event(BreedSettledEvent(breed_id=settled.id, owner=settled.owner, settled_at=now))
    await uow.commit()
    logger.info("Breeding %d withdrawn by %s", settled.id, caller)
    return settled
