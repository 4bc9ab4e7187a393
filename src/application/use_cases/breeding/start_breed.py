from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from src.application.errors import ConflictError, InvalidState, ValidationError
from src.application.events.models import BreedStartedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.breeding import allocate_breed_id
from src.application.use_cases.ledger import get_config
from src.domain.models.breeding import MAX_INT64, Breeding
from src.domain.models.fee_balance import FeeBalance
from src.domain.value_objects.identity import Identity

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StartBreedInput:
    parent_a: str | None = None
    parent_b: str | None = None


def validate_parents(payload: StartBreedInput) -> tuple[str, str]:
    parent_a = (payload.parent_a or "").strip()
    parent_b = (payload.parent_b or "").strip()
    if not parent_a or not parent_b:
        raise InvalidState("Both parent identifiers are required")
    return parent_a, parent_b


async def execute(
    uow: UnitOfWork,
    caller: Identity,
    payload: StartBreedInput,
    now: int,
) -> Breeding:
    parent_a, parent_b = validate_parents(payload)
    state = await get_config.execute(uow)
    config = state.config
    if now > MAX_INT64 - config.breed_duration:
        raise ValidationError(
            "Breeding would end beyond the supported time range",
            details={"now": now, "breed_duration": config.breed_duration},
        )

    # Claiming the id first serializes concurrent breedings on the counter row
    breed_id = await allocate_breed_id.next_id(uow)

    balance = await uow.fee_balance.get() or FeeBalance()
    if not balance.accepts(config.breed_price_denom):
        raise InvalidState(
            "Fee balance holds a different denomination; withdraw funds first",
            details={"held": balance.denom, "price_denom": config.breed_price_denom},
        )
    if not balance.can_credit(config.breed_price_amount):
        raise InvalidState("Fee balance is full; withdraw funds first")

    breeding = Breeding.create(
        breed_id=breed_id,
        owner=caller,
        parent_a=parent_a,
        parent_b=parent_b,
        start_time=now,
        duration=config.breed_duration,
    )
    created = await uow.breedings.add(breeding)

    credited = replace(balance)
    credited.credit(config.breed_price_amount, config.breed_price_denom)
    if await uow.fee_balance.compare_and_set(balance, credited) is None:
        raise ConflictError("Fee balance changed concurrently, retry the breeding")

    uow.add_event(
        BreedStartedEvent(
            breed_id=created.id,
            owner=created.owner,
            parent_a=created.parent_a,
            parent_b=created.parent_b,
            start_time=created.start_time,
            end_time=created.end_time,
        )
    )
    await uow.commit()
    logger.info(
        "Breeding %d started by %s (%s x %s), matures at %d",
        created.id,
        caller,
        parent_a,
        parent_b,
        created.end_time,
    )
    return created
