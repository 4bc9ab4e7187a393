from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from src.application.errors import Unauthorized, ValidationError
from src.application.events.models import ConfigUpdatedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.ledger import get_config
from src.domain.models.ledger_config import UPDATABLE_FIELDS, ConfigState
from src.domain.value_objects.identity import Identity

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateConfigInput:
    breed_count_limit: int | None = None
    breed_duration: int | None = None
    breed_price_amount: int | None = None
    breed_price_denom: str | None = None
    owner: Identity | None = None


def ensure_owner(state: ConfigState, caller: Identity) -> None:
    if not state.is_owner(caller):
        raise Unauthorized("Only the ledger owner may perform this action")


async def execute(uow: UnitOfWork, caller: Identity, payload: UpdateConfigInput) -> ConfigState:
    state = await get_config.execute(uow)
    ensure_owner(state, caller)

    data: dict = {}
    for field_name in UPDATABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if not data and payload.owner is None:
        return state

    config = state.config.merged(data)
    problems = config.problems()
    if problems:
        raise ValidationError("Invalid ledger config", details={"errors": problems})

    updated = replace(
        state,
        config=config,
        owner=payload.owner or state.owner,
        updated_at=datetime.now(timezone.utc),
    )
    saved = await uow.config_state.save(updated)

    changed = list(data.keys())
    if payload.owner is not None:
        changed.append("owner")
    uow.add_event(
        ConfigUpdatedEvent(actor=caller, changed_fields=tuple(changed), new_owner=payload.owner)
    )
    await uow.commit()
    logger.info("Ledger config updated by %s: %s", caller, ", ".join(changed))
    return saved
