from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from src.application.errors import InvalidState, NotFound, Unauthorized, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.ports.minter import Minter, MintReceipt
from src.domain.value_objects.identity import Identity

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MintOffspringInput:
    breed_id: int
    token_id: str
    token_uri: str | None = None
    extension: dict[str, Any] | None = None


async def execute(
    uow: UnitOfWork,
    minter: Minter,
    caller: Identity,
    payload: MintOffspringInput,
    now: int,
) -> MintReceipt:
    token_id = payload.token_id.strip()
    if not token_id:
        raise ValidationError("token_id is required")
    breeding = await uow.breedings.get(payload.breed_id)
    if breeding is None:
        raise NotFound(f"Breeding {payload.breed_id} not found")
    if breeding.owner != caller:
        raise Unauthorized("Only the breeding owner can mint its offspring")
    status = breeding.status_at(now)
    if not status.can_mint():
        raise InvalidState(
            "Breeding has not matured yet",
            details={"status": status.value, "end_time": breeding.end_time},
        )
    receipt = await minter.mint(
        breeding=breeding,
        token_id=token_id,
        token_uri=payload.token_uri,
        extension=payload.extension,
    )
    logger.info("Mint delegated for breeding %d: token %s", breeding.id, receipt.token_id)
    return receipt
