from __future__ import annotations

import logging
from dataclasses import dataclass

from src.application.errors import ConflictError, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breed_counter import BreedCounter
from src.domain.models.fee_balance import FeeBalance
from src.domain.models.ledger_config import ConfigState, LedgerConfig
from src.domain.value_objects.identity import Identity

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class InitializeLedgerInput:
    breed_count_limit: int
    breed_duration: int
    breed_price_amount: int = 0
    breed_price_denom: str = "uluna"
    breed_start_time: int | None = None
    child_base_uri: str | None = None
    child_contract_addr: str | None = None
    child_nft_max_supply: int | None = None
    parent_contract_addr: str | None = None


async def execute(uow: UnitOfWork, payload: InitializeLedgerInput, admin: Identity) -> ConfigState:
    existing = await uow.config_state.get()
    if existing is not None:
        raise ConflictError("Ledger already initialized")

    config = LedgerConfig(
        breed_count_limit=payload.breed_count_limit,
        breed_duration=payload.breed_duration,
        breed_price_amount=payload.breed_price_amount,
        breed_price_denom=payload.breed_price_denom,
        breed_start_time=payload.breed_start_time,
        child_base_uri=payload.child_base_uri,
        child_contract_addr=payload.child_contract_addr,
        child_nft_max_supply=payload.child_nft_max_supply,
        parent_contract_addr=payload.parent_contract_addr,
    )
    problems = config.problems()
    if problems:
        raise ValidationError("Invalid ledger config", details={"errors": problems})

    state = await uow.config_state.add(ConfigState(config=config, owner=admin))
    await uow.breed_counter.save(BreedCounter())
    await uow.fee_balance.save(FeeBalance(denom=config.breed_price_denom))
    await uow.commit()
    logger.info(
        "Ledger initialized: owner=%s limit=%d duration=%ds",
        admin,
        config.breed_count_limit,
        config.breed_duration,
    )
    return state
