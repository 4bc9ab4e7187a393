from __future__ import annotations

from src.application.errors import InvalidState
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.ledger_config import ConfigState


async def execute(uow: UnitOfWork) -> ConfigState:
    state = await uow.config_state.get()
    if state is None:
        raise InvalidState("Ledger not initialized")
    return state
