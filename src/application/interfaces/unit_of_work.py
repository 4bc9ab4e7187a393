from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.breed_counter import BreedCounterRepository
from src.application.interfaces.repositories.breedings import BreedingsRepository
from src.application.interfaces.repositories.config_state import ConfigStateRepository
from src.application.interfaces.repositories.fee_balance import FeeBalanceRepository


class UnitOfWork(Protocol):
    config_state: ConfigStateRepository
    breed_counter: BreedCounterRepository
    breedings: BreedingsRepository
    fee_balance: FeeBalanceRepository
    # Domain events collected during the transaction
    events: list

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

    # Record a domain event during the transaction
    def add_event(self, event: object) -> None: ...

    # Drain collected events (used for post-commit dispatch)
    def drain_events(self) -> list: ...
