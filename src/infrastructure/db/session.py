from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import UnitOfWork


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.config_state = None
        self.breed_counter = None
        self.breedings = None
        self.fee_balance = None
        self.events: list = []

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.breed_counter_sqlalchemy import (
            BreedCounterSQLAlchemyRepository,
        )
        from src.infrastructure.repos.breedings_sqlalchemy import BreedingsSQLAlchemyRepository
        from src.infrastructure.repos.config_state_sqlalchemy import (
            ConfigStateSQLAlchemyRepository,
        )
        from src.infrastructure.repos.fee_balance_sqlalchemy import FeeBalanceSQLAlchemyRepository

        self.config_state = ConfigStateSQLAlchemyRepository(self.session)
        self.breed_counter = BreedCounterSQLAlchemyRepository(self.session)
        self.breedings = BreedingsSQLAlchemyRepository(self.session)
        self.fee_balance = FeeBalanceSQLAlchemyRepository(self.session)
        self.events = []
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
                self.events = []
        finally:
            await self.session.close()
            self.session = None
            self.config_state = None
            self.breed_counter = None
            self.breedings = None
            self.fee_balance = None

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
        self.events = []

    def add_event(self, event: object) -> None:
        self.events.append(event)

    def drain_events(self) -> list:
        events, self.events = self.events, []
        return events
