from __future__ import annotations

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.breed_counter import BreedCounterRepository
from src.domain.models.breed_counter import BreedCounter
from src.infrastructure.db.orm.breed_counter import BREED_COUNTER_ID, BreedCounterORM


class BreedCounterSQLAlchemyRepository(BreedCounterRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedCounterORM) -> BreedCounter:
        return BreedCounter(count=orm.count, latest_id=orm.latest_id)

    async def get(self) -> BreedCounter | None:
        orm = await self.session.get(BreedCounterORM, BREED_COUNTER_ID, populate_existing=True)
        return self._to_domain(orm) if orm else None

    async def save(self, counter: BreedCounter) -> BreedCounter:
        orm = await self.session.get(BreedCounterORM, BREED_COUNTER_ID)
        if orm is None:
            orm = BreedCounterORM(id=BREED_COUNTER_ID)
            self.session.add(orm)
        orm.count = counter.count
        orm.latest_id = counter.latest_id
        await self.session.flush()
        return self._to_domain(orm)

    async def claim(self, limit: int) -> BreedCounter | None:
        # Single conditional UPDATE so concurrent claims never share an id
        stmt = (
            update(BreedCounterORM)
            .where(BreedCounterORM.id == BREED_COUNTER_ID)
            .where(BreedCounterORM.count < limit)
            .values(
                count=BreedCounterORM.count + 1,
                latest_id=BreedCounterORM.latest_id + 1,
            )
            .returning(BreedCounterORM.count, BreedCounterORM.latest_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        count, latest_id = row
        return BreedCounter(count=count, latest_id=latest_id)
