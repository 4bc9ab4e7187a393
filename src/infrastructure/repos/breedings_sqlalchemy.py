from __future__ import annotations

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.breedings import BreedingsRepository
from src.domain.models.breeding import MAX_INT64, Breeding
from src.domain.value_objects.identity import Identity
from src.infrastructure.db.orm.breeding import BreedingORM


class BreedingsSQLAlchemyRepository(BreedingsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedingORM) -> Breeding:
        return Breeding(
            id=orm.id,
            owner=Identity(orm.owner),
            parent_a=orm.parent_a,
            parent_b=orm.parent_b,
            start_time=orm.start_time,
            end_time=orm.end_time,
            withdrawn=orm.withdrawn,
        )

    async def add(self, breeding: Breeding) -> Breeding:
        orm = BreedingORM(
            id=breeding.id,
            owner=breeding.owner.value,
            parent_a=breeding.parent_a,
            parent_b=breeding.parent_b,
            start_time=breeding.start_time,
            end_time=breeding.end_time,
            withdrawn=breeding.withdrawn,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def settle(self, breed_id: int) -> Breeding | None:
        stmt = (
            update(BreedingORM)
            .where(BreedingORM.id == breed_id)
            .where(BreedingORM.withdrawn == False)  # noqa: E712
            .values(withdrawn=True)
            .returning(BreedingORM)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get(self, breed_id: int) -> Breeding | None:
        if not 0 < breed_id <= MAX_INT64:
            return None
        orm = await self.session.get(BreedingORM, breed_id)
        return self._to_domain(orm) if orm else None

    async def list_all(self, owner: Identity | None = None) -> list[Breeding]:
        stmt = select(BreedingORM)
        if owner is not None:
            stmt = stmt.where(BreedingORM.owner == owner.value)
        stmt = stmt.order_by(BreedingORM.id.asc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count(self, owner: Identity | None = None) -> int:
        stmt = select(func.count()).select_from(BreedingORM)
        if owner is not None:
            stmt = stmt.where(BreedingORM.owner == owner.value)
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def count_by_withdrawn(self, withdrawn: bool) -> int:
        stmt = (
            select(func.count())
            .select_from(BreedingORM)
            .where(BreedingORM.withdrawn == withdrawn)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def count_by_parent(self, parent_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(BreedingORM)
            .where(or_(BreedingORM.parent_a == parent_id, BreedingORM.parent_b == parent_id))
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)
