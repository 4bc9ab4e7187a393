from __future__ import annotations

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.fee_balance import FeeBalanceRepository
from src.domain.models.fee_balance import FeeBalance
from src.infrastructure.db.orm.fee_balance import FEE_BALANCE_ID, FeeBalanceORM


class FeeBalanceSQLAlchemyRepository(FeeBalanceRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: FeeBalanceORM) -> FeeBalance:
        return FeeBalance(amount=int(orm.amount), denom=orm.denom)

    async def get(self) -> FeeBalance | None:
        orm = await self.session.get(FeeBalanceORM, FEE_BALANCE_ID, populate_existing=True)
        return self._to_domain(orm) if orm else None

    async def save(self, balance: FeeBalance) -> FeeBalance:
        orm = await self.session.get(FeeBalanceORM, FEE_BALANCE_ID)
        if orm is None:
            orm = FeeBalanceORM(id=FEE_BALANCE_ID)
            self.session.add(orm)
        orm.amount = str(balance.amount)
        orm.denom = balance.denom
        await self.session.flush()
        return self._to_domain(orm)

    async def compare_and_set(
        self, expected: FeeBalance, balance: FeeBalance
    ) -> FeeBalance | None:
        stmt = (
            update(FeeBalanceORM)
            .where(FeeBalanceORM.id == FEE_BALANCE_ID)
            .where(FeeBalanceORM.amount == str(expected.amount))
            .where(FeeBalanceORM.denom == expected.denom)
            .values(amount=str(balance.amount), denom=balance.denom)
            .returning(FeeBalanceORM.amount, FeeBalanceORM.denom)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        amount, denom = row
        return FeeBalance(amount=int(amount), denom=denom)
