from __future__ import annotations

from typing import Protocol

from src.domain.models.fee_balance import FeeBalance


class FeeBalanceRepository(Protocol):
    async def get(self) -> FeeBalance | None: ...

    async def save(self, balance: FeeBalance) -> FeeBalance: ...

    async def compare_and_set(
        self, expected: FeeBalance, balance: FeeBalance
    ) -> FeeBalance | None:
        """Store ``balance`` only if the stored one still equals ``expected``."""
        ...
