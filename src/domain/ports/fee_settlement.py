from __future__ import annotations

from typing import Protocol

from src.domain.value_objects.identity import Identity


class FeeSettlement(Protocol):
    async def transfer(self, *, recipient: Identity, amount: int, denom: str) -> None: ...
