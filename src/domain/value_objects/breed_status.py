from __future__ import annotations

from enum import Enum


class BreedStatus(str, Enum):
    PENDING = "PENDING"
    MATURED = "MATURED"
    SETTLED = "SETTLED"

    def can_withdraw(self) -> bool:
        return self is BreedStatus.MATURED

    def can_mint(self) -> bool:
        return self in {BreedStatus.MATURED, BreedStatus.SETTLED}
