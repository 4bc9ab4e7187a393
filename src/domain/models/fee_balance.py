from __future__ import annotations

from dataclasses import dataclass

# Amounts are unsigned 128-bit values
MAX_AMOUNT = 2**128 - 1


@dataclass(slots=True)
class FeeBalance:
    amount: int = 0
    denom: str = ""

    def is_empty(self) -> bool:
        return self.amount <= 0

    def accepts(self, denom: str) -> bool:
        return self.is_empty() or self.denom == denom

    def can_credit(self, amount: int) -> bool:
        return self.amount + amount <= MAX_AMOUNT

    def credit(self, amount: int, denom: str) -> None:
        if amount < 0:
            raise ValueError("Cannot credit a negative fee")
        if not self.accepts(denom):
            raise ValueError(f"Fee balance holds {self.denom}, cannot credit {denom}")
        if not self.can_credit(amount):
            raise ValueError("Fee balance would exceed the maximum amount")
        if self.is_empty():
            self.denom = denom
        self.amount += amount

    def drain(self) -> int:
        amount, self.amount = self.amount, 0
        return amount
