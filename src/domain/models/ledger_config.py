from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from src.domain.models.breeding import MAX_INT64
from src.domain.models.fee_balance import MAX_AMOUNT
from src.domain.value_objects.identity import Identity

# Field names an owner may change after initialisation
UPDATABLE_FIELDS = (
    "breed_count_limit",
    "breed_duration",
    "breed_price_amount",
    "breed_price_denom",
)


@dataclass(slots=True)
class LedgerConfig:
    breed_count_limit: int
    breed_duration: int
    breed_price_amount: int = 0
    breed_price_denom: str = "uluna"

    # Opaque values forwarded to the minting side; the ledger never interprets them
    breed_start_time: int | None = None
    child_base_uri: str | None = None
    child_contract_addr: str | None = None
    child_nft_max_supply: int | None = None
    parent_contract_addr: str | None = None

    def problems(self) -> list[str]:
        found: list[str] = []
        if self.breed_duration <= 0:
            found.append("breed_duration must be greater than zero")
        elif self.breed_duration > MAX_INT64:
            found.append(f"breed_duration must not exceed {MAX_INT64}")
        if self.breed_count_limit < 0:
            found.append("breed_count_limit must not be negative")
        elif self.breed_count_limit > MAX_INT64:
            found.append(f"breed_count_limit must not exceed {MAX_INT64}")
        if self.breed_price_amount < 0:
            found.append("breed_price_amount must not be negative")
        elif self.breed_price_amount > MAX_AMOUNT:
            found.append(f"breed_price_amount must not exceed {MAX_AMOUNT}")
        if not self.breed_price_denom or not self.breed_price_denom.strip():
            found.append("breed_price_denom must not be empty")
        for name in ("breed_start_time", "child_nft_max_supply"):
            value = getattr(self, name)
            if value is not None and not 0 <= value <= MAX_INT64:
                found.append(f"{name} must be between 0 and {MAX_INT64}")
        return found

    def merged(self, data: dict) -> LedgerConfig:
        changes = {name: data[name] for name in UPDATABLE_FIELDS if data.get(name) is not None}
        return replace(self, **changes)


@dataclass(slots=True)
class ConfigState:
    config: LedgerConfig
    owner: Identity
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def is_owner(self, identity: Identity) -> bool:
        return self.owner == identity
