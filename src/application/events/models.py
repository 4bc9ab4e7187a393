from __future__ import annotations

from dataclasses import dataclass

from src.domain.value_objects.identity import Identity


@dataclass(frozen=True)
class BreedStartedEvent:
    breed_id: int
    owner: Identity
    parent_a: str
    parent_b: str
    start_time: int
    end_time: int


@dataclass(frozen=True)
class BreedSettledEvent:
    breed_id: int
    owner: Identity
    settled_at: int


@dataclass(frozen=True)
class ConfigUpdatedEvent:
    actor: Identity
    changed_fields: tuple[str, ...]
    new_owner: Identity | None = None


@dataclass(frozen=True)
class FundsWithdrawnEvent:
    recipient: Identity
    amount: int
    denom: str
