from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from src.domain.models.breeding import Breeding
from src.domain.value_objects.identity import Identity


@dataclass(frozen=True, slots=True)
class MintReceipt:
    breed_id: int
    token_id: str
    owner: Identity
    token_uri: str | None = None


class Minter(Protocol):
    async def mint(
        self,
        *,
        breeding: Breeding,
        token_id: str,
        token_uri: str | None = None,
        extension: dict[str, Any] | None = None,
    ) -> MintReceipt: ...

    async def on_breed_settled(self, breeding: Breeding) -> None: ...
