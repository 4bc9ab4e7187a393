from __future__ import annotations

from typing import Protocol

from src.domain.models.ledger_config import ConfigState


class ConfigStateRepository(Protocol):
    async def get(self) -> ConfigState | None: ...

    async def add(self, state: ConfigState) -> ConfigState: ...

    async def save(self, state: ConfigState) -> ConfigState: ...
