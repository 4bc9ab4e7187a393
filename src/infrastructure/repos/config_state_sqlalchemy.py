from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.config_state import ConfigStateRepository
from src.domain.models.ledger_config import ConfigState, LedgerConfig
from src.domain.value_objects.identity import Identity
from src.infrastructure.db.orm.config_state import CONFIG_STATE_ID, ConfigStateORM


class ConfigStateSQLAlchemyRepository(ConfigStateRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ConfigStateORM) -> ConfigState:
        return ConfigState(
            config=LedgerConfig(
                breed_count_limit=orm.breed_count_limit,
                breed_duration=orm.breed_duration,
                breed_price_amount=int(orm.breed_price_amount),
                breed_price_denom=orm.breed_price_denom,
                breed_start_time=orm.breed_start_time,
                child_base_uri=orm.child_base_uri,
                child_contract_addr=orm.child_contract_addr,
                child_nft_max_supply=orm.child_nft_max_supply,
                parent_contract_addr=orm.parent_contract_addr,
            ),
            owner=Identity(orm.owner),
            updated_at=orm.updated_at,
        )

    def _apply(self, orm: ConfigStateORM, state: ConfigState) -> None:
        config = state.config
        orm.owner = state.owner.value
        orm.breed_count_limit = config.breed_count_limit
        orm.breed_duration = config.breed_duration
        orm.breed_price_amount = str(config.breed_price_amount)
        orm.breed_price_denom = config.breed_price_denom
        orm.breed_start_time = config.breed_start_time
        orm.child_base_uri = config.child_base_uri
        orm.child_contract_addr = config.child_contract_addr
        orm.child_nft_max_supply = config.child_nft_max_supply
        orm.parent_contract_addr = config.parent_contract_addr
        orm.updated_at = state.updated_at

    async def get(self) -> ConfigState | None:
        orm = await self.session.get(ConfigStateORM, CONFIG_STATE_ID)
        return self._to_domain(orm) if orm else None

    async def add(self, state: ConfigState) -> ConfigState:
        orm = ConfigStateORM(id=CONFIG_STATE_ID)
        self._apply(orm, state)
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def save(self, state: ConfigState) -> ConfigState:
        orm = await self.session.get(ConfigStateORM, CONFIG_STATE_ID)
        if orm is None:
            return await self.add(state)
        self._apply(orm, state)
        await self.session.flush()
        return self._to_domain(orm)
