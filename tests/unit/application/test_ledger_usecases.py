from __future__ import annotations

import pytest

from src.application.errors import ConflictError, InvalidState, Unauthorized, ValidationError
from src.application.events.models import ConfigUpdatedEvent
from src.application.use_cases.ledger import get_config, initialize_ledger, update_config
from src.domain.value_objects.identity import Identity

ADMIN = Identity("terra1admin")
OTHER = Identity("terra1other")


async def init(uow, **overrides):
    values = dict(
        breed_count_limit=10,
        breed_duration=3_600,
        breed_price_amount=100,
        breed_price_denom="uluna",
        child_base_uri="ipfs://kittens/",
    )
    values.update(overrides)
    return await initialize_ledger.execute(
        uow, initialize_ledger.InitializeLedgerInput(**values), admin=ADMIN
    )


@pytest.mark.asyncio
async def test_initialize_stores_config_counter_and_balance(uow):
    state = await init(uow)
    assert state.owner == ADMIN
    assert state.config.child_base_uri == "ipfs://kittens/"
    assert uow.breed_counter.stored.count == 0
    assert uow.breed_counter.stored.latest_id == 0
    assert uow.fee_balance.stored.amount == 0
    assert uow.commits == [1]


@pytest.mark.asyncio
async def test_initialize_twice_fails(uow):
    await init(uow)
    with pytest.raises(ConflictError):
        await init(uow)


@pytest.mark.asyncio
async def test_initialize_rejects_zero_duration(uow):
    with pytest.raises(ValidationError):
        await init(uow, breed_duration=0)
    assert uow.config_state.stored is None


@pytest.mark.asyncio
async def test_get_config_requires_initialization(uow):
    with pytest.raises(InvalidState):
        await get_config.execute(uow)


@pytest.mark.asyncio
async def test_update_leaves_unspecified_fields_unchanged(uow):
    await init(uow)
    state = await update_config.execute(
        uow, ADMIN, update_config.UpdateConfigInput(breed_duration=7_200)
    )
    assert state.config.breed_duration == 7_200
    assert state.config.breed_count_limit == 10
    assert state.config.breed_price_amount == 100
    assert state.config.breed_price_denom == "uluna"
    assert state.config.child_base_uri == "ipfs://kittens/"
    assert state.owner == ADMIN

    stored = await get_config.execute(uow)
    assert stored.config == state.config


@pytest.mark.asyncio
async def test_update_by_non_owner_is_unauthorized(uow):
    await init(uow)
    with pytest.raises(Unauthorized):
        await update_config.execute(
            uow, OTHER, update_config.UpdateConfigInput(breed_count_limit=1)
        )
    assert (await get_config.execute(uow)).config.breed_count_limit == 10


@pytest.mark.asyncio
async def test_owner_transfer_revokes_old_owner(uow):
    await init(uow)
    state = await update_config.execute(uow, ADMIN, update_config.UpdateConfigInput(owner=OTHER))
    assert state.owner == OTHER

    with pytest.raises(Unauthorized):
        await update_config.execute(
            uow, ADMIN, update_config.UpdateConfigInput(breed_count_limit=1)
        )
    updated = await update_config.execute(
        uow, OTHER, update_config.UpdateConfigInput(breed_count_limit=1)
    )
    assert updated.config.breed_count_limit == 1

    events = uow.drain_events()
    assert isinstance(events[0], ConfigUpdatedEvent)
    assert events[0].new_owner == OTHER
    assert events[0].changed_fields == ("owner",)


@pytest.mark.asyncio
async def test_update_rejects_invalid_values(uow):
    await init(uow)
    with pytest.raises(ValidationError):
        await update_config.execute(
            uow, ADMIN, update_config.UpdateConfigInput(breed_count_limit=-5)
        )


@pytest.mark.asyncio
async def test_empty_update_is_a_no_op(uow):
    await init(uow)
    state = await update_config.execute(uow, ADMIN, update_config.UpdateConfigInput())
    assert state.config.breed_duration == 3_600
    assert uow.commits == [1]
