from __future__ import annotations

import pytest

from src.application.errors import (
    InfrastructureError,
    InsufficientBalance,
    InvalidState,
    Unauthorized,
)
from src.application.events.models import FundsWithdrawnEvent
from src.application.use_cases.breeding import start_breed
from src.application.use_cases.fees import withdraw_fund
from src.application.use_cases.ledger import initialize_ledger, update_config
from src.domain.value_objects.identity import Identity

ADMIN = Identity("terra1admin")
ALICE = Identity("terra1alice")


class RecordingSettlement:
    def __init__(self) -> None:
        self.transfers: list[tuple[Identity, int, str]] = []

    async def transfer(self, *, recipient: Identity, amount: int, denom: str) -> None:
        self.transfers.append((recipient, amount, denom))


async def init(uow, price: int = 100) -> None:
    await initialize_ledger.execute(
        uow,
        initialize_ledger.InitializeLedgerInput(
            breed_count_limit=10, breed_duration=10, breed_price_amount=price
        ),
        admin=ADMIN,
    )


async def breed(uow, index: int = 0) -> None:
    await start_breed.execute(
        uow,
        ALICE,
        start_breed.StartBreedInput(parent_a=f"a{index}", parent_b=f"b{index}"),
        0,
    )


@pytest.mark.asyncio
async def test_owner_withdraws_accumulated_fees(uow):
    await init(uow)
    await breed(uow, 0)
    await breed(uow, 1)
    uow.drain_events()
    settlement = RecordingSettlement()

    withdrawn = await withdraw_fund.execute(uow, settlement, ADMIN)

    assert withdrawn.amount == 200
    assert withdrawn.denom == "uluna"
    assert settlement.transfers == [(ADMIN, 200, "uluna")]
    assert (await withdraw_fund.get_balance(uow)).amount == 0
    assert uow.drain_events() == [
        FundsWithdrawnEvent(recipient=ADMIN, amount=200, denom="uluna")
    ]


@pytest.mark.asyncio
async def test_empty_balance_cannot_be_withdrawn(uow):
    await init(uow, price=0)
    await breed(uow)
    settlement = RecordingSettlement()
    with pytest.raises(InsufficientBalance):
        await withdraw_fund.execute(uow, settlement, ADMIN)
    assert settlement.transfers == []


@pytest.mark.asyncio
async def test_non_owner_cannot_withdraw(uow):
    await init(uow)
    await breed(uow)
    with pytest.raises(Unauthorized):
        await withdraw_fund.execute(uow, RecordingSettlement(), ALICE)
    assert (await withdraw_fund.get_balance(uow)).amount == 100


@pytest.mark.asyncio
async def test_denomination_change_needs_empty_balance(uow):
    await init(uow)
    await breed(uow, 0)
    await update_config.execute(
        uow, ADMIN, update_config.UpdateConfigInput(breed_price_denom="uusd")
    )

    with pytest.raises(InvalidState):
        await breed(uow, 1)

    await withdraw_fund.execute(uow, RecordingSettlement(), ADMIN)
    await breed(uow, 2)
    balance = await withdraw_fund.get_balance(uow)
    assert (balance.amount, balance.denom) == (100, "uusd")


class FailingSettlement:
    async def transfer(self, *, recipient: Identity, amount: int, denom: str) -> None:
        raise ConnectionError("chain unreachable")


@pytest.mark.asyncio
async def test_balance_is_drained_before_transfer(uow):
    await init(uow)
    await breed(uow)
    commits_before = len(uow.commits)

    with pytest.raises(InfrastructureError) as exc_info:
        await withdraw_fund.execute(uow, FailingSettlement(), ADMIN)

    assert exc_info.value.details == {"amount": "100", "denom": "uluna"}
    assert len(uow.commits) == commits_before + 1
    assert (await withdraw_fund.get_balance(uow)).amount == 0
    with pytest.raises(InsufficientBalance):
        await withdraw_fund.execute(uow, RecordingSettlement(), ADMIN)
