from __future__ import annotations

import pytest

from src.domain.models.breed_counter import BreedCounter
from src.domain.models.breeding import MAX_INT64, Breeding
from src.domain.models.fee_balance import MAX_AMOUNT, FeeBalance
from src.domain.models.ledger_config import LedgerConfig
from src.domain.value_objects.breed_status import BreedStatus
from src.domain.value_objects.identity import Identity
from src.domain.value_objects.sort_order import SortOrder


def make_breeding(**overrides) -> Breeding:
    values = dict(
        breed_id=1,
        owner=Identity("terra1alice"),
        parent_a="cat-1",
        parent_b="cat-2",
        start_time=100,
        duration=50,
    )
    values.update(overrides)
    return Breeding.create(**values)


def test_end_time_is_start_plus_duration():
    breeding = make_breeding(start_time=1_000, duration=86_400)
    assert breeding.end_time == 87_400
    assert breeding.withdrawn is False


def test_status_moves_from_pending_to_matured_to_settled():
    breeding = make_breeding()
    assert breeding.status_at(149) is BreedStatus.PENDING
    assert breeding.status_at(150) is BreedStatus.MATURED
    breeding.mark_withdrawn()
    assert breeding.status_at(150) is BreedStatus.SETTLED
    assert breeding.status_at(10) is BreedStatus.SETTLED


def test_mark_withdrawn_only_once():
    breeding = make_breeding()
    breeding.mark_withdrawn()
    with pytest.raises(ValueError):
        breeding.mark_withdrawn()


def test_status_permissions():
    assert not BreedStatus.PENDING.can_withdraw()
    assert BreedStatus.MATURED.can_withdraw()
    assert not BreedStatus.SETTLED.can_withdraw()
    assert not BreedStatus.PENDING.can_mint()
    assert BreedStatus.SETTLED.can_mint()


def test_has_parent_matches_either_side():
    breeding = make_breeding(parent_a="x", parent_b="y")
    assert breeding.has_parent("x")
    assert breeding.has_parent("y")
    assert not breeding.has_parent("z")


def test_counter_advances_sequentially():
    counter = BreedCounter()
    assert [counter.advance() for _ in range(3)] == [1, 2, 3]
    assert counter.count == 3
    assert counter.has_capacity(4)
    assert not counter.has_capacity(3)


def test_zero_limit_has_no_capacity():
    assert not BreedCounter().has_capacity(0)


def test_fee_balance_credit_and_drain():
    balance = FeeBalance()
    balance.credit(10, "uluna")
    balance.credit(5, "uluna")
    assert balance.amount == 15
    assert balance.denom == "uluna"
    assert not balance.accepts("uusd")
    with pytest.raises(ValueError):
        balance.credit(1, "uusd")
    assert balance.drain() == 15
    assert balance.is_empty()
    assert balance.accepts("uusd")


def test_sort_order_parse_falls_back_to_ascending():
    assert SortOrder.parse("descending") is SortOrder.DESCENDING
    assert SortOrder.parse("DESC") is SortOrder.DESCENDING
    assert SortOrder.parse("ascending") is SortOrder.ASCENDING
    assert SortOrder.parse("newest-first") is SortOrder.ASCENDING
    assert SortOrder.parse(None) is SortOrder.ASCENDING


def test_config_problems_and_merge():
    config = LedgerConfig(breed_count_limit=5, breed_duration=60)
    assert config.problems() == []
    merged = config.merged({"breed_duration": 120, "breed_price_denom": None})
    assert merged.breed_duration == 120
    assert merged.breed_count_limit == 5
    assert merged.breed_price_denom == config.breed_price_denom

    broken = LedgerConfig(breed_count_limit=-1, breed_duration=0, breed_price_denom=" ")
    assert len(broken.problems()) == 3


def test_identity_equality_is_by_value():
    assert Identity("terra1a") == Identity("terra1a")
    assert Identity("terra1a") != Identity("terra1b")
    assert str(Identity("terra1a")) == "terra1a"


def test_fee_balance_refuses_to_exceed_maximum():
    balance = FeeBalance(amount=MAX_AMOUNT - 1, denom="uluna")
    assert balance.can_credit(1)
    assert not balance.can_credit(2)
    with pytest.raises(ValueError):
        balance.credit(2, "uluna")
    balance.credit(1, "uluna")
    assert balance.amount == MAX_AMOUNT


def test_config_rejects_unstorable_values():
    config = LedgerConfig(
        breed_count_limit=MAX_INT64 + 1,
        breed_duration=MAX_INT64 + 1,
        breed_price_amount=MAX_AMOUNT + 1,
        breed_start_time=-1,
    )
    assert len(config.problems()) == 4
    assert LedgerConfig(
        breed_count_limit=MAX_INT64, breed_duration=MAX_INT64, breed_price_amount=MAX_AMOUNT
    ).problems() == []
