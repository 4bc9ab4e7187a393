from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from dataclasses import replace
from pathlib import Path
from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.models.breed_counter import BreedCounter
from src.domain.models.breeding import Breeding
from src.domain.models.fee_balance import FeeBalance
from src.domain.models.ledger_config import ConfigState
from src.domain.value_objects.identity import Identity
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import (  # noqa: F401
    breed_counter,
    breeding,
    config_state,
    fee_balance,
)
from src.infrastructure.db.session import create_engine, create_session_factory
from src.interfaces.http.main import create_app


class InMemoryConfigStateRepo:
    def __init__(self) -> None:
        self.stored: ConfigState | None = None

    async def get(self) -> ConfigState | None:
        return replace(self.stored, config=replace(self.stored.config)) if self.stored else None

    async def add(self, state: ConfigState) -> ConfigState:
        self.stored = state
        return state

    async def save(self, state: ConfigState) -> ConfigState:
        self.stored = state
        return state


class InMemoryBreedCounterRepo:
    def __init__(self) -> None:
        self.stored: BreedCounter | None = None

    async def get(self) -> BreedCounter | None:
        return replace(self.stored) if self.stored else None

    async def save(self, counter: BreedCounter) -> BreedCounter:
        self.stored = replace(counter)
        return counter

    async def claim(self, limit: int) -> BreedCounter | None:
        if self.stored is None or not self.stored.has_capacity(limit):
            return None
        self.stored.advance()
        return replace(self.stored)


class InMemoryBreedingsRepo:
    def __init__(self) -> None:
        self.rows: dict[int, Breeding] = {}

    async def add(self, breeding: Breeding) -> Breeding:
        self.rows[breeding.id] = replace(breeding)
        return replace(breeding)

    async def settle(self, breed_id: int) -> Breeding | None:
        row = self.rows.get(breed_id)
        if row is None or row.withdrawn:
            return None
        row.mark_withdrawn()
        return replace(row)

    async def get(self, breed_id: int) -> Breeding | None:
        row = self.rows.get(breed_id)
        return replace(row) if row else None

    async def list_all(self, owner: Identity | None = None) -> list[Breeding]:
        return [
            replace(row)
            for _, row in sorted(self.rows.items())
            if owner is None or row.owner == owner
        ]

    async def count(self, owner: Identity | None = None) -> int:
        return len(await self.list_all(owner))

    async def count_by_withdrawn(self, withdrawn: bool) -> int:
        return sum(1 for row in self.rows.values() if row.withdrawn is withdrawn)

    async def count_by_parent(self, parent_id: str) -> int:
        return sum(1 for row in self.rows.values() if row.has_parent(parent_id))


class InMemoryFeeBalanceRepo:
    def __init__(self) -> None:
        self.stored: FeeBalance | None = None

    async def get(self) -> FeeBalance | None:
        return replace(self.stored) if self.stored else None

    async def save(self, balance: FeeBalance) -> FeeBalance:
        self.stored = replace(balance)
        return balance

    async def compare_and_set(
        self, expected: FeeBalance, balance: FeeBalance
    ) -> FeeBalance | None:
        if self.stored != expected:
            return None
        self.stored = replace(balance)
        return replace(balance)


def make_uow() -> SimpleNamespace:
    events: list = []
    commits: list[int] = []

    async def commit():
        commits.append(len(commits) + 1)

    async def rollback():
        return None

    def add_event(event):
        events.append(event)

    def drain_events():
        drained = list(events)
        events.clear()
        return drained

    return SimpleNamespace(
        config_state=InMemoryConfigStateRepo(),
        breed_counter=InMemoryBreedCounterRepo(),
        breedings=InMemoryBreedingsRepo(),
        fee_balance=InMemoryFeeBalanceRepo(),
        events=events,
        commits=commits,
        commit=commit,
        rollback=rollback,
        add_event=add_event,
        drain_events=drain_events,
    )


@pytest.fixture()
def uow() -> SimpleNamespace:
    return make_uow()


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "environment": "test",
            "bootstrap_secret_key": "bootstrap-secret",
        }
    )


@pytest.fixture()
async def session_factory(test_settings: Settings):
    engine = create_engine(test_settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield create_session_factory(engine)
    await engine.dispose()


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
def auth_headers(app) -> Callable[..., dict[str, str]]:
    def build(address: str, *, now: int | None = None) -> dict[str, str]:
        token = app.state.jwt_service.create_access_token(subject=address)
        headers = {"Authorization": f"Bearer {token}"}
        if now is not None:
            headers[app.state.settings.block_time_header] = str(now)
        return headers

    return build
