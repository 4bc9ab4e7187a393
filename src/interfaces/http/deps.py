from __future__ import annotations

import time
from collections.abc import AsyncIterator

from fastapi import BackgroundTasks, Request

from src.application.errors import AuthError, ValidationError
from src.config.settings import Settings, get_settings
from src.domain.models.breeding import MAX_INT64
from src.domain.ports.fee_settlement import FeeSettlement
from src.domain.ports.identity_resolver import IdentityResolver
from src.domain.ports.minter import Minter
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_auth_context(request: Request) -> AuthContext:
    context = getattr(request.state, "auth_context", None)
    if context is None:
        raise AuthError("Authentication required")
    return context


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_block_time(request: Request) -> int:
    """Current time as supplied by the dispatcher, in unix seconds.

    Falls back to the wall clock when the request carries no block time.
    """
    settings = get_app_settings(request)
    raw = request.headers.get(settings.block_time_header)
    if raw is None:
        return int(time.time())
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValidationError(
            f"{settings.block_time_header} must be an integer", details={"value": raw}
        ) from exc
    if not 0 <= value <= MAX_INT64:
        raise ValidationError(
            f"{settings.block_time_header} must be between 0 and {MAX_INT64}",
            details={"value": raw},
        )
    return value


def get_identity_resolver(request: Request) -> IdentityResolver:
    resolver = getattr(request.app.state, "identity_resolver", None)
    if resolver is None:
        raise RuntimeError("Identity resolver not configured")
    return resolver


def get_minter(request: Request) -> Minter:
    minter = getattr(request.app.state, "minter", None)
    if minter is None:
        raise RuntimeError("Minter not configured")
    return minter


def get_fee_settlement(request: Request) -> FeeSettlement:
    settlement = getattr(request.app.state, "fee_settlement", None)
    if settlement is None:
        raise RuntimeError("Fee settlement not configured")
    return settlement


def schedule_event_dispatch(
    request: Request, background_tasks: BackgroundTasks, uow: SQLAlchemyUnitOfWork
) -> None:
    """Hand events collected by a committed unit of work to a background dispatcher."""
    events = uow.drain_events()
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory and events:
        from src.application.events.dispatcher import dispatch_events

        background_tasks.add_task(dispatch_events, session_factory, get_minter(request), events)
