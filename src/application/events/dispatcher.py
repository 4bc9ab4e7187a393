from __future__ import annotations

import logging
from typing import Iterable

from src.application.events.models import (
    BreedSettledEvent,
    BreedStartedEvent,
    ConfigUpdatedEvent,
    FundsWithdrawnEvent,
)
from src.domain.ports.minter import Minter
from src.infrastructure.db.session import SQLAlchemyUnitOfWork

logger = logging.getLogger(__name__)


async def dispatch_events(session_factory, minter: Minter, events: Iterable[object]) -> None:
    """
    Dispatch events post-commit. Uses a transient unit of work to reload settled records.
    Safe to call in a background task.
    """
    events = list(events)
    if not events:
        return

    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        for event in events:
            try:
                if isinstance(event, BreedSettledEvent):
                    await _handle_breed_settled(uow, minter, event)
                elif isinstance(event, BreedStartedEvent):
                    logger.debug("Breeding %d started, ends at %d", event.breed_id, event.end_time)
                elif isinstance(event, ConfigUpdatedEvent):
                    if event.new_owner is not None:
                        logger.info(
                            "Ledger ownership transferred from %s to %s",
                            event.actor,
                            event.new_owner,
                        )
                elif isinstance(event, FundsWithdrawnEvent):
                    logger.debug("Funds withdrawn: %d %s", event.amount, event.denom)
            except Exception as e:
                logger.error(
                    "Error dispatching event %s: %s", type(event).__name__, e, exc_info=True
                )


async def _handle_breed_settled(
    uow: SQLAlchemyUnitOfWork, minter: Minter, event: BreedSettledEvent
) -> None:
    breeding = await uow.breedings.get(event.breed_id)
    if breeding is None:
        logger.warning("Settled breeding %d vanished before dispatch", event.breed_id)
        return
    await minter.on_breed_settled(breeding)
