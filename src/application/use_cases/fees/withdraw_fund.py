from __future__ import annotations

import logging
from dataclasses import replace

from src.application.errors import ConflictError, InfrastructureError, InsufficientBalance
from src.application.events.models import FundsWithdrawnEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.ledger import get_config
from src.application.use_cases.ledger.update_config import ensure_owner
from src.domain.models.fee_balance import FeeBalance
from src.domain.ports.fee_settlement import FeeSettlement
from src.domain.value_objects.identity import Identity

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, settlement: FeeSettlement, caller: Identity) -> FeeBalance:
    """Send the whole custodied fee balance to the ledger owner.

    The drained balance is committed before the transfer is requested, so a
    balance is paid out at most once. Returns the balance as it was before the
    withdrawal.
    """
    state = await get_config.execute(uow)
    ensure_owner(state, caller)

    balance = await uow.fee_balance.get()
    if balance is None or balance.is_empty():
        raise InsufficientBalance("Fee balance is zero")

    drained = replace(balance)
    amount = drained.drain()
    if await uow.fee_balance.compare_and_set(balance, drained) is None:
        raise ConflictError("Fee balance changed concurrently, retry the withdrawal")
    uow.add_event(FundsWithdrawnEvent(recipient=caller, amount=amount, denom=balance.denom))
    await uow.commit()

    try:
        await settlement.transfer(recipient=caller, amount=amount, denom=balance.denom)
    except Exception as exc:
        logger.error(
            "Fee transfer to %s failed after the balance was drained: %d %s",
            caller,
            amount,
            balance.denom,
            exc_info=True,
        )
        raise InfrastructureError(
            "Fee transfer failed",
            details={"amount": str(amount), "denom": balance.denom},
        ) from exc
    logger.info("Fee balance withdrawn by %s: %d %s", caller, amount, balance.denom)
    return balance


async def get_balance(uow: UnitOfWork) -> FeeBalance:
    return await uow.fee_balance.get() or FeeBalance()
