from __future__ import annotations

import logging

from src.domain.ports.fee_settlement import FeeSettlement
from src.domain.value_objects.identity import Identity

logger = logging.getLogger(__name__)


class LoggingFeeSettlement(FeeSettlement):
    async def transfer(  # pragma: no cover - side effect only
        self, *, recipient: Identity, amount: int, denom: str
    ) -> None:
        logger.info(
            "Fee transfer (logging settlement): to=%s amount=%d denom=%s",
            recipient,
            amount,
            denom,
        )
