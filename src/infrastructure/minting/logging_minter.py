from __future__ import annotations

import logging
from typing import Any

from src.domain.models.breeding import Breeding
from src.domain.ports.minter import Minter, MintReceipt

logger = logging.getLogger(__name__)


class LoggingMinter(Minter):
    def __init__(self, *, child_contract_addr: str | None = None) -> None:
        self.child_contract_addr = child_contract_addr

    async def mint(
        self,
        *,
        breeding: Breeding,
        token_id: str,
        token_uri: str | None = None,
        extension: dict[str, Any] | None = None,
    ) -> MintReceipt:
        logger.info(
            "Mint requested (logging minter): breed_id=%s token_id=%s owner=%s "
            "token_uri=%s contract=%s extension_keys=%s",
            breeding.id,
            token_id,
            breeding.owner,
            token_uri or "",
            self.child_contract_addr or "",
            ",".join(sorted(extension or {})),
        )
        return MintReceipt(
            breed_id=breeding.id,
            token_id=token_id,
            owner=breeding.owner,
            token_uri=token_uri,
        )

    async def on_breed_settled(self, breeding: Breeding) -> None:  # pragma: no cover
        logger.info(
            "Breeding settled, offspring may be minted: breed_id=%s owner=%s parents=%s,%s",
            breeding.id,
            breeding.owner,
            breeding.parent_a,
            breeding.parent_b,
        )
