from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base

# The config state is a singleton row
CONFIG_STATE_ID = 1


class ConfigStateORM(Base):
    __tablename__ = "ledger_config_state"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=CONFIG_STATE_ID)
    owner: Mapped[str] = mapped_column(String(255), nullable=False)
    breed_count_limit: Mapped[int] = mapped_column(BigInteger, nullable=False)
    breed_duration: Mapped[int] = mapped_column(BigInteger, nullable=False)
    # u128 amounts do not fit a portable integer column
    breed_price_amount: Mapped[str] = mapped_column(String(40), nullable=False, default="0")
    breed_price_denom: Mapped[str] = mapped_column(String(64), nullable=False)
    breed_start_time: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    child_base_uri: Mapped[str | None] = mapped_column(Text, nullable=True)
    child_contract_addr: Mapped[str | None] = mapped_column(String(255), nullable=True)
    child_nft_max_supply: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    parent_contract_addr: Mapped[str | None] = mapped_column(String(255), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
