from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base

FEE_BALANCE_ID = 1


class FeeBalanceORM(Base):
    __tablename__ = "fee_balance"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=FEE_BALANCE_ID)
    amount: Mapped[str] = mapped_column(String(40), nullable=False, default="0")
    denom: Mapped[str] = mapped_column(String(64), nullable=False, default="")
