from __future__ import annotations

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base

BREED_COUNTER_ID = 1


class BreedCounterORM(Base):
    __tablename__ = "breed_counter"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=BREED_COUNTER_ID)
    count: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    latest_id: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
