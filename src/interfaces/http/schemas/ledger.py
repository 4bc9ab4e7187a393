from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from src.domain.models.breeding import MAX_INT64
from src.domain.models.fee_balance import MAX_AMOUNT


class LedgerInitRequest(BaseModel):
    breed_count_limit: int = Field(ge=0, le=MAX_INT64)
    breed_duration: int = Field(gt=0, le=MAX_INT64, description="Seconds until a breeding matures")
    breed_price_amount: int = Field(0, ge=0, le=MAX_AMOUNT)
    breed_price_denom: str = Field("uluna", min_length=1, max_length=64)
    breed_start_time: int | None = Field(None, ge=0, le=MAX_INT64)
    child_base_uri: str | None = None
    child_contract_addr: str | None = Field(None, max_length=255)
    child_nft_max_supply: int | None = Field(None, ge=0, le=MAX_INT64)
    parent_contract_addr: str | None = Field(None, max_length=255)


class ConfigUpdateRequest(BaseModel):
    breed_count_limit: int | None = Field(None, ge=0, le=MAX_INT64)
    breed_duration: int | None = Field(None, gt=0, le=MAX_INT64)
    breed_price_amount: int | None = Field(None, ge=0, le=MAX_AMOUNT)
    breed_price_denom: str | None = Field(None, min_length=1, max_length=64)
    owner: str | None = Field(None, min_length=1, max_length=255)


class ConfigResponse(BaseModel):
    breed_count_limit: int
    breed_duration: int
    breed_price_amount: str
    breed_price_denom: str
    breed_start_time: int | None
    child_base_uri: str | None
    child_contract_addr: str | None
    child_nft_max_supply: int | None
    parent_contract_addr: str | None
    owner: str
    updated_at: datetime


class FeeBalanceResponse(BaseModel):
    amount: str
    denom: str
