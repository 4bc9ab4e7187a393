from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class BreedRequest(BaseModel):
    # Missing or blank parents are rejected by the ledger, not by validation
    parent_a: str | None = Field(None, max_length=255)
    parent_b: str | None = Field(None, max_length=255)


class MintRequest(BaseModel):
    token_id: str = Field(min_length=1, max_length=255)
    token_uri: str | None = None
    extension: dict[str, Any] | None = None


class BreedingResponse(BaseModel):
    id: int
    owner: str
    parent_a: str
    parent_b: str
    start_time: int
    end_time: int
    withdrawn: bool
    status: str


class BreedingListResponse(BaseModel):
    items: list[BreedingResponse]
    total: int
    count: int
    offset: int
    sort: str


class CountResponse(BaseModel):
    count: int


class MintResponse(BaseModel):
    breed_id: int
    token_id: str
    owner: str
    token_uri: str | None
