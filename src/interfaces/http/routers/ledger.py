from __future__ import annotations

import secrets

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status

from src.application.errors import Unauthorized
from src.application.use_cases.fees import withdraw_fund
from src.application.use_cases.ledger import get_config, initialize_ledger, update_config
from src.config.settings import Settings
from src.domain.models.fee_balance import FeeBalance
from src.domain.models.ledger_config import ConfigState
from src.domain.ports.identity_resolver import IdentityResolver
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import (
    get_app_settings,
    get_auth_context,
    get_fee_settlement,
    get_identity_resolver,
    get_uow,
    schedule_event_dispatch,
)
from src.interfaces.http.schemas.ledger import (
    ConfigResponse,
    ConfigUpdateRequest,
    FeeBalanceResponse,
    LedgerInitRequest,
)

router = APIRouter(prefix="/ledger", tags=["ledger"])


def _to_response(state: ConfigState, resolver: IdentityResolver) -> ConfigResponse:
    config = state.config
    return ConfigResponse(
        breed_count_limit=config.breed_count_limit,
        breed_duration=config.breed_duration,
        breed_price_amount=str(config.breed_price_amount),
        breed_price_denom=config.breed_price_denom,
        breed_start_time=config.breed_start_time,
        child_base_uri=config.child_base_uri,
        child_contract_addr=config.child_contract_addr,
        child_nft_max_supply=config.child_nft_max_supply,
        parent_contract_addr=config.parent_contract_addr,
        owner=resolver.display(state.owner),
        updated_at=state.updated_at,
    )


def _balance_response(balance: FeeBalance) -> FeeBalanceResponse:
    return FeeBalanceResponse(amount=str(balance.amount), denom=balance.denom)


def _check_bootstrap_key(request: Request, settings: Settings) -> None:
    if settings.bootstrap_secret_key is None:
        return
    provided = request.headers.get(settings.bootstrap_header) or ""
    expected = settings.bootstrap_secret_key.get_secret_value()
    if not secrets.compare_digest(provided, expected):
        raise Unauthorized("Invalid bootstrap key")


@router.post("/init", response_model=ConfigResponse, status_code=status.HTTP_201_CREATED)
async def init_ledger_endpoint(
    payload: LedgerInitRequest,
    request: Request,
    settings: Settings = Depends(get_app_settings),
    context: AuthContext = Depends(get_auth_context),
    resolver: IdentityResolver = Depends(get_identity_resolver),
    uow=Depends(get_uow),
):
    _check_bootstrap_key(request, settings)
    state = await initialize_ledger.execute(
        uow,
        initialize_ledger.InitializeLedgerInput(**payload.model_dump()),
        admin=context.identity,
    )
    return _to_response(state, resolver)


@router.get("/config", response_model=ConfigResponse)
async def get_config_endpoint(
    resolver: IdentityResolver = Depends(get_identity_resolver),
    uow=Depends(get_uow),
):
    state = await get_config.execute(uow)
    return _to_response(state, resolver)


@router.patch("/config", response_model=ConfigResponse)
async def update_config_endpoint(
    payload: ConfigUpdateRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    context: AuthContext = Depends(get_auth_context),
    resolver: IdentityResolver = Depends(get_identity_resolver),
    uow=Depends(get_uow),
):
    updates = payload.model_dump(exclude_unset=True, exclude_none=True)
    new_owner = updates.pop("owner", None)
    state = await update_config.execute(
        uow,
        context.identity,
        update_config.UpdateConfigInput(
            **updates,
            owner=resolver.canonicalize(new_owner) if new_owner else None,
        ),
    )
    schedule_event_dispatch(request, background_tasks, uow)
    return _to_response(state, resolver)


@router.get("/funds", response_model=FeeBalanceResponse)
async def get_funds_endpoint(uow=Depends(get_uow)):
    balance = await withdraw_fund.get_balance(uow)
    return _balance_response(balance)


@router.post("/funds/withdraw", response_model=FeeBalanceResponse)
async def withdraw_funds_endpoint(
    request: Request,
    background_tasks: BackgroundTasks,
    context: AuthContext = Depends(get_auth_context),
    settlement=Depends(get_fee_settlement),
    uow=Depends(get_uow),
):
    withdrawn = await withdraw_fund.execute(uow, settlement, context.identity)
    schedule_event_dispatch(request, background_tasks, uow)
    return _balance_response(withdrawn)
