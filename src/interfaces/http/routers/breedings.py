from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Body, Depends, Query, Request, status

from src.application.errors import NotFound
from src.application.use_cases.breeding import (
    breeding_stats,
    get_breeding,
    mint_offspring,
    start_breed,
    withdraw_breed,
)
from src.application.use_cases.queries import list_breedings
from src.domain.models.breeding import Breeding
from src.domain.ports.identity_resolver import IdentityResolver
from src.domain.ports.minter import Minter
from src.domain.value_objects.sort_order import SortOrder
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import (
    get_auth_context,
    get_block_time,
    get_identity_resolver,
    get_minter,
    get_uow,
    schedule_event_dispatch,
)
from src.interfaces.http.schemas.breedings import (
    BreedingListResponse,
    BreedingResponse,
    BreedRequest,
    CountResponse,
    MintRequest,
    MintResponse,
)

router = APIRouter(tags=["breedings"])


def _to_response(breeding: Breeding, resolver: IdentityResolver, now: int) -> BreedingResponse:
    return BreedingResponse(
        id=breeding.id,
        owner=resolver.display(breeding.owner),
        parent_a=breeding.parent_a,
        parent_b=breeding.parent_b,
        start_time=breeding.start_time,
        end_time=breeding.end_time,
        withdrawn=breeding.withdrawn,
        status=breeding.status_at(now).value,
    )


async def _start(
    payload: BreedRequest | None,
    request: Request,
    background_tasks: BackgroundTasks,
    context: AuthContext,
    resolver: IdentityResolver,
    now: int,
    uow,
) -> BreedingResponse:
    payload = payload or BreedRequest()
    created = await start_breed.execute(
        uow,
        context.identity,
        start_breed.StartBreedInput(parent_a=payload.parent_a, parent_b=payload.parent_b),
        now,
    )
    schedule_event_dispatch(request, background_tasks, uow)
    return _to_response(created, resolver, now)


@router.post("/breedings", response_model=BreedingResponse, status_code=status.HTTP_201_CREATED)
async def breed_endpoint(
    payload: BreedRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    context: AuthContext = Depends(get_auth_context),
    resolver: IdentityResolver = Depends(get_identity_resolver),
    now: int = Depends(get_block_time),
    uow=Depends(get_uow),
):
    return await _start(payload, request, background_tasks, context, resolver, now, uow)


@router.post(
    "/breedings/start", response_model=BreedingResponse, status_code=status.HTTP_201_CREATED
)
async def start_breed_endpoint(
    request: Request,
    background_tasks: BackgroundTasks,
    payload: BreedRequest | None = Body(None),
    context: AuthContext = Depends(get_auth_context),
    resolver: IdentityResolver = Depends(get_identity_resolver),
    now: int = Depends(get_block_time),
    uow=Depends(get_uow),
):
    return await _start(payload, request, background_tasks, context, resolver, now, uow)


@router.get("/breedings", response_model=BreedingListResponse)
async def list_breedings_endpoint(
    count: int = Query(10, ge=0, le=1000),
    offset: int = Query(0, ge=0),
    sort: str = Query(SortOrder.ASCENDING.value, description="ascending or descending"),
    resolver: IdentityResolver = Depends(get_identity_resolver),
    now: int = Depends(get_block_time),
    uow=Depends(get_uow),
):
    items = await list_breedings.list_breedings(uow, count, offset, sort)
    total = await list_breedings.breedings_length(uow)
    return BreedingListResponse(
        items=[_to_response(b, resolver, now) for b in items],
        total=total,
        count=count,
        offset=offset,
        sort=SortOrder.parse(sort).value,
    )


@router.get("/breedings/length", response_model=CountResponse)
async def breedings_length_endpoint(uow=Depends(get_uow)):
    return CountResponse(count=await list_breedings.breedings_length(uow))


@router.get("/breedings/stats/open", response_model=CountResponse)
async def open_count_endpoint(uow=Depends(get_uow)):
    return CountResponse(count=await breeding_stats.count_open(uow))


@router.get("/breedings/stats/settled", response_model=CountResponse)
async def settled_count_endpoint(uow=Depends(get_uow)):
    return CountResponse(count=await breeding_stats.count_settled(uow))


@router.get("/breedings/{breed_id}", response_model=BreedingResponse)
async def get_breeding_endpoint(
    breed_id: int,
    resolver: IdentityResolver = Depends(get_identity_resolver),
    now: int = Depends(get_block_time),
    uow=Depends(get_uow),
):
    breeding = await get_breeding.execute(uow, breed_id)
    if breeding is None:
        raise NotFound(f"Breeding {breed_id} not found")
    return _to_response(breeding, resolver, now)


@router.post("/breedings/{breed_id}/withdraw", response_model=BreedingResponse)
async def withdraw_breeding_endpoint(
    breed_id: int,
    request: Request,
    background_tasks: BackgroundTasks,
    context: AuthContext = Depends(get_auth_context),
    resolver: IdentityResolver = Depends(get_identity_resolver),
    now: int = Depends(get_block_time),
    uow=Depends(get_uow),
):
    updated = await withdraw_breed.execute(uow, context.identity, breed_id, now)
    schedule_event_dispatch(request, background_tasks, uow)
    return _to_response(updated, resolver, now)


@router.post("/breedings/{breed_id}/mint", response_model=MintResponse)
async def mint_offspring_endpoint(
    breed_id: int,
    payload: MintRequest,
    context: AuthContext = Depends(get_auth_context),
    resolver: IdentityResolver = Depends(get_identity_resolver),
    minter: Minter = Depends(get_minter),
    now: int = Depends(get_block_time),
    uow=Depends(get_uow),
):
    receipt = await mint_offspring.execute(
        uow,
        minter,
        context.identity,
        mint_offspring.MintOffspringInput(
            breed_id=breed_id,
            token_id=payload.token_id,
            token_uri=payload.token_uri,
            extension=payload.extension,
        ),
        now,
    )
    return MintResponse(
        breed_id=receipt.breed_id,
        token_id=receipt.token_id,
        owner=resolver.display(receipt.owner),
        token_uri=receipt.token_uri,
    )


@router.get("/owners/{owner}/breedings", response_model=BreedingListResponse)
async def list_owner_breedings_endpoint(
    owner: str,
    count: int = Query(10, ge=0, le=1000),
    offset: int = Query(0, ge=0),
    sort: str = Query(SortOrder.ASCENDING.value, description="ascending or descending"),
    resolver: IdentityResolver = Depends(get_identity_resolver),
    now: int = Depends(get_block_time),
    uow=Depends(get_uow),
):
    identity = resolver.canonicalize(owner)
    items = await list_breedings.list_owner_breedings(uow, identity, count, offset, sort)
    total = await list_breedings.owner_breedings_length(uow, identity)
    return BreedingListResponse(
        items=[_to_response(b, resolver, now) for b in items],
        total=total,
        count=count,
        offset=offset,
        sort=SortOrder.parse(sort).value,
    )


@router.get("/owners/{owner}/breedings/length", response_model=CountResponse)
async def owner_breedings_length_endpoint(
    owner: str,
    resolver: IdentityResolver = Depends(get_identity_resolver),
    uow=Depends(get_uow),
):
    identity = resolver.canonicalize(owner)
    return CountResponse(count=await list_breedings.owner_breedings_length(uow, identity))


@router.get("/parents/{parent_id}/breedings/count", response_model=CountResponse)
async def parent_breed_count_endpoint(parent_id: str, uow=Depends(get_uow)):
    return CountResponse(count=await breeding_stats.count_for_parent(uow, parent_id))
