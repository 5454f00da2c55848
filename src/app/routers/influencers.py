# src/app/routers/influencers.py
from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from starlette.concurrency import run_in_threadpool

from src.app.deps import get_influencer_service
from src.app.domain.errors import RecordNotFoundError, RecordWriteError
from src.app.domain.models import Influencer
from src.app.schemas.influencers import (
    InfluencerCreate,
    InfluencerResponse,
    InfluencerUpdate,
)
from src.app.services.influencer_service import InfluencerService

router = APIRouter(prefix="/influencers", tags=["influencers"])

# API field -> domain field
_FIELD_NAMES = {
    "name": "name",
    "avatar": "avatar",
    "coverImage": "cover_image",
    "bio": "bio",
    "socialMedia": "social_media",
    "specialties": "specialties",
    "followers": "followers",
    "recipesCount": "recipes_count",
}
_NULLABLE_FIELDS = {"avatar", "coverImage", "bio"}


def influencer_response(influencer: Influencer) -> InfluencerResponse:
    return InfluencerResponse(
        id=influencer.id or "",
        name=influencer.name or "",
        avatar=influencer.avatar,
        coverImage=influencer.cover_image,
        bio=influencer.bio,
        socialMedia=influencer.social_media,
        specialties=influencer.specialties,
        followers=influencer.followers,
        recipesCount=influencer.recipes_count,
    )


def _influencer_changes(payload: InfluencerUpdate) -> dict[str, Any]:
    changes = payload.model_dump(exclude_unset=True)
    cleared = sorted(key for key, value in changes.items() if value is None and key not in _NULLABLE_FIELDS)
    if cleared:
        raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
    return {_FIELD_NAMES[key]: value for key, value in changes.items()}


@router.get("/", response_model=list[InfluencerResponse])
async def list_influencers(
    q: Optional[str] = Query(default=None, description="Case-insensitive search on name and bio"),
    service: InfluencerService = Depends(get_influencer_service),
) -> list[InfluencerResponse]:
    if q is None:
        influencers = await run_in_threadpool(service.get_all)
    else:
        influencers = await run_in_threadpool(service.search, q)
    return [influencer_response(item) for item in influencers]


@router.get("/{influencer_id}", response_model=InfluencerResponse)
async def get_influencer(
    influencer_id: str,
    service: InfluencerService = Depends(get_influencer_service),
) -> InfluencerResponse:
    try:
        influencer = await run_in_threadpool(service.get_by_id, influencer_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return influencer_response(influencer)


@router.post("/", response_model=InfluencerResponse, status_code=status.HTTP_201_CREATED)
async def create_influencer(
    payload: InfluencerCreate,
    service: InfluencerService = Depends(get_influencer_service),
) -> InfluencerResponse:
    fields = {_FIELD_NAMES[key]: value for key, value in payload.model_dump().items()}
    try:
        influencer = await run_in_threadpool(service.create, Influencer(**fields))
    except RecordWriteError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    return influencer_response(influencer)


@router.patch("/{influencer_id}", response_model=InfluencerResponse)
async def update_influencer(
    influencer_id: str,
    payload: InfluencerUpdate,
    service: InfluencerService = Depends(get_influencer_service),
) -> InfluencerResponse:
    try:
        influencer = await run_in_threadpool(
            service.update, influencer_id, _influencer_changes(payload)
        )
    except (RecordNotFoundError, RecordWriteError) as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return influencer_response(influencer)


@router.delete("/{influencer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_influencer(
    influencer_id: str,
    service: InfluencerService = Depends(get_influencer_service),
) -> Response:
    await run_in_threadpool(service.delete, influencer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
