"""Recommendations router: full envelope and per-domain slices for the caller's trips."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from roamster.database import get_db
from roamster.dependencies import get_current_user
from roamster.models.trip import Trip
from roamster.models.user import User
from roamster.services.recommendation.errors import InvalidTripError
from roamster.services.recommendation_service import recommendation_service
from roamster.services.trip_service import trip_service

logger = logging.getLogger(__name__)

router = APIRouter()


async def resolve_trip(db: AsyncSession, user: User, trip_id: uuid.UUID | None) -> Trip:
    """The requested trip, or the user's active trip when no id is given."""
    if trip_id is not None:
        trip = await trip_service.get_user_trip(db, user.id, trip_id)
    else:
        trip = await trip_service.get_active_trip(db, user.id)
    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")
    return trip


@router.get("/recommendations")
async def get_recommendations(
    trip_id: uuid.UUID | None = Query(None),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Clothing, food, experiences, photos and notifications for one trip."""
    trip = await resolve_trip(db, user, trip_id)
    try:
        result = await recommendation_service.generate(trip, user)
    except InvalidTripError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return result.to_dict()


async def _domain_slice(domain: str, trip_id: uuid.UUID | None, db: AsyncSession, user: User) -> dict:
    trip = await resolve_trip(db, user, trip_id)
    try:
        recommendation = await recommendation_service.recommend(domain, trip, user)
    except InvalidTripError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"trip_id": str(trip.id), **recommendation.to_dict()}


@router.get("/clothes")
async def get_clothes(
    trip_id: uuid.UUID | None = Query(None),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return await _domain_slice("clothes", trip_id, db, user)


@router.get("/food")
async def get_food(
    trip_id: uuid.UUID | None = Query(None),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return await _domain_slice("food", trip_id, db, user)


@router.get("/guide")
async def get_guide(
    trip_id: uuid.UUID | None = Query(None),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return await _domain_slice("guide", trip_id, db, user)


@router.get("/photo")
async def get_photo(
    trip_id: uuid.UUID | None = Query(None),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return await _domain_slice("photo", trip_id, db, user)
