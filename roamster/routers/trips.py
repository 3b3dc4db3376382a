import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from roamster.database import get_db
from roamster.dependencies import get_current_user
from roamster.models.trip import Trip
from roamster.models.user import User
from roamster.schemas.trip import CreateTripRequest, TripResponse, UpdateTripRequest
from roamster.services.trip_service import trip_service

router = APIRouter()

# NULL = use the engine default (no accommodation, intensity derived from travel group)
CLEARABLE_TRIP_FIELDS = {"accommodation", "activity_intensity"}


async def _get_trip_or_404(db: AsyncSession, user: User, trip_id: uuid.UUID) -> Trip:
    trip = await trip_service.get_user_trip(db, user.id, trip_id)
    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")
    return trip


@router.get("", response_model=list[TripResponse])
async def list_trips(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    trips = await trip_service.list_trips(db, user.id)
    return [TripResponse.model_validate(t) for t in trips]


@router.get("/active/current", response_model=TripResponse)
async def get_active_trip(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    trip = await trip_service.get_active_trip(db, user.id)
    if not trip:
        raise HTTPException(status_code=404, detail="No active trip")
    return TripResponse.model_validate(trip)


@router.get("/{trip_id}", response_model=TripResponse)
async def get_trip(
    trip_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return TripResponse.model_validate(await _get_trip_or_404(db, user, trip_id))


@router.post("", status_code=201, response_model=TripResponse)
async def create_trip(
    req: CreateTripRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Create a trip. The new trip becomes the user's only active trip."""
    trip = Trip(user_id=user.id, **req.model_dump())
    trip.destination = trip.destination.strip()
    db.add(trip)
    await trip_service.activate(db, trip)
    await db.commit()
    await db.refresh(trip)
    return TripResponse.model_validate(trip)


@router.put("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: uuid.UUID,
    req: UpdateTripRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    trip = await _get_trip_or_404(db, user, trip_id)
    # An explicit null clears a nullable column; it is ignored for required ones
    changes = {
        k: v for k, v in req.model_dump(exclude_unset=True).items()
        if v is not None or k in CLEARABLE_TRIP_FIELDS
    }

    start = changes.get("start_date", trip.start_date)
    end = changes.get("end_date", trip.end_date)
    if end <= start:
        raise HTTPException(status_code=422, detail="End date must be after start date")
    if "destination" in changes:
        changes["destination"] = changes["destination"].strip()
        if not changes["destination"]:
            raise HTTPException(status_code=422, detail="Destination is required")

    for field, value in changes.items():
        setattr(trip, field, value)
    await db.commit()
    await db.refresh(trip)
    return TripResponse.model_validate(trip)


@router.put("/{trip_id}/activate", response_model=TripResponse)
async def activate_trip(
    trip_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    trip = await _get_trip_or_404(db, user, trip_id)
    await trip_service.activate(db, trip)
    await db.commit()
    await db.refresh(trip)
    return TripResponse.model_validate(trip)


@router.delete("/{trip_id}")
async def delete_trip(
    trip_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    trip = await _get_trip_or_404(db, user, trip_id)
    await db.delete(trip)
    await db.commit()
    return {"message": "Trip deleted"}
