"""Notifications router: stored trip notices for the current user."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from roamster.database import get_db
from roamster.dependencies import get_current_user
from roamster.models.notification import Notification
from roamster.models.user import User
from roamster.routers.recommendations import resolve_trip
from roamster.services.notification_service import notification_service
from roamster.services.recommendation.errors import InvalidTripError
from roamster.services.recommendation_service import recommendation_service

router = APIRouter()


def _serialize(n: Notification) -> dict:
    return {
        "id": str(n.id),
        "trip_id": str(n.trip_id) if n.trip_id else None,
        "type": n.type,
        "title": n.title,
        "message": n.message,
        "priority": n.priority,
        "is_read": n.is_read,
        "created_at": n.created_at.isoformat() if n.created_at else None,
    }


@router.get("")
async def list_notifications(
    is_read: bool | None = Query(None),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Get user's notifications, newest first."""
    query = (
        select(Notification)
        .where(Notification.user_id == user.id)
        .order_by(Notification.created_at.desc())
        .limit(limit)
    )
    if is_read is not None:
        query = query.where(Notification.is_read == is_read)

    result = await db.execute(query)
    notifications = result.scalars().all()

    count_result = await db.execute(
        select(func.count(Notification.id))
        .where(Notification.user_id == user.id, Notification.is_read == False)
    )
    unread_count = count_result.scalar() or 0

    return {
        "notifications": [_serialize(n) for n in notifications],
        "unread_count": unread_count,
    }


@router.post("/refresh", status_code=201)
async def refresh_notifications(
    trip_id: uuid.UUID | None = Query(None),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Derive the current notices for a trip and store them."""
    trip = await resolve_trip(db, user, trip_id)
    try:
        result = await recommendation_service.generate(trip, user)
    except InvalidTripError as e:
        raise HTTPException(status_code=422, detail=str(e))

    created = await notification_service.store_notices(db, user.id, trip.id, result.notifications)
    return {"notifications": [_serialize(n) for n in created]}


@router.put("/read-all")
async def mark_all_read(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    await db.execute(
        update(Notification)
        .where(Notification.user_id == user.id, Notification.is_read == False)
        .values(is_read=True)
    )
    await db.commit()
    return {"message": "All notifications marked as read"}


@router.put("/{notification_id}/read")
async def mark_read(
    notification_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    result = await db.execute(
        select(Notification).where(
            Notification.id == notification_id, Notification.user_id == user.id
        )
    )
    notification = result.scalar_one_or_none()
    if not notification:
        raise HTTPException(status_code=404, detail="Notification not found")

    notification.is_read = True
    await db.commit()
    return {"message": "Notification marked as read"}
