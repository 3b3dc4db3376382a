"""Trip service: ownership lookups, the single-active-trip rule, engine input mapping."""

import logging
import uuid

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from roamster.models.trip import Trip
from roamster.models.user import User
from roamster.services.recommendation.domain import TripDetails, UserPreferences

logger = logging.getLogger(__name__)


class TripService:
    async def list_trips(self, db: AsyncSession, user_id: uuid.UUID) -> list[Trip]:
        result = await db.execute(
            select(Trip).where(Trip.user_id == user_id).order_by(Trip.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_user_trip(
        self, db: AsyncSession, user_id: uuid.UUID, trip_id: uuid.UUID
    ) -> Trip | None:
        """The trip if it exists and belongs to the user."""
        result = await db.execute(
            select(Trip).where(Trip.id == trip_id, Trip.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_active_trip(self, db: AsyncSession, user_id: uuid.UUID) -> Trip | None:
        result = await db.execute(
            select(Trip)
            .where(Trip.user_id == user_id, Trip.is_active == True)
            .order_by(Trip.created_at.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def deactivate_all(self, db: AsyncSession, user_id: uuid.UUID):
        await db.execute(
            update(Trip).where(Trip.user_id == user_id, Trip.is_active == True).values(is_active=False)
        )

    async def activate(self, db: AsyncSession, trip: Trip) -> Trip:
        """Make ``trip`` the user's only active trip. Caller commits."""
        await self.deactivate_all(db, trip.user_id)
        trip.is_active = True
        logger.info(f"Trip {trip.id} activated for user {trip.user_id}")
        return trip

    @staticmethod
    def to_trip_details(trip: Trip) -> TripDetails:
        return TripDetails(
            destination=trip.destination,
            start_date=trip.start_date,
            end_date=trip.end_date,
            travel_group=trip.travel_group,
            accommodation=trip.accommodation,
            safety_sensitivity=trip.safety_sensitivity,
            comfort_level=trip.comfort_level,
            activity_intensity=trip.activity_intensity,
        )

    @staticmethod
    def preferences_for(user: User) -> UserPreferences:
        return UserPreferences(
            gender=user.gender,
            clothing_size=user.clothing_size,
            dietary_preference=user.dietary_preference or "none",
            travel_style=user.travel_style or "relaxed",
            social_intent=user.social_intent or "casual",
            language_preference=user.language_preference or "english",
        )


trip_service = TripService()
