"""Notification service: persists the advisory notices derived for a trip."""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from roamster.models.notification import Notification
from roamster.services.recommendation.domain import Notification as Notice

logger = logging.getLogger(__name__)


class NotificationService:
    """Stores derived notices as in-app notifications."""

    async def store_notices(
        self, db: AsyncSession, user_id: uuid.UUID, trip_id: uuid.UUID | None, notices,
    ) -> list[Notification]:
        created = [
            await self._create(db, user_id=user_id, trip_id=trip_id, notice=notice)
            for notice in notices
        ]
        await db.commit()
        for notification in created:
            await db.refresh(notification)
        logger.info(f"Stored {len(created)} notifications for user {user_id}")
        return created

    async def _create(
        self, db: AsyncSession, user_id: uuid.UUID, trip_id: uuid.UUID | None, notice: Notice,
    ) -> Notification:
        notification = Notification(
            user_id=user_id,
            trip_id=trip_id,
            type=notice.type,
            title=notice.title,
            message=notice.message,
            priority=notice.priority,
        )
        db.add(notification)
        return notification


notification_service = NotificationService()
