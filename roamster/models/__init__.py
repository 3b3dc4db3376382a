from roamster.models.user import User
from roamster.models.trip import Trip
from roamster.models.notification import Notification

__all__ = [
    "Notification",
    "Trip",
    "User",
]
