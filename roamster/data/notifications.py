"""Advisory notices derived from time-of-day, travel group and weather.

Evaluated in order; every rule that holds contributes its notice.
"""

from roamster.services.recommendation.config import CAUTIOUS_GROUPS, SOCIAL_GROUPS
from roamster.services.recommendation.domain import Notification
from roamster.services.recommendation.rules import RuleGroup, condition_is

BEST_PHOTO_TIME = Notification(
    type="photo",
    title="Best Photo Time Now",
    message="Soft natural light perfect for photos. Safe & crowd-free.",
    priority="high",
)

RAIN_EXPECTED = Notification(
    type="weather",
    title="Rain Expected",
    message="Consider waterproof clothing and indoor activities.",
    priority="medium",
)

EVENING_EXPERIENCE = Notification(
    type="experience",
    title="Evening Experience",
    message="Perfect time for cafes, culture, and golden hour photos.",
    priority="medium",
)

NIGHT_TRAVEL_NOTICE = Notification(
    type="safety",
    title="Night Travel Notice",
    message="Night experiences are limited for your travel group. Consider daytime alternatives.",
    priority="high",
)

NOTIFICATION_RULES = (
    RuleGroup(
        name="notice:best-photo-time",
        when=lambda c: c.time_of_day == "morning" and c.travel_group != "elderly",
        items=(BEST_PHOTO_TIME,),
    ),
    RuleGroup(
        name="notice:rain",
        when=lambda c: condition_is(c, "rain"),
        items=(RAIN_EXPECTED,),
    ),
    RuleGroup(
        name="notice:evening-experience",
        when=lambda c: c.time_of_day == "evening" and c.travel_group in SOCIAL_GROUPS,
        items=(EVENING_EXPERIENCE,),
    ),
    RuleGroup(
        name="notice:night-safety",
        when=lambda c: c.time_of_day == "night" and c.travel_group in CAUTIOUS_GROUPS,
        items=(NIGHT_TRAVEL_NOTICE,),
    ),
)
