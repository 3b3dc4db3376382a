"""Experience rule groups: time-of-day activities plus destination highlights."""

from roamster.services.recommendation.config import SOCIAL_GROUPS
from roamster.services.recommendation.domain import ExperienceItem
from roamster.services.recommendation.rules import DestinationTable, RuleGroup

ALL_GROUPS = ("solo", "couple", "family", "kids", "elderly")

MORNING = (
    ExperienceItem(
        id="morning-1",
        name="Sunrise Viewpoint",
        category="viewpoint",
        description="Best light for photography, less crowd",
        time_of_day="morning",
        duration="1-2 hours",
        walking_intensity="low",
        crowd_level="low",
        safety_level="high",
        requires_night_travel=False,
        suitable_for=ALL_GROUPS,
        price_range="Free - ₹500",
        best_for="Photography, peaceful experience",
    ),
    ExperienceItem(
        id="morning-2",
        name="Local Market Visit",
        category="cultural",
        description="Experience local life and culture",
        time_of_day="morning",
        duration="2-3 hours",
        walking_intensity="moderate",
        crowd_level="medium",
        safety_level="high",
        requires_night_travel=False,
        suitable_for=("solo", "couple", "family"),
        price_range="Free",
        best_for="Cultural immersion, shopping",
    ),
)

AFTERNOON = (
    ExperienceItem(
        id="afternoon-1",
        name="Museum or Gallery",
        category="cultural",
        description="Indoor activity, escape the heat",
        time_of_day="afternoon",
        duration="2-4 hours",
        walking_intensity="low",
        crowd_level="medium",
        safety_level="high",
        requires_night_travel=False,
        suitable_for=ALL_GROUPS,
        price_range="₹100-500",
        best_for="Learning, comfort, family-friendly",
    ),
)

EVENING = (
    ExperienceItem(
        id="evening-1",
        name="Sunset Point",
        category="viewpoint",
        description="Golden hour photography",
        time_of_day="evening",
        duration="1-2 hours",
        walking_intensity="low",
        crowd_level="medium",
        safety_level="high",
        requires_night_travel=False,
        suitable_for=ALL_GROUPS,
        price_range="Free - ₹300",
        best_for="Photography, romantic experience",
    ),
    ExperienceItem(
        id="evening-2",
        name="Cultural Show or Performance",
        category="entertainment",
        description="Local dance, music, or theater",
        time_of_day="evening",
        duration="2-3 hours",
        walking_intensity="low",
        crowd_level="medium",
        safety_level="high",
        requires_night_travel=False,
        suitable_for=ALL_GROUPS,
        price_range="₹300-1000",
        best_for="Cultural experience, seated activity",
    ),
)

NIGHTLIFE = (
    ExperienceItem(
        id="night-1",
        name="Night Market or Nightlife",
        category="entertainment",
        description="Explore night scene (safe areas only)",
        time_of_day="night",
        duration="2-4 hours",
        walking_intensity="moderate",
        crowd_level="high",
        safety_level="medium",
        requires_night_travel=True,
        suitable_for=("solo", "couple"),
        price_range="₹500-2000",
        best_for="Social experience, nightlife",
    ),
)

DESTINATION_EXPERIENCES: dict[str, tuple[ExperienceItem, ...]] = {
    "mumbai": (
        ExperienceItem(
            id="mumbai-exp-1",
            name="Marine Drive Walk",
            category="walking",
            description="Scenic waterfront promenade",
            time_of_day="any",
            duration="1-2 hours",
            walking_intensity="low",
            crowd_level="medium",
            safety_level="high",
            requires_night_travel=False,
            suitable_for=ALL_GROUPS,
            price_range="Free",
            best_for="Relaxation, views",
        ),
        ExperienceItem(
            id="mumbai-exp-2",
            name="Elephanta Caves",
            category="historical",
            description="Ancient cave temples (requires ferry)",
            time_of_day="day",
            duration="4-5 hours",
            walking_intensity="high",
            crowd_level="high",
            safety_level="high",
            requires_night_travel=False,
            suitable_for=("solo", "couple", "family"),
            price_range="₹500-1000",
            best_for="History, photography",
        ),
    ),
    "goa": (
        ExperienceItem(
            id="goa-exp-1",
            name="Beach Relaxation",
            category="leisure",
            description="Relax on beautiful beaches",
            time_of_day="any",
            duration="2-4 hours",
            walking_intensity="low",
            crowd_level="medium",
            safety_level="high",
            requires_night_travel=False,
            suitable_for=ALL_GROUPS,
            price_range="Free",
            best_for="Relaxation, family time",
        ),
    ),
    "delhi": (
        ExperienceItem(
            id="delhi-exp-1",
            name="Red Fort",
            category="historical",
            description="UNESCO World Heritage Site",
            time_of_day="day",
            duration="2-3 hours",
            walking_intensity="moderate",
            crowd_level="high",
            safety_level="high",
            requires_night_travel=False,
            suitable_for=ALL_GROUPS,
            price_range="₹500-800",
            best_for="History, photography",
        ),
    ),
}

EXPERIENCE_RULE_GROUPS = (
    RuleGroup(name="morning", when=lambda c: c.time_of_day == "morning", items=MORNING),
    RuleGroup(name="afternoon", when=lambda c: c.time_of_day == "afternoon", items=AFTERNOON),
    RuleGroup(name="evening", when=lambda c: c.time_of_day == "evening", items=EVENING),
    RuleGroup(
        name="nightlife",
        when=lambda c: c.time_of_day == "night" and c.travel_group in SOCIAL_GROUPS,
        items=NIGHTLIFE,
    ),
    DestinationTable(name="destination-highlights", entries=DESTINATION_EXPERIENCES),
)

EXPERIENCE_WARNING_RULES = (
    RuleGroup(
        name="warn:night-cautious",
        when=lambda c: c.time_of_day == "night" and c.travel_group in ("kids", "elderly"),
        items=("Night experiences are limited for your travel group. Consider daytime alternatives.",),
    ),
    RuleGroup(
        name="warn:elderly-walking",
        when=lambda c: c.travel_group == "elderly",
        items=("Avoiding high walking intensity experiences. Prioritizing seated and accessible options.",),
    ),
)
