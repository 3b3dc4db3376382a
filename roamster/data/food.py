"""Food rule groups: time-of-day meals plus local cuisine per destination."""

from dataclasses import replace

from roamster.services.recommendation.domain import FoodItem
from roamster.services.recommendation.rules import DestinationTable, RuleGroup

ALL_GROUPS = ("solo", "couple", "family", "kids", "elderly")

BREAKFAST = (
    FoodItem(
        id="breakfast-1",
        name="Local Breakfast Special",
        category="breakfast",
        description="Authentic morning meal",
        spice_level="low",
        hygiene_level="high",
        suitable_for=ALL_GROUPS,
        kid_friendly=True,
        elderly_friendly=True,
        price_range="₹100-300",
        location="Local cafes",
    ),
)

LUNCH = (
    FoodItem(
        id="lunch-1",
        name="Traditional Lunch",
        category="lunch",
        description="Hearty local cuisine",
        spice_level="medium",
        hygiene_level="high",
        suitable_for=("solo", "couple", "family"),
        kid_friendly=True,
        elderly_friendly=True,
        price_range="₹200-500",
        location="Restaurants",
    ),
)

EVENING_SNACKS = (
    FoodItem(
        id="snacks-1",
        name="Street Food Delights",
        category="snacks",
        description="Local street food (if safe)",
        spice_level="medium",
        hygiene_level="high",
        suitable_for=("solo", "couple", "family"),
        kid_friendly=True,
        elderly_friendly=False,
        price_range="₹50-200",
        location="Street vendors",
    ),
)


def _street_food_for_group(context, item: FoodItem) -> FoodItem:
    # Street stalls are rated down when travelling with kids
    if context.travel_group == "kids":
        return replace(item, hygiene_level="medium", kid_friendly=False)
    return item


LOCAL_CUISINE: dict[str, tuple[FoodItem, ...]] = {
    "mumbai": (
        FoodItem(
            id="mumbai-1",
            name="Vada Pav",
            category="snacks",
            description="Mumbai's iconic street food",
            spice_level="medium",
            hygiene_level="medium",
            suitable_for=("solo", "couple", "family"),
            kid_friendly=True,
            elderly_friendly=True,
            price_range="₹20-50",
            location="Street vendors",
        ),
        FoodItem(
            id="mumbai-2",
            name="Pav Bhaji",
            category="main",
            description="Spicy vegetable curry with bread",
            spice_level="high",
            hygiene_level="high",
            suitable_for=("solo", "couple", "family"),
            kid_friendly=False,
            elderly_friendly=False,
            price_range="₹100-200",
            location="Restaurants",
        ),
    ),
    "goa": (
        FoodItem(
            id="goa-1",
            name="Fish Curry Rice",
            category="main",
            description="Traditional Goan seafood",
            spice_level="high",
            hygiene_level="high",
            suitable_for=("solo", "couple"),
            kid_friendly=False,
            elderly_friendly=False,
            price_range="₹300-600",
            location="Beach shacks",
            diet="non-vegetarian",
        ),
    ),
    "delhi": (
        FoodItem(
            id="delhi-1",
            name="Chole Bhature",
            category="main",
            description="Spicy chickpeas with fried bread",
            spice_level="medium",
            hygiene_level="high",
            suitable_for=("solo", "couple", "family"),
            kid_friendly=True,
            elderly_friendly=True,
            price_range="₹150-300",
            location="Restaurants",
        ),
    ),
}

FOOD_RULE_GROUPS = (
    RuleGroup(name="breakfast", when=lambda c: c.time_of_day == "morning", items=BREAKFAST),
    RuleGroup(name="lunch", when=lambda c: c.time_of_day == "afternoon", items=LUNCH),
    RuleGroup(
        name="evening-snacks",
        when=lambda c: c.time_of_day == "evening",
        items=EVENING_SNACKS,
        adjust=_street_food_for_group,
    ),
    DestinationTable(name="local-cuisine", entries=LOCAL_CUISINE),
)

FOOD_WARNING_RULES = (
    RuleGroup(
        name="warn:kids",
        when=lambda c: c.travel_group == "kids",
        items=("Avoid street food and high spice levels for kids",),
    ),
    RuleGroup(
        name="warn:elderly",
        when=lambda c: c.travel_group == "elderly",
        items=("Prioritize easily digestible food and avoid extreme spices",),
    ),
    RuleGroup(
        name="warn:plant-based",
        when=lambda c: c.dietary_preference in ("vegetarian", "vegan"),
        items=("Some local cuisines may contain non-vegetarian ingredients - verify before ordering",),
    ),
)
