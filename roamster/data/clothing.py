"""Clothing rule groups: season/weather thresholds, footwear and evening extras."""

from roamster.services.recommendation.config import (
    CAUTIOUS_GROUPS,
    SOCIAL_GROUPS,
    recommendation_config,
)
from roamster.services.recommendation.domain import ClothingItem
from roamster.services.recommendation.rules import (
    RuleGroup,
    condition_is,
    temperature_above,
    temperature_below,
)

_weather = recommendation_config.weather

WARM_WEATHER_ITEMS = (
    ClothingItem(
        id="summer-1",
        name="Light Cotton T-Shirt",
        category="top",
        description="Breathable cotton for hot weather",
        suitable_for=("solo", "couple", "family"),
        rent_price=200,
        buy_price=800,
        kid_friendly=True,
        comfortable=True,
    ),
    ClothingItem(
        id="summer-2",
        name="Linen Shirt",
        category="top",
        description="Elegant and breathable",
        suitable_for=("solo", "couple"),
        rent_price=300,
        buy_price=1200,
        kid_friendly=False,
        comfortable=True,
    ),
    ClothingItem(
        id="summer-3",
        name="Shorts / Capris",
        category="bottom",
        description="Comfortable for walking",
        suitable_for=("solo", "couple", "family", "kids"),
        rent_price=250,
        buy_price=1000,
        kid_friendly=True,
        comfortable=True,
    ),
)

COLD_WEATHER_ITEMS = (
    ClothingItem(
        id="winter-1",
        name="Warm Sweater",
        category="top",
        description="Cozy and warm",
        suitable_for=("solo", "couple", "family", "elderly"),
        rent_price=400,
        buy_price=1500,
        kid_friendly=True,
        comfortable=True,
    ),
    ClothingItem(
        id="winter-2",
        name="Layered Jacket",
        category="outerwear",
        description="Perfect for variable temperatures",
        suitable_for=("solo", "couple", "family", "elderly"),
        rent_price=500,
        buy_price=2500,
        kid_friendly=True,
        comfortable=True,
    ),
)

RAIN_GEAR = (
    ClothingItem(
        id="rain-1",
        name="Waterproof Jacket",
        category="outerwear",
        description="Stay dry in rain",
        suitable_for=("solo", "couple", "family", "kids", "elderly"),
        rent_price=350,
        buy_price=1800,
        kid_friendly=True,
        comfortable=True,
    ),
)

SUPPORTIVE_FOOTWEAR = (
    ClothingItem(
        id="footwear-1",
        name="Comfortable Walking Shoes",
        category="footwear",
        description="Supportive and non-slip",
        suitable_for=("family", "kids", "elderly"),
        rent_price=400,
        buy_price=2000,
        kid_friendly=True,
        comfortable=True,
    ),
)

STYLISH_FOOTWEAR = (
    ClothingItem(
        id="footwear-2",
        name="Stylish Sneakers",
        category="footwear",
        description="Fashion-forward and comfortable",
        suitable_for=("solo", "couple"),
        rent_price=500,
        buy_price=3000,
        kid_friendly=False,
        comfortable=True,
    ),
)

EVENING_WEAR = (
    ClothingItem(
        id="evening-1",
        name="Smart Casual Outfit",
        category="outfit",
        description="Perfect for evening experiences",
        suitable_for=("solo", "couple"),
        rent_price=600,
        buy_price=3500,
        kid_friendly=False,
        comfortable=True,
    ),
)

CLOTHING_RULE_GROUPS = (
    RuleGroup(
        name="warm-weather",
        when=lambda c: c.season == "summer" or temperature_above(c, _weather.warm_above),
        items=WARM_WEATHER_ITEMS,
    ),
    RuleGroup(
        name="cold-weather",
        when=lambda c: c.season == "winter" or temperature_below(c, _weather.cold_below),
        items=COLD_WEATHER_ITEMS,
    ),
    RuleGroup(
        name="rain",
        when=lambda c: condition_is(c, "rain"),
        items=RAIN_GEAR,
    ),
    RuleGroup(
        name="footwear:supportive",
        when=lambda c: c.travel_group in CAUTIOUS_GROUPS,
        items=SUPPORTIVE_FOOTWEAR,
    ),
    RuleGroup(
        name="footwear:stylish",
        when=lambda c: c.travel_group not in CAUTIOUS_GROUPS,
        items=STYLISH_FOOTWEAR,
    ),
    RuleGroup(
        name="evening-social",
        when=lambda c: c.travel_group in SOCIAL_GROUPS and c.time_of_day in ("evening", "night"),
        items=EVENING_WEAR,
    ),
)

CLOTHING_WARNING_RULES = (
    RuleGroup(
        name="warn:rain-kids",
        when=lambda c: condition_is(c, "rain") and c.travel_group == "kids",
        items=("Ensure waterproof clothing for kids to prevent illness",),
    ),
    RuleGroup(
        name="warn:heat-elderly",
        when=lambda c: c.travel_group == "elderly" and temperature_above(c, _weather.elderly_heat_above),
        items=("High temperature - ensure light, breathable clothing",),
    ),
)
