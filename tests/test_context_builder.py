from dataclasses import replace
from datetime import date, datetime

import pytest

from roamster.data.weather import DEFAULT_WEATHER, static_weather_lookup
from roamster.services.recommendation.context_builder import (
    ContextBuilder,
    build_context,
    fixed_clock,
    get_activity_intensity,
    get_crowd_level,
    get_safety_level,
    get_season,
    get_time_of_day,
    validate_trip,
)
from roamster.services.recommendation.domain import UserPreferences, WeatherSnapshot
from roamster.services.recommendation.errors import InvalidTripError, RecommendationError


@pytest.mark.parametrize("month,season", [
    (1, "winter"), (2, "winter"), (3, "spring"), (4, "spring"), (5, "spring"),
    (6, "summer"), (7, "summer"), (8, "summer"), (9, "autumn"), (10, "autumn"),
    (11, "autumn"), (12, "winter"),
])
def test_season_covers_every_month(month, season):
    assert get_season(date(2024, month, 1)) == season


@pytest.mark.parametrize("hour,bucket", [
    (0, "night"), (4, "night"), (5, "morning"), (11, "morning"), (12, "afternoon"),
    (16, "afternoon"), (17, "evening"), (20, "evening"), (21, "night"), (23, "night"),
])
def test_time_of_day_boundaries(hour, bucket):
    assert get_time_of_day(hour) == bucket


@pytest.mark.parametrize("hour", [-1, 24, "5", 5.0, True, None])
def test_time_of_day_rejects_bad_hours(hour):
    with pytest.raises(InvalidTripError):
        get_time_of_day(hour)


def test_crowd_level_follows_time_of_day():
    assert get_crowd_level("morning") == "low"
    assert get_crowd_level("afternoon") == "high"
    assert get_crowd_level("evening") == "medium"
    assert get_crowd_level("night") == "low"


def test_static_weather_is_case_insensitive():
    assert static_weather_lookup("  GOA ") == WeatherSnapshot(temperature=30, condition="partly-cloudy", humidity=80)
    assert static_weather_lookup("bangalore").condition == "rain"


def test_unknown_destination_gets_default_weather():
    assert static_weather_lookup("Atlantis") == DEFAULT_WEATHER
    assert DEFAULT_WEATHER == WeatherSnapshot(temperature=25.0, condition="sunny", humidity=70)
    assert static_weather_lookup(None) == DEFAULT_WEATHER


def test_safety_level_by_group_and_sensitivity():
    assert get_safety_level("kids") == "high"
    assert get_safety_level("elderly") == "high"
    assert get_safety_level("solo") == "normal"
    assert get_safety_level("solo", "high") == "high"
    assert get_safety_level("kids", "normal") == "high"


def test_trip_activity_intensity_wins_over_group_default():
    assert get_activity_intensity("solo") == "high"
    assert get_activity_intensity("kids") == "low"
    assert get_activity_intensity("kids", "high") == "high"


def test_build_derives_full_context(make_context):
    ctx = make_context(hour=8, destination="Goa", travel_group="kids",
                       start_date=date(2024, 7, 10), end_date=date(2024, 7, 15))
    assert ctx.season == "summer"
    assert ctx.weather == WeatherSnapshot(temperature=30, condition="partly-cloudy", humidity=80)
    assert ctx.time_of_day == "morning"
    assert ctx.crowd_level == "low"
    assert ctx.safety_level == "high"
    assert ctx.activity_intensity == "low"
    assert ctx.comfort_level == "moderate"
    assert ctx.dietary_preference == "none"
    assert ctx.city_key == "goa"


def test_build_is_deterministic(make_trip):
    builder = ContextBuilder(clock=fixed_clock(14))
    trip = make_trip(destination="Delhi")
    assert builder.build(trip) == builder.build(trip)


def test_trip_values_carried_into_context(make_context):
    ctx = make_context(comfort_level="premium", activity_intensity="low", accommodation="hostel",
                       preferences=UserPreferences(gender="Female", clothing_size="M",
                                                   dietary_preference="vegan"))
    assert ctx.comfort_level == "premium"
    assert ctx.activity_intensity == "low"
    assert ctx.accommodation == "hostel"
    assert ctx.gender == "Female"
    assert ctx.clothing_size == "M"
    assert ctx.dietary_preference == "vegan"


def test_unknown_dietary_preference_treated_as_none(make_context):
    ctx = make_context(preferences=UserPreferences(dietary_preference="keto"))
    assert ctx.dietary_preference == "none"


def test_failing_weather_lookup_falls_back_to_default(make_trip):
    def broken(destination):
        raise RuntimeError("provider down")

    ctx = ContextBuilder(weather_lookup=broken, clock=fixed_clock(10)).build(make_trip())
    assert ctx.weather == DEFAULT_WEATHER

    ctx = ContextBuilder(weather_lookup=lambda d: None, clock=fixed_clock(10)).build(make_trip())
    assert ctx.weather == DEFAULT_WEATHER


def test_end_date_must_follow_start_date(make_trip):
    with pytest.raises(InvalidTripError) as exc:
        validate_trip(make_trip(start_date=date(2024, 5, 1), end_date=date(2024, 5, 1)))
    assert exc.value.field == "end_date"

    with pytest.raises(InvalidTripError):
        validate_trip(make_trip(start_date=date(2024, 5, 2), end_date=date(2024, 5, 1)))


@pytest.mark.parametrize("overrides,field", [
    ({"destination": "   "}, "destination"),
    ({"destination": None}, "destination"),
    ({"travel_group": None}, "travel_group"),
    ({"travel_group": "friends"}, "travel_group"),
    ({"accommodation": "tent"}, "accommodation"),
    ({"safety_sensitivity": "extreme"}, "safety_sensitivity"),
    ({"comfort_level": "luxury"}, "comfort_level"),
    ({"activity_intensity": "extreme"}, "activity_intensity"),
    ({"start_date": None}, "start_date"),
    ({"end_date": "not-a-date"}, "end_date"),
])
def test_invalid_trips_are_rejected(make_trip, overrides, field):
    with pytest.raises(InvalidTripError) as exc:
        validate_trip(make_trip(**overrides))
    assert exc.value.field == field


def test_invalid_trip_error_is_a_value_error():
    assert issubclass(InvalidTripError, ValueError)
    assert issubclass(InvalidTripError, RecommendationError)


def test_dates_are_normalized(make_trip):
    trip = validate_trip(make_trip(start_date="2024-07-10", end_date=datetime(2024, 7, 15, 9, 30)))
    assert trip.start_date == date(2024, 7, 10)
    assert trip.end_date == date(2024, 7, 15)

    untouched = make_trip()
    assert validate_trip(untouched) is untouched


def test_bad_clock_reading_is_rejected(make_trip):
    with pytest.raises(InvalidTripError):
        build_context(make_trip(), clock=fixed_clock(25))


def test_context_to_dict_is_json_ready(make_context):
    data = make_context(destination="Goa").to_dict()
    assert data["start_date"] == "2024-04-10"
    assert data["weather"] == {"temperature": 30, "condition": "partly-cloudy", "humidity": 80}


def test_replace_keeps_context_frozen(make_context):
    ctx = make_context()
    with pytest.raises(AttributeError):
        ctx.season = "winter"
    assert replace(ctx, weather=None).weather is None
