"""Context builder: derives the situational context for one recommendation pass."""

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable

from roamster.data.travel_groups import (
    ACTIVITY_INTENSITY_BY_GROUP,
    CROWD_BY_TIME_OF_DAY,
    SAFETY_BY_GROUP,
)
from roamster.data.weather import DEFAULT_WEATHER, static_weather_lookup
from roamster.services.recommendation.config import (
    ACCOMMODATIONS,
    ACTIVITY_INTENSITIES,
    COMFORT_LEVELS,
    DIETARY_PREFERENCES,
    SAFETY_LEVELS,
    TRAVEL_GROUPS,
    RecommendationConfig,
    recommendation_config,
)
from roamster.services.recommendation.domain import (
    RecommendationContext,
    TripDetails,
    UserPreferences,
    WeatherSnapshot,
)
from roamster.services.recommendation.errors import InvalidTripError

logger = logging.getLogger(__name__)

Clock = Callable[[], int]
WeatherLookup = Callable[[str], WeatherSnapshot]


def system_clock() -> int:
    """Current local hour (0-23)."""
    return datetime.now().hour


def fixed_clock(hour: int) -> Clock:
    return lambda: hour


def fixed_weather(snapshot: WeatherSnapshot) -> WeatherLookup:
    """Lookup that ignores the destination; used once a snapshot is already resolved."""
    return lambda destination: snapshot


# ---------- Pure derivations ----------

def get_season(value: date, config: RecommendationConfig = recommendation_config) -> str:
    """Calendar season of ``value``'s month (northern-hemisphere buckets only)."""
    return config.seasons.season_for(value.month)


def get_time_of_day(hour: int, config: RecommendationConfig = recommendation_config) -> str:
    if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
        raise InvalidTripError(f"Hour must be an integer in 0-23, got {hour!r}", field="hour")
    return config.time_of_day.bucket_for(hour)


def get_crowd_level(time_of_day: str) -> str:
    return CROWD_BY_TIME_OF_DAY.get(time_of_day, "medium")


def get_safety_level(travel_group: str, safety_sensitivity: str | None = None) -> str:
    """Group default, raised to ``high`` when the trip asks for it."""
    derived = SAFETY_BY_GROUP.get(travel_group, recommendation_config.defaults.safety_level)
    if safety_sensitivity == "high":
        return "high"
    return derived


def get_activity_intensity(travel_group: str, trip_value: str | None = None) -> str:
    """An explicit trip value wins over the group default."""
    if trip_value:
        return trip_value
    return ACTIVITY_INTENSITY_BY_GROUP.get(travel_group, recommendation_config.defaults.activity_intensity)


# ---------- Input validation ----------

def _coerce_date(value, field: str) -> date:
    if value is None:
        raise InvalidTripError(f"{field} is required", field=field)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            raise InvalidTripError(f"{field} is not an ISO date: {value!r}", field=field)
    raise InvalidTripError(f"{field} must be a date, got {type(value).__name__}", field=field)


def _check_choice(value, choices: tuple[str, ...], field: str, required: bool = False):
    if value is None:
        if required:
            raise InvalidTripError(f"{field} is required", field=field)
        return
    if value not in choices:
        raise InvalidTripError(
            f"{field} must be one of {', '.join(choices)}; got {value!r}", field=field,
        )


def validate_trip(trip: TripDetails) -> TripDetails:
    """Reject caller-contract violations; returns the trip with dates normalized."""
    if not isinstance(trip.destination, str) or not trip.destination.strip():
        raise InvalidTripError("Destination is required", field="destination")

    start = _coerce_date(trip.start_date, "start_date")
    end = _coerce_date(trip.end_date, "end_date")
    if end <= start:
        raise InvalidTripError("End date must be after start date", field="end_date")

    _check_choice(trip.travel_group, TRAVEL_GROUPS, "travel_group", required=True)
    _check_choice(trip.accommodation, ACCOMMODATIONS, "accommodation")
    _check_choice(trip.safety_sensitivity, SAFETY_LEVELS, "safety_sensitivity")
    _check_choice(trip.comfort_level, COMFORT_LEVELS, "comfort_level")
    _check_choice(trip.activity_intensity, ACTIVITY_INTENSITIES, "activity_intensity")

    if start is trip.start_date and end is trip.end_date:
        return trip
    return replace(trip, start_date=start, end_date=end)


def _dietary_preference(preferences: UserPreferences, config: RecommendationConfig) -> str:
    fallback = config.defaults.dietary_preference
    value = preferences.dietary_preference or fallback
    if value not in DIETARY_PREFERENCES:
        logger.warning(f"Unknown dietary preference {value!r}, treating as {fallback!r}")
        return fallback
    return value


# ---------- Builder ----------

class ContextBuilder:
    """Builds a ``RecommendationContext`` from a trip, a clock and a weather lookup.

    Deterministic for fixed inputs. The weather lookup is advisory: if it raises or
    returns nothing, the default snapshot is used.
    """

    def __init__(
        self,
        weather_lookup: WeatherLookup = static_weather_lookup,
        clock: Clock = system_clock,
        config: RecommendationConfig = recommendation_config,
    ):
        self.weather_lookup = weather_lookup
        self.clock = clock
        self.config = config

    def build(
        self,
        trip: TripDetails,
        preferences: UserPreferences | None = None,
    ) -> RecommendationContext:
        trip = validate_trip(trip)
        preferences = preferences or UserPreferences()
        time_of_day = get_time_of_day(self.clock(), self.config)

        return RecommendationContext(
            destination=trip.destination,
            start_date=trip.start_date,
            end_date=trip.end_date,
            season=get_season(trip.start_date, self.config),
            weather=self._weather_for(trip.destination),
            time_of_day=time_of_day,
            crowd_level=get_crowd_level(time_of_day),
            travel_group=trip.travel_group,
            accommodation=trip.accommodation,
            safety_level=get_safety_level(trip.travel_group, trip.safety_sensitivity),
            comfort_level=trip.comfort_level or self.config.defaults.comfort_level,
            activity_intensity=get_activity_intensity(trip.travel_group, trip.activity_intensity),
            dietary_preference=_dietary_preference(preferences, self.config),
            gender=preferences.gender,
            clothing_size=preferences.clothing_size,
        )

    def _weather_for(self, destination: str) -> WeatherSnapshot:
        try:
            snapshot = self.weather_lookup(destination)
        except Exception as e:
            logger.warning(f"Weather lookup failed for {destination!r}, using default: {e}")
            return DEFAULT_WEATHER
        return snapshot or DEFAULT_WEATHER


def build_context(
    trip: TripDetails,
    preferences: UserPreferences | None = None,
    clock: Clock = system_clock,
    weather_lookup: WeatherLookup = static_weather_lookup,
) -> RecommendationContext:
    """Functional shortcut for ``ContextBuilder(weather_lookup, clock).build(...)``."""
    return ContextBuilder(weather_lookup=weather_lookup, clock=clock).build(trip, preferences)
