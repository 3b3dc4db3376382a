"""Static weather snapshots per destination.

Stands in for a live provider when no weather API key is configured, and is the
fallback whenever the live provider fails.
"""

import logging

from roamster.services.recommendation.config import recommendation_config
from roamster.services.recommendation.domain import WeatherSnapshot

logger = logging.getLogger(__name__)

WEATHER_SNAPSHOTS: dict[str, WeatherSnapshot] = {
    "mumbai": WeatherSnapshot(temperature=28, condition="sunny", humidity=75),
    "delhi": WeatherSnapshot(temperature=32, condition="sunny", humidity=60),
    "goa": WeatherSnapshot(temperature=30, condition="partly-cloudy", humidity=80),
    "bangalore": WeatherSnapshot(temperature=26, condition="rain", humidity=85),
    "kerala": WeatherSnapshot(temperature=27, condition="rain", humidity=90),
}

_thresholds = recommendation_config.weather
DEFAULT_WEATHER = WeatherSnapshot(
    temperature=_thresholds.default_temperature,
    condition=_thresholds.default_condition,
    humidity=_thresholds.default_humidity,
)


def static_weather_lookup(destination: str) -> WeatherSnapshot:
    """Case-insensitive lookup; unknown or unusable names get ``DEFAULT_WEATHER``."""
    if not isinstance(destination, str):
        return DEFAULT_WEATHER
    snapshot = WEATHER_SNAPSHOTS.get(destination.strip().lower())
    if snapshot is None:
        logger.debug(f"No weather entry for {destination!r}, using default snapshot")
        return DEFAULT_WEATHER
    return snapshot
