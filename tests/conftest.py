import os
import tempfile

# Configure before any roamster import reads settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["WEATHER_API_KEY"] = ""
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="roamster-logs-"))

from datetime import date

import pytest

from roamster.data.weather import static_weather_lookup
from roamster.services.recommendation.context_builder import ContextBuilder, fixed_clock, fixed_weather
from roamster.services.recommendation.domain import TripDetails, UserPreferences, WeatherSnapshot


@pytest.fixture
def make_trip():
    def _make(**overrides) -> TripDetails:
        values = {
            "destination": "Mumbai",
            "start_date": date(2024, 4, 10),
            "end_date": date(2024, 4, 15),
            "travel_group": "solo",
        }
        values.update(overrides)
        return TripDetails(**values)
    return _make


@pytest.fixture
def make_context(make_trip):
    """Context at a fixed hour, with the static table or an explicit weather snapshot."""
    def _make(hour: int = 10, weather: WeatherSnapshot | None = None,
              preferences: UserPreferences | None = None, **trip_overrides):
        lookup = static_weather_lookup if weather is None else fixed_weather(weather)
        builder = ContextBuilder(weather_lookup=lookup, clock=fixed_clock(hour))
        return builder.build(make_trip(**trip_overrides), preferences)
    return _make
