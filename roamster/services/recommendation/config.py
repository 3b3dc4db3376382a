"""Recommendation engine configuration: single source for all thresholds."""

from dataclasses import dataclass, field


TRAVEL_GROUPS: tuple[str, ...] = ("solo", "couple", "family", "kids", "elderly")
ACCOMMODATIONS: tuple[str, ...] = ("hotel", "hostel", "airbnb")
SAFETY_LEVELS: tuple[str, ...] = ("normal", "high")
COMFORT_LEVELS: tuple[str, ...] = ("basic", "moderate", "premium")
ACTIVITY_INTENSITIES: tuple[str, ...] = ("low", "moderate", "high")
DIETARY_PREFERENCES: tuple[str, ...] = ("vegetarian", "non-vegetarian", "vegan", "none")

# Groups that get the cautious summaries and the stricter filters
CAUTIOUS_GROUPS: frozenset[str] = frozenset({"kids", "elderly"})
SOCIAL_GROUPS: frozenset[str] = frozenset({"solo", "couple"})


@dataclass(frozen=True)
class SeasonBuckets:
    """Calendar months (1-12) per season. Not hemisphere-aware."""
    spring: tuple[int, ...] = (3, 4, 5)
    summer: tuple[int, ...] = (6, 7, 8)
    autumn: tuple[int, ...] = (9, 10, 11)

    def season_for(self, month: int) -> str:
        if month in self.spring:
            return "spring"
        if month in self.summer:
            return "summer"
        if month in self.autumn:
            return "autumn"
        return "winter"


@dataclass(frozen=True)
class TimeOfDayBoundaries:
    """Half-open hour ranges [start, end) for each time-of-day bucket."""
    morning_start: int = 5
    afternoon_start: int = 12
    evening_start: int = 17
    night_start: int = 21

    def bucket_for(self, hour: int) -> str:
        if self.morning_start <= hour < self.afternoon_start:
            return "morning"
        if self.afternoon_start <= hour < self.evening_start:
            return "afternoon"
        if self.evening_start <= hour < self.night_start:
            return "evening"
        return "night"


@dataclass(frozen=True)
class WeatherThresholds:
    """Temperature triggers (Celsius) for clothing rules and warnings."""
    warm_above: float = 25.0          # strictly above -> warm-weather items
    cold_below: float = 15.0          # strictly below -> cold-weather items
    elderly_heat_above: float = 30.0  # strictly above -> breathability warning
    default_temperature: float = 25.0
    default_condition: str = "sunny"
    default_humidity: int = 70


@dataclass(frozen=True)
class ContextDefaults:
    """Values used when neither the trip nor the travel-group tables supply one."""
    safety_level: str = "normal"
    comfort_level: str = "moderate"
    activity_intensity: str = "moderate"
    dietary_preference: str = "none"


@dataclass(frozen=True)
class RecommendationConfig:
    """Top-level config aggregating all sub-configs."""
    seasons: SeasonBuckets = field(default_factory=SeasonBuckets)
    time_of_day: TimeOfDayBoundaries = field(default_factory=TimeOfDayBoundaries)
    weather: WeatherThresholds = field(default_factory=WeatherThresholds)
    defaults: ContextDefaults = field(default_factory=ContextDefaults)
    max_workers: int = 4


# Singleton; import this everywhere
recommendation_config = RecommendationConfig()
