"""Data structures shared by the context builder, recommenders and orchestrator.

Everything here is immutable once built. ``to_dict`` renders the JSON shape returned to
routers; dates become ISO strings and tuples become lists.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from types import MappingProxyType


def _jsonable(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, Mapping):
        return {k: _jsonable(v) for k, v in value.items()}
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


class _Serializable:
    def to_dict(self) -> dict:
        return {f.name: _jsonable(getattr(self, f.name)) for f in fields(self)}


# ---------- Inputs ----------

@dataclass(frozen=True)
class TripDetails(_Serializable):
    """The trip a recommendation pass is computed for."""
    destination: str
    start_date: date
    end_date: date
    travel_group: str
    accommodation: str | None = None
    safety_sensitivity: str | None = None
    comfort_level: str | None = None
    activity_intensity: str | None = None


@dataclass(frozen=True)
class UserPreferences(_Serializable):
    """Long-term traveler preferences. ``travel_style`` is carried but not consulted."""
    gender: str | None = None
    clothing_size: str | None = None
    dietary_preference: str = "none"
    travel_style: str = "relaxed"
    social_intent: str = "casual"
    language_preference: str = "english"


@dataclass(frozen=True)
class WeatherSnapshot(_Serializable):
    temperature: float
    condition: str
    humidity: int


# ---------- Context ----------

@dataclass(frozen=True)
class RecommendationContext(_Serializable):
    """Situational snapshot derived once per request and shared by every recommender."""
    destination: str
    start_date: date
    end_date: date
    season: str
    weather: WeatherSnapshot | None
    time_of_day: str
    crowd_level: str
    travel_group: str
    accommodation: str | None
    safety_level: str
    comfort_level: str
    activity_intensity: str
    dietary_preference: str = "none"
    gender: str | None = None
    clothing_size: str | None = None

    @property
    def city_key(self) -> str:
        """Lookup key for destination tables."""
        return (self.destination or "").strip().lower()


# ---------- Rule-table items ----------

@dataclass(frozen=True)
class ClothingItem(_Serializable):
    id: str
    name: str
    category: str
    description: str
    suitable_for: tuple[str, ...]
    rent_price: int
    buy_price: int
    kid_friendly: bool
    comfortable: bool

    @property
    def elderly_friendly(self) -> bool:
        return self.comfortable


@dataclass(frozen=True)
class FoodItem(_Serializable):
    id: str
    name: str
    category: str  # breakfast | lunch | snacks | main
    description: str
    spice_level: str
    hygiene_level: str
    suitable_for: tuple[str, ...]
    kid_friendly: bool
    elderly_friendly: bool
    price_range: str
    location: str
    diet: str | None = None  # vegan | vegetarian | non-vegetarian; untagged for most items


@dataclass(frozen=True)
class ExperienceItem(_Serializable):
    id: str
    name: str
    category: str
    description: str
    time_of_day: str
    duration: str
    walking_intensity: str
    crowd_level: str
    safety_level: str
    requires_night_travel: bool
    suitable_for: tuple[str, ...]
    price_range: str
    best_for: str
    kid_friendly: bool = True
    elderly_friendly: bool = True


@dataclass(frozen=True)
class PhotoSpot(_Serializable):
    id: str
    name: str
    category: str
    description: str
    best_time: str
    light_quality: str
    crowd_level: str
    safety_level: str
    suitable_for: tuple[str, ...]
    angles: tuple[str, ...]
    poses: tuple[str, ...]
    kid_friendly: bool = True
    elderly_friendly: bool = True


@dataclass(frozen=True)
class PhotoTip(_Serializable):
    type: str
    title: str
    description: str
    suggestions: tuple[str, ...]


# ---------- Outputs ----------

@dataclass(frozen=True)
class Notification(_Serializable):
    type: str      # photo | weather | experience | safety
    title: str
    message: str
    priority: str  # low | medium | high


@dataclass(frozen=True)
class DomainRecommendation(_Serializable):
    """Filtered items, aggregate summary and advisory warnings for one domain."""
    domain: str
    items: tuple = ()
    summary: Mapping = field(default_factory=dict)
    warnings: tuple[str, ...] = ()
    tips: tuple[PhotoTip, ...] = ()
    failed: bool = False

    def __post_init__(self):
        # Read-only view over a private copy
        object.__setattr__(self, "summary", MappingProxyType(dict(self.summary)))


@dataclass(frozen=True)
class RecommendationResult:
    """The envelope returned by the orchestrator."""
    context: RecommendationContext
    clothing: DomainRecommendation
    food: DomainRecommendation
    experiences: DomainRecommendation
    photos: DomainRecommendation
    notifications: tuple[Notification, ...]
    generated_at: datetime
    errors: tuple[str, ...] = ()

    @property
    def domains(self) -> dict[str, DomainRecommendation]:
        return {
            "clothing": self.clothing,
            "food": self.food,
            "experiences": self.experiences,
            "photos": self.photos,
        }

    def to_dict(self) -> dict:
        return {
            "context": self.context.to_dict(),
            "recommendations": {name: rec.to_dict() for name, rec in self.domains.items()},
            "notifications": [n.to_dict() for n in self.notifications],
            "generated_at": self.generated_at.isoformat(),
            "errors": list(self.errors),
        }
