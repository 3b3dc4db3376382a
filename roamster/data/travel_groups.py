"""Per-travel-group and per-time-of-day lookup tables used by the context builder."""

SAFETY_BY_GROUP: dict[str, str] = {
    "solo": "normal",
    "couple": "normal",
    "family": "high",
    "kids": "high",
    "elderly": "high",
}

ACTIVITY_INTENSITY_BY_GROUP: dict[str, str] = {
    "solo": "high",
    "couple": "moderate",
    "family": "moderate",
    "kids": "low",
    "elderly": "low",
}

# Rough crowd estimate until a live feed exists
CROWD_BY_TIME_OF_DAY: dict[str, str] = {
    "morning": "low",
    "afternoon": "high",
    "evening": "medium",
    "night": "low",
}
