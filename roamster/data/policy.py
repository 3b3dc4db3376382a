"""Travel-group and dietary exclusion policy.

Applied to every domain's candidate union. Rules are checked in order; the first match
excludes the item. Items without a flag (e.g. experiences carry no kid-friendly flag)
are treated as compliant with that flag.
"""

from roamster.services.recommendation.rules import ExclusionRule, always

FOOD = frozenset({"food"})
EXPERIENCE = frozenset({"experience"})


def _group_is(*groups: str):
    return lambda context: context.travel_group in groups


def _diet_is(preference: str):
    return lambda context: context.dietary_preference == preference


SAFETY_POLICY: tuple[ExclusionRule, ...] = (
    ExclusionRule(
        name="suitability",
        applies=always,
        excludes=lambda item, context: context.travel_group not in item.suitable_for,
    ),
    # kids
    ExclusionRule(
        name="kids:not-kid-friendly",
        applies=_group_is("kids"),
        excludes=lambda item, context: not getattr(item, "kid_friendly", True),
    ),
    ExclusionRule(
        name="kids:high-spice",
        applies=_group_is("kids"),
        excludes=lambda item, context: item.spice_level == "high",
        domains=FOOD,
    ),
    ExclusionRule(
        name="kids:night-travel",
        applies=_group_is("kids"),
        excludes=lambda item, context: item.requires_night_travel,
        domains=EXPERIENCE,
    ),
    # elderly
    ExclusionRule(
        name="elderly:not-comfortable",
        applies=_group_is("elderly"),
        excludes=lambda item, context: not getattr(item, "elderly_friendly", True),
    ),
    ExclusionRule(
        name="elderly:high-spice",
        applies=_group_is("elderly"),
        excludes=lambda item, context: item.spice_level == "high",
        domains=FOOD,
    ),
    ExclusionRule(
        name="elderly:high-walking",
        applies=_group_is("elderly"),
        excludes=lambda item, context: item.walking_intensity == "high",
        domains=EXPERIENCE,
    ),
    ExclusionRule(
        name="elderly:night-travel",
        applies=_group_is("elderly"),
        excludes=lambda item, context: item.requires_night_travel,
        domains=EXPERIENCE,
    ),
    ExclusionRule(
        name="cautious:low-safety",
        applies=_group_is("kids", "elderly"),
        excludes=lambda item, context: item.safety_level == "low",
        domains=EXPERIENCE,
    ),
    # dietary preference; most food items carry no diet tag
    ExclusionRule(
        name="diet:vegan",
        applies=_diet_is("vegan"),
        excludes=lambda item, context: item.diet != "vegan",
        domains=FOOD,
    ),
    ExclusionRule(
        name="diet:vegetarian",
        applies=_diet_is("vegetarian"),
        excludes=lambda item, context: item.diet == "non-vegetarian",
        domains=FOOD,
    ),
)
