"""Rule-group and exclusion-rule machinery shared by the domain recommenders.

Candidate generation is a union over independent rule groups; each group contributes
zero or more items and knows nothing about the others. Filtering is a flat table of
exclusion rules applied to the union.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from roamster.services.recommendation.domain import RecommendationContext

logger = logging.getLogger(__name__)

ContextPredicate = Callable[[RecommendationContext], bool]


# ---------- Context predicates ----------

def temperature_above(context: RecommendationContext, threshold: float) -> bool:
    """False when there is no weather reading."""
    if context.weather is None or context.weather.temperature is None:
        return False
    return context.weather.temperature > threshold


def temperature_below(context: RecommendationContext, threshold: float) -> bool:
    if context.weather is None or context.weather.temperature is None:
        return False
    return context.weather.temperature < threshold


def condition_is(context: RecommendationContext, condition: str) -> bool:
    if context.weather is None:
        return False
    return context.weather.condition == condition


def always(context: RecommendationContext) -> bool:
    return True


# ---------- Candidate generation ----------

@dataclass(frozen=True)
class RuleGroup:
    """Emits ``items`` when ``when(context)`` holds, optionally adjusted per context."""
    name: str
    when: ContextPredicate
    items: tuple = ()
    adjust: Callable[[RecommendationContext, Any], Any] | None = None

    def candidates(self, context: RecommendationContext) -> list:
        if not self.when(context):
            return []
        if self.adjust is None:
            return list(self.items)
        return [self.adjust(context, item) for item in self.items]


@dataclass(frozen=True)
class DestinationTable:
    """Emits the items listed for the context's destination (lower-cased city name)."""
    name: str
    entries: dict[str, tuple]

    def candidates(self, context: RecommendationContext) -> list:
        return list(self.entries.get(context.city_key, ()))


def collect_candidates(groups, context: RecommendationContext) -> list:
    """Union of every group's candidates; the first occurrence of an id (or value) wins.

    A group that fails contributes nothing; the rest still run.
    """
    seen: set = set()
    candidates = []
    for group in groups:
        try:
            produced = group.candidates(context)
        except Exception as e:
            logger.warning(f"Rule group '{group.name}' failed, skipping: {e}")
            continue
        for item in produced:
            key = getattr(item, "id", item)
            if key in seen:
                continue
            seen.add(key)
            candidates.append(item)
    return candidates


# ---------- Filtering ----------

@dataclass(frozen=True)
class ExclusionRule:
    """Drops an item when the rule applies to the context and the item matches.

    ``domains`` limits the rule to some recommenders; empty means every domain.
    """
    name: str
    applies: ContextPredicate
    excludes: Callable[[Any, RecommendationContext], bool]
    domains: frozenset[str] = frozenset()

    def rejects(self, item, domain: str, context: RecommendationContext) -> bool:
        if self.domains and domain not in self.domains:
            return False
        return self.applies(context) and self.excludes(item, context)


def apply_exclusions(
    items: list,
    domain: str,
    context: RecommendationContext,
    policy: tuple[ExclusionRule, ...],
) -> list:
    kept = []
    for item in items:
        rejected_by = next((rule for rule in policy if rule.rejects(item, domain, context)), None)
        if rejected_by is not None:
            logger.debug(f"{domain}: '{item.id}' excluded by {rejected_by.name}")
            continue
        kept.append(item)
    return kept
