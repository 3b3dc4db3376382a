"""Notification deriver: advisory notices computed from the context alone."""

from roamster.data.notifications import NOTIFICATION_RULES
from roamster.services.recommendation.domain import Notification, RecommendationContext
from roamster.services.recommendation.rules import collect_candidates


def derive_notifications(context: RecommendationContext, rules=NOTIFICATION_RULES) -> list[Notification]:
    """Zero or more notices, in rule order. Does not look at recommender output."""
    return collect_candidates(rules, context)
