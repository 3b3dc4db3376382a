"""Shared three-stage pipeline for the domain recommenders.

generate candidates (union of rule groups) -> exclude by policy -> summarize + warn
"""

from abc import ABC, abstractmethod

from roamster.data.policy import SAFETY_POLICY
from roamster.services.recommendation.config import CAUTIOUS_GROUPS
from roamster.services.recommendation.domain import DomainRecommendation, RecommendationContext
from roamster.services.recommendation.rules import ExclusionRule, apply_exclusions, collect_candidates


class DomainRecommender(ABC):
    domain: str = ""
    rule_groups: tuple = ()
    warning_rules: tuple = ()
    policy: tuple[ExclusionRule, ...] = SAFETY_POLICY

    # Canned summary lines: cautious for kids/elderly, balanced otherwise
    cautious_message: str = ""
    balanced_message: str = ""

    def recommend(self, context: RecommendationContext) -> DomainRecommendation:
        items = self.filter(self.candidates(context), context)
        return DomainRecommendation(
            domain=self.domain,
            items=tuple(items),
            summary=self.summarize(items, context),
            warnings=tuple(self.warnings(context)),
            tips=tuple(self.tips(context)),
        )

    def candidates(self, context: RecommendationContext) -> list:
        return collect_candidates(self.rule_groups, context)

    def filter(self, items: list, context: RecommendationContext) -> list:
        return apply_exclusions(items, self.domain, context, self.policy)

    def warnings(self, context: RecommendationContext) -> list[str]:
        return collect_candidates(self.warning_rules, context)

    def tips(self, context: RecommendationContext) -> list:
        return []

    def headline(self, context: RecommendationContext) -> str:
        if context.travel_group in CAUTIOUS_GROUPS:
            return self.cautious_message
        return self.balanced_message

    @abstractmethod
    def summarize(self, items: list, context: RecommendationContext) -> dict:
        ...
