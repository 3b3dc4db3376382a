"""Food recommender: meals for the time of day plus local cuisine."""

from roamster.data.food import FOOD_RULE_GROUPS, FOOD_WARNING_RULES
from roamster.services.recommendation.base import DomainRecommender


class FoodRecommender(DomainRecommender):
    domain = "food"
    rule_groups = FOOD_RULE_GROUPS
    warning_rules = FOOD_WARNING_RULES
    cautious_message = "Prioritizing mild, hygienic, and easily digestible options"
    balanced_message = "Mix of local favorites and safe options"

    def summarize(self, items, context) -> dict:
        return {
            "total_options": len(items),
            "recommendation": self.headline(context),
        }


food_recommender = FoodRecommender()
