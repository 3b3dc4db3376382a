"""Clothing recommender: weather/season driven outfits with rent and buy estimates."""

from roamster.data.clothing import CLOTHING_RULE_GROUPS, CLOTHING_WARNING_RULES
from roamster.services.recommendation.base import DomainRecommender


class ClothingRecommender(DomainRecommender):
    domain = "clothing"
    rule_groups = CLOTHING_RULE_GROUPS
    warning_rules = CLOTHING_WARNING_RULES
    cautious_message = "Prioritizing comfort and safety over fashion"
    balanced_message = "Balanced mix of style and comfort"

    def summarize(self, items, context) -> dict:
        return {
            "total_items": len(items),
            "estimated_rent_cost": sum(item.rent_price for item in items),
            "estimated_buy_cost": sum(item.buy_price for item in items),
            "recommendation": self.headline(context),
        }


clothing_recommender = ClothingRecommender()
