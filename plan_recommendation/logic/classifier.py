"""
Classifier

Classifies total scores into recommendation tiers:
- Optimal
- Good
- Acceptable
- Fallback
"""

from collections import Counter
from typing import Dict, List

from .contracts import ScoredTemplate
from .constants import RecommendationTier, TIER_THRESHOLDS


def classify_score(total_score: float) -> RecommendationTier:
    """
    Map a total score (0-100) to a tier.

    Args:
        total_score: Aggregated score

    Returns:
        RecommendationTier enum value
    """
    for tier, minimum in TIER_THRESHOLDS:
        if total_score >= minimum:
            return tier
    return RecommendationTier.FALLBACK


def classify_template(scored: ScoredTemplate) -> RecommendationTier:
    return classify_score(scored.total_score)


def get_tier_counts(scored_templates: List[ScoredTemplate]) -> Dict[RecommendationTier, int]:
    """
    Count templates in each tier.
    """
    counts = Counter(classify_template(scored) for scored in scored_templates)
    return {tier: counts.get(tier, 0) for tier in RecommendationTier}
