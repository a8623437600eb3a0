"""
Score Aggregator

Combines individual dimension scores into a total score.
Applies weighting, completeness and gate multipliers, and clamping.
"""

import logging
from typing import Dict, List, Optional, Sequence

from .contracts import (
    DimensionScore,
    EngineConfig,
    PlanTemplate,
    ScoredTemplate,
    UserProfile,
    VolumeModification,
)
from .dimension_scorers import DIMENSION_SCORERS, meets_experience_floor
from .constants import (
    COMPLETENESS_MULTIPLIER,
    COMPLETE_PLAN_TYPES,
    MAX_TOTAL_SCORE,
    MIN_TOTAL_SCORE,
    SCORE_PRECISION,
    SOFT_GATE_MULTIPLIER,
    VOLUME_MODIFICATION_MIN_SCORE,
    VOLUME_MODIFICATION_PAIRS,
    VOLUME_MODIFICATION_SETS_INCREASE,
    VOLUME_MODIFICATION_TECHNIQUES,
    Completeness,
    EligibilityGate,
)

logger = logging.getLogger(__name__)


def resolve_completeness(template: PlanTemplate) -> Completeness:
    """Complete when the catalog marks it so or the plan type is a known complete program."""
    if template.completion_status == Completeness.COMPLETE:
        return Completeness.COMPLETE
    if template.plan_type in COMPLETE_PLAN_TYPES:
        return Completeness.COMPLETE
    return Completeness.INCOMPLETE


def weighted_total(
    dimension_scores: Dict[str, DimensionScore],
    weights: Dict[str, float]
) -> float:
    """Weighted sum of dimension scores (weights sum to 1 over a 0-100 domain)."""
    return sum(
        dimension_scores[dimension].score * weight
        for dimension, weight in weights.items()
    )


def clamp_score(score: float) -> float:
    return round(max(MIN_TOTAL_SCORE, min(MAX_TOTAL_SCORE, score)), SCORE_PRECISION)


def volume_modification_for(
    profile: UserProfile,
    template: PlanTemplate,
    total_score: float
) -> Optional[VolumeModification]:
    """
    Volume increase advice for users above the plan's target level.

    Returned as a separate field; it never alters the total score.
    """
    if (profile.fitness_level, template.fitness_level) not in VOLUME_MODIFICATION_PAIRS:
        return None
    if total_score < VOLUME_MODIFICATION_MIN_SCORE:
        return None
    return VolumeModification(
        sets_increase=VOLUME_MODIFICATION_SETS_INCREASE,
        advanced_techniques=list(VOLUME_MODIFICATION_TECHNIQUES),
    )


def aggregate_scores(
    profile: UserProfile,
    template: PlanTemplate,
    config: Optional[EngineConfig] = None,
    catalog_index: int = 0
) -> ScoredTemplate:
    """
    Compute all dimension scores and aggregate into a total score.

    Args:
        profile: User's profile
        template: Plan template to score
        config: Weights and gate policy (defaults when omitted)
        catalog_index: Position in the catalog, used for tie-breaking

    Returns:
        ScoredTemplate with all scores and eligibility status
    """
    config = config or EngineConfig()
    dimension_scores: Dict[str, DimensionScore] = {}
    reasoning: List[str] = []

    for scorer in DIMENSION_SCORERS:
        score, notes = scorer(profile, template)
        weight = config.weights[score.dimension]
        dimension_scores[score.dimension] = score.model_copy(update={
            "weight": weight,
            "weighted_score": score.score * weight,
        })
        reasoning.extend(notes)

    total = weighted_total(dimension_scores, config.weights)

    completeness = resolve_completeness(template)
    total *= COMPLETENESS_MULTIPLIER[completeness]
    if completeness == Completeness.INCOMPLETE:
        reasoning.append("Still in development - available soon")

    is_eligible = meets_experience_floor(
        profile.training_experience_months,
        template.min_training_experience_months,
    )
    if not is_eligible and config.eligibility_gate == EligibilityGate.SOFT:
        total *= SOFT_GATE_MULTIPLIER

    total_score = clamp_score(total)

    volume_modification = volume_modification_for(profile, template, total_score)
    if volume_modification is not None:
        reasoning.append(
            f"Tip: increase volume by {volume_modification.sets_increase} for best results"
        )

    logger.debug(
        f"Scored template {template.id} ({template.plan_type}): {total_score} "
        f"eligible={is_eligible} completeness={completeness.value}"
    )

    return ScoredTemplate(
        template=template,
        catalog_index=catalog_index,
        dimension_scores=dimension_scores,
        total_score=total_score,
        is_eligible=is_eligible,
        completeness=completeness,
        reasoning=reasoning,
        volume_modification=volume_modification,
    )


def batch_aggregate(
    profile: UserProfile,
    templates: Sequence[PlanTemplate],
    config: Optional[EngineConfig] = None
) -> List[ScoredTemplate]:
    """
    Score multiple templates in catalog order.

    Args:
        profile: User's profile
        templates: Catalog of plan templates
        config: Weights and gate policy

    Returns:
        List of ScoredTemplate objects
    """
    return [
        aggregate_scores(profile, template, config, catalog_index=index)
        for index, template in enumerate(templates)
    ]
