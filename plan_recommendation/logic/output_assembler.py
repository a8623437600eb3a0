"""
Output Assembler

Transforms internal scoring data into the PlanRecommendation and
RecommendationOutput contracts.
"""

import logging
from typing import List, Optional

from .classifier import classify_template, get_tier_counts
from .contracts import (
    PlanRecommendation,
    RecommendationOutput,
    ScoreBreakdown,
    ScoredTemplate,
)
from .constants import (
    DIMENSION_ELIGIBILITY,
    DIMENSION_FITNESS_LEVEL,
    DIMENSION_GOAL,
    DIMENSION_SCHEDULE,
    DIMENSION_VOLUME,
    ENGINE_VERSION,
)

logger = logging.getLogger(__name__)


def build_breakdown(scored: ScoredTemplate) -> ScoreBreakdown:
    scores = scored.dimension_scores
    return ScoreBreakdown(
        fitness_level_score=scores[DIMENSION_FITNESS_LEVEL].score,
        goal_score=scores[DIMENSION_GOAL].score,
        schedule_score=scores[DIMENSION_SCHEDULE].score,
        eligibility_score=scores[DIMENSION_ELIGIBILITY].score,
        volume_score=scores[DIMENSION_VOLUME].score,
    )


def assemble_recommendation(
    scored: ScoredTemplate,
    rank: int = 0
) -> PlanRecommendation:
    """
    Convert a ScoredTemplate into a PlanRecommendation.

    Args:
        scored: The scored template
        rank: 1-based position in the ranked list (0 when unranked)

    Returns:
        PlanRecommendation object
    """
    return PlanRecommendation(
        template=scored.template,
        total_score=scored.total_score,
        breakdown=build_breakdown(scored),
        dimension_scores=list(scored.dimension_scores.values()),
        tier=classify_template(scored),
        completeness=scored.completeness,
        is_eligible=scored.is_eligible,
        reasoning=list(scored.reasoning),
        volume_modification=scored.volume_modification,
        rank=rank,
    )


def assemble_recommendations(ranked: List[ScoredTemplate]) -> List[PlanRecommendation]:
    """Build the ranked recommendation list."""
    return [
        assemble_recommendation(scored, rank)
        for rank, scored in enumerate(ranked, 1)
    ]


def assemble_output(
    ranked: List[ScoredTemplate],
    total_evaluated: int,
    total_eligible: int,
    processing_time_ms: Optional[float] = None
) -> RecommendationOutput:
    """
    Assemble the final RecommendationOutput.

    Args:
        ranked: Ranked and truncated templates
        total_evaluated: Templates in the catalog
        total_eligible: Templates that survived exclusion
        processing_time_ms: Processing time in milliseconds

    Returns:
        Complete RecommendationOutput
    """
    recommendations = assemble_recommendations(ranked)
    warnings = _generate_warnings(total_evaluated, total_eligible)

    for warning in warnings:
        logger.warning(f"⚠️ {warning}")

    return RecommendationOutput(
        recommendations=recommendations,
        total_templates_evaluated=total_evaluated,
        total_eligible=total_eligible,
        total_recommended=len(recommendations),
        tier_counts={tier.value: count for tier, count in get_tier_counts(ranked).items()},
        processing_time_ms=processing_time_ms,
        engine_version=ENGINE_VERSION,
        warnings=warnings,
    )


def _generate_warnings(total_evaluated: int, total_eligible: int) -> List[str]:
    """Empty catalog and all-excluded are results, not errors; flag them here."""
    warnings = []

    if total_evaluated == 0:
        warnings.append("Template catalog is empty.")
    elif total_eligible == 0:
        warnings.append(
            f"All {total_evaluated} templates were excluded by the eligibility gate or score floor."
        )

    return warnings
