"""
Recommendation Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for generating plan recommendations.
"""

import logging
import time
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from .aggregator import aggregate_scores, batch_aggregate
from .catalog import template_from_record, templates_from_records
from .contracts import (
    EngineConfig,
    PlanRecommendation,
    PlanTemplate,
    RecommendationOutput,
    UserProfile,
)
from .constants import DEFAULT_RECOMMENDATION_LIMIT, ENGINE_VERSION
from .errors import InvalidLimitError, InvalidProfileError
from .output_assembler import assemble_output, assemble_recommendation
from .ranker import filter_excluded, rank_templates, select_top

logger = logging.getLogger(__name__)

ProfileInput = Union[UserProfile, Mapping[str, Any]]
TemplateInput = Union[PlanTemplate, Mapping[str, Any]]


def coerce_profile(profile: ProfileInput) -> UserProfile:
    """
    Accept a UserProfile or a mapping of its fields.

    Raises:
        InvalidProfileError: a field is outside its domain; values are never
            coerced to a default
    """
    if isinstance(profile, UserProfile):
        return profile
    if not isinstance(profile, Mapping):
        raise InvalidProfileError(
            f"Expected a user profile or mapping, got {type(profile).__name__}"
        )
    try:
        return UserProfile(**profile)
    except ValidationError as e:
        raise InvalidProfileError(f"Invalid user profile: {e}") from e


def validate_limit(limit: Any) -> int:
    # bool is an int subclass but never a meaningful limit
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidLimitError(f"limit must be a positive integer, got {limit!r}")
    if limit < 1:
        raise InvalidLimitError(f"limit must be at least 1, got {limit}")
    return limit


class RecommendationEngine:
    """
    Stateless recommendation engine that orchestrates the scoring pipeline.

    Pipeline flow:
    1. Validation - Check profile, catalog and limit
    2. Dimension Scoring - Score each dimension independently
    3. Aggregation - Combine dimension scores into a total score
    4. Ranking - Drop excluded templates, sort, truncate
    5. Output Assembly - Build the final recommendations
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize the recommendation engine.

        Args:
            config: Weights, gate policy and exclusion floor. Defaults apply
                when omitted.
        """
        self.config = config or EngineConfig()
        self.version = ENGINE_VERSION

    def recommend(
        self,
        profile: ProfileInput,
        templates: Iterable[TemplateInput],
        limit: int = DEFAULT_RECOMMENDATION_LIMIT
    ) -> RecommendationOutput:
        """
        Generate recommendations for a user profile.

        Args:
            profile: User's training profile
            templates: Template catalog, read-only
            limit: Maximum number of recommendations to return

        Returns:
            RecommendationOutput with ranked recommendations
        """
        user = coerce_profile(profile)
        limit = validate_limit(limit)
        catalog = templates_from_records(templates)

        start_time = time.perf_counter()

        logger.info(
            f"🎯 Scoring {len(catalog)} templates for {user.fitness_level.value}/"
            f"{user.primary_goal.value}, {user.available_training_days} days"
        )

        scored = batch_aggregate(user, catalog, self.config)
        kept = filter_excluded(scored, self.config)
        ranked = select_top(rank_templates(kept), limit)

        processing_time = (time.perf_counter() - start_time) * 1000

        logger.info(
            f"🏆 Evaluated: {len(catalog)}, eligible: {len(kept)}, "
            f"returned: {len(ranked)} ({processing_time:.2f}ms)"
        )

        return assemble_output(
            ranked=ranked,
            total_evaluated=len(catalog),
            total_eligible=len(kept),
            processing_time_ms=round(processing_time, 2),
        )

    def get_top_recommendations(
        self,
        profile: ProfileInput,
        templates: Iterable[TemplateInput],
        limit: int = DEFAULT_RECOMMENDATION_LIMIT
    ) -> List[PlanRecommendation]:
        """Ranked recommendations only, without summary statistics."""
        return self.recommend(profile, templates, limit).recommendations

    def recommend_from_dict(
        self,
        profile_data: Mapping[str, Any],
        templates: Iterable[TemplateInput],
        **kwargs
    ) -> RecommendationOutput:
        """
        Generate recommendations from a dictionary profile.

        Convenience method for API integration.
        """
        return self.recommend(coerce_profile(profile_data), templates, **kwargs)

    def score_single_template(
        self,
        profile: ProfileInput,
        template: TemplateInput
    ) -> PlanRecommendation:
        """
        Score one template for a user.

        Never excluded: ineligible templates come back with
        ``is_eligible=False`` and rank 0.
        """
        scored = aggregate_scores(
            coerce_profile(profile),
            template_from_record(template),
            self.config,
        )
        return assemble_recommendation(scored)


# Convenience functions for simple usage
def get_top_recommendations(
    profile: ProfileInput,
    templates: Iterable[TemplateInput],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    config: Optional[EngineConfig] = None
) -> List[PlanRecommendation]:
    """
    Score all templates and return the best `limit` matches.

    Args:
        profile: User profile
        templates: All available plan templates
        limit: Maximum number of recommendations (at least 1)
        config: Optional engine configuration

    Returns:
        Recommendations sorted by total score, highest first
    """
    return RecommendationEngine(config).get_top_recommendations(profile, templates, limit)


def get_best_recommendation(
    profile: ProfileInput,
    templates: Iterable[TemplateInput],
    config: Optional[EngineConfig] = None
) -> Optional[PlanRecommendation]:
    recommendations = get_top_recommendations(profile, templates, 1, config)
    return recommendations[0] if recommendations else None


def score_plan_template(
    profile: ProfileInput,
    template: TemplateInput,
    config: Optional[EngineConfig] = None
) -> PlanRecommendation:
    return RecommendationEngine(config).score_single_template(profile, template)
