"""
Recommendation Logic Module

Provides the deterministic scoring engine for training plan recommendations.
"""

from .contracts import (
    UserProfile,
    PlanTemplate,
    EngineConfig,
    PlanRecommendation,
    RecommendationOutput,
    DimensionScore,
    ScoreBreakdown,
    VolumeModification,
    ScoredTemplate,
)
from .engine import (
    RecommendationEngine,
    get_top_recommendations,
    get_best_recommendation,
    score_plan_template,
)
from .catalog import generate_mock_templates, templates_from_records
from .constants import (
    FitnessLevel,
    TrainingGoal,
    RecommendationTier,
    Completeness,
    EligibilityGate,
    DIMENSION_WEIGHTS,
)
from .errors import (
    RecommendationError,
    InvalidProfileError,
    InvalidLimitError,
    InvalidTemplateError,
)

__all__ = [
    # Main engine
    "RecommendationEngine",
    "get_top_recommendations",
    "get_best_recommendation",
    "score_plan_template",

    # Catalog
    "generate_mock_templates",
    "templates_from_records",

    # Contracts
    "UserProfile",
    "PlanTemplate",
    "EngineConfig",
    "PlanRecommendation",
    "RecommendationOutput",
    "DimensionScore",
    "ScoreBreakdown",
    "VolumeModification",
    "ScoredTemplate",

    # Enums
    "FitnessLevel",
    "TrainingGoal",
    "RecommendationTier",
    "Completeness",
    "EligibilityGate",
    "DIMENSION_WEIGHTS",

    # Errors
    "RecommendationError",
    "InvalidProfileError",
    "InvalidLimitError",
    "InvalidTemplateError",
]
