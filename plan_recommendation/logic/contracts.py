"""
Data Contracts for the Plan Scoring Engine

Defines Pydantic models for UserProfile and PlanTemplate (input) and
PlanRecommendation / RecommendationOutput (output).
These contracts are the API boundary for the scoring engine.
"""

import math
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    Completeness,
    DEFAULT_EXCLUSION_FLOOR,
    DIMENSION_WEIGHTS,
    ENGINE_VERSION,
    EligibilityGate,
    FitnessLevel,
    RecommendationTier,
    TrainingGoal,
)


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class UserProfile(BaseModel):
    """
    Input contract for the scoring engine.
    Represents the requesting user's training attributes.
    """
    model_config = ConfigDict(frozen=True)

    fitness_level: FitnessLevel
    training_experience_months: int = Field(ge=0)
    available_training_days: int = Field(ge=1, le=7)
    primary_goal: TrainingGoal


class PlanTemplate(BaseModel):
    """
    A predefined training plan from the template catalog.

    Display fields are carried through unchanged; timestamps are
    provenance only and never scored.
    """
    model_config = ConfigDict(frozen=True)

    # Identity
    id: str = Field(min_length=1)
    plan_type: str

    # Display
    name: str
    name_de: Optional[str] = None
    description: Optional[str] = None
    description_de: Optional[str] = None

    # Matchable attributes
    fitness_level: FitnessLevel
    primary_goal: TrainingGoal
    days_per_week: int = Field(ge=1, le=7)
    min_training_experience_months: int = Field(default=0, ge=0)
    estimated_duration_weeks: Optional[int] = Field(default=None, ge=1)
    difficulty_rating: Optional[int] = Field(default=None, ge=1, le=5)

    # Pre-computed catalog metadata
    exercises_per_workout: Optional[int] = Field(default=None, ge=1)
    completion_status: Optional[Completeness] = None

    # Provenance
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EngineConfig(BaseModel):
    """Static scoring configuration: weights, gate policy and exclusion floor."""
    model_config = ConfigDict(frozen=True)

    weights: Dict[str, float] = Field(default_factory=lambda: dict(DIMENSION_WEIGHTS))
    eligibility_gate: EligibilityGate = EligibilityGate.HARD
    exclusion_floor: float = Field(default=DEFAULT_EXCLUSION_FLOOR, ge=0.0, le=100.0)

    @field_validator("weights")
    @classmethod
    def _check_weights(cls, weights: Dict[str, float]) -> Dict[str, float]:
        if set(weights) != set(DIMENSION_WEIGHTS):
            raise ValueError(
                f"weights must cover exactly {sorted(DIMENSION_WEIGHTS)}, got {sorted(weights)}"
            )
        if any(w < 0 for w in weights.values()):
            raise ValueError("weights must be non-negative")
        if not math.isclose(sum(weights.values()), 1.0, abs_tol=1e-9):
            raise ValueError(f"weights must sum to 1.0, got {sum(weights.values()):.4f}")
        return weights


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class DimensionScore(BaseModel):
    """Individual dimension score with explanation."""
    dimension: str
    score: float = Field(ge=0.0, le=100.0)
    weight: float = Field(default=0.0, ge=0.0, le=1.0)
    weighted_score: float = Field(default=0.0, ge=0.0, le=100.0)
    explanation: str = ""


class ScoreBreakdown(BaseModel):
    """Raw per-dimension scores (0-100) for display."""
    fitness_level_score: float
    goal_score: float
    schedule_score: float
    eligibility_score: float
    volume_score: float


class VolumeModification(BaseModel):
    """Suggested volume increase for users above the plan's target level."""
    sets_increase: str
    advanced_techniques: List[str] = Field(default_factory=list)


class PlanRecommendation(BaseModel):
    """
    Single plan recommendation with full scoring details.
    """
    template: PlanTemplate

    # Scoring
    total_score: float = Field(ge=0.0, le=100.0)
    breakdown: ScoreBreakdown
    dimension_scores: List[DimensionScore] = Field(default_factory=list)

    # Classification
    tier: RecommendationTier
    completeness: Completeness
    is_eligible: bool = True

    # Explainability
    reasoning: List[str] = Field(default_factory=list)
    volume_modification: Optional[VolumeModification] = None

    # Ranking metadata
    rank: int = 0


class RecommendationOutput(BaseModel):
    """
    Output contract for the engine's full pipeline.
    Contains ranked recommendations with summary statistics.
    """
    recommendations: List[PlanRecommendation] = Field(default_factory=list)

    # Summary Statistics
    total_templates_evaluated: int = 0
    total_eligible: int = 0
    total_recommended: int = 0
    tier_counts: Dict[str, int] = Field(default_factory=dict)

    # Processing metadata
    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION

    warnings: List[str] = Field(default_factory=list)


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class ScoredTemplate(BaseModel):
    """
    A template with computed scores.
    Used between scoring and ranking stages.
    """
    template: PlanTemplate
    catalog_index: int = 0
    dimension_scores: Dict[str, DimensionScore] = Field(default_factory=dict)
    total_score: float = 0.0
    is_eligible: bool = True
    completeness: Completeness = Completeness.COMPLETE
    reasoning: List[str] = Field(default_factory=list)
    volume_modification: Optional[VolumeModification] = None
