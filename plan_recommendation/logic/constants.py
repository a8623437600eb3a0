"""
Scoring Engine Constants

Defines all enums, match tables, weights and thresholds used by the plan
scoring engine. All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class FitnessLevel(str, Enum):
    """Training level of a user or the target level of a plan (ordered)."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TrainingGoal(str, Enum):
    """Primary training goal of a user or the focus of a plan."""
    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    BOTH = "both"                    # strength + hypertrophy
    GENERAL_FITNESS = "general_fitness"
    POWERLIFTING = "powerlifting"


class RecommendationTier(str, Enum):
    """Qualitative tier derived from the total score."""
    OPTIMAL = "optimal"
    GOOD = "good"
    ACCEPTABLE = "acceptable"
    FALLBACK = "fallback"


class Completeness(str, Enum):
    """Whether a plan template is fully built out in the catalog."""
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"


class EligibilityGate(str, Enum):
    """How templates below their experience floor are treated."""
    HARD = "hard"    # excluded from results
    SOFT = "soft"    # kept, with a steep penalty


# =============================================================================
# DIMENSION MATCH TABLES (all scores on a 0-100 scale)
# =============================================================================

FITNESS_LEVEL_ORDER: List[FitnessLevel] = [
    FitnessLevel.BEGINNER,
    FitnessLevel.INTERMEDIATE,
    FitnessLevel.ADVANCED,
]

# Keyed by signed distance: template level index - user level index.
# Positive = template is stricter than the user.
FITNESS_LEVEL_DISTANCE_SCORES: Dict[int, float] = {
    0: 100.0,
    -1: 60.0,    # one level milder, usable as back-to-basics
    1: 50.0,     # one level stricter, not quite ready
    -2: 20.0,
    2: 10.0,
}

# user goal -> template goal -> score
GOAL_COMPATIBILITY: Dict[TrainingGoal, Dict[TrainingGoal, float]] = {
    TrainingGoal.STRENGTH: {
        TrainingGoal.STRENGTH: 100.0,
        TrainingGoal.POWERLIFTING: 90.0,
        TrainingGoal.BOTH: 80.0,
        TrainingGoal.GENERAL_FITNESS: 50.0,
        TrainingGoal.HYPERTROPHY: 40.0,
    },
    TrainingGoal.HYPERTROPHY: {
        TrainingGoal.HYPERTROPHY: 100.0,
        TrainingGoal.BOTH: 80.0,
        TrainingGoal.GENERAL_FITNESS: 60.0,
        TrainingGoal.STRENGTH: 40.0,
        TrainingGoal.POWERLIFTING: 30.0,
    },
    TrainingGoal.BOTH: {
        TrainingGoal.BOTH: 100.0,
        TrainingGoal.STRENGTH: 80.0,
        TrainingGoal.HYPERTROPHY: 80.0,
        TrainingGoal.POWERLIFTING: 70.0,
        TrainingGoal.GENERAL_FITNESS: 60.0,
    },
    TrainingGoal.GENERAL_FITNESS: {
        TrainingGoal.GENERAL_FITNESS: 100.0,
        TrainingGoal.BOTH: 70.0,
        TrainingGoal.HYPERTROPHY: 60.0,
        TrainingGoal.STRENGTH: 50.0,
        TrainingGoal.POWERLIFTING: 30.0,
    },
    TrainingGoal.POWERLIFTING: {
        TrainingGoal.POWERLIFTING: 100.0,
        TrainingGoal.STRENGTH: 90.0,
        TrainingGoal.BOTH: 70.0,
        TrainingGoal.GENERAL_FITNESS: 40.0,
        TrainingGoal.HYPERTROPHY: 30.0,
    },
}
GOAL_MISMATCH_SCORE = 20.0

# User has more days than the plan needs, keyed by surplus days
SCHEDULE_SURPLUS_SCORES: Dict[int, float] = {1: 85.0, 2: 70.0, 3: 55.0}
SCHEDULE_SURPLUS_FLOOR = 40.0

# Plan needs more days than the user has, keyed by missing days
SCHEDULE_DEFICIT_SCORES: Dict[int, float] = {1: 60.0, 2: 35.0, 3: 15.0}
SCHEDULE_DEFICIT_FLOOR = 0.0

ELIGIBLE_SCORE = 100.0
INELIGIBLE_SCORE = 0.0

# Ideal exercises per workout by user level (min, max)
VOLUME_IDEAL_RANGES: Dict[FitnessLevel, Tuple[int, int]] = {
    FitnessLevel.BEGINNER: (4, 6),
    FitnessLevel.INTERMEDIATE: (5, 7),
    FitnessLevel.ADVANCED: (6, 9),
}
# Scores by how far outside the ideal range (0 = inside)
VOLUME_DISTANCE_SCORES: Dict[int, float] = {0: 100.0, 1: 80.0, 2: 60.0}
VOLUME_OUT_OF_RANGE_SCORE = 40.0
VOLUME_UNKNOWN_SCORE = 75.0

# =============================================================================
# DIMENSION WEIGHTS
# =============================================================================

DIMENSION_FITNESS_LEVEL = "fitness_level"
DIMENSION_GOAL = "goal"
DIMENSION_SCHEDULE = "schedule"
DIMENSION_ELIGIBILITY = "eligibility"
DIMENSION_VOLUME = "volume"

# Weights for each scoring dimension (must sum to 1.0)
DIMENSION_WEIGHTS: Dict[str, float] = {
    DIMENSION_FITNESS_LEVEL: 0.35,
    DIMENSION_GOAL: 0.25,
    DIMENSION_SCHEDULE: 0.20,
    DIMENSION_ELIGIBILITY: 0.10,
    DIMENSION_VOLUME: 0.10,
}

# =============================================================================
# MULTIPLIERS
# =============================================================================

COMPLETENESS_MULTIPLIER: Dict[Completeness, float] = {
    Completeness.COMPLETE: 1.0,
    Completeness.INCOMPLETE: 0.7,
}

# Programs known to be complete when a template carries no completion_status
COMPLETE_PLAN_TYPES: FrozenSet[str] = frozenset({
    "starting_strength",
    "stronglifts_5x5",
    "full_body_3x",
    "phul",
    "upper_lower_hypertrophy",
    "531_intermediate",
    "ppl_6x_intermediate",
})

SOFT_GATE_MULTIPLIER = 0.5

MIN_TOTAL_SCORE = 0.0
MAX_TOTAL_SCORE = 100.0
SCORE_PRECISION = 2

# =============================================================================
# CLASSIFICATION THRESHOLDS
# =============================================================================

# Minimum total score per tier, checked from highest to lowest
TIER_THRESHOLDS: List[Tuple[RecommendationTier, float]] = [
    (RecommendationTier.OPTIMAL, 90.0),
    (RecommendationTier.GOOD, 75.0),
    (RecommendationTier.ACCEPTABLE, 60.0),
]

# =============================================================================
# ADVISORY RULES
# =============================================================================

# (user level, template level) pairs that get a volume increase note
VOLUME_MODIFICATION_PAIRS: FrozenSet[Tuple[FitnessLevel, FitnessLevel]] = frozenset({
    (FitnessLevel.ADVANCED, FitnessLevel.INTERMEDIATE),
})
VOLUME_MODIFICATION_MIN_SCORE = 80.0
VOLUME_MODIFICATION_SETS_INCREASE = "+20%"
VOLUME_MODIFICATION_TECHNIQUES: Tuple[str, ...] = (
    "Drop Sets",
    "Rest-Pause Sets",
    "Cluster Sets",
)

# Months after which a user is close to the next level
PROGRESSION_READY_MONTHS: Dict[FitnessLevel, int] = {
    FitnessLevel.BEGINNER: 10,
    FitnessLevel.INTERMEDIATE: 30,
}

# Highest experience floor a next-level plan may carry for that note
PROGRESSION_MAX_TEMPLATE_MONTHS: Dict[FitnessLevel, int] = {
    FitnessLevel.BEGINNER: 12,
    FitnessLevel.INTERMEDIATE: 36,
}

# =============================================================================
# RANKING CONFIGURATION
# =============================================================================

DEFAULT_RECOMMENDATION_LIMIT = 3
DEFAULT_EXCLUSION_FLOOR = 0.0

# Ranks templates without a difficulty rating after every rated one on ties
UNRATED_DIFFICULTY_SORT_KEY = 6

ENGINE_VERSION = "1.0.0"
