"""
Dimension Scorers

Individual scoring functions for each evaluation dimension.
Each scorer produces a score between 0 and 100 independent of the others;
weights are applied later by the aggregator.
All logic is deterministic - no AI/ML components.
"""

from typing import List, Optional, Tuple

from .contracts import DimensionScore, PlanTemplate, UserProfile
from .constants import (
    DIMENSION_ELIGIBILITY,
    DIMENSION_FITNESS_LEVEL,
    DIMENSION_GOAL,
    DIMENSION_SCHEDULE,
    DIMENSION_VOLUME,
    ELIGIBLE_SCORE,
    FITNESS_LEVEL_DISTANCE_SCORES,
    FITNESS_LEVEL_ORDER,
    GOAL_COMPATIBILITY,
    GOAL_MISMATCH_SCORE,
    INELIGIBLE_SCORE,
    PROGRESSION_MAX_TEMPLATE_MONTHS,
    PROGRESSION_READY_MONTHS,
    SCHEDULE_DEFICIT_FLOOR,
    SCHEDULE_DEFICIT_SCORES,
    SCHEDULE_SURPLUS_FLOOR,
    SCHEDULE_SURPLUS_SCORES,
    VOLUME_DISTANCE_SCORES,
    VOLUME_IDEAL_RANGES,
    VOLUME_OUT_OF_RANGE_SCORE,
    VOLUME_UNKNOWN_SCORE,
    FitnessLevel,
    TrainingGoal,
)


# =============================================================================
# MATCH FUNCTIONS
# =============================================================================

def level_distance(user_level: FitnessLevel, template_level: FitnessLevel) -> int:
    """Signed distance on the level order; positive when the template is stricter."""
    return FITNESS_LEVEL_ORDER.index(template_level) - FITNESS_LEVEL_ORDER.index(user_level)


def fitness_level_match(user_level: FitnessLevel, template_level: FitnessLevel) -> float:
    """Ordered-distance score; stricter templates never beat milder ones."""
    return FITNESS_LEVEL_DISTANCE_SCORES[level_distance(user_level, template_level)]


def goal_match(user_goal: TrainingGoal, template_goal: TrainingGoal) -> float:
    if user_goal == template_goal:
        return 100.0
    return GOAL_COMPATIBILITY.get(user_goal, {}).get(template_goal, GOAL_MISMATCH_SCORE)


def schedule_match(available_days: int, required_days: int) -> float:
    """
    Compare the user's weekly availability with the plan's requirement.

    Missing days are penalised harder than spare days: a plan needing
    more days than the user has is likely infeasible.
    """
    delta = available_days - required_days
    if delta == 0:
        return 100.0
    if delta > 0:
        return SCHEDULE_SURPLUS_SCORES.get(delta, SCHEDULE_SURPLUS_FLOOR)
    return SCHEDULE_DEFICIT_SCORES.get(-delta, SCHEDULE_DEFICIT_FLOOR)


def meets_experience_floor(experience_months: int, min_months: int) -> bool:
    return experience_months >= min_months


def volume_match(user_level: FitnessLevel, exercises_per_workout: Optional[int]) -> float:
    """
    Score the plan's exercises per workout against the ideal range for the level.

    Templates without pre-computed volume get a neutral score.
    """
    if exercises_per_workout is None:
        return VOLUME_UNKNOWN_SCORE

    low, high = VOLUME_IDEAL_RANGES[user_level]
    if exercises_per_workout < low:
        distance = low - exercises_per_workout
    elif exercises_per_workout > high:
        distance = exercises_per_workout - high
    else:
        distance = 0
    return VOLUME_DISTANCE_SCORES.get(distance, VOLUME_OUT_OF_RANGE_SCORE)


# =============================================================================
# DIMENSION SCORERS
# =============================================================================

def score_fitness_level(
    profile: UserProfile,
    template: PlanTemplate
) -> Tuple[DimensionScore, List[str]]:
    """
    Score alignment between the user's level and the plan's target level.

    Also notes when a user one level below the plan is close to
    progressing; the note does not change the score.
    """
    notes: List[str] = []
    distance = level_distance(profile.fitness_level, template.fitness_level)
    raw_score = fitness_level_match(profile.fitness_level, template.fitness_level)

    if distance == 0:
        notes.append("Perfect fit for your training level")
    elif distance < 0:
        notes.append("Below your level - works as a back-to-basics or deload block")
    elif distance == 1:
        ready_months = PROGRESSION_READY_MONTHS.get(profile.fitness_level)
        max_floor = PROGRESSION_MAX_TEMPLATE_MONTHS.get(profile.fitness_level)
        if (
            ready_months is not None
            and profile.training_experience_months >= ready_months
            and template.min_training_experience_months <= max_floor
        ):
            notes.append("You are close to the next level - ready for the challenge?")
        else:
            notes.append("One level above your current training level")
    else:
        notes.append("Not suitable for your current training level")

    return DimensionScore(
        dimension=DIMENSION_FITNESS_LEVEL,
        score=raw_score,
        explanation=(
            f"User: {profile.fitness_level.value}, Plan: {template.fitness_level.value}, "
            f"Distance: {distance:+d}"
        ),
    ), notes


def score_goal(
    profile: UserProfile,
    template: PlanTemplate
) -> Tuple[DimensionScore, List[str]]:
    """Score how well the plan's focus serves the user's goal."""
    notes: List[str] = []
    raw_score = goal_match(profile.primary_goal, template.primary_goal)

    if raw_score == 100.0:
        notes.append("Perfect for your training goal")
    elif raw_score >= 70.0:
        notes.append("Well suited to your training goal")

    return DimensionScore(
        dimension=DIMENSION_GOAL,
        score=raw_score,
        explanation=(
            f"User goal: {profile.primary_goal.value}, Plan goal: {template.primary_goal.value}"
        ),
    ), notes


def score_schedule(
    profile: UserProfile,
    template: PlanTemplate
) -> Tuple[DimensionScore, List[str]]:
    notes: List[str] = []
    available = profile.available_training_days
    required = template.days_per_week
    raw_score = schedule_match(available, required)

    if available == required:
        notes.append(f"Fits your {available} training days perfectly")
    elif available > required:
        notes.append(f"Needs {required} of your {available} training days")
    else:
        notes.append(f"Requires {required} training days (you have {available})")

    return DimensionScore(
        dimension=DIMENSION_SCHEDULE,
        score=raw_score,
        explanation=f"Available: {available} days, Required: {required} days",
    ), notes


def score_eligibility(
    profile: UserProfile,
    template: PlanTemplate
) -> Tuple[DimensionScore, List[str]]:
    """
    Eligibility threshold on training experience.

    Full credit at or above the plan's floor and nothing below it; extra
    months above the floor earn no bonus.
    """
    notes: List[str] = []
    months = profile.training_experience_months
    floor = template.min_training_experience_months
    eligible = meets_experience_floor(months, floor)

    if not eligible:
        notes.append(f"Requires at least {floor} months of training experience (you have {months})")

    return DimensionScore(
        dimension=DIMENSION_ELIGIBILITY,
        score=ELIGIBLE_SCORE if eligible else INELIGIBLE_SCORE,
        explanation=f"Experience: {months} months, Minimum: {floor} months",
    ), notes


def score_volume(
    profile: UserProfile,
    template: PlanTemplate
) -> Tuple[DimensionScore, List[str]]:
    raw_score = volume_match(profile.fitness_level, template.exercises_per_workout)
    low, high = VOLUME_IDEAL_RANGES[profile.fitness_level]

    if template.exercises_per_workout is None:
        explanation = "Exercises per workout: unknown"
    else:
        explanation = (
            f"Exercises per workout: {template.exercises_per_workout}, Ideal: {low}-{high}"
        )

    return DimensionScore(
        dimension=DIMENSION_VOLUME,
        score=raw_score,
        explanation=explanation,
    ), []


# Order matters only for the order of reasoning notes
DIMENSION_SCORERS = [
    score_fitness_level,
    score_schedule,
    score_goal,
    score_eligibility,
    score_volume,
]
