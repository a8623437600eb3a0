import pytest

from plan_recommendation.logic import (
    FitnessLevel,
    PlanTemplate,
    TrainingGoal,
    UserProfile,
    generate_mock_templates,
)


@pytest.fixture
def mock_templates():
    return generate_mock_templates()


@pytest.fixture
def beginner_strength():
    return UserProfile(
        fitness_level=FitnessLevel.BEGINNER,
        training_experience_months=2,
        available_training_days=3,
        primary_goal=TrainingGoal.STRENGTH,
    )


@pytest.fixture
def advanced_strength():
    return UserProfile(
        fitness_level=FitnessLevel.ADVANCED,
        training_experience_months=48,
        available_training_days=4,
        primary_goal=TrainingGoal.STRENGTH,
    )


@pytest.fixture
def intermediate_hypertrophy():
    return UserProfile(
        fitness_level=FitnessLevel.INTERMEDIATE,
        training_experience_months=18,
        available_training_days=4,
        primary_goal=TrainingGoal.HYPERTROPHY,
    )


@pytest.fixture
def make_template():
    """Factory for templates that differ only in the fields a test cares about."""
    def _make(**overrides):
        fields = {
            "id": "t",
            "plan_type": "custom",
            "name": "Custom Plan",
            "fitness_level": FitnessLevel.BEGINNER,
            "primary_goal": TrainingGoal.STRENGTH,
            "days_per_week": 3,
            "min_training_experience_months": 0,
            "difficulty_rating": 2,
            "completion_status": "complete",
        }
        fields.update(overrides)
        return PlanTemplate(**fields)
    return _make
