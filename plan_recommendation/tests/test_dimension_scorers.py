import pytest

from plan_recommendation.logic.constants import FitnessLevel, TrainingGoal
from plan_recommendation.logic.dimension_scorers import (
    fitness_level_match,
    goal_match,
    meets_experience_floor,
    schedule_match,
    score_eligibility,
    score_fitness_level,
    score_goal,
    score_schedule,
    score_volume,
    volume_match,
)

B, I, A = FitnessLevel.BEGINNER, FitnessLevel.INTERMEDIATE, FitnessLevel.ADVANCED


@pytest.mark.parametrize("user,template,expected", [
    (B, B, 100), (I, I, 100), (A, A, 100),
    (I, B, 60), (A, I, 60),
    (B, I, 50), (I, A, 50),
    (A, B, 20),
    (B, A, 10),
])
def test_fitness_level_match(user, template, expected):
    assert fitness_level_match(user, template) == expected


def test_fitness_level_stricter_never_beats_milder():
    assert fitness_level_match(I, A) < fitness_level_match(I, B)
    assert fitness_level_match(B, A) < fitness_level_match(A, B)
    assert fitness_level_match(B, I) < fitness_level_match(I, B)


def test_fitness_level_degrades_with_distance():
    assert fitness_level_match(B, B) > fitness_level_match(B, I) > fitness_level_match(B, A)
    assert fitness_level_match(A, A) > fitness_level_match(A, I) > fitness_level_match(A, B)


@pytest.mark.parametrize("user,template,expected", [
    (TrainingGoal.STRENGTH, TrainingGoal.STRENGTH, 100),
    (TrainingGoal.BOTH, TrainingGoal.BOTH, 100),
    (TrainingGoal.STRENGTH, TrainingGoal.POWERLIFTING, 90),
    (TrainingGoal.STRENGTH, TrainingGoal.BOTH, 80),
    (TrainingGoal.HYPERTROPHY, TrainingGoal.BOTH, 80),
    (TrainingGoal.STRENGTH, TrainingGoal.HYPERTROPHY, 40),
    (TrainingGoal.HYPERTROPHY, TrainingGoal.STRENGTH, 40),
    (TrainingGoal.STRENGTH, TrainingGoal.GENERAL_FITNESS, 50),
    (TrainingGoal.HYPERTROPHY, TrainingGoal.POWERLIFTING, 30),
])
def test_goal_match(user, template, expected):
    assert goal_match(user, template) == expected


@pytest.mark.parametrize("user_goal", [TrainingGoal.STRENGTH, TrainingGoal.HYPERTROPHY])
def test_goal_both_is_superset_match(user_goal):
    superset = goal_match(user_goal, TrainingGoal.BOTH)
    assert goal_match(user_goal, user_goal) > superset
    assert superset > goal_match(user_goal, TrainingGoal.GENERAL_FITNESS)


@pytest.mark.parametrize("available,required,expected", [
    (3, 3, 100), (6, 6, 100),
    (4, 3, 85), (5, 3, 70), (6, 3, 55), (7, 3, 40),
    (3, 4, 60), (3, 5, 35), (3, 6, 15), (2, 6, 0), (1, 7, 0),
])
def test_schedule_match(available, required, expected):
    assert schedule_match(available, required) == expected


@pytest.mark.parametrize("days", [1, 2, 3, 4, 5, 6])
def test_schedule_deficiency_penalised_more_than_surplus(days):
    assert schedule_match(1, 1 + days) < schedule_match(1 + days, 1)


def test_experience_floor_is_a_threshold():
    assert meets_experience_floor(12, 12)
    assert meets_experience_floor(120, 12)
    assert not meets_experience_floor(11, 12)


@pytest.mark.parametrize("level,exercises,expected", [
    (B, 5, 100), (B, 4, 100), (B, 6, 100),
    (B, 3, 80), (B, 7, 80),
    (B, 8, 60), (B, 2, 60),
    (B, 10, 40),
    (A, 9, 100), (A, 5, 80),
    (I, None, 75),
])
def test_volume_match(level, exercises, expected):
    assert volume_match(level, exercises) == expected


def test_scorers_return_dimension_scores(beginner_strength, mock_templates):
    starting_strength = mock_templates[0]
    for scorer, dimension in [
        (score_fitness_level, "fitness_level"),
        (score_goal, "goal"),
        (score_schedule, "schedule"),
        (score_eligibility, "eligibility"),
        (score_volume, "volume"),
    ]:
        score, notes = scorer(beginner_strength, starting_strength)
        assert score.dimension == dimension
        assert 0 <= score.score <= 100
        assert isinstance(notes, list)


def test_eligibility_scorer_explains_missing_experience(beginner_strength, mock_templates):
    score, notes = score_eligibility(beginner_strength, mock_templates[7])
    assert score.score == 0
    assert any("36 months" in note for note in notes)


def test_progression_note_does_not_change_score(make_template, beginner_strength):
    template = make_template(fitness_level=I)
    ready = beginner_strength.model_copy(update={"training_experience_months": 11})

    ready_score, ready_notes = score_fitness_level(ready, template)
    base_score, base_notes = score_fitness_level(beginner_strength, template)

    assert ready_score.score == base_score.score == 50
    assert any("close to the next level" in n for n in ready_notes)
    assert not any("close to the next level" in n for n in base_notes)


def test_progression_note_skipped_when_plan_floor_is_too_high(make_template, beginner_strength):
    template = make_template(fitness_level=I, min_training_experience_months=18)
    ready = beginner_strength.model_copy(update={"training_experience_months": 10})

    score, notes = score_fitness_level(ready, template)
    assert score.score == 50
    assert not any("close to the next level" in n for n in notes)
    assert "One level above your current training level" in notes

    at_cap = make_template(fitness_level=I, min_training_experience_months=12)
    _, cap_notes = score_fitness_level(ready, at_cap)
    assert any("close to the next level" in n for n in cap_notes)
