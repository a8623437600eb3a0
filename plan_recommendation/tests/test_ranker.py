import pytest

from plan_recommendation.logic import EligibilityGate, EngineConfig, RecommendationTier
from plan_recommendation.logic.aggregator import aggregate_scores, batch_aggregate
from plan_recommendation.logic.classifier import classify_score, get_tier_counts
from plan_recommendation.logic.ranker import (
    filter_excluded,
    is_excluded,
    rank_templates,
    select_top,
)


@pytest.mark.parametrize("score,tier", [
    (100.0, RecommendationTier.OPTIMAL),
    (90.0, RecommendationTier.OPTIMAL),
    (89.99, RecommendationTier.GOOD),
    (75.0, RecommendationTier.GOOD),
    (74.99, RecommendationTier.ACCEPTABLE),
    (60.0, RecommendationTier.ACCEPTABLE),
    (59.99, RecommendationTier.FALLBACK),
    (0.0, RecommendationTier.FALLBACK),
])
def test_classify_score(score, tier):
    assert classify_score(score) == tier


def test_tier_counts(advanced_strength, mock_templates):
    counts = get_tier_counts(batch_aggregate(advanced_strength, mock_templates))
    assert sum(counts.values()) == len(mock_templates)
    assert counts[RecommendationTier.OPTIMAL] == 0
    assert counts[RecommendationTier.GOOD] == 2


def test_rank_sorts_by_score_descending(advanced_strength, mock_templates):
    ranked = rank_templates(batch_aggregate(advanced_strength, mock_templates))
    scores = [s.total_score for s in ranked]
    assert scores == sorted(scores, reverse=True)


def test_ties_broken_by_difficulty_then_catalog_order(beginner_strength, make_template):
    templates = [
        make_template(id="hard", difficulty_rating=4),
        make_template(id="unrated", difficulty_rating=None),
        make_template(id="easy-a", difficulty_rating=1),
        make_template(id="easy-b", difficulty_rating=1),
    ]
    scored = [
        aggregate_scores(beginner_strength, t, catalog_index=i)
        for i, t in enumerate(templates)
    ]
    assert len({s.total_score for s in scored}) == 1

    ranked = rank_templates(list(reversed(scored)))
    assert [s.template.id for s in ranked] == ["easy-a", "easy-b", "hard", "unrated"]


def test_hard_gate_excludes_ineligible(beginner_strength, mock_templates):
    config = EngineConfig()
    scored = batch_aggregate(beginner_strength, mock_templates, config)
    kept = filter_excluded(scored, config)
    assert [s.template.id for s in kept] == ["1", "2", "3"]


def test_soft_gate_keeps_ineligible(beginner_strength, mock_templates):
    config = EngineConfig(eligibility_gate=EligibilityGate.SOFT)
    scored = batch_aggregate(beginner_strength, mock_templates, config)
    assert len(filter_excluded(scored, config)) == len(mock_templates)


def test_exclusion_floor_is_inclusive(advanced_strength, mock_templates):
    scored = aggregate_scores(advanced_strength, mock_templates[3])  # 78.5
    assert is_excluded(scored, EngineConfig(exclusion_floor=78.5))
    assert not is_excluded(scored, EngineConfig(exclusion_floor=78.4))


def test_select_top_truncates():
    assert select_top([1, 2, 3], 2) == [1, 2]
    assert select_top([1, 2, 3], 10) == [1, 2, 3]
