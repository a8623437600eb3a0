"""
Ranker

Drops excluded templates, sorts the rest and truncates to the limit.

Tie-break: equal total scores are ordered by difficulty rating ascending
(unrated templates last), then by catalog order.
"""

from typing import List, Tuple

from .contracts import EngineConfig, ScoredTemplate
from .constants import EligibilityGate, UNRATED_DIFFICULTY_SORT_KEY


def is_excluded(scored: ScoredTemplate, config: EngineConfig) -> bool:
    """
    Whether a template is left out of the results entirely.

    Ineligible templates are excluded under the hard gate; any template
    scoring at or below the exclusion floor is excluded regardless.
    """
    if not scored.is_eligible and config.eligibility_gate == EligibilityGate.HARD:
        return True
    return scored.total_score <= config.exclusion_floor


def filter_excluded(
    scored_templates: List[ScoredTemplate],
    config: EngineConfig
) -> List[ScoredTemplate]:
    return [s for s in scored_templates if not is_excluded(s, config)]


def ranking_key(scored: ScoredTemplate) -> Tuple[float, int, int]:
    difficulty = scored.template.difficulty_rating
    if difficulty is None:
        difficulty = UNRATED_DIFFICULTY_SORT_KEY
    return (-scored.total_score, difficulty, scored.catalog_index)


def rank_templates(
    scored_templates: List[ScoredTemplate]
) -> List[ScoredTemplate]:
    """
    Rank templates by total score (descending) with the fixed tie-break.

    Args:
        scored_templates: List of scored templates

    Returns:
        Sorted list by score
    """
    return sorted(scored_templates, key=ranking_key)


def select_top(
    ranked: List[ScoredTemplate],
    limit: int
) -> List[ScoredTemplate]:
    """
    Take the first `limit` ranked templates (all of them if fewer).
    """
    return ranked[:limit]
