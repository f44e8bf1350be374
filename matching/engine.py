"""
Matching orchestration layer.

Scores every catalog career against a user's trait percentages and
returns the best fits. Scoring itself lives in matching.traits.
"""
from typing import List, Mapping, Optional, Sequence, Union

from core.traits import PersonalityScores
from ingestion.build_career_profiles import get_careers
from matching.traits import calculate_match_score
from models.career_profile import Career

DEFAULT_TOP_N = 5

ScoresInput = Union[PersonalityScores, Mapping[str, int]]


def rank_careers(
    user_scores: ScoresInput,
    catalog: Optional[Sequence[Career]] = None,
) -> List[Career]:
    """
    Every catalog career with its match score attached, best first.
    Ties keep catalog order (sorted() is stable).
    """
    user = PersonalityScores.coerce(user_scores)
    if catalog is None:
        catalog = get_careers()

    matched = [career.with_match_score(calculate_match_score(user, career)) for career in catalog]
    return sorted(matched, key=lambda career: career.match_score, reverse=True)


def match_careers(
    user_scores: ScoresInput,
    catalog: Optional[Sequence[Career]] = None,
    limit: int = DEFAULT_TOP_N,
) -> List[Career]:
    """
    Entry point for matching.
    Returns the top `limit` careers, sorted by match score descending.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative: {limit}")
    return rank_careers(user_scores, catalog)[:limit]
