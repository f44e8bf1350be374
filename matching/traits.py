from core.logger import get_logger
from core.traits import TRAIT_TYPES, PersonalityScores, clamp, round_half_up
from models.career_profile import Career

logger = get_logger("matching")

# Trait importance weights
TRAIT_WEIGHTS = {
    "openness": 1.2,
    "conscientiousness": 1.4,
    "extraversion": 1.0,
    "agreeableness": 1.0,
    "neuroticism": 0.8,
}

# Score for careers with no ideal profile
FALLBACK_SCORE = 50

# Weighted similarity in [0, 1] is shown on a 65-95 display range
DISPLAY_BASE = 65
DISPLAY_SPAN = 30


def weighted_similarity(user_norm: dict, ideal: dict) -> float:
    """
    Similarity between a normalised user profile and a career's ideal profile.

    Rule:
    - Per trait similarity is 1 - |user - ideal|
    - Each trait counts in proportion to its ideal value times its weight,
      so traits the career cares about dominate
    - An all-zero ideal profile has no signal and scores 0
    """

    weighted_sum = 0.0
    total_weight = 0.0

    for trait in TRAIT_TYPES:
        similarity = 1 - abs(user_norm[trait] - ideal[trait])
        weighted_sum += similarity * ideal[trait] * TRAIT_WEIGHTS[trait]
        total_weight += ideal[trait] * TRAIT_WEIGHTS[trait]

    return weighted_sum / total_weight if total_weight > 0 else 0


def calculate_match_score(user: PersonalityScores, career: Career) -> int:
    """
    Personality fit of one user for one career, as an integer in [0, 100].
    """
    user = PersonalityScores.coerce(user)

    if career.personality_match is None:
        logger.debug("Career %s has no ideal profile, using fallback score", career.id)
        return FALLBACK_SCORE

    avg = weighted_similarity(user.normalised(), career.personality_match)
    score = round_half_up(DISPLAY_BASE + avg * DISPLAY_SPAN)
    return int(clamp(score, 0, 100))
