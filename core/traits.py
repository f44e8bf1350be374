import math
from collections.abc import Mapping
from numbers import Real

from core.errors import ValidationError


# Big Five (OCEAN) dimensions, in display order
TRAIT_TYPES = [
    "openness",
    "conscientiousness",
    "extraversion",
    "agreeableness",
    "neuroticism",
]

SCORE_MIN = 0
SCORE_MAX = 100


def clamp(value, low=0.0, high=1.0):
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def _is_number(value) -> bool:
    # bool is an int subclass but never a valid score
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


# Personality scores are the 0-100 percentages computed from a quiz submission
class PersonalityScores:
    """
    Immutable mapping of each trait to an integer percentage in [0, 100].
    """

    def __init__(self, scores):
        if not isinstance(scores, Mapping):
            raise ValidationError(f"Scores must be a mapping, got {type(scores).__name__}")

        errors = []
        unknown = [name for name in scores if name not in TRAIT_TYPES]
        if unknown:
            errors.append(f"Unknown traits: {', '.join(sorted(map(str, unknown)))}")

        cleaned = {}
        for trait in TRAIT_TYPES:
            if trait not in scores:
                errors.append(f"Missing trait: {trait}")
                continue

            value = scores[trait]
            if not _is_number(value):
                errors.append(f"Score for {trait} must be numeric: {value!r}")
                continue
            if value != int(value):
                errors.append(f"Score for {trait} must be a whole number: {value!r}")
                continue
            if not SCORE_MIN <= value <= SCORE_MAX:
                errors.append(f"Score for {trait} out of range [0, 100]: {value!r}")
                continue

            cleaned[trait] = int(value)

        if errors:
            raise ValidationError(errors)

        self._scores = cleaned

    @classmethod
    def coerce(cls, scores):
        if isinstance(scores, cls):
            return scores
        return cls(scores)

    @property
    def scores(self) -> dict:
        return dict(self._scores)

    def normalised(self) -> dict:
        return {trait: value / 100 for trait, value in self._scores.items()}

    def to_dict(self) -> dict:
        return self.scores

    def __getitem__(self, trait):
        return self._scores[trait]

    def __iter__(self):
        return iter(TRAIT_TYPES)

    def __eq__(self, other):
        if isinstance(other, PersonalityScores):
            return self._scores == other._scores
        if isinstance(other, dict):
            return self._scores == other
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self._scores[t] for t in TRAIT_TYPES))

    def __repr__(self):
        inner = ", ".join(f"{t}={self._scores[t]}" for t in TRAIT_TYPES)
        return f"PersonalityScores({inner})"
