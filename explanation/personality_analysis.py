"""
Plain-language reading of a set of trait scores.

Deterministic, template based. Thresholds:
- description: high when score >= 60
- strengths: score >= 70 (neuroticism <= 30 counts as emotional stability)
- development areas: score <= 40 (neuroticism >= 70 needs stress management)
- career recommendations: trait pairs at >= 70 or <= 40
"""
from typing import Dict, List

from core.traits import TRAIT_TYPES, PersonalityScores, round_half_up

HIGH_DESCRIPTION_THRESHOLD = 60
STRENGTH_THRESHOLD = 70
DEVELOPMENT_THRESHOLD = 40
STABILITY_THRESHOLD = 30

TRAIT_DESCRIPTIONS: Dict[str, Dict[str, str]] = {
    "openness": {
        "name": "Openness",
        "high": "You are open to new ideas and experiences, creative and ready for change.",
        "low": "You prefer tradition and stability and approach new things with caution.",
    },
    "conscientiousness": {
        "name": "Conscientiousness",
        "high": "You are organised, responsible and work towards the goals you set yourself.",
        "low": "You prefer to work freely and flexibly and sometimes pay little attention to planning.",
    },
    "extraversion": {
        "name": "Extraversion",
        "high": "You enjoy being around people and are active and full of initiative.",
        "low": "You prefer calm surroundings and working on your own.",
    },
    "agreeableness": {
        "name": "Agreeableness",
        "high": "You are ready to help others, open to cooperation and friendly.",
        "low": "You are independent and think critically, and sometimes prefer competition.",
    },
    "neuroticism": {
        "name": "Emotional sensitivity (Neuroticism)",
        "high": "You may be prone to stress and worry and are emotionally sensitive.",
        "low": "You stay calm and steady when facing problems and cope well with stress.",
    },
}

STRENGTHS: Dict[str, List[str]] = {
    "openness": ["Creative thinking", "Openness to novelty"],
    "conscientiousness": ["Orderliness", "Responsibility", "Goal orientation"],
    "extraversion": ["Social skills", "Leadership", "Energy"],
    "agreeableness": ["Cooperation", "Willingness to help", "Diplomacy"],
    "neuroticism": ["Emotional sensitivity", "Attention to detail"],
}
STABILITY_STRENGTHS = ["Emotional stability", "Stress resilience"]

DEVELOPMENT_AREAS: Dict[str, List[str]] = {
    "openness": ["Trying new experiences", "Developing a creative approach"],
    "conscientiousness": ["Time management", "Self-discipline"],
    "extraversion": ["Developing social skills", "Networking"],
    "agreeableness": ["Developing collaboration skills", "Empathy"],
}
STRESS_DEVELOPMENT_AREAS = ["Coping with stress", "Emotional regulation"]

# (rule name, condition, careers), checked in order
RECOMMENDATION_RULES = [
    (
        "innovation",
        lambda s: s["openness"] >= 70 and s["conscientiousness"] >= 70,
        ["Research and development (R&D)", "Product Manager", "UX/UI Designer"],
    ),
    (
        "people",
        lambda s: s["extraversion"] >= 70 and s["agreeableness"] >= 70,
        ["HR Manager", "Marketing Manager", "Sales Representative", "Project Manager"],
    ),
    (
        "management",
        lambda s: s["conscientiousness"] >= 70 and s["neuroticism"] <= 40,
        ["Operations Manager", "Financial Analyst", "Quality Assurance"],
    ),
    (
        "creative",
        lambda s: s["openness"] >= 70 and s["extraversion"] >= 70,
        ["Content Creator", "Marketing Creative", "Event Manager"],
    ),
    (
        "technical",
        lambda s: s["conscientiousness"] >= 70 and s["extraversion"] <= 40,
        ["Software Developer", "Data Analyst", "Accountant", "Engineer"],
    ),
]
DEFAULT_RECOMMENDATIONS = ["Business Analyst", "Administrative Assistant", "Customer Service"]


def _unique(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


def describe_trait(trait: str, score: int) -> str:
    entry = TRAIT_DESCRIPTIONS[trait]
    return entry["high"] if score >= HIGH_DESCRIPTION_THRESHOLD else entry["low"]


def generate_personality_analysis(scores) -> str:
    scores = PersonalityScores.coerce(scores)

    paragraphs = []
    for trait in TRAIT_TYPES:
        value = scores[trait]
        name = TRAIT_DESCRIPTIONS[trait]["name"]
        paragraphs.append(f"{name}: {value}%\n{describe_trait(trait, value)}")

    return "\n\n".join(paragraphs)


def identify_strengths(scores) -> List[str]:
    scores = PersonalityScores.coerce(scores)

    strengths: List[str] = []
    for trait in TRAIT_TYPES:
        value = scores[trait]
        if value >= STRENGTH_THRESHOLD:
            strengths.extend(STRENGTHS[trait])
        elif trait == "neuroticism" and value <= STABILITY_THRESHOLD:
            strengths.extend(STABILITY_STRENGTHS)

    return _unique(strengths)


def identify_development_areas(scores) -> List[str]:
    scores = PersonalityScores.coerce(scores)

    areas: List[str] = []
    for trait in TRAIT_TYPES:
        value = scores[trait]
        if trait == "neuroticism":
            # Low neuroticism needs no work
            if value >= STRENGTH_THRESHOLD:
                areas.extend(STRESS_DEVELOPMENT_AREAS)
        elif value <= DEVELOPMENT_THRESHOLD:
            areas.extend(DEVELOPMENT_AREAS[trait])

    return _unique(areas)


def generate_career_recommendations(scores) -> List[str]:
    """
    Rule-based career titles for a profile, independent of the catalog.
    Falls back to a general set when no rule applies.
    """
    scores = PersonalityScores.coerce(scores)

    recommendations: List[str] = []
    for _name, condition, careers in RECOMMENDATION_RULES:
        if condition(scores):
            recommendations.extend(careers)

    if not recommendations:
        recommendations = list(DEFAULT_RECOMMENDATIONS)

    return _unique(recommendations)


def overall_score(scores) -> int:
    """Rounded mean of the five trait scores."""
    scores = PersonalityScores.coerce(scores)
    return round_half_up(sum(scores[trait] for trait in TRAIT_TYPES) / len(TRAIT_TYPES))
