"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path

import pytest

from core.logger import reset_logging
from core.traits import TRAIT_TYPES, PersonalityScores
from models.career_profile import Career
from questionnaires.questions import Question


@pytest.fixture(autouse=True)
def _reset_engine_logging():
    """Drop the engine's console handler after each test so it never outlives a captured stream."""
    yield
    reset_logging()


def make_scores(value=None, **overrides) -> PersonalityScores:
    """Scores with every trait set to `value` (default 50), then overrides."""
    base = {trait: 50 if value is None else value for trait in TRAIT_TYPES}
    base.update(overrides)
    return PersonalityScores(base)


@pytest.fixture
def one_per_trait():
    """Five questions, one per trait, none reversed."""
    return tuple(
        Question(id=f"q{i}", text=f"Statement about {trait}", category=trait)
        for i, trait in enumerate(TRAIT_TYPES, start=1)
    )


@pytest.fixture
def one_per_trait_reversed():
    """Five questions, one per trait, all reverse scored."""
    return tuple(
        Question(id=f"r{i}", text=f"Negative statement about {trait}", category=trait, weight=-1)
        for i, trait in enumerate(TRAIT_TYPES, start=1)
    )


@pytest.fixture
def data_scientist() -> Career:
    return Career.from_dict({
        "id": "data-scientist",
        "title": "Data Scientist",
        "personality_match": {
            "openness": 0.9,
            "conscientiousness": 0.9,
            "extraversion": 0.4,
            "agreeableness": 0.6,
            "neuroticism": 0.45,
        },
    })


@pytest.fixture
def no_profile_career() -> Career:
    return Career.from_dict({"id": "mystery", "title": "Mystery Role"})


@pytest.fixture
def small_catalog():
    """Careers with clearly separated ideal profiles."""
    def career(career_id, o, c, e, a, n):
        return Career.from_dict({
            "id": career_id,
            "title": career_id.replace("-", " ").title(),
            "personality_match": {
                "openness": o,
                "conscientiousness": c,
                "extraversion": e,
                "agreeableness": a,
                "neuroticism": n,
            },
        })

    return (
        career("accountant", 0.3, 0.95, 0.3, 0.5, 0.3),
        career("artist", 0.95, 0.4, 0.5, 0.6, 0.6),
        career("sales", 0.5, 0.6, 0.95, 0.6, 0.2),
        career("nurse", 0.5, 0.9, 0.6, 0.95, 0.3),
        career("researcher", 0.95, 0.85, 0.3, 0.5, 0.4),
        career("manager", 0.7, 0.85, 0.8, 0.7, 0.3),
        career("guard", 0.2, 0.7, 0.4, 0.4, 0.3),
    )


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temp file and return its path."""
    def _write(name: str, payload) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
