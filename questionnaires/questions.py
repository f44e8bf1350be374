import json
from collections import Counter
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Sequence, Tuple

from core.config import get_settings
from core.errors import ConfigurationError
from core.logger import get_logger
from core.traits import TRAIT_TYPES

logger = get_logger("questions")

VALID_WEIGHTS = (1, -1)


@dataclass(frozen=True)
class Question:
    """
    A single Likert item. weight = -1 marks a reverse-scored question.
    """

    id: str
    text: str
    category: str
    weight: int = 1

    def __post_init__(self):
        if self.category not in TRAIT_TYPES:
            raise ConfigurationError(f"Question {self.id}: invalid category {self.category!r}")
        if self.weight not in VALID_WEIGHTS or isinstance(self.weight, bool):
            raise ConfigurationError(f"Question {self.id}: weight must be 1 or -1, got {self.weight!r}")

    @classmethod
    def from_dict(cls, question: dict) -> "Question":
        try:
            q_id = question["id"]
            text = question["text"]
        except KeyError as e:
            raise ConfigurationError(f"Question is missing field {e.args[0]!r}: {question}") from e

        # Older catalogs tag questions with "trait" instead of "category"
        category = question.get("category") or question.get("trait")

        return cls(
            id=str(q_id),
            text=text,
            category=category,
            weight=question.get("weight") or 1,
        )

    @property
    def is_reversed(self) -> bool:
        return self.weight == -1

    def to_dict(self, include_weight: bool = True) -> dict:
        data = {"id": self.id, "text": self.text, "category": self.category}
        if include_weight:
            data["weight"] = self.weight
        return data


def validate_question_catalog(questions: Sequence[Question]) -> None:
    """
    Catalog integrity: non-empty, unique ids, every trait covered.
    """
    if not questions:
        raise ConfigurationError("Question catalog is empty")

    duplicates = [q_id for q_id, n in Counter(q.id for q in questions).items() if n > 1]
    if duplicates:
        raise ConfigurationError(f"Duplicate question ids: {', '.join(sorted(duplicates))}")

    covered = {q.category for q in questions}
    uncovered = [trait for trait in TRAIT_TYPES if trait not in covered]
    if uncovered:
        raise ConfigurationError(f"Traits with no questions: {', '.join(uncovered)}")


def load_questions(path: Optional[Path] = None) -> Tuple[Question, ...]:
    path = Path(path) if path else get_settings().questions_file

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read question catalog {path}: {e}") from e

    entries = raw.get("questions") if isinstance(raw, dict) else raw
    if not isinstance(entries, list):
        raise ConfigurationError(f"Question catalog {path} has no 'questions' list")

    questions = tuple(Question.from_dict(q) for q in entries)
    validate_question_catalog(questions)

    logger.info("Loaded %d questions from %s", len(questions), path.name)
    return questions


@lru_cache(maxsize=1)
def get_questions() -> Tuple[Question, ...]:
    """Bundled question catalog, loaded once per process."""
    return load_questions()
