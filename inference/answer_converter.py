from typing import Dict, List, Optional, Sequence

from core.errors import ConfigurationError, ValidationError
from core.traits import TRAIT_TYPES, PersonalityScores, round_half_up
from questionnaires.questions import Question, get_questions

LIKERT_MIN = 1
LIKERT_MAX = 5

# Reverse scoring maps 1<->5, 2<->4 and leaves 3 alone
REVERSE_OFFSET = LIKERT_MIN + LIKERT_MAX


def validate_answers(answers: Sequence[int], questions: Sequence[Question]) -> List[str]:
    """
    Check a raw answer list against the question catalog.
    Returns a list of problems; empty means the answers are usable.
    """
    if isinstance(answers, (str, bytes)) or not isinstance(answers, Sequence):
        return [f"Answers must be a list, got {type(answers).__name__}"]

    errors = []

    if len(answers) != len(questions):
        errors.append(f"Expected {len(questions)} answers, got {len(answers)}")

    for i, value in enumerate(answers):
        if isinstance(value, bool) or not isinstance(value, int):
            errors.append(f"Answer {i + 1} must be an integer: {value!r}")
        elif not LIKERT_MIN <= value <= LIKERT_MAX:
            errors.append(f"Answer {i + 1} out of range [{LIKERT_MIN}, {LIKERT_MAX}]: {value}")

    return errors


def score_answer(value: int, question: Question) -> int:
    if question.is_reversed:
        return REVERSE_OFFSET - value
    return value


def calculate_scores(answers: Sequence[int], questions: Sequence[Question]) -> PersonalityScores:
    """
    Convert positional Likert answers (1-5) into 0-100 trait percentages.

    Each trait score is the mean (reverse-scored where needed) answer of its
    questions divided by the maximum answer, as a rounded percentage.
    """
    errors = validate_answers(answers, questions)
    if errors:
        raise ValidationError(errors)

    trait_sums: Dict[str, int] = {trait: 0 for trait in TRAIT_TYPES}
    trait_counts: Dict[str, int] = {trait: 0 for trait in TRAIT_TYPES}

    for question, value in zip(questions, answers):
        trait_sums[question.category] += score_answer(value, question)
        trait_counts[question.category] += 1

    empty = [trait for trait, count in trait_counts.items() if count == 0]
    if empty:
        raise ConfigurationError(f"Traits with no questions: {', '.join(empty)}")

    return PersonalityScores({
        trait: round_half_up((trait_sums[trait] / (trait_counts[trait] * LIKERT_MAX)) * 100)
        for trait in TRAIT_TYPES
    })


def calculate_personality_scores(
    answers: Sequence[int],
    questions: Optional[Sequence[Question]] = None,
) -> PersonalityScores:
    """Score answers against the bundled question catalog."""
    if questions is None:
        questions = get_questions()
    return calculate_scores(answers, questions)
