"""
Score a set of quiz answers and print the career ranking.

    python -m scripts.rank_all_careers 5 4 3 ...
    python -m scripts.rank_all_careers --answers-file answers.json --all
"""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from core.config import get_settings
from core.errors import ValidationError
from core.logger import configure_logging
from core.traits import TRAIT_TYPES
from inference.answer_converter import calculate_personality_scores
from matching.engine import match_careers, rank_careers


def read_answers(args: argparse.Namespace) -> List[int]:
    if args.answers_file:
        with Path(args.answers_file).open("r", encoding="utf-8") as f:
            data = json.load(f)
        # Accept either a bare list or {"answers": [...]}
        return data["answers"] if isinstance(data, dict) else data
    return args.answers


def print_ranking(scores, careers) -> None:
    print("\n===== TRAIT SCORES =====\n")
    for trait in TRAIT_TYPES:
        print(f"  {trait:<18} {scores[trait]:3d}%")

    print("\n===== CAREER RANKINGS =====\n")
    for rank, career in enumerate(careers, start=1):
        print(f"{rank:3d}. {career.title:<28} |  MATCH: {career.match_score:3d}%")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="rank_all_careers", description="Rank careers for a set of quiz answers")
    parser.add_argument("answers", nargs="*", type=int, help="Answers (1-5) in question order")
    parser.add_argument("--answers-file", help="JSON file with a list of answers or {\"answers\": [...]}")
    parser.add_argument("--all", action="store_true", help="Print the full ranking instead of the top matches")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level, stream=sys.stderr)

    if not args.answers and not args.answers_file:
        parser.error("provide answers or --answers-file")

    try:
        answers = read_answers(args)
        scores = calculate_personality_scores(answers)
    except (OSError, json.JSONDecodeError, KeyError) as e:
        print(f"Could not read answers: {e}", file=sys.stderr)
        return 2
    except ValidationError as e:
        print(f"Invalid answers: {e}", file=sys.stderr)
        return 2

    if args.all:
        careers = rank_careers(scores)
    else:
        careers = match_careers(scores, limit=settings.top_n)

    print_ranking(scores, careers)
    return 0


if __name__ == "__main__":
    sys.exit(main())
