"""
Runtime configuration, read from the environment (and a local .env file).
"""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parents[1]
DATA_DIR = BASE_DIR / "data"

QUESTIONS_FILE = DATA_DIR / "personality_questions.json"
CAREERS_FILE = DATA_DIR / "careers.json"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    top_n: int = 5
    log_level: str = "INFO"
    questions_file: Path = QUESTIONS_FILE
    careers_file: Path = CAREERS_FILE
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def load_settings() -> Settings:
    top_n = int(os.getenv("CAREERPATH_TOP_N", "5"))
    if top_n < 1:
        raise ValueError(f"CAREERPATH_TOP_N must be positive: {top_n}")

    return Settings(
        top_n=top_n,
        log_level=os.getenv("CAREERPATH_LOG_LEVEL", "INFO").upper(),
        questions_file=Path(os.getenv("CAREERPATH_QUESTIONS_FILE", str(QUESTIONS_FILE))),
        careers_file=Path(os.getenv("CAREERPATH_CAREERS_FILE", str(CAREERS_FILE))),
        cors_origins=_split_origins(os.getenv("CAREERPATH_CORS_ORIGINS", "*")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
