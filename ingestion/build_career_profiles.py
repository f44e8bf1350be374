import json
from functools import lru_cache
from pathlib import Path
from typing import Optional, Sequence, Tuple

from core.config import get_settings
from core.errors import ConfigurationError
from core.logger import get_logger
from models.career_profile import Career

logger = get_logger("careers")


def build_careers(entries: Sequence[dict]) -> Tuple[Career, ...]:
    """
    Turn raw catalog entries into Career records, keeping catalog order.
    """
    careers = tuple(Career.from_dict(entry) for entry in entries)

    seen = set()
    for career in careers:
        if career.id in seen:
            raise ConfigurationError(f"Duplicate career id: {career.id}")
        seen.add(career.id)

    missing = [c.id for c in careers if not c.has_ideal_profile]
    if missing:
        logger.warning("Careers without personality_match will use the fallback score: %s", ", ".join(missing))

    return careers


def load_careers(path: Optional[Path] = None) -> Tuple[Career, ...]:
    path = Path(path) if path else get_settings().careers_file

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read career catalog {path}: {e}") from e

    entries = raw.get("careers") if isinstance(raw, dict) else raw
    if not isinstance(entries, list):
        raise ConfigurationError(f"Career catalog {path} has no 'careers' list")

    careers = build_careers(entries)
    logger.info("Loaded %d careers from %s", len(careers), path.name)
    return careers


@lru_cache(maxsize=1)
def get_careers() -> Tuple[Career, ...]:
    """Bundled career catalog, loaded once per process."""
    return load_careers()


def get_career_by_id(career_id: str, catalog: Optional[Sequence[Career]] = None) -> Optional[Career]:
    if catalog is None:
        catalog = get_careers()
    for career in catalog:
        if career.id == career_id:
            return career
    return None
