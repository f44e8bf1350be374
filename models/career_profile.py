from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

from core.errors import ConfigurationError
from core.traits import TRAIT_TYPES


def _ideal_profile(career_id: str, raw) -> Optional[Dict[str, float]]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Career {career_id}: personality_match must be a mapping")

    profile = {}
    for trait in TRAIT_TYPES:
        if trait not in raw:
            raise ConfigurationError(f"Career {career_id}: personality_match is missing {trait}")
        value = raw[trait]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0.0 <= value <= 1.0:
            raise ConfigurationError(
                f"Career {career_id}: personality_match.{trait} must be in [0, 1], got {value!r}"
            )
        profile[trait] = float(value)

    return profile


@dataclass(frozen=True)
class Career:
    """
    Static catalog entry for a single career.
    No scoring logic; match_score is attached to copies only.
    """

    id: str
    title: str
    description: str = ""
    salary: Optional[str] = None
    skills: Tuple[str, ...] = ()
    growth: Optional[str] = None
    companies: Tuple[str, ...] = ()
    category: Optional[str] = None
    demand_level: Optional[str] = None

    # Ideal trait profile, values in [0, 1]
    personality_match: Optional[Dict[str, float]] = field(default=None, compare=False)

    match_score: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Career":
        try:
            career_id = str(data["id"])
            title = data["title"]
        except KeyError as e:
            raise ConfigurationError(f"Career is missing field {e.args[0]!r}: {data}") from e

        return cls(
            id=career_id,
            title=title,
            description=data.get("description", ""),
            salary=data.get("salary") or data.get("averageSalary"),
            skills=tuple(data.get("skills") or data.get("requiredSkills") or ()),
            growth=data.get("growth") or data.get("growthRate"),
            companies=tuple(data.get("companies") or ()),
            category=data.get("category"),
            demand_level=data.get("demand_level") or data.get("demandLevel"),
            personality_match=_ideal_profile(career_id, data.get("personality_match")),
        )

    @property
    def has_ideal_profile(self) -> bool:
        return self.personality_match is not None

    def with_match_score(self, score: int) -> "Career":
        return replace(self, match_score=score)

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "salary": self.salary,
            "skills": list(self.skills),
            "growth": self.growth,
            "companies": list(self.companies),
            "category": self.category,
            "demandLevel": self.demand_level,
            "personality_match": dict(self.personality_match) if self.personality_match else None,
        }
        if self.match_score is not None:
            data["matchScore"] = self.match_score
        return data
