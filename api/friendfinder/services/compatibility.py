"""Profile-to-profile compatibility scoring.

Six factor scores, each in [0, 100], are blended with fixed weights into a
0-100 match percentage. A factor with no data on either side gets the neutral
score (50); a factor with data on only one side gets 0, except age, which
stays neutral whenever either age is missing.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Mapping

from ..config import COMPATIBLE_THRESHOLD, DEFAULT_MATCH_WEIGHTS

NEUTRAL_SCORE = 50.0

LIFESTYLE_FACTORS = ("drinking", "smoking", "exercise", "pets")

INDUSTRY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "tech": ("software", "developer", "engineer", "programmer", "it", "technology"),
    "healthcare": ("doctor", "nurse", "medical", "health", "hospital"),
    "education": ("teacher", "professor", "educator", "school"),
    "finance": ("banker", "accountant", "financial", "finance", "investment"),
    "marketing": ("marketing", "advertising", "brand", "pr", "public relations"),
    "design": ("designer", "graphic", "ui", "ux", "creative"),
}

HIGHER_EDUCATION_TERMS = ("university", "college", "bachelor", "master", "phd", "doctorate")

# (max age gap, score); gaps beyond the last step score 10.
AGE_STEPS: tuple[tuple[int, float], ...] = ((0, 100.0), (2, 80.0), (5, 60.0), (10, 40.0), (15, 20.0))


@dataclass(frozen=True)
class ScoreBreakdown:
    hobbies: float
    job: float
    age: float
    location: float
    lifestyle: float
    education: float


@dataclass(frozen=True)
class MatchResult:
    score: int
    compatible: bool
    breakdown: ScoreBreakdown

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _interest_name(item: Any) -> str:
    if isinstance(item, str):
        name = item
    elif isinstance(item, Mapping):
        name = item.get("name")
    else:
        name = getattr(item, "name", None)
    if not isinstance(name, str):
        return ""
    return name.strip().lower()


def normalize_interests(interests: Iterable[Any] | None) -> set[str]:
    return {n for n in (_interest_name(i) for i in (interests or [])) if n}


def hobbies_score(interests_a: Iterable[Any] | None, interests_b: Iterable[Any] | None) -> float:
    set_a = normalize_interests(interests_a)
    set_b = normalize_interests(interests_b)
    if not set_a and not set_b:
        return NEUTRAL_SCORE
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / len(set_a | set_b) * 100.0


def _industries(title: str) -> set[str]:
    return {name for name, keywords in INDUSTRY_KEYWORDS.items() if any(k in title for k in keywords)}


def job_score(job_a: str | None, job_b: str | None) -> float:
    if not job_a and not job_b:
        return NEUTRAL_SCORE
    if not job_a or not job_b:
        return 0.0

    j1 = job_a.strip().lower()
    j2 = job_b.strip().lower()
    if j1 == j2:
        return 100.0
    if j1 in j2 or j2 in j1:
        return 50.0
    if _industries(j1) & _industries(j2):
        return 50.0
    return 0.0


def age_score(age_a: int | None, age_b: int | None) -> float:
    if not age_a or not age_b:
        return NEUTRAL_SCORE
    gap = abs(age_a - age_b)
    for max_gap, score in AGE_STEPS:
        if gap <= max_gap:
            return score
    return 10.0


def location_score(location_a: str | None, location_b: str | None) -> float:
    if not location_a and not location_b:
        return NEUTRAL_SCORE
    if not location_a or not location_b:
        return 0.0

    loc1 = location_a.strip().lower()
    loc2 = location_b.strip().lower()
    if loc1 == loc2:
        return 100.0

    parts1 = loc1.split(",")
    parts2 = loc2.split(",")
    if parts1[0].strip() == parts2[0].strip():
        return 70.0

    region1 = parts1[1].strip() if len(parts1) > 1 else ""
    region2 = parts2[1].strip() if len(parts2) > 1 else ""
    if region1 and region2 and region1 == region2:
        return 50.0
    return 30.0


def lifestyle_score(lifestyle_a: Mapping[str, Any] | None, lifestyle_b: Mapping[str, Any] | None) -> float:
    lifestyle_a = lifestyle_a or {}
    lifestyle_b = lifestyle_b or {}
    matches = 0
    considered = 0
    for factor in LIFESTYLE_FACTORS:
        value_a = lifestyle_a.get(factor)
        value_b = lifestyle_b.get(factor)
        if not value_a or not value_b:
            continue
        considered += 1
        if str(value_a).lower() == str(value_b).lower():
            matches += 1
    if considered == 0:
        return NEUTRAL_SCORE
    return matches / considered * 100.0


def _is_higher_education(education: str) -> bool:
    return any(term in education for term in HIGHER_EDUCATION_TERMS)


def education_score(education_a: str | None, education_b: str | None) -> float:
    if not education_a and not education_b:
        return NEUTRAL_SCORE
    if not education_a or not education_b:
        return 0.0

    e1 = education_a.strip().lower()
    e2 = education_b.strip().lower()
    if e1 == e2:
        return 100.0
    if _is_higher_education(e1) == _is_higher_education(e2):
        return 60.0
    return 20.0


def _job_title(profile: Mapping[str, Any]) -> str | None:
    return profile.get("job_title") or profile.get("jobTitle") or profile.get("job")


def score_breakdown(profile_a: Mapping[str, Any], profile_b: Mapping[str, Any]) -> ScoreBreakdown:
    return ScoreBreakdown(
        hobbies=hobbies_score(profile_a.get("interests"), profile_b.get("interests")),
        job=job_score(_job_title(profile_a), _job_title(profile_b)),
        age=age_score(profile_a.get("age"), profile_b.get("age")),
        location=location_score(profile_a.get("location"), profile_b.get("location")),
        lifestyle=lifestyle_score(profile_a.get("lifestyle"), profile_b.get("lifestyle")),
        education=education_score(profile_a.get("education"), profile_b.get("education")),
    )


def weighted_total(breakdown: ScoreBreakdown, weights: Mapping[str, float] | None = None) -> int:
    weights = weights or DEFAULT_MATCH_WEIGHTS
    factors = asdict(breakdown)
    total = sum(factors[name] * float(weights.get(name, 0.0)) for name in factors)
    # round half up, then clamp regardless of the weights in use
    return min(100, max(0, math.floor(total + 0.5)))


def score_profiles(
    profile_a: Mapping[str, Any],
    profile_b: Mapping[str, Any],
    weights: Mapping[str, float] | None = None,
    threshold: int | None = None,
) -> MatchResult:
    breakdown = score_breakdown(profile_a or {}, profile_b or {})
    score = weighted_total(breakdown, weights)
    cutoff = COMPATIBLE_THRESHOLD if threshold is None else threshold
    return MatchResult(score=score, compatible=score >= cutoff, breakdown=breakdown)


def calculate_match_percentage(profile_a: Mapping[str, Any], profile_b: Mapping[str, Any]) -> int:
    return score_profiles(profile_a, profile_b).score
