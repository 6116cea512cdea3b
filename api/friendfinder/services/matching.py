from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .compatibility import ScoreBreakdown, score_profiles

logger = logging.getLogger(__name__)


@dataclass
class RankedCandidate:
    user_id: str
    score: int
    compatible: bool
    breakdown: ScoreBreakdown


def _candidate_id(candidate: Mapping[str, Any]) -> str | None:
    value = candidate.get("user_id") or candidate.get("id")
    if value is None:
        return None
    v = str(value).strip()
    return v or None


def rank_candidates(
    profile: Mapping[str, Any],
    candidates: Iterable[Mapping[str, Any]],
    *,
    user_id: str | None = None,
    min_score: int = 0,
    limit: int | None = None,
    exclude: set[str] | None = None,
    weights: Mapping[str, float] | None = None,
) -> list[RankedCandidate]:
    exclude = exclude or set()
    seen: set[str] = set()
    ranked: list[RankedCandidate] = []

    for candidate in candidates:
        cid = _candidate_id(candidate)
        if not cid:
            logger.debug("[matching] skipping candidate without id")
            continue
        if cid == user_id or cid in exclude or cid in seen:
            continue
        seen.add(cid)

        result = score_profiles(profile, candidate.get("profile") or {}, weights=weights)
        if result.score < min_score:
            continue
        ranked.append(
            RankedCandidate(
                user_id=cid,
                score=result.score,
                compatible=result.compatible,
                breakdown=result.breakdown,
            )
        )

    ranked.sort(key=lambda r: (-r.score, r.user_id))
    if limit is not None:
        ranked = ranked[: max(0, limit)]
    return ranked
