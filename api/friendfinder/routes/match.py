import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from .. import repo
from ..config import RANK_MAX_CANDIDATES
from ..deps import parse_user_id
from ..schemas import CalculateMatchRequest, MatchResultResponse, RankRequest, RankResponse
from ..services.compatibility import score_profiles
from ..services.matching import rank_candidates

logger = logging.getLogger(__name__)

router = APIRouter()
scaffold_router = APIRouter()


def _load_profile(user_id: str) -> dict[str, Any] | None:
    try:
        return repo.get_profile_by_user_id(user_id)
    except SQLAlchemyError as exc:
        logger.error("[matching] profile lookup failed for user_id=%s: %s", user_id, exc)
        raise HTTPException(status_code=503, detail="Profile store unavailable")


@scaffold_router.get("/health")
def match_scaffold_health() -> dict[str, str]:
    return {"status": "ok", "module": "match"}


@router.post("/matching/calculate", response_model=MatchResultResponse, response_model_exclude_none=True)
def calculate_match(payload: CalculateMatchRequest) -> dict[str, Any]:
    if payload.user1 is not None and payload.user2 is not None:
        result = score_profiles(payload.user1.model_dump(), payload.user2.model_dump())
        return result.to_dict()

    user_id = parse_user_id(payload.user_id, "userId")
    target_user_id = parse_user_id(payload.target_user_id, "targetUserId")
    if not user_id or not target_user_id:
        raise HTTPException(status_code=400, detail="Missing required parameters")

    profile = _load_profile(user_id)
    target = _load_profile(target_user_id)
    if not profile or not target:
        logger.info(
            "[matching] profile not found user_id=%s found=%s target_user_id=%s found=%s",
            user_id,
            bool(profile),
            target_user_id,
            bool(target),
        )
        raise HTTPException(status_code=404, detail="User not found")

    result = score_profiles(profile, target)
    logger.debug("[matching] user_id=%s target_user_id=%s score=%s", user_id, target_user_id, result.score)
    return {**result.to_dict(), "source": "calculated"}


@router.post("/matching/rank", response_model=RankResponse)
def rank_matches(payload: RankRequest) -> dict[str, Any]:
    if len(payload.candidates) > RANK_MAX_CANDIDATES:
        raise HTTPException(
            status_code=400,
            detail=f"At most {RANK_MAX_CANDIDATES} candidates can be ranked per request",
        )
    ranked = rank_candidates(
        payload.user.model_dump(),
        [{"user_id": c.user_id, "profile": c.profile.model_dump()} for c in payload.candidates],
        user_id=payload.user_id,
        min_score=payload.min_score,
        limit=payload.limit,
        exclude=set(payload.exclude),
    )
    return {"results": [asdict(r) for r in ranked]}
