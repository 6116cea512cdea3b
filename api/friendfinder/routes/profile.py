from typing import Any

from fastapi import APIRouter

from ..http_helpers import validate_signup_payload
from ..services.profile_completion import build_completion_report

router = APIRouter()
scaffold_router = APIRouter()


@scaffold_router.get("/health")
def profile_scaffold_health() -> dict[str, str]:
    return {"status": "ok", "module": "profile"}


@router.post("/profile/completion")
def profile_completion(payload: dict[str, Any]) -> dict[str, Any]:
    return build_completion_report(payload)


@router.post("/profile/validate")
def validate_profile(payload: dict[str, Any]) -> dict[str, Any]:
    cleaned = validate_signup_payload(payload)
    return {"valid": True, **cleaned}
