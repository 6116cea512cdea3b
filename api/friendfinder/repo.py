import json
from typing import Any

from sqlalchemy import text

from friendfinder.database import SessionLocal


def _decode_lifestyle(value: Any) -> dict[str, Any]:
    if isinstance(value, dict):
        return value
    if isinstance(value, str) and value.strip():
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            return {}
        return decoded if isinstance(decoded, dict) else {}
    return {}


def get_profile_interests(db, user_id: str) -> list[str]:
    rows = db.execute(
        text(
            """
            SELECT i.name
            FROM user_interests ui
            JOIN interests i ON i.id = ui.interest_id
            WHERE ui.user_id = CAST(:user_id AS uuid)
            ORDER BY i.name
            """
        ),
        {"user_id": user_id},
    ).mappings().all()
    return [str(r["name"]) for r in rows if r.get("name")]


def get_profile_by_user_id(user_id: str) -> dict[str, Any] | None:
    with SessionLocal() as db:
        row = db.execute(
            text(
                """
                SELECT user_id, age, location, job_title, job, education, lifestyle
                FROM profiles
                WHERE user_id = CAST(:user_id AS uuid)
                """
            ),
            {"user_id": user_id},
        ).mappings().first()
        if not row:
            return None
        profile = dict(row)
        profile["user_id"] = str(profile["user_id"])
        profile["lifestyle"] = _decode_lifestyle(profile.get("lifestyle"))
        profile["interests"] = get_profile_interests(db, user_id)
    return profile
