import uuid

from fastapi import HTTPException


def parse_user_id(raw_user_id: str | None, field: str = "userId") -> str | None:
    if not raw_user_id:
        return None
    value = raw_user_id.strip()
    if not value:
        return None
    try:
        return str(uuid.UUID(value))
    except ValueError:
        raise HTTPException(status_code=400, detail=f"{field} must be a valid UUID")
