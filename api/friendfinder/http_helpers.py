from typing import Any

from fastapi import HTTPException

from .services.validation import (
    ValidationResult,
    format_phone,
    parse_age,
    validate_age,
    validate_email,
    validate_location,
    validate_name,
    validate_password,
    validate_phone,
)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _require(result: ValidationResult) -> None:
    if not result.valid:
        raise HTTPException(status_code=400, detail=result.message)


def validate_signup_payload(payload: dict[str, Any]) -> dict[str, Any]:
    raw_name = payload.get("name")
    name = str(raw_name) if raw_name is not None else None
    _require(validate_name(name))

    raw_email = str(payload.get("email") or "").strip()
    raw_phone = str(payload.get("phone") or "").strip()
    if not raw_email and not raw_phone:
        raise HTTPException(status_code=400, detail="Email or phone is required")

    email: str | None = None
    if raw_email:
        email = normalize_email(raw_email)
        if not validate_email(email):
            raise HTTPException(status_code=400, detail="Invalid email format")

    phone: str | None = None
    if raw_phone:
        if not validate_phone(raw_phone):
            raise HTTPException(status_code=400, detail="Phone number must have 10 digits")
        phone = format_phone(raw_phone)

    if "password" in payload:
        raw_password = payload.get("password")
        _require(validate_password(str(raw_password) if raw_password is not None else None))

    _require(validate_age(payload.get("age")))

    raw_location = payload.get("location")
    location = str(raw_location) if raw_location is not None else None
    _require(validate_location(location))

    return {
        "name": " ".join(name.split()),
        "email": email,
        "phone": phone,
        "age": parse_age(payload.get("age")),
        "location": location.strip(),
    }
