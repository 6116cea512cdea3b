from typing import Any

from .compatibility import LIFESTYLE_FACTORS
from .validation import parse_age

ALLOWED_GENDERS = ("Male", "Female", "Other", "Prefer not to say")

# Placeholder values the sign-up form pre-fills; they do not count as filled in.
PLACEHOLDERS: dict[str, tuple[str, ...]] = {
    "name": ("Your Name",),
    "bio": ("Passionate about connecting with amazing people!",),
    "location": ("New York, NY",),
    "job": ("Software Developer",),
    "education": ("University",),
    "height": (),
    "lookingFor": (),
}

MIN_INTERESTS = 3


def _is_set(value: Any, placeholders: tuple[str, ...] = ()) -> bool:
    if not value:
        return False
    v = str(value).strip()
    if not v:
        return False
    return v not in placeholders


def _text_field(user: dict[str, Any], key: str) -> bool:
    return _is_set(user.get(key), PLACEHOLDERS.get(key, ()))


def _age_ok(user: dict[str, Any]) -> bool:
    age = parse_age(user.get("age"))
    return age is not None and 0 < age <= 100


def _interests_ok(user: dict[str, Any]) -> bool:
    interests = user.get("interests")
    return isinstance(interests, list) and len(interests) >= MIN_INTERESTS


def _lifestyle_ok(user: dict[str, Any]) -> bool:
    lifestyle = user.get("lifestyle") or {}
    return isinstance(lifestyle, dict) and all(lifestyle.get(f) for f in LIFESTYLE_FACTORS)


def _checks(user: dict[str, Any]) -> list[tuple[str, int, bool]]:
    """(missing-field label, weight, satisfied) in display order."""
    return [
        ("Name", 10, _text_field(user, "name")),
        ("Age", 10, _age_ok(user)),
        ("Email or Phone", 10, bool(user.get("email") or user.get("phone"))),
        ("Bio", 10, _text_field(user, "bio")),
        ("Location", 10, _text_field(user, "location")),
        ("Gender", 10, user.get("gender") in ALLOWED_GENDERS),
        ("Job", 5, _text_field(user, "job")),
        ("Education", 5, _text_field(user, "education")),
        ("Height", 5, _text_field(user, "height")),
        ("Looking For", 5, _text_field(user, "lookingFor")),
        (f"Interests (at least {MIN_INTERESTS})", 5, _interests_ok(user)),
        ("Lifestyle preferences", 5, _lifestyle_ok(user)),
    ]


def calculate_profile_completion(user: dict[str, Any] | None) -> int:
    if user is None:
        return 0
    completion = sum(weight for _, weight, ok in _checks(user) if ok)
    return min(100, completion)


def get_missing_fields(user: dict[str, Any] | None) -> list[str]:
    if user is None:
        return []
    return [label for label, _, ok in _checks(user) if not ok]


def get_completion_status(percentage: int) -> str:
    if percentage >= 90:
        return "Excellent!"
    if percentage >= 75:
        return "Great!"
    if percentage >= 50:
        return "Good"
    if percentage >= 25:
        return "Getting there"
    return "Just getting started"


def build_completion_report(user: dict[str, Any] | None) -> dict[str, Any]:
    completion = calculate_profile_completion(user)
    return {
        "completion": completion,
        "missing": get_missing_fields(user),
        "status": get_completion_status(completion),
    }
