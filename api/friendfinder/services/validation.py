import re
from dataclasses import dataclass
from typing import Any

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_NON_DIGIT_RE = re.compile(r"\D")

MIN_AGE = 18
MAX_AGE = 100
MIN_PASSWORD_LENGTH = 8


@dataclass
class ValidationResult:
    valid: bool
    message: str = ""


OK = ValidationResult(valid=True)


def _digits(value: str) -> str:
    return _NON_DIGIT_RE.sub("", value or "")


def validate_phone(phone: str) -> bool:
    return len(_digits(phone)) == 10


def validate_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email or ""))


def validate_password(password: str | None) -> ValidationResult:
    if not password:
        return ValidationResult(False, "Password is required")
    if len(password) < MIN_PASSWORD_LENGTH:
        return ValidationResult(False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if not re.search(r"[A-Za-z]", password):
        return ValidationResult(False, "Password must contain at least one letter")
    if not re.search(r"[0-9]", password):
        return ValidationResult(False, "Password must contain at least one number")
    return OK


def validate_name(name: str | None) -> ValidationResult:
    if not name or not name.strip():
        return ValidationResult(False, "Name is required")
    parts = name.split()
    if len(parts) < 2:
        return ValidationResult(False, "Please enter your first and last name")
    if any(len(p) < 2 for p in parts):
        return ValidationResult(False, "Each name part must be at least 2 characters")
    return OK


def parse_age(age: Any) -> int | None:
    if isinstance(age, bool):
        return None
    if isinstance(age, int):
        return age
    if isinstance(age, float):
        return int(age)
    m = re.match(r"^\s*([+-]?\d+)", str(age or ""))
    return int(m.group(1)) if m else None


def validate_age(age: Any) -> ValidationResult:
    value = parse_age(age)
    if value is None:
        return ValidationResult(False, "Age must be a number")
    if value < MIN_AGE:
        return ValidationResult(False, f"You must be at least {MIN_AGE} years old")
    if value > MAX_AGE:
        return ValidationResult(False, "Please enter a valid age")
    return OK


def validate_location(location: str | None) -> ValidationResult:
    if not location or not location.strip():
        return ValidationResult(False, "Location is required")
    if len(location.strip()) < 2:
        return ValidationResult(False, "Location must be at least 2 characters")
    return OK


def format_phone(value: str) -> str:
    numbers = _digits(value)
    if len(numbers) <= 3:
        return numbers
    if len(numbers) <= 6:
        return f"({numbers[:3]}) {numbers[3:]}"
    return f"({numbers[:3]}) {numbers[3:6]}-{numbers[6:10]}"
