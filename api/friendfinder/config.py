import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_MATCH_WEIGHTS: dict[str, float] = {
    "hobbies": float(os.getenv("HOBBIES_W", "0.60")),
    "job": float(os.getenv("JOB_W", "0.05")),
    "age": float(os.getenv("AGE_W", "0.10")),
    "location": float(os.getenv("LOCATION_W", "0.10")),
    "lifestyle": float(os.getenv("LIFESTYLE_W", "0.10")),
    "education": float(os.getenv("EDUCATION_W", "0.05")),
}


def apply_weight_overrides(weights: dict[str, float], raw: str) -> dict[str, float]:
    try:
        override: Any = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("MATCH_WEIGHTS_JSON is not valid JSON; using per-factor weights.")
        return weights
    if not isinstance(override, dict):
        logger.warning("MATCH_WEIGHTS_JSON must be an object; using per-factor weights.")
        return weights
    for key, value in override.items():
        if key not in weights:
            continue
        if isinstance(value, bool):
            logger.warning("MATCH_WEIGHTS_JSON weight %s=%r is not a number; skipped.", key, value)
            continue
        try:
            weights[key] = float(value)
        except (TypeError, ValueError):
            logger.warning("MATCH_WEIGHTS_JSON weight %s=%r is not a number; skipped.", key, value)
    return weights


if os.getenv("MATCH_WEIGHTS_JSON"):
    apply_weight_overrides(DEFAULT_MATCH_WEIGHTS, os.getenv("MATCH_WEIGHTS_JSON", "{}"))

COMPATIBLE_THRESHOLD = int(os.getenv("COMPATIBLE_THRESHOLD", "70"))
RANK_MAX_CANDIDATES = int(os.getenv("RANK_MAX_CANDIDATES", "200"))

ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
    if origin.strip()
]
