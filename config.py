import os
import logging

from dotenv import load_dotenv
from pydantic import ValidationError

from plan_recommendation.logic.contracts import EngineConfig
from plan_recommendation.logic.constants import (
    DEFAULT_EXCLUSION_FLOOR,
    DEFAULT_RECOMMENDATION_LIMIT,
    EligibilityGate,
)

load_dotenv()


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} env var must be an integer, got {raw!r}")


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} env var must be a number, got {raw!r}")


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise RuntimeError(f"LOG_LEVEL env var is not a logging level: {LOG_LEVEL!r}")

RECOMMENDATION_DEFAULT_LIMIT = _int("RECOMMENDATION_DEFAULT_LIMIT", DEFAULT_RECOMMENDATION_LIMIT)
if RECOMMENDATION_DEFAULT_LIMIT < 1:
    raise RuntimeError("RECOMMENDATION_DEFAULT_LIMIT env var must be at least 1")

_gate = os.getenv("RECOMMENDATION_ELIGIBILITY_GATE", EligibilityGate.HARD.value).strip().lower()
try:
    RECOMMENDATION_ELIGIBILITY_GATE = EligibilityGate(_gate)
except ValueError:
    raise RuntimeError(
        f"RECOMMENDATION_ELIGIBILITY_GATE env var must be 'hard' or 'soft', got {_gate!r}"
    )

RECOMMENDATION_EXCLUSION_FLOOR = _float("RECOMMENDATION_EXCLUSION_FLOOR", DEFAULT_EXCLUSION_FLOOR)


def get_engine_config() -> EngineConfig:
    """Engine configuration from the environment; weights stay at their documented defaults."""
    try:
        return EngineConfig(
            eligibility_gate=RECOMMENDATION_ELIGIBILITY_GATE,
            exclusion_floor=RECOMMENDATION_EXCLUSION_FLOOR,
        )
    except ValidationError as e:
        raise RuntimeError(f"Invalid recommendation engine settings: {e}") from e
