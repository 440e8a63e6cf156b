from __future__ import annotations
import os, json, pathlib, random


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# dominant, auxiliary, tertiary, inferior
STACK_WEIGHTS: tuple[float, float, float, float] = (4.0, 2.0, 1.0, 0.5)

LIKERT_MIN: int = 1
LIKERT_MAX: int = 5
LIKERT_MIDPOINT: int = 3
LIKERT_REVERSE_BASE: int = 6
SCORE_EMPHASIS_EXPONENT: float = 1.2

NORM_RAW_MIN: float = -20.0
NORM_RAW_MAX: float = 20.0
NORM_OUT_MIN: int = 0
NORM_OUT_MAX: int = 100

CONFIDENCE_EPSILON: float = 1e-6
CONFIDENCE_MIN: int = 0
CONFIDENCE_MAX: int = 100
CONFIDENCE_HIGH_THRESHOLD: int = 30

SHUFFLE_MAX_ATTEMPTS: int = 1000
PROVISIONAL_MIN_ANSWERS: int = 8

BANK_MIN_PER_DIMENSION: int = 8
BANK_MIN_REVERSED_PER_DIMENSION: int = 1

DEBUG_TRACE: bool = False
SEED: int | None = None
TRACE_FIELDS: tuple[str, ...] = (
    "question_id",
    "dimension",
    "value",
    "is_reversed",
    "previous_value",
    "delta",
    "score_after",
)
# // env overrides for local runs; model constants above are fixed.
SHUFFLE_MAX_ATTEMPTS = _env_int("SHUFFLE_MAX_ATTEMPTS", SHUFFLE_MAX_ATTEMPTS)
PROVISIONAL_MIN_ANSWERS = _env_int("PROVISIONAL_MIN_ANSWERS", PROVISIONAL_MIN_ANSWERS)
CONFIDENCE_HIGH_THRESHOLD = _env_int("CONFIDENCE_HIGH_THRESHOLD", CONFIDENCE_HIGH_THRESHOLD)
DEBUG_TRACE = _env_bool("DEBUG_TRACE", False)
_seed_raw = os.getenv("SEED")
SEED = _env_int("SEED", 0) if _seed_raw and _seed_raw.strip() else None


def load_config() -> dict:
    cfg: dict = {}
    p = pathlib.Path("config.json")
    if p.exists():
        try:
            cfg = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            cfg = {}
    e = os.environ
    if e.get("SEED"):
        cfg["SEED"] = _env_int("SEED", 0)
    if e.get("PROVISIONAL_MIN_ANSWERS"):
        cfg["PROVISIONAL_MIN_ANSWERS"] = PROVISIONAL_MIN_ANSWERS
    return cfg


def make_rng(cfg: dict | None = None) -> random.Random:
    s = (cfg or {}).get("SEED", SEED)
    if s is not None:
        return random.Random(int(s))
    return random.Random()
