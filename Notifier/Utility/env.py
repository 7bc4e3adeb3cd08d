"""Environment helpers (.env loading and settings lookup)"""
import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

SEED_VAR = "OBSERVER_SEED"
LOG_LEVEL_VAR = "OBSERVER_LOG_LEVEL"


def _parse_line(line: str):
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    if line.startswith("export "):
        line = line[len("export "):]
    if "=" not in line:
        return None
    key, val = line.split("=", 1)
    val = val.strip()
    if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
        val = val[1:-1]
    return key.strip(), val


def load_env_file(filepath: str = ".env") -> None:
    """Export KEY=VALUE pairs from `filepath`. Variables already set win."""
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for raw in f:
                pair = _parse_line(raw)
                if pair is None:
                    continue
                os.environ.setdefault(*pair)
    except OSError as e:
        logger.debug("Ignoring .env load error: %s", e)


def get_seed() -> Optional[int]:
    value = os.environ.get(SEED_VAR)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.debug("Ignoring non-integer %s: %r", SEED_VAR, value)
        return None


def get_log_level() -> int:
    name = os.environ.get(LOG_LEVEL_VAR, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
