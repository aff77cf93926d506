import locale
import logging
import os
from pathlib import Path
from typing import List, Tuple

# =========================
# Storage
# =========================
DB_PATH = Path(os.environ.get("SCHOOLCUP_DB_PATH", "schoolcup.db"))
STORAGE_KEY = "school-football-tournament-v1"

# =========================
# Tournament
# =========================
COMPETITIONS: Tuple[str, ...] = ("boys", "girls")
DEFAULT_COMPETITION = "boys"
COMPETITION_LABELS = {"boys": "Boys", "girls": "Girls"}

DEFAULT_SCHOOLS: List[str] = [
    "Pegasus",
    "Kúlan",
    "Dimma",
    "Jemen",
    "Fönix",
    "Ekkó",
    "Igló",
    "Þeba",
    "Kjarninn",
]

BYE = "BYE"
MATCH_ID_SEPARATOR = "__"

POINTS_WIN = 3
POINTS_DRAW = 1

# =========================
# Logging
# =========================
LOG_LEVEL = os.environ.get("SCHOOLCUP_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def configure_collation() -> bool:
    """Use the environment's collation for name ordering; keep codepoint order if it is unavailable."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logging.getLogger(__name__).warning("system collation locale unavailable, sorting names by codepoint")
        return False
    return True
