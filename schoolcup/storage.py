import json
import logging
import sqlite3
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from schoolcup.config import COMPETITIONS, DB_PATH, DEFAULT_COMPETITION, DEFAULT_SCHOOLS, STORAGE_KEY
from schoolcup.models import CompetitionState, Round, Score, TournamentState
from schoolcup.schedule import generate_round_robin

logger = logging.getLogger(__name__)


# =========================
# Default state
# =========================
def generate_default_state() -> TournamentState:
    schools = list(DEFAULT_SCHOOLS)
    return TournamentState(
        schools=schools,
        active_competition=DEFAULT_COMPETITION,
        competitions={
            c: CompetitionState(schedule=generate_round_robin(schools, c)) for c in COMPETITIONS
        },
        last_saved=None,
    )


# =========================
# Payload -> state
# =========================
def _sanitize_schedule(raw) -> list:
    if not isinstance(raw, list):
        return []
    try:
        return [Round.from_payload(rd) for rd in raw]
    except (KeyError, TypeError, ValueError):
        logger.warning("discarding malformed schedule")
        return []


def _sanitize_scores(raw) -> dict:
    if not isinstance(raw, dict):
        return {}
    scores = {}
    for match_id, value in raw.items():
        try:
            scores[str(match_id)] = Score.from_payload(value)
        except (KeyError, TypeError, ValueError):
            logger.warning("dropping malformed score for %s", match_id)
    return scores


def _sanitize_competition(raw) -> CompetitionState:
    if not isinstance(raw, dict):
        return CompetitionState()
    return CompetitionState(
        schedule=_sanitize_schedule(raw.get("schedule")),
        scores=_sanitize_scores(raw.get("scores")),
    )


def state_from_payload(payload) -> Optional[TournamentState]:
    """Rebuild a state from a decoded record, or ``None`` if it is unusable."""
    if not isinstance(payload, dict):
        return None
    schools = payload.get("schools")
    competitions = payload.get("competitions")
    if not isinstance(schools, list) or not isinstance(competitions, dict):
        return None
    active = payload.get("activeCompetition")
    last_saved = payload.get("lastSaved")
    return TournamentState(
        schools=[str(s) for s in schools],
        active_competition=active if active in COMPETITIONS else DEFAULT_COMPETITION,
        competitions={c: _sanitize_competition(competitions.get(c)) for c in COMPETITIONS},
        last_saved=last_saved if isinstance(last_saved, str) and last_saved else None,
    )


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def decode_state(raw: Optional[str]) -> TournamentState:
    if not raw:
        logger.info("no saved tournament, starting from defaults")
        return generate_default_state()
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        logger.warning("saved tournament is not valid JSON, starting from defaults")
        return generate_default_state()
    state = state_from_payload(payload)
    if state is None:
        logger.warning("saved tournament has an unexpected shape, starting from defaults")
        return generate_default_state()
    return state


# =========================
# Key-value store (sqlite)
# =========================
class StateStore:
    """One JSON record per key in a small sqlite table."""

    def __init__(self, db_path: Union[str, Path] = DB_PATH, key: str = STORAGE_KEY):
        self.db_path = Path(db_path)
        self.key = key

    def _connect(self) -> sqlite3.Connection:
        con = sqlite3.connect(self.db_path)
        con.execute("""
        CREATE TABLE IF NOT EXISTS kv_store (
          key TEXT PRIMARY KEY,
          value TEXT NOT NULL,
          updated_at REAL
        )
        """)
        con.commit()
        return con

    def read(self) -> Optional[str]:
        con = self._connect()
        try:
            row = con.execute("SELECT value FROM kv_store WHERE key=?", (self.key,)).fetchone()
        finally:
            con.close()
        return row[0] if row else None

    def write(self, value: str) -> None:
        con = self._connect()
        try:
            con.execute("""
            INSERT INTO kv_store(key, value, updated_at) VALUES(?,?,?)
            ON CONFLICT(key) DO UPDATE SET
              value=excluded.value,
              updated_at=excluded.updated_at
            """, (self.key, value, time.time()))
            con.commit()
        finally:
            con.close()

    def load(self) -> TournamentState:
        return decode_state(self.read())

    def save(self, state: TournamentState) -> TournamentState:
        """Stamp ``last_saved`` on the state and write it out."""
        state.last_saved = datetime.now(timezone.utc).isoformat()
        self.write(json.dumps(state.to_payload(), ensure_ascii=False))
        logger.info("tournament saved to %s", self.db_path)
        return state
