"""Tournament controller: owns the state and applies user actions to it.

Every mutation is persisted immediately. Destructive actions take a
``confirm`` callable supplied by the page and do nothing when it answers no.
"""
import logging
from typing import Callable, List, Optional, Tuple

from schoolcup.config import COMPETITIONS
from schoolcup.models import Score, StandingsRow, TournamentState
from schoolcup.schedule import generate_round_robin
from schoolcup.scores import ScoreInput, clear_score, parse_score_inputs, set_score
from schoolcup.standings import compute_standings
from schoolcup.storage import StateStore
from schoolcup.teams import parse_team_text

logger = logging.getLogger(__name__)

Confirm = Callable[[], bool]


class TeamListError(ValueError):
    pass


class TournamentController:
    def __init__(self, store: StateStore, state: Optional[TournamentState] = None):
        self.store = store
        self.state = state if state is not None else store.load()

    def _persist(self):
        self.store.save(self.state)

    # =========================
    # Destructive actions
    # =========================
    def _regenerate_all(self):
        for c in COMPETITIONS:
            cs = self.state.competition(c)
            cs.schedule = generate_round_robin(self.state.schools, c)
            cs.scores = {}
        logger.info("schedules regenerated for %d schools, scores cleared", len(self.state.schools))
        self._persist()

    def apply_new_team_list(self, raw_text: str, confirm: Confirm) -> bool:
        schools = parse_team_text(raw_text)
        if not schools:
            raise TeamListError("Please enter at least one school name.")
        if not confirm():
            return False
        self.state.schools = schools
        self._regenerate_all()
        return True

    def regenerate(self, confirm: Confirm) -> bool:
        if not confirm():
            return False
        self._regenerate_all()
        return True

    # =========================
    # Scores
    # =========================
    def record_or_clear_score(self, match_id: str, raw_home: str, raw_away: str) -> ScoreInput:
        parsed = parse_score_inputs(raw_home, raw_away)
        if not parsed.valid:
            return parsed
        cs = self.state.competition()
        if parsed.is_clear:
            cs.scores = clear_score(cs.scores, match_id)
            logger.info("score cleared for %s", match_id)
        else:
            cs.scores = set_score(cs.scores, match_id, parsed.home_goals, parsed.away_goals)
            logger.info("score %d-%d recorded for %s", parsed.home_goals, parsed.away_goals, match_id)
        self._persist()
        return parsed

    def clear_score(self, match_id: str):
        cs = self.state.competition()
        cs.scores = clear_score(cs.scores, match_id)
        logger.info("score cleared for %s", match_id)
        self._persist()

    def score_for(self, match_id: str, competition: Optional[str] = None) -> Optional[Score]:
        return self.state.competition(competition).scores.get(match_id)

    # =========================
    # Views
    # =========================
    def set_active_competition(self, competition: str):
        if competition not in COMPETITIONS:
            raise ValueError(f"unknown competition {competition!r}")
        self.state.active_competition = competition
        self._persist()

    def compute_standings(self, competition: Optional[str] = None) -> List[StandingsRow]:
        cs = self.state.competition(competition)
        return compute_standings(self.state.schools, cs.schedule, cs.scores)

    def progress(self, competition: Optional[str] = None) -> Tuple[int, int]:
        cs = self.state.competition(competition)
        matches = cs.matches()
        return sum(1 for m in matches if m.id in cs.scores), len(matches)
