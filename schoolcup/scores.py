import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from schoolcup.models import Score

_GOALS = re.compile(r"[0-9]{1,9}")

MSG_PARTIAL = "Enter both scores, or leave both blank."
MSG_NOT_NUMBER = "Scores must be non-negative integers."


@dataclass(frozen=True)
class ScoreInput:
    """Outcome of validating the two raw score fields of one match.

    A valid input with both goals ``None`` means "clear the score".
    """
    valid: bool
    home_goals: Optional[int] = None
    away_goals: Optional[int] = None
    message: str = ""

    @property
    def is_clear(self) -> bool:
        return self.valid and self.home_goals is None and self.away_goals is None


def parse_score_inputs(raw_home: Optional[str], raw_away: Optional[str]) -> ScoreInput:
    home = (raw_home or "").strip()
    away = (raw_away or "").strip()
    if not home and not away:
        return ScoreInput(valid=True)
    if not home or not away:
        return ScoreInput(valid=False, message=MSG_PARTIAL)
    if not (_GOALS.fullmatch(home) and _GOALS.fullmatch(away)):
        return ScoreInput(valid=False, message=MSG_NOT_NUMBER)
    return ScoreInput(valid=True, home_goals=int(home), away_goals=int(away))


def set_score(scores: Mapping[str, Score], match_id: str, home_goals: int, away_goals: int) -> Dict[str, Score]:
    updated = dict(scores)
    updated[match_id] = Score(home_goals, away_goals)
    return updated


def clear_score(scores: Mapping[str, Score], match_id: str) -> Dict[str, Score]:
    updated = dict(scores)
    updated.pop(match_id, None)
    return updated
