"""Tournament data model and its JSON payload shape.

Payload keys follow the stored record (camelCase); attribute names are
snake_case. ``from_payload`` helpers raise ``ValueError``/``TypeError``/
``KeyError`` on malformed input and leave recovery to the loader.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from schoolcup.config import COMPETITIONS, DEFAULT_COMPETITION


def _is_goal_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _round_number(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"invalid round number {value!r}")
    return value


# =========================
# Schedule
# =========================
@dataclass(frozen=True)
class Match:
    id: str
    round: int
    home: str
    away: str

    def to_payload(self) -> dict:
        return {"id": self.id, "round": self.round, "home": self.home, "away": self.away}

    @classmethod
    def from_payload(cls, payload: dict) -> "Match":
        match = cls(
            id=str(payload["id"]),
            round=_round_number(payload["round"]),
            home=str(payload["home"]),
            away=str(payload["away"]),
        )
        if match.home == match.away:
            raise ValueError(f"invalid match {payload!r}")
        return match


@dataclass(frozen=True)
class Round:
    round: int
    matches: List[Match] = field(default_factory=list)

    def to_payload(self) -> dict:
        return {"round": self.round, "matches": [m.to_payload() for m in self.matches]}

    @classmethod
    def from_payload(cls, payload: dict) -> "Round":
        return cls(
            round=_round_number(payload["round"]),
            matches=[Match.from_payload(m) for m in payload["matches"]],
        )


# =========================
# Scores
# =========================
@dataclass(frozen=True)
class Score:
    home_goals: int
    away_goals: int

    def __post_init__(self):
        if not (_is_goal_count(self.home_goals) and _is_goal_count(self.away_goals)):
            raise ValueError(
                f"goals must be non-negative integers, got {self.home_goals!r}-{self.away_goals!r}"
            )

    def to_payload(self) -> dict:
        return {"homeGoals": self.home_goals, "awayGoals": self.away_goals}

    @classmethod
    def from_payload(cls, payload: dict) -> "Score":
        return cls(home_goals=payload["homeGoals"], away_goals=payload["awayGoals"])


# =========================
# Standings
# =========================
@dataclass
class StandingsRow:
    team: str
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0


# =========================
# Tournament state
# =========================
@dataclass
class CompetitionState:
    schedule: List[Round] = field(default_factory=list)
    scores: Dict[str, Score] = field(default_factory=dict)

    def matches(self) -> List[Match]:
        return [m for rd in self.schedule for m in rd.matches]

    def to_payload(self) -> dict:
        return {
            "schedule": [rd.to_payload() for rd in self.schedule],
            "scores": {mid: s.to_payload() for mid, s in self.scores.items()},
        }


@dataclass
class TournamentState:
    schools: List[str] = field(default_factory=list)
    active_competition: str = DEFAULT_COMPETITION
    competitions: Dict[str, CompetitionState] = field(
        default_factory=lambda: {c: CompetitionState() for c in COMPETITIONS}
    )
    last_saved: Optional[str] = None

    def competition(self, name: Optional[str] = None) -> CompetitionState:
        return self.competitions[name or self.active_competition]

    def to_payload(self) -> dict:
        return {
            "schools": list(self.schools),
            "activeCompetition": self.active_competition,
            "competitions": {c: cs.to_payload() for c, cs in self.competitions.items()},
            "lastSaved": self.last_saved,
        }
