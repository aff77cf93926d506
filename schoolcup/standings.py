import locale
import logging
from typing import Dict, List, Mapping, Sequence

import pandas as pd

from schoolcup.config import POINTS_DRAW, POINTS_WIN
from schoolcup.models import Round, Score, StandingsRow

logger = logging.getLogger(__name__)

COLUMNS = {
    "team": "School",
    "played": "P",
    "wins": "W",
    "draws": "D",
    "losses": "L",
    "goals_for": "GF",
    "goals_against": "GA",
    "goal_difference": "GD",
    "points": "Pts",
}


def sort_key(row: StandingsRow):
    return (-row.points, -row.goal_difference, -row.goals_for, locale.strxfrm(row.team))


def compute_standings(
    teams: Sequence[str],
    schedule: Sequence[Round],
    scores: Mapping[str, Score],
) -> List[StandingsRow]:
    table: Dict[str, StandingsRow] = {t: StandingsRow(team=t) for t in teams}

    for rd in schedule:
        for m in rd.matches:
            score = scores.get(m.id)
            if score is None:
                continue
            home, away = table.get(m.home), table.get(m.away)
            if home is None or away is None:
                logger.debug("skipping %s: team not in current list", m.id)
                continue
            hg, ag = score.home_goals, score.away_goals
            home.played += 1; away.played += 1
            home.goals_for += hg; home.goals_against += ag
            away.goals_for += ag; away.goals_against += hg
            if hg > ag:
                home.wins += 1; home.points += POINTS_WIN
                away.losses += 1
            elif hg < ag:
                away.wins += 1; away.points += POINTS_WIN
                home.losses += 1
            else:
                home.draws += 1; away.draws += 1
                home.points += POINTS_DRAW; away.points += POINTS_DRAW

    for row in table.values():
        row.goal_difference = row.goals_for - row.goals_against
    return sorted(table.values(), key=sort_key)


def standings_frame(rows: Sequence[StandingsRow]) -> pd.DataFrame:
    df = pd.DataFrame([{label: getattr(r, attr) for attr, label in COLUMNS.items()} for r in rows],
                      columns=list(COLUMNS.values()))
    df.insert(0, "#", range(1, len(df) + 1))
    return df
