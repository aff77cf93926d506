"""Round-robin schedule generation (circle method).

Position 0 stays fixed while the others rotate one slot per round: after
each round the last entry moves to index 1. Round ``r`` pairs slot ``i``
with slot ``n-1-i``; home and away swap on odd rounds. Odd team counts get
a ``BYE`` entry whose pairings are dropped.
"""
from typing import List, Sequence

from schoolcup.config import BYE
from schoolcup.ids import make_match_id
from schoolcup.models import Match, Round


def generate_round_robin(teams: Sequence[str], competition: str) -> List[Round]:
    if len(teams) < 2:
        return []

    slots = list(teams)
    if len(slots) % 2:
        slots.append(BYE)

    n = len(slots)
    half = n // 2
    schedule: List[Round] = []
    for r in range(n - 1):
        round_no = r + 1
        matches: List[Match] = []
        for i in range(half):
            a, b = slots[i], slots[n - 1 - i]
            if a == BYE or b == BYE:
                continue
            home, away = (a, b) if r % 2 == 0 else (b, a)
            matches.append(Match(make_match_id(competition, round_no, home, away), round_no, home, away))
        schedule.append(Round(round=round_no, matches=matches))
        slots.insert(1, slots.pop())
    return schedule
