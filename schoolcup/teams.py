from typing import Iterable, List


def normalize_team_list(lines: Iterable[str]) -> List[str]:
    """Trim names, drop blanks and case-insensitive duplicates (first spelling wins)."""
    seen = set()
    teams: List[str] = []
    for line in lines:
        name = line.strip()
        if not name:
            continue
        key = name.casefold()
        if key in seen:
            continue
        seen.add(key)
        teams.append(name)
    return teams


def parse_team_text(text: str) -> List[str]:
    return normalize_team_list((text or "").split("\n"))
