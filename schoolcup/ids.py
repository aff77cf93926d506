"""Match identifiers.

Ids read like ``boys__3__kulan__eba``. Two names that slugify the same
(``"Fönix"`` and ``"Fonix!"``) produce the same id for the same fixture;
team lists are expected to avoid such pairs.
"""
import re
import unicodedata

from schoolcup.config import MATCH_ID_SEPARATOR

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")


def slugify(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_ALNUM.sub("-", stripped).strip("-").lower()


def make_match_id(competition: str, round_no: int, home: str, away: str) -> str:
    return MATCH_ID_SEPARATOR.join([competition, str(round_no), slugify(home), slugify(away)])
