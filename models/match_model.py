"""
Data model for a single match result and the helper pools derived from it.

`MatchRecord` is a frozen dataclass so a record built by the form can be
handed to the storage layer without accidental modification. Attribute names
are snake_case; the Apps Script sheet uses camelCase column keys, handled by
`to_payload` / `from_payload`:
    - `id`, `player`, `opponent`, `format`, `playerDeck`, `opponentDeck`,
        `games`, `playDraw`, `sideboardStatus`, `date`.

Optional fields (`id`, `play_draw`, `sideboard_status`) are either a value or
`None`; they are left out of the payload entirely when absent.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

_WIRE_KEYS = {
    "id": "id",
    "player": "player",
    "opponent": "opponent",
    "format": "format",
    "player_deck": "playerDeck",
    "opponent_deck": "opponentDeck",
    "games": "games",
    "play_draw": "playDraw",
    "sideboard_status": "sideboardStatus",
    "date": "date",
}
_OPTIONAL = {"id", "play_draw", "sideboard_status"}
_GAMES_RE = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")


def _cell(value: Any) -> str:
    """Sheet cells come back as str, int, float or None."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


@dataclass(frozen=True)
class MatchRecord:
    player: str
    opponent: str
    format: str
    player_deck: str
    opponent_deck: str
    games: str
    date: str = ""
    play_draw: Optional[str] = None
    sideboard_status: Optional[str] = None
    id: Optional[str] = None

    def to_payload(self) -> Dict[str, str]:
        """Return the camelCase dict sent to the sheet, without absent optionals."""
        payload: Dict[str, str] = {}
        for attr, key in _WIRE_KEYS.items():
            value = getattr(self, attr)
            if attr in _OPTIONAL and value is None:
                continue
            payload[key] = value
        return payload

    @classmethod
    def from_payload(cls, row: Mapping[str, Any]) -> "MatchRecord":
        if not isinstance(row, Mapping):
            raise ValueError(f"expected a mapping, got {type(row).__name__}")
        values = {}
        for attr, key in _WIRE_KEYS.items():
            text = _cell(row.get(key))
            if attr in _OPTIONAL:
                values[attr] = text or None
            else:
                values[attr] = text
        return cls(**values)

    def score(self) -> Optional[Tuple[int, int]]:
        """(wins, losses) parsed from `games`, or None for hand-edited cells."""
        m = _GAMES_RE.match(self.games or "")
        if not m:
            return None
        return int(m.group(1)), int(m.group(2))


def _pool(values: Iterable[str]) -> List[str]:
    return sorted({v for v in values if v})


def name_pool(records: Iterable[MatchRecord]) -> List[str]:
    """Sorted unique player and opponent names across `records`."""
    names: List[str] = []
    for r in records:
        names.extend((r.player, r.opponent))
    return _pool(names)


def deck_pool(records: Iterable[MatchRecord]) -> List[str]:
    """Sorted unique player and opponent deck names across `records`."""
    decks: List[str] = []
    for r in records:
        decks.extend((r.player_deck, r.opponent_deck))
    return _pool(decks)
