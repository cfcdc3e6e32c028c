"""Rekordy wyjściowe symulacji: zdarzenia, komentarz i wynik meczu."""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Union

from models.player import Side

GOAL = "Goal"
YELLOW_CARD = "Yellow Card"


@dataclass(frozen=True)
class MatchEvent:
    minute: int
    type: str
    team: Side
    player_name: str
    description: str
    assister_name: Optional[str] = None


@dataclass(frozen=True)
class MatchCommentary:
    minute: int
    text: str


MatchUpdate = Union[MatchEvent, MatchCommentary]


@dataclass
class MatchResult:
    """
    Wynik pojedynczej symulacji.

    `player_stats` jest liczone ex post z listy zdarzeń
    (klucz: id zawodnika, wartość: {'goals': n, 'assists': n}).
    """
    home_score: int = 0
    away_score: int = 0
    events: List[MatchEvent] = field(default_factory=list)
    commentary_log: List[MatchCommentary] = field(default_factory=list)
    is_rivalry: bool = False
    player_stats: Dict[str, Dict[str, int]] = field(default_factory=dict)

    @property
    def score(self) -> tuple:
        return (self.home_score, self.away_score)

    @property
    def goals(self) -> List[MatchEvent]:
        return [e for e in self.events if e.type == GOAL]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
