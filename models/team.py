"""Model drużyny piłkarskiej (wejście silnika po jednej stronie)."""
from dataclasses import dataclass, field
from typing import Any, List

from models.player import Player, Side
from simulation.tactics import TeamTactics


@dataclass
class Team:
    """
    Reprezentuje drużynę w pojedynczym meczu.

    Attributes:
        name: Nazwa drużyny
        side: Strona ('home' lub 'away')
        players: Lista zawodników na boisku
        tactics: Ustawienia taktyczne (mentalność, pressing, linia obrony)
        familiarity: Zgranie z formacją (0-100), dostarczane z zewnątrz
        mentoring_groups: Grupy mentorskie - przekazywane dalej do scorera chemii
    """
    name: str
    side: Side
    players: List[Player] = field(default_factory=list)
    tactics: TeamTactics = field(default_factory=TeamTactics)
    familiarity: float = 50.0
    mentoring_groups: List[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.side not in ("home", "away"):
            raise ValueError(f"Nieznana strona drużyny {self.name}: {self.side!r}")
        if not 0 <= self.familiarity <= 100:
            raise ValueError(f"Zgranie taktyczne {self.familiarity} poza zakresem 0-100")

    def get_attackers(self) -> List[Player]:
        """Zwraca napastników i pomocników (kandydaci do strzału)."""
        return [p for p in self.players if p.is_forward() or p.is_midfielder()]

    def get_defenders(self) -> List[Player]:
        """Zwraca obrońców i pomocników (kandydaci do odbioru)."""
        return [p for p in self.players if p.is_defender() or p.is_midfielder()]

    def get_outfield_players(self) -> List[Player]:
        return [p for p in self.players if p.category is not None and not p.is_goalkeeper()]

    def get_key_players(self, n: int = 3) -> List[Player]:
        """Top-n wg średniej strzał/podanie/odbiór/ustawianie (nowa lista, bez sortowania w miejscu)."""
        return sorted(self.players, key=lambda p: p.get_key_rating(), reverse=True)[:n]
