"""Model zawodnika piłkarskiego."""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Literal, Optional

from models.roles import RoleCategory, role_category

Side = Literal["home", "away"]

# Skala formy/morale (porządkowa, pięciostopniowa; 'Average' to alias 'Okay')
FORM_LEVELS = ("Excellent", "Good", "Okay", "Average", "Poor", "Very Poor")

ATTRIBUTE_NAMES = ("speed", "passing", "tackling", "shooting", "dribbling", "positioning", "stamina")


@dataclass
class PlayerAttributes:
    """Atrybuty liczbowe zawodnika, każdy w zakresie 0-100."""
    speed: float = 50
    passing: float = 50
    tackling: float = 50
    shooting: float = 50
    dribbling: float = 50
    positioning: float = 50
    stamina: float = 50

    def __post_init__(self) -> None:
        for name in ATTRIBUTE_NAMES:
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"Atrybut {name}={value} poza zakresem 0-100")

    @classmethod
    def uniform(cls, value: float) -> "PlayerAttributes":
        return cls(**{name: value for name in ATTRIBUTE_NAMES})


@dataclass
class MoraleBoost:
    """Chwilowy bonus morale: effect/10 dokładane do modyfikatora przez `duration` minut."""
    effect: float
    duration: int

    @property
    def active(self) -> bool:
        return self.duration > 0


@dataclass
class Player:
    """
    Reprezentuje zawodnika piłkarskiego.

    Attributes:
        id: Unikalny identyfikator zawodnika
        name: Imię i nazwisko zawodnika
        team: Strona ('home' lub 'away')
        role_id: Id roli z tabeli PLAYER_ROLES (np. 'cb', 'b2b', 'p')
        attributes: Atrybuty liczbowe (0-100)
        form: Forma ('Excellent' ... 'Very Poor')
        morale: Morale (ta sama skala co forma)
        stamina: Aktualna wytrzymałość (0-100)
        morale_boost: Opcjonalny chwilowy bonus morale
        traits: Lista cech charakteru (np. 'Temperamental')
    """
    id: str
    name: str
    team: Side
    role_id: str
    attributes: PlayerAttributes = field(default_factory=PlayerAttributes)
    form: str = "Okay"
    morale: str = "Okay"
    stamina: float = 100.0
    morale_boost: Optional[MoraleBoost] = None
    traits: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.team not in ("home", "away"):
            raise ValueError(f"Nieznana strona zawodnika {self.name}: {self.team!r}")
        if not 0 <= self.stamina <= 100:
            raise ValueError(f"Stamina {self.stamina} poza zakresem 0-100 ({self.name})")

    @property
    def category(self) -> Optional[RoleCategory]:
        """Kategoria pozycyjna; None dla nieznanej roli."""
        return role_category(self.role_id)

    def is_goalkeeper(self) -> bool:
        return self.category is RoleCategory.GK

    def is_defender(self) -> bool:
        return self.category is RoleCategory.DF

    def is_midfielder(self) -> bool:
        return self.category is RoleCategory.MF

    def is_forward(self) -> bool:
        return self.category is RoleCategory.FW

    def has_trait(self, trait: str) -> bool:
        return trait in self.traits

    def get_key_rating(self) -> float:
        """Średnia strzał/podanie/odbiór/ustawianie - ranking kluczowych zawodników."""
        a = self.attributes
        return (a.shooting + a.passing + a.tackling + a.positioning) / 4

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], *, team: Optional[Side] = None) -> "Player":
        boost = data.get("morale_boost") or data.get("moraleBoost")
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", "Anon"),
            team=team or data.get("team", "home"),
            role_id=data.get("role_id") or data.get("roleId", ""),
            attributes=PlayerAttributes(**(data.get("attributes") or {})),
            form=data.get("form", "Okay"),
            morale=data.get("morale", "Okay"),
            stamina=float(data.get("stamina", 100.0)),
            morale_boost=MoraleBoost(effect=float(boost["effect"]), duration=int(boost["duration"])) if boost else None,
            traits=list(data.get("traits", [])),
        )
