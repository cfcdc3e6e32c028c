"""Tabela ról zawodników i kategorie pozycyjne."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional


class RoleCategory(str, Enum):
    GK = "GK"
    DF = "DF"
    MF = "MF"
    FW = "FW"


@dataclass(frozen=True)
class PlayerRole:
    id: str
    name: str
    category: RoleCategory


PLAYER_ROLES: Dict[str, PlayerRole] = {r.id: r for r in (
    PlayerRole("gk", "Goalkeeper", RoleCategory.GK),
    PlayerRole("sk", "Sweeper Keeper", RoleCategory.GK),
    PlayerRole("cb", "Centre-Back", RoleCategory.DF),
    PlayerRole("bpd", "Ball-Playing Defender", RoleCategory.DF),
    PlayerRole("ncb", "No-Nonsense Centre-Back", RoleCategory.DF),
    PlayerRole("fb", "Full-Back", RoleCategory.DF),
    PlayerRole("wb", "Wing-Back", RoleCategory.DF),
    PlayerRole("dm", "Defensive Midfielder", RoleCategory.MF),
    PlayerRole("dlp", "Deep-Lying Playmaker", RoleCategory.MF),
    PlayerRole("cm", "Central Midfielder", RoleCategory.MF),
    PlayerRole("b2b", "Box-to-Box Midfielder", RoleCategory.MF),
    PlayerRole("ap", "Advanced Playmaker", RoleCategory.MF),
    PlayerRole("wm", "Wide Midfielder", RoleCategory.MF),
    PlayerRole("w", "Winger", RoleCategory.FW),
    PlayerRole("iw", "Inverted Winger", RoleCategory.FW),
    PlayerRole("p", "Poacher", RoleCategory.FW),
    PlayerRole("tf", "Target Forward", RoleCategory.FW),
    PlayerRole("cf", "Complete Forward", RoleCategory.FW),
)}

# Pomocnicy, którzy dokładają się także do obrony / ataku
DEFENSIVE_MIDFIELD_ROLES: FrozenSet[str] = frozenset({"dm", "dlp", "b2b"})
ATTACKING_MIDFIELD_ROLES: FrozenSet[str] = frozenset({"ap", "b2b", "wm"})


def get_role(role_id: str) -> Optional[PlayerRole]:
    """Zwraca rolę po id albo None, gdy id jest nieznane."""
    return PLAYER_ROLES.get(role_id)


def role_category(role_id: str) -> Optional[RoleCategory]:
    role = get_role(role_id)
    return role.category if role else None
