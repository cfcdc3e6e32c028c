"""Wczytywanie składów i chemii z pliku JSON (data/squads.json)."""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from models.player import Player, Side
from models.roles import get_role
from models.team import Team
from simulation.chemistry import ChemistryContext
from simulation.tactics import TeamTactics

_log = logging.getLogger("matchsim.loader")

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
SQUADS_JSON = DATA_DIR / "squads.json"


def _read(path: Union[str, Path, None]) -> Dict[str, Any]:
    path = Path(path or SQUADS_JSON)
    if not path.exists():
        raise FileNotFoundError(f"Brak pliku z danymi: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def load_squads(path: Union[str, Path, None] = None) -> Dict[str, Dict[str, Any]]:
    """Surowe definicje drużyn po nazwie (strona jest wybierana dopiero przy parowaniu)."""
    data = _read(path)
    squads = {t.get("name", "Unknown Team"): t for t in data.get("teams", [])}
    if not squads:
        raise ValueError(f"Nie znaleziono żadnych drużyn w {path or SQUADS_JSON}")
    return squads


def build_team(raw: Dict[str, Any], side: Side) -> Team:
    players: List[Player] = []
    for p in raw.get("players", []):
        player = Player.from_dict(p, team=side)
        if get_role(player.role_id) is None:
            _log.warning("Nieznana rola %r zawodnika %s - nie wniesie siły do drużyny", player.role_id, player.name)
        players.append(player)
    return Team(
        name=raw.get("name", "Unknown Team"),
        side=side,
        players=players,
        tactics=TeamTactics.from_dict(raw.get("tactics") or {}),
        familiarity=float(raw.get("familiarity", 50.0)),
        mentoring_groups=list(raw.get("mentoring_groups", [])),
    )


def load_chemistry(path: Union[str, Path, None] = None) -> ChemistryContext:
    data = _read(path).get("chemistry") or {}
    matrix = {str(a): {str(b): float(v) for b, v in row.items()} for a, row in (data.get("matrix") or {}).items()}
    return ChemistryContext(matrix=matrix, relationships=data.get("relationships"))


def load_match(home: Optional[str] = None, away: Optional[str] = None,
               path: Union[str, Path, None] = None) -> tuple:
    """Zwraca (home Team, away Team, ChemistryContext); domyślnie dwie pierwsze drużyny z pliku."""
    squads = load_squads(path)
    names = list(squads)
    home = home or names[0]
    away = away or next((n for n in names if n != home), names[0])
    for name in (home, away):
        if name not in squads:
            raise KeyError(f"Nie znaleziono drużyny '{name}'")
    return build_team(squads[home], "home"), build_team(squads[away], "away"), load_chemistry(path)
