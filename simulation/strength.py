"""
Agregacja atrybutów zawodników w trzy oceny zespołu: atak, obrona, środek pola.

Wzór per zawodnik: mieszanka atrybutów roli × modyfikator forma/morale
× modyfikator wytrzymałości. Średnia z koszyka jest mnożona przez
modyfikator zgrania taktycznego i modyfikator chemii (oba w [0.8, 1.2]).
"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from itertools import combinations
from typing import Any, Dict, List, Optional, Sequence

from models.player import Player
from models.roles import ATTACKING_MIDFIELD_ROLES, DEFENSIVE_MIDFIELD_ROLES, RoleCategory
from simulation.chemistry import ChemistryContext, ChemistryScorer, matrix_chemistry_score
from simulation.config import get_config

FORM_MORALE_SCALE: Dict[str, float] = {
    "Excellent": 1.10,
    "Good": 1.05,
    "Okay": 1.00,
    "Average": 1.00,
    "Poor": 0.95,
    "Very Poor": 0.90,
}


@dataclass(frozen=True)
class TeamStrengths:
    attack: float
    defense: float
    midfield: float
    overall_chemistry: float

    @property
    def overall(self) -> float:
        return (self.attack + self.defense + self.midfield) / 3

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def ordinal_modifier(value: Optional[str]) -> float:
    return FORM_MORALE_SCALE.get(value or "", 1.0)


def form_morale_modifier(player: Player) -> float:
    boost = player.morale_boost
    boost_effect = boost.effect / 10 if boost is not None and boost.active else 0.0
    return (ordinal_modifier(player.form) + ordinal_modifier(player.morale)) / 2 + boost_effect


def stamina_modifier(stamina: float) -> float:
    floor = float(get_config().get('strength.stamina_floor', 0.7))
    return floor + (1.0 - floor) * (stamina / 100)


def scale_multiplier(value: float) -> float:
    """0..100 -> 0.8..1.2 (wspólne dla zgrania taktycznego i chemii)."""
    cfg = get_config()
    floor = float(cfg.get('strength.multiplier_floor', 0.8))
    span = float(cfg.get('strength.multiplier_span', 0.4))
    return floor + (value / 100) * span


familiarity_multiplier = scale_multiplier
chemistry_multiplier = scale_multiplier


def overall_chemistry(players: Sequence[Player], chemistry: ChemistryContext,
                      mentoring_groups: List[Any], scorer: ChemistryScorer) -> float:
    """Średnia chemia ze wszystkich nieuporządkowanych par (50 przy < 2 zawodnikach)."""
    total = 0.0
    links = 0
    for a, b in combinations(players, 2):
        total += scorer(a, b, chemistry.matrix, chemistry.relationships, mentoring_groups)
        links += 1
    if links == 0:
        return float(get_config().get('strength.neutral', 50.0))
    return total / links


def compute_team_strengths(
    players: Sequence[Player],
    tactical_familiarity: float,
    chemistry: Optional[ChemistryContext] = None,
    mentoring_groups: Optional[List[Any]] = None,
    scorer: ChemistryScorer = matrix_chemistry_score,
) -> TeamStrengths:
    neutral = float(get_config().get('strength.neutral', 50.0))
    if not players:
        return TeamStrengths(attack=neutral, defense=neutral, midfield=neutral, overall_chemistry=neutral)

    chemistry = chemistry or ChemistryContext()
    sums = {"attack": 0.0, "defense": 0.0, "midfield": 0.0}
    counts = {"attack": 0, "defense": 0, "midfield": 0}

    def add(bucket: str, value: float) -> None:
        sums[bucket] += value
        counts[bucket] += 1

    for p in players:
        category = p.category
        if category is None:
            # nieznana rola - zawodnik zostaje w składzie, ale nie wnosi siły
            continue
        a = p.attributes
        mod = form_morale_modifier(p) * stamina_modifier(p.stamina)

        if category is RoleCategory.FW:
            add("attack", (a.shooting * 1.2 + a.dribbling + a.positioning) / 3 * mod)
        elif category is RoleCategory.MF:
            add("midfield", (a.passing * 1.1 + a.positioning + a.dribbling + a.speed) / 4 * mod)
            if p.role_id in DEFENSIVE_MIDFIELD_ROLES:
                add("defense", (a.tackling * 1.1 + a.positioning) / 2 * mod)
            if p.role_id in ATTACKING_MIDFIELD_ROLES:
                add("attack", (a.shooting + a.dribbling + a.passing) / 3 * mod)
        elif category is RoleCategory.DF:
            add("defense", (a.tackling * 1.2 + a.positioning + a.speed) / 3 * mod)
        elif category is RoleCategory.GK:
            add("defense", a.positioning * 1.5 * mod)
        else:  # pragma: no cover
            raise AssertionError(f"Nieobsłużona kategoria roli: {category}")

    chem = overall_chemistry(players, chemistry, mentoring_groups or [], scorer)
    multiplier = familiarity_multiplier(tactical_familiarity) * chemistry_multiplier(chem)

    def bucket(name: str) -> float:
        base = sums[name] / counts[name] if counts[name] else neutral
        return base * multiplier

    return TeamStrengths(
        attack=bucket("attack"),
        defense=bucket("defense"),
        midfield=bucket("midfield"),
        overall_chemistry=chem,
    )
