from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict

from simulation.tactics import TeamTactics
from simulation.utils import clamp


@dataclass(frozen=True)
class OutcomePrediction:
    home_win_probability: float
    draw_probability: float
    away_win_probability: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def tactical_balance(home_tactics: TeamTactics, away_tactics: TeamTactics) -> float:
    """Symetryczny stosunek wzajemnego wykorzystania mentalności (1.0 przy tych samych ustawieniach)."""
    home_edge = home_tactics.goal_chance_mod / away_tactics.defensive_action_mod
    away_edge = away_tactics.goal_chance_mod / home_tactics.defensive_action_mod
    return home_edge / away_edge


def predict_outcome(home_strength: float, away_strength: float,
                    home_tactics: TeamTactics, away_tactics: TeamTactics) -> OutcomePrediction:
    """
    Prawdopodobieństwa wygranej/remisu/porażki przed meczem.

    Uwaga: away_win nie jest przycinane - przy skrajnych różnicach może wyjść
    lekko ujemne (np. -0.0); konsument musi się przed tym bronić.
    """
    adjusted_diff = (home_strength - away_strength) * tactical_balance(home_tactics, away_tactics)
    home_win = clamp(0.5 + adjusted_diff / 200, 0.10, 0.90)
    draw = max(0.10, 0.40 - abs(adjusted_diff) / 100)
    away_win = 1 - home_win - draw
    return OutcomePrediction(
        home_win_probability=round(home_win, 2),
        draw_probability=round(draw, 2),
        away_win_probability=round(away_win, 2),
    )
