from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.player import Player
from models.team import Team
from simulation.chemistry import ChemistryContext, ChemistryScorer, matrix_chemistry_score
from simulation.config import get_config
from simulation.prediction import OutcomePrediction, predict_outcome
from simulation.strength import TeamStrengths, compute_team_strengths


@dataclass
class MatchPreview:
    home_strengths: TeamStrengths
    away_strengths: TeamStrengths
    outcome: OutcomePrediction
    key_players: Dict[str, List[Player]] = field(default_factory=dict)
    tactical_mismatch: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'home_strengths': self.home_strengths.to_dict(),
            'away_strengths': self.away_strengths.to_dict(),
            'outcome': self.outcome.to_dict(),
            'key_players': {side: [p.name for p in players] for side, players in self.key_players.items()},
            'tactical_mismatch': list(self.tactical_mismatch),
        }


def tactical_mismatches(home: Team, away: Team, home_str: TeamStrengths, away_str: TeamStrengths,
                        poor_chemistry: float = 30.0) -> List[str]:
    """Proste reguły ostrzeżeń taktycznych (tekst doradczy, bez wpływu na symulację)."""
    ht, at = home.tactics, away.tactics
    out: List[str] = []
    if ht.mentality == "very-attacking" and at.defensive_line == "deep":
        out.append("Home team's attacking mentality may struggle against away team's deep defense")
    if at.mentality == "very-attacking" and ht.defensive_line == "deep":
        out.append("Away team's attacking mentality may struggle against home team's deep defense")
    if at.pressing == "high" and ht.mentality == "very-attacking":
        out.append("Away team's high pressing could exploit home team's aggressive approach")
    if ht.pressing == "high" and at.mentality == "very-attacking":
        out.append("Home team's high pressing could exploit away team's aggressive approach")
    if home_str.overall_chemistry < poor_chemistry:
        out.append("Home team's poor chemistry could be a deciding factor")
    if away_str.overall_chemistry < poor_chemistry:
        out.append("Away team's poor chemistry could be exploited")
    return out


def generate_match_preview(home: Team, away: Team, chemistry: Optional[ChemistryContext] = None,
                           scorer: ChemistryScorer = matrix_chemistry_score) -> MatchPreview:
    chemistry = chemistry or ChemistryContext()
    cfg = get_config()

    def strengths(team: Team) -> TeamStrengths:
        groups = team.mentoring_groups or chemistry.groups_for(team.side)
        return compute_team_strengths(team.players, team.familiarity, chemistry, groups, scorer)

    home_str = strengths(home)
    away_str = strengths(away)
    outcome = predict_outcome(home_str.overall, away_str.overall, home.tactics, away.tactics)
    n = int(cfg.get('preview.key_players', 3))
    return MatchPreview(
        home_strengths=home_str,
        away_strengths=away_str,
        outcome=outcome,
        key_players={"home": home.get_key_players(n), "away": away.get_key_players(n)},
        tactical_mismatch=tactical_mismatches(
            home, away, home_str, away_str,
            poor_chemistry=float(cfg.get('preview.poor_chemistry_threshold', 30.0)),
        ),
    )
