from __future__ import annotations
import copy as _copy
import logging
import random
from typing import Dict, Iterator, List, Optional

from models.match import GOAL, YELLOW_CARD, MatchEvent, MatchResult
from models.player import Player
from models.team import Team
from simulation.chemistry import CachedChemistryScorer, ChemistryContext, ChemistryScorer, matrix_chemistry_score
from simulation.commentary import Commentary
from simulation.config import get_config
from simulation.feed import MatchFeed, UpdateCallback
from simulation.stats import collect_player_stats
from simulation.strength import TeamStrengths, compute_team_strengths
from simulation.tactics import TeamTactics
from simulation.utils import best_by

_log = logging.getLogger("matchsim.match")

# Eksportowane stałe (używane w main.py)
TOTAL_SIM_MINUTES = 90
TEMPERAMENTAL = "Temperamental"


class MatchEngine:
    """
    Symulacja meczu minuta po minucie (1..90, bez doliczonego czasu).

    Silnik pracuje na głębokich kopiach drużyn - zawodnicy wywołującego nie są
    modyfikowani. Każde zdarzenie i linia komentarza trafia synchronicznie do
    `on_update`; na koniec `simulate_match()` zwraca MatchResult.
    """

    def __init__(self, home: Team, away: Team, chemistry: Optional[ChemistryContext] = None, *,
                 on_update: Optional[UpdateCallback] = None, rng: Optional[random.Random] = None,
                 scorer: ChemistryScorer = matrix_chemistry_score, cache_chemistry: bool = True,
                 commentary: Optional[Commentary] = None, verbose: bool = False) -> None:
        for team, side in ((home, "home"), (away, "away")):
            if not isinstance(team, Team):
                raise TypeError(f"Oczekiwano Team dla strony {side}, jest {type(team).__name__}")
            if not isinstance(team.tactics, TeamTactics):
                raise TypeError(f"Brak taktyki (TeamTactics) dla drużyny {team.name}")
            if team.side != side:
                raise ValueError(f"Drużyna {team.name} ma stronę {team.side!r}, oczekiwano {side!r}")

        # Zawodnicy wywołującego - tylko do odczytu (statystyki końcowe)
        self._source_players: List[Player] = list(home.players) + list(away.players)
        # Izoluj stan wejściowy - pracuj na głębokich kopiach drużyn
        self.home = _copy.deepcopy(home)
        self.away = _copy.deepcopy(away)
        self.chemistry = chemistry or ChemistryContext()
        # osobny cache na stronę - grupy mentorskie (i ew. id zawodników) są per drużyna
        self.scorers: Dict[str, ChemistryScorer] = {
            side: CachedChemistryScorer(scorer) if cache_chemistry else scorer for side in ("home", "away")
        }
        self._rng = rng or random.Random()
        self.commentary = commentary or Commentary()
        self.feed = MatchFeed(on_update, verbose=verbose)
        self.home_score = 0
        self.away_score = 0
        self.minute = 0
        self.possession: Optional[str] = None
        self._started = False
        self._cfg = get_config()

    # siła drużyn

    def team_strengths(self, team: Team) -> TeamStrengths:
        groups = team.mentoring_groups or self.chemistry.groups_for(team.side)
        return compute_team_strengths(team.players, team.familiarity, self.chemistry, groups,
                                      self.scorers[team.side])

    def _decay_morale_boosts(self) -> None:
        for p in self.home.players + self.away.players:
            if p.morale_boost is not None and p.morale_boost.duration > 0:
                p.morale_boost.duration -= 1
            if p.morale_boost is not None and p.morale_boost.duration <= 0:
                p.morale_boost = None

    @staticmethod
    def _midfield_factor(home: TeamStrengths, away: TeamStrengths) -> float:
        return home.midfield / ((home.midfield + away.midfield) or 1)

    # pętla meczu

    def iter_minutes(self) -> Iterator[int]:
        """Generator: symuluje kolejne minuty i oddaje sterowanie po każdej z nich."""
        if self._started:
            raise RuntimeError("Ten mecz został już rozegrany - utwórz nowy MatchEngine")
        self._started = True
        initial = self._midfield_factor(self.team_strengths(self.home), self.team_strengths(self.away))
        self.possession = "home" if initial > 0.5 else "away"
        for minute in range(1, TOTAL_SIM_MINUTES + 1):
            self.minute = minute
            self._simulate_minute(minute)
            yield minute

    def simulate_match(self) -> MatchResult:
        for _ in self.iter_minutes():
            pass
        return self._build_result()

    def _simulate_minute(self, minute: int) -> None:
        self._decay_morale_boosts()
        home_str = self.team_strengths(self.home)
        away_str = self.team_strengths(self.away)

        exponent = float(self._cfg.get('match.possession_exponent', 1.5))
        home_advantage = self._midfield_factor(home_str, away_str) ** exponent

        # szarpanina w środku pola - zmiana posiadania
        if self._rng.random() < float(self._cfg.get('match.possession_change_prob', 0.30)):
            self.possession = "away" if self.possession == "home" else "home"
            self.feed.comment(minute, self.commentary.possession(self.possession))

        base_chance = float(self._cfg.get('chances.base_creation_prob', 0.10))
        if self.possession == "home":
            chance_creation = base_chance * home_advantage
            attacking, defending, att_str, def_str = self.home, self.away, home_str, away_str
        else:
            chance_creation = base_chance * (1 - home_advantage)
            attacking, defending, att_str, def_str = self.away, self.home, away_str, home_str
        if self._rng.random() < chance_creation:
            self._simulate_chance(minute, attacking, defending, att_str, def_str)

        self._simulate_fouls(minute)

    def _simulate_chance(self, minute: int, attacking: Team, defending: Team,
                         att_str: TeamStrengths, def_str: TeamStrengths) -> None:
        if not attacking.players:
            return
        attack_rating = att_str.attack * attacking.tactics.goal_chance_mod
        defense_rating = def_str.defense * defending.tactics.defensive_action_mod
        base_goal = float(self._cfg.get('chances.base_goal_prob', 0.10))
        exponent = float(self._cfg.get('chances.goal_ratio_exponent', 2.0))
        goal_probability = base_goal * (attack_rating / (defense_rating or 1)) ** exponent

        attacker = best_by(attacking.get_attackers(), lambda p: p.attributes.positioning, attacking.players)

        if self._rng.random() < goal_probability:
            self._score_goal(minute, attacking)
        else:
            defender = best_by(defending.get_defenders(), lambda p: p.attributes.tackling, defending.players)
            defender_name = defender.name if defender else "the defence"
            self.feed.comment(minute, self.commentary.tackle(attacker.name, defender_name))

    def _score_goal(self, minute: int, attacking: Team) -> None:
        scorers = attacking.get_attackers()
        scorer = self._rng.choice(scorers) if scorers else attacking.players[0]
        assister: Optional[Player] = None
        candidates = [p for p in attacking.get_outfield_players() if p.id != scorer.id]
        if candidates and self._rng.random() < float(self._cfg.get('chances.assist_prob', 0.70)):
            assister = self._rng.choice(candidates)

        self.feed.comment(minute, self.commentary.goal(scorer.name, assister.name if assister else None))
        self.feed.event(MatchEvent(
            minute=minute,
            type=GOAL,
            team=attacking.side,
            player_name=scorer.name,
            description=f"scored a goal, assisted by {assister.name}." if assister else "scored a goal.",
            assister_name=assister.name if assister else None,
        ))
        if attacking.side == "home":
            self.home_score += 1
        else:
            self.away_score += 1

    def _simulate_fouls(self, minute: int) -> None:
        base = float(self._cfg.get('fouls.base_prob_per_min', 0.001))
        temper = float(self._cfg.get('fouls.temperamental_mult', 1.5))
        for team in (self.home, self.away):
            for player in team.players:
                p_foul = base * team.tactics.foul_chance_mod
                if player.has_trait(TEMPERAMENTAL):
                    p_foul *= temper
                if self._rng.random() < p_foul:
                    self.feed.comment(minute, self.commentary.yellow_card(player.name))
                    self.feed.event(MatchEvent(
                        minute=minute,
                        type=YELLOW_CARD,
                        team=team.side,
                        player_name=player.name,
                        description="received a yellow card for a late challenge.",
                    ))

    def _build_result(self) -> MatchResult:
        events = list(self.feed.events)
        is_rivalry = self._rng.random() < float(self._cfg.get('rivalry.probability', 0.20))
        _log.debug("Koniec meczu %s %d-%d %s", self.home.name, self.home_score, self.away_score, self.away.name)
        return MatchResult(
            home_score=self.home_score,
            away_score=self.away_score,
            events=events,
            commentary_log=list(self.feed.commentary),
            is_rivalry=is_rivalry,
            player_stats=collect_player_stats(events, self._source_players),
        )


def simulate_match(home: Team, away: Team, chemistry: Optional[ChemistryContext] = None,
                   on_update: Optional[UpdateCallback] = None, **kwargs) -> MatchResult:
    """Skrót: jeden mecz od początku do końca."""
    return MatchEngine(home, away, chemistry, on_update=on_update, **kwargs).simulate_match()
