"""Testy jednostkowe dla silnika meczowego."""
from __future__ import annotations
import random
from typing import List

import pytest

from models.match import GOAL, YELLOW_CARD, MatchCommentary, MatchEvent
from models.player import MoraleBoost, Player, PlayerAttributes
from models.team import Team
from simulation.chemistry import CachedChemistryScorer
from simulation.config import get_config
from simulation.match import TOTAL_SIM_MINUTES, MatchEngine, simulate_match
from simulation.tactics import TeamTactics
from simulation.utils import make_rng

ROLES = ("gk", "cb", "cb", "fb", "fb", "dm", "b2b", "ap", "w", "p", "cf")


class _ScriptedRng(random.Random):
    """RNG zwracający zawsze tę samą wartość z random()."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def _team(side: str, prefix: str, *, value: float = 60, tactics: TeamTactics = TeamTactics(),
          temperamental: tuple = (), roles=ROLES) -> Team:
    players = [
        Player(
            id=f"{prefix}{i}",
            name=f"{prefix.upper()} Player {i}",
            team=side,
            role_id=role,
            attributes=PlayerAttributes.uniform(value),
            traits=["Temperamental"] if i in temperamental else [],
        )
        for i, role in enumerate(roles, start=1)
    ]
    return Team(name=f"{prefix.upper()} FC", side=side, players=players, tactics=tactics)


def _pair(**kw):
    return _team("home", "h", **kw), _team("away", "a", **kw)


class TestMatchEngine:
    """Testy dla silnika meczowego."""

    def test_same_seed_same_match(self):
        home, away = _pair()
        r1 = MatchEngine(home, away, rng=make_rng(42)).simulate_match()
        r2 = MatchEngine(home, away, rng=make_rng(42)).simulate_match()
        assert r1.score == r2.score
        assert r1.events == r2.events
        assert r1.commentary_log == r2.commentary_log
        assert r1.is_rivalry == r2.is_rivalry

    @pytest.mark.parametrize("seed", [1, 7, 99, 2024])
    def test_result_invariants(self, seed):
        home, away = _pair()
        res = MatchEngine(home, away, rng=make_rng(seed)).simulate_match()
        minutes = [e.minute for e in res.events]
        assert all(1 <= m <= TOTAL_SIM_MINUTES for m in minutes)
        assert minutes == sorted(minutes)
        assert all(1 <= c.minute <= TOTAL_SIM_MINUTES for c in res.commentary_log)
        assert res.home_score >= 0 and res.away_score >= 0
        assert res.home_score == sum(1 for e in res.goals if e.team == "home")
        assert res.away_score == sum(1 for e in res.goals if e.team == "away")
        total_goals = sum(s["goals"] for s in res.player_stats.values())
        assert total_goals == res.home_score + res.away_score

    def test_callback_receives_every_update_in_order(self):
        home, away = _pair()
        updates: List = []
        res = MatchEngine(home, away, on_update=updates.append, rng=make_rng(5)).simulate_match()
        assert [u for u in updates if isinstance(u, MatchEvent)] == res.events
        assert [u for u in updates if isinstance(u, MatchCommentary)] == res.commentary_log
        minutes = [u.minute for u in updates]
        assert minutes == sorted(minutes)

    def test_module_shortcut(self):
        home, away = _pair()
        res = simulate_match(home, away, rng=make_rng(3))
        again = MatchEngine(home, away, rng=make_rng(3)).simulate_match()
        assert res.score == again.score

    def test_caller_teams_not_mutated(self):
        home, away = _pair()
        home.players[8].morale_boost = MoraleBoost(effect=2, duration=5)
        MatchEngine(home, away, rng=make_rng(11)).simulate_match()
        assert home.players[8].morale_boost == MoraleBoost(effect=2, duration=5)
        assert all(p.stamina == 100.0 for p in home.players + away.players)

    def test_morale_boost_decays_each_minute(self):
        home, away = _pair()
        home.players[9].morale_boost = MoraleBoost(effect=1, duration=3)
        engine = MatchEngine(home, away, rng=make_rng(1))
        ticks = engine.iter_minutes()
        assert next(ticks) == 1
        assert engine.home.players[9].morale_boost.duration == 2
        next(ticks)
        assert engine.home.players[9].morale_boost.duration == 1
        next(ticks)
        assert engine.home.players[9].morale_boost is None
        assert sum(1 for _ in ticks) == TOTAL_SIM_MINUTES - 3

    def test_engine_runs_only_once(self):
        home, away = _pair()
        engine = MatchEngine(home, away, rng=make_rng(6))
        first = engine.simulate_match()
        with pytest.raises(RuntimeError):
            engine.simulate_match()
        assert engine.home_score == first.home_score
        assert engine.feed.events == first.events


class TestValidation:

    def test_missing_tactics_raises(self):
        home, away = _pair()
        away.tactics = None  # type: ignore[assignment]
        with pytest.raises(TypeError):
            MatchEngine(home, away)

    def test_not_a_team_raises(self):
        home, _ = _pair()
        with pytest.raises(TypeError):
            MatchEngine(home, "away")  # type: ignore[arg-type]

    def test_wrong_side_raises(self):
        home, away = _pair()
        with pytest.raises(ValueError):
            MatchEngine(away, home)


class TestScriptedRandomness:

    def test_every_draw_succeeds(self):
        home, away = _pair()
        engine = MatchEngine(home, away, rng=_ScriptedRng(0.0))
        res = engine.simulate_match()
        # równe drużyny -> start od gości; zmiana posiadania co minutę
        assert res.score == (45, 45)
        assert [g.team for g in res.goals[:4]] == ["home", "away", "home", "away"]
        assert all(g.assister_name is not None for g in res.goals)
        assert res.is_rivalry is True
        yellows = [e for e in res.events if e.type == YELLOW_CARD]
        assert len(yellows) == 22 * TOTAL_SIM_MINUTES

    def test_initial_possession_goes_away_on_equal_midfields(self):
        home, away = _pair()
        engine = MatchEngine(home, away, rng=_ScriptedRng(0.999))
        next(engine.iter_minutes())
        assert engine.possession == "away"

    def test_initial_possession_goes_home_with_stronger_midfield(self):
        home, away = _team("home", "h", value=80), _team("away", "a", value=40)
        engine = MatchEngine(home, away, rng=_ScriptedRng(0.999))
        next(engine.iter_minutes())
        assert engine.possession == "home"

    def test_no_draw_succeeds(self):
        home, away = _pair()
        res = MatchEngine(home, away, rng=_ScriptedRng(0.999)).simulate_match()
        assert res.score == (0, 0)
        assert res.events == []
        assert res.commentary_log == []
        assert res.is_rivalry is False

    def test_only_temperamental_players_booked(self):
        get_config().data['fouls']['base_prob_per_min'] = 0.4
        home = _team("home", "h", temperamental=(7,))
        away = _team("away", "a", temperamental=(3,))
        res = MatchEngine(home, away, rng=_ScriptedRng(0.5)).simulate_match()
        booked = {e.player_name for e in res.events if e.type == YELLOW_CARD}
        assert booked == {"H Player 7", "A Player 3"}
        assert len(res.events) == 2 * TOTAL_SIM_MINUTES
        assert all(e.description == "received a yellow card for a late challenge." for e in res.events)

    def test_high_pressing_raises_foul_rate(self):
        get_config().data['fouls']['base_prob_per_min'] = 0.45
        home = _team("home", "h", tactics=TeamTactics(pressing="high"))
        away = _team("away", "a")
        res = MatchEngine(home, away, rng=_ScriptedRng(0.5)).simulate_match()
        sides = {e.team for e in res.events}
        assert sides == {"home"}
        assert len(res.events) == 11 * TOTAL_SIM_MINUTES


class TestChemistryCache:

    def test_pair_scored_once_per_match(self):
        home, away = _pair()
        engine = MatchEngine(home, away, rng=make_rng(8))
        engine.simulate_match()
        assert all(isinstance(s, CachedChemistryScorer) for s in engine.scorers.values())
        assert engine.scorers["home"].calls == 55
        assert engine.scorers["away"].calls == 55

    def test_cache_kept_per_side_when_ids_overlap(self):
        def side(name):
            players = [Player(id=str(i), name=f"{name}-{i}", team=name, role_id=r,
                              attributes=PlayerAttributes.uniform(60))
                       for i, r in enumerate(("gk", "cb", "cm", "cf"), start=1)]
            return Team(name=name, side=name, players=players)

        home, away = side("home"), side("away")
        home.mentoring_groups = [["1", "2", "3", "4"]]
        cached = MatchEngine(home, away, rng=make_rng(1))
        plain = MatchEngine(home, away, rng=make_rng(1), cache_chemistry=False)
        for engine in (cached, plain):
            next(engine.iter_minutes())
        got = [cached.team_strengths(t).overall_chemistry for t in (cached.home, cached.away)]
        expected = [plain.team_strengths(t).overall_chemistry for t in (plain.home, plain.away)]
        assert got == expected == [60.0, 50.0]

    def test_uncached_scorer_called_every_minute(self):
        calls = []

        def scorer(a, b, *rest):
            calls.append(1)
            return 50.0

        home, away = _pair()
        MatchEngine(home, away, rng=make_rng(8), scorer=scorer, cache_chemistry=False).simulate_match()
        # ocena startowa + 90 minut, po 55 par na drużynę
        assert len(calls) == 2 * 55 * (TOTAL_SIM_MINUTES + 1)


class TestGoalAttribution:

    def test_scorers_and_assisters(self):
        home, away = _pair(value=90)
        get_config().data['chances']['base_creation_prob'] = 0.5
        goals = []
        for seed in range(20):
            goals.extend(MatchEngine(home, away, rng=make_rng(seed)).simulate_match().goals)
        assert goals
        by_name = {p.name: p for p in home.players + away.players}
        for g in goals:
            assert g.type == GOAL
            scorer = by_name[g.player_name]
            assert scorer.is_forward() or scorer.is_midfielder()
            assert scorer.team == g.team
            if g.assister_name is not None:
                assister = by_name[g.assister_name]
                assert assister.name != scorer.name
                assert not assister.is_goalkeeper()
                assert assister.team == g.team
                assert g.description == f"scored a goal, assisted by {assister.name}."
            else:
                assert g.description == "scored a goal."

    def test_empty_attacking_side_creates_nothing(self):
        home = Team(name="Empty", side="home", players=[])
        away = _team("away", "a")
        res = MatchEngine(home, away, rng=_ScriptedRng(0.0)).simulate_match()
        assert res.home_score == 0
