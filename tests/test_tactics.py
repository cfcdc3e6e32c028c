from __future__ import annotations
import pytest

from simulation.tactics import DEFENSIVE_LINES, MENTALITIES, PRESSING_LEVELS, TACTIC_MODIFIERS, TeamTactics


def test_default_tactics_are_neutral():
    t = TeamTactics()
    assert t.goal_chance_mod == 1.0
    assert t.defensive_action_mod == 1.0
    assert t.foul_chance_mod == 1.0
    assert t.possession_gain_mod == 1.0
    assert t.opponent_shot_quality_mod == 1.0
    assert t.offside_chance_mod == 1.0


@pytest.mark.parametrize("mentality,goal,defence", [
    ("very-defensive", 0.70, 1.30),
    ("defensive", 0.85, 1.15),
    ("balanced", 1.00, 1.00),
    ("attacking", 1.15, 0.85),
    ("very-attacking", 1.30, 0.70),
])
def test_mentality_modifiers(mentality, goal, defence):
    t = TeamTactics(mentality=mentality)
    assert t.goal_chance_mod == pytest.approx(goal)
    assert t.defensive_action_mod == pytest.approx(defence)


def test_pressing_and_line_modifiers():
    assert TeamTactics(pressing="low").foul_chance_mod == pytest.approx(0.8)
    assert TeamTactics(pressing="high").foul_chance_mod == pytest.approx(1.2)
    assert TeamTactics(pressing="high").possession_gain_mod == pytest.approx(1.1)
    assert TeamTactics(defensive_line="deep").opponent_shot_quality_mod == pytest.approx(0.85)
    assert TeamTactics(defensive_line="high").offside_chance_mod == pytest.approx(1.2)


def test_table_covers_all_settings():
    assert len(MENTALITIES) == 5
    assert set(PRESSING_LEVELS) == {"low", "medium", "high"}
    assert set(DEFENSIVE_LINES) == {"deep", "medium", "high"}
    for group in TACTIC_MODIFIERS.values():
        for mods in group.values():
            assert all(v > 0 for v in mods.values())


@pytest.mark.parametrize("kwargs", [
    {"mentality": "all-out"},
    {"pressing": "extreme"},
    {"defensive_line": "suicidal"},
])
def test_unknown_setting_raises(kwargs):
    with pytest.raises(ValueError):
        TeamTactics(**kwargs)


def test_from_dict_accepts_camel_case_line():
    t = TeamTactics.from_dict({"mentality": "defensive", "pressing": "low", "defensiveLine": "deep"})
    assert t == TeamTactics("defensive", "low", "deep")


def test_tactics_are_immutable():
    t = TeamTactics()
    with pytest.raises(Exception):
        t.mentality = "attacking"  # type: ignore[misc]
