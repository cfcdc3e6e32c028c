from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

# Statyczna tabela modyfikatorów taktycznych
TACTIC_MODIFIERS: Dict[str, Dict[str, Dict[str, float]]] = {
    "mentality": {
        "very-defensive": {"goal_chance": 0.70, "defensive_action": 1.30},
        "defensive":      {"goal_chance": 0.85, "defensive_action": 1.15},
        "balanced":       {"goal_chance": 1.00, "defensive_action": 1.00},
        "attacking":      {"goal_chance": 1.15, "defensive_action": 0.85},
        "very-attacking": {"goal_chance": 1.30, "defensive_action": 0.70},
    },
    "pressing": {
        "low":    {"foul_chance": 0.8, "possession_gain": 0.9},
        "medium": {"foul_chance": 1.0, "possession_gain": 1.0},
        "high":   {"foul_chance": 1.2, "possession_gain": 1.1},
    },
    "defensive_line": {
        "deep":   {"opponent_shot_quality": 0.85, "offside_chance": 0.8},
        "medium": {"opponent_shot_quality": 1.00, "offside_chance": 1.0},
        "high":   {"opponent_shot_quality": 1.15, "offside_chance": 1.2},
    },
}

MENTALITIES = tuple(TACTIC_MODIFIERS["mentality"])
PRESSING_LEVELS = tuple(TACTIC_MODIFIERS["pressing"])
DEFENSIVE_LINES = tuple(TACTIC_MODIFIERS["defensive_line"])


@dataclass(frozen=True)
class TeamTactics:
    mentality: str = "balanced"     # very-defensive | defensive | balanced | attacking | very-attacking
    pressing: str = "medium"        # low | medium | high
    defensive_line: str = "medium"  # deep | medium | high

    def __post_init__(self) -> None:
        if self.mentality not in MENTALITIES:
            raise ValueError(f"Nieznana mentalność: {self.mentality!r}")
        if self.pressing not in PRESSING_LEVELS:
            raise ValueError(f"Nieznany pressing: {self.pressing!r}")
        if self.defensive_line not in DEFENSIVE_LINES:
            raise ValueError(f"Nieznana linia obrony: {self.defensive_line!r}")

    @property
    def goal_chance_mod(self) -> float:
        return TACTIC_MODIFIERS["mentality"][self.mentality]["goal_chance"]

    @property
    def defensive_action_mod(self) -> float:
        return TACTIC_MODIFIERS["mentality"][self.mentality]["defensive_action"]

    @property
    def foul_chance_mod(self) -> float:
        return TACTIC_MODIFIERS["pressing"][self.pressing]["foul_chance"]

    @property
    def possession_gain_mod(self) -> float:
        return TACTIC_MODIFIERS["pressing"][self.pressing]["possession_gain"]

    @property
    def opponent_shot_quality_mod(self) -> float:
        return TACTIC_MODIFIERS["defensive_line"][self.defensive_line]["opponent_shot_quality"]

    @property
    def offside_chance_mod(self) -> float:
        return TACTIC_MODIFIERS["defensive_line"][self.defensive_line]["offside_chance"]

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "TeamTactics":
        return cls(
            mentality=data.get("mentality", "balanced"),
            pressing=data.get("pressing", "medium"),
            defensive_line=data.get("defensive_line") or data.get("defensiveLine", "medium"),
        )
