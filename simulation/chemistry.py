"""
Chemia zespołu - interfejs do zewnętrznego scorera par zawodników.

Silnik nie zagląda do struktury relacji ani grup mentorskich; przekazuje je
dalej i korzysta wyłącznie z liczby 0-100 zwróconej dla pary.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Tuple

from models.player import Player

ChemistryMatrix = Mapping[str, Mapping[str, float]]

# score(a, b, matrix, relationships, mentoring_groups) -> 0..100
ChemistryScorer = Callable[[Player, Player, ChemistryMatrix, Any, List[Any]], float]

DEFAULT_PAIR_SCORE = 50.0
MENTORING_BONUS = 10.0


@dataclass
class ChemistryContext:
    matrix: Dict[str, Dict[str, float]] = field(default_factory=dict)
    relationships: Any = None
    mentoring_groups: Dict[str, List[Any]] = field(default_factory=lambda: {"home": [], "away": []})

    def groups_for(self, side: str) -> List[Any]:
        return list((self.mentoring_groups or {}).get(side) or [])


def _group_members(group: Any) -> List[str]:
    if isinstance(group, Mapping):
        ids = list(group.get("mentee_ids") or group.get("menteeIds") or [])
        mentor = group.get("mentor_id") or group.get("mentorId")
        if mentor:
            ids.append(mentor)
        return [str(i) for i in ids]
    return [str(i) for i in (group or [])]


def matrix_chemistry_score(a: Player, b: Player, matrix: ChemistryMatrix,
                           relationships: Any = None, mentoring_groups: List[Any] | None = None) -> float:
    """Domyślny scorer: wpis z macierzy (w dowolnym kierunku) + bonus za wspólną grupę mentorską."""
    score = (matrix or {}).get(a.id, {}).get(b.id)
    if score is None:
        score = (matrix or {}).get(b.id, {}).get(a.id, DEFAULT_PAIR_SCORE)
    for group in mentoring_groups or []:
        members = _group_members(group)
        if a.id in members and b.id in members:
            score += MENTORING_BONUS
    return max(0.0, min(100.0, float(score)))


class CachedChemistryScorer:
    """
    Pamięta wynik dla pary (id, id) przez cały mecz - chemia pary nie zmienia się
    w trakcie spotkania, a siła drużyny jest liczona co minutę.
    """

    def __init__(self, scorer: ChemistryScorer = matrix_chemistry_score) -> None:
        self.scorer = scorer
        self._cache: Dict[Tuple[str, str], float] = {}
        self.calls = 0

    def __call__(self, a: Player, b: Player, matrix: ChemistryMatrix,
                 relationships: Any, mentoring_groups: List[Any]) -> float:
        key = (a.id, b.id) if a.id <= b.id else (b.id, a.id)
        if key not in self._cache:
            self.calls += 1
            self._cache[key] = float(self.scorer(a, b, matrix, relationships, mentoring_groups))
        return self._cache[key]
