# simulation/stats.py
from __future__ import annotations

import json
import statistics
import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

from models.match import GOAL, YELLOW_CARD, MatchEvent, MatchResult
from models.player import Player


def collect_player_stats(events: Sequence[MatchEvent], players: Iterable[Player]) -> Dict[str, Dict[str, int]]:
    """
    Gole i asysty per zawodnik, liczone wyłącznie z listy zdarzeń
    (bez liczników prowadzonych w trakcie meczu).
    """
    goals = [e for e in events if e.type == GOAL]
    out: Dict[str, Dict[str, int]] = {}
    for p in players:
        out[p.id] = {
            "goals": sum(1 for e in goals if e.player_name == p.name),
            "assists": sum(1 for e in goals if e.assister_name == p.name),
        }
    return out


def distribution_snapshot(results: Sequence[MatchResult]) -> Dict[str, Any]:
    """Średnie z serii meczów (bramki, żółte kartki, rozkład rozstrzygnięć)."""
    n = len(results)
    if n == 0:
        return {'matches': 0}
    goals = [r.home_score + r.away_score for r in results]
    yellows = [sum(1 for e in r.events if e.type == YELLOW_CARD) for r in results]
    home_wins = sum(1 for r in results if r.home_score > r.away_score)
    away_wins = sum(1 for r in results if r.away_score > r.home_score)
    return {
        'matches': n,
        'goals_per_match': round(statistics.mean(goals), 3),
        'yellows_per_match': round(statistics.mean(yellows), 3),
        'home_win_share': round(home_wins / n, 3),
        'draw_share': round((n - home_wins - away_wins) / n, 3),
        'away_win_share': round(away_wins / n, 3),
        'rivalry_share': round(sum(1 for r in results if r.is_rivalry) / n, 3),
    }


def minute_histogram(results: Iterable[MatchResult], bins: int = 9, minutes: int = 90) -> List[int]:
    """Liczba zdarzeń w równych przedziałach minut (domyślnie 9 × 10 minut)."""
    hist = [0] * bins
    width = minutes / bins
    for r in results:
        for e in r.events:
            idx = min(bins - 1, int((e.minute - 1) / width))
            hist[idx] += 1
    return hist


def write_snapshot(snapshot: Dict[str, Any], out_dir: str = 'out') -> str:
    Path(out_dir).mkdir(parents=True, exist_ok=True)
    ts = int(time.time())
    path = Path(out_dir) / f"distribution_{ts}.json"
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(snapshot, f, ensure_ascii=False, indent=2)
    return str(path)
