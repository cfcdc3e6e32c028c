from __future__ import annotations
import argparse
import csv
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models.loader import load_match  # noqa: E402
from models.match import YELLOW_CARD, MatchResult  # noqa: E402
from simulation.match import MatchEngine  # noqa: E402
from simulation.stats import distribution_snapshot, write_snapshot  # noqa: E402
from simulation.utils import make_rng  # noqa: E402


def simulate_many(n: int = 200, home: Optional[str] = None, away: Optional[str] = None,
                  squads: Optional[str] = None) -> Tuple[List[Dict], List[MatchResult]]:
    home_team, away_team, chemistry = load_match(home, away, squads)
    rows: List[Dict] = []
    results: List[MatchResult] = []
    for seed in range(n):
        res = MatchEngine(home_team, away_team, chemistry, rng=make_rng(seed)).simulate_match()
        results.append(res)
        rows.append({
            "seed": seed,
            "home_score": res.home_score,
            "away_score": res.away_score,
            "yellows_home": sum(1 for e in res.events if e.type == YELLOW_CARD and e.team == "home"),
            "yellows_away": sum(1 for e in res.events if e.type == YELLOW_CARD and e.team == "away"),
            "commentary_lines": len(res.commentary_log),
            "is_rivalry": res.is_rivalry,
        })
    return rows, results


def write_csv(rows: List[Dict], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if not rows:
        return
    with path.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        w.writeheader()
        w.writerows(rows)


if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("-n", type=int, default=200)
    p.add_argument("--home", type=str)
    p.add_argument("--away", type=str)
    p.add_argument("--squads", type=str)
    p.add_argument("--out-dir", type=str, default=str(ROOT / "reports"))
    args = p.parse_args()

    data, results = simulate_many(n=args.n, home=args.home, away=args.away, squads=args.squads)
    out = Path(args.out_dir) / "batch_stats.csv"
    write_csv(data, out)
    snap = write_snapshot(distribution_snapshot(results), out_dir=args.out_dir)
    print(f"Wrote {len(data)} rows to {out}")
    print(f"Distribution snapshot: {snap}")
