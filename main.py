from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List

from models.match import GOAL, MatchResult
from models.loader import SQUADS_JSON, load_match
from models.team import Team
from simulation.config import load_config
from simulation.match import TOTAL_SIM_MINUTES, MatchEngine
from simulation.preview import MatchPreview, generate_match_preview
from simulation.utils import make_rng

# Wymuś wyjście UTF-8 w konsoli (zapobiega krzaczeniu polskich znaków)
try:
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")
except AttributeError:
    pass


def render_lineups(home: Team, away: Team) -> None:
    print("\n" + "=" * 80)
    print("⚽ SKŁADY DRUŻYN ⚽")
    print("=" * 80 + "\n")

    def print_team(team: Team, icon: str) -> None:
        t = team.tactics
        print(f"{icon} {team.name}")
        print(
            f"   Mentalność: {t.mentality} | Pressing: {t.pressing} | Linia obrony: {t.defensive_line} | Zgranie: {team.familiarity:.0f}\n"
        )
        groups = {
            "Bramkarz": [p for p in team.players if p.is_goalkeeper()],
            "Obrońcy": [p for p in team.players if p.is_defender()],
            "Pomocnicy": [p for p in team.players if p.is_midfielder()],
            "Napastnicy": [p for p in team.players if p.is_forward()],
            "Nieznana rola": [p for p in team.players if p.category is None],
        }
        for title, arr in groups.items():
            if not arr:
                continue
            print(f"   {title}:")
            for pl in arr:
                traits = ", ".join(pl.traits[:2])
                traits_txt = f" | Cechy: {traits}" if traits else ""
                print(
                    f"      # {pl.name:<22} | {pl.role_id:<4} | Ocena: {pl.get_key_rating():>5.1f} | Forma: {pl.form}{traits_txt}"
                )
            print()

    print_team(home, "🔴")
    print_team(away, "🔵")
    print("=" * 80 + "\n")


def print_preview(preview: MatchPreview, home: Team, away: Team) -> None:
    hs, aws, o = preview.home_strengths, preview.away_strengths, preview.outcome
    print("🔎 ZAPOWIEDŹ MECZU")
    print(f"   {'':<12}{home.name:>20}{away.name:>20}")
    for label, h, a in (
        ("Atak", hs.attack, aws.attack),
        ("Obrona", hs.defense, aws.defense),
        ("Środek", hs.midfield, aws.midfield),
        ("Chemia", hs.overall_chemistry, aws.overall_chemistry),
    ):
        print(f"   {label:<12}{h:>20.1f}{a:>20.1f}")
    print(
        f"\n   Szanse: {home.name} {o.home_win_probability:.0%} | remis {o.draw_probability:.0%} | {away.name} {o.away_win_probability:.0%}"
    )
    for side, team in (("home", home), ("away", away)):
        names = ", ".join(p.name for p in preview.key_players.get(side, []))
        print(f"   Kluczowi ({team.name}): {names}")
    if preview.tactical_mismatch:
        print("\n   ⚠️  Uwagi taktyczne:")
        for w in preview.tactical_mismatch:
            print(f"      - {w}")
    print()


def print_match_report(result: MatchResult, home: Team, away: Team) -> None:
    print("\n" + "=" * 70)
    print(f"RAPORT Z MECZU: {home.name} vs {away.name}")
    print("=" * 70 + "\n")
    print(f"📊 WYNIK KOŃCOWY: {home.name} {result.home_score} - {result.away_score} {away.name}\n")

    names = {"home": home.name, "away": away.name}
    goals = result.goals
    if goals:
        print("⚽ BRAMKI:")
        for g in goals:
            assist = f" (asysta: {g.assister_name})" if g.assister_name else ""
            print(f"   {names[g.team]}: {g.minute}' {g.player_name}{assist}")
    else:
        print("⚽ BRAMKI: Brak bramek w tym meczu")

    cards = [e for e in result.events if e.type != GOAL]
    if cards:
        print("\n🟨 KARTKI:")
        for e in cards:
            print(f"   {names[e.team]}: {e.minute}' {e.player_name}")

    scorers: List[Dict] = []
    for team in (home, away):
        for p in team.players:
            st = result.player_stats.get(p.id) or {}
            if st.get("goals") or st.get("assists"):
                scorers.append({"name": p.name, **st})
    if scorers:
        print("\n📈 PUNKTACJA KANADYJSKA:")
        for s in sorted(scorers, key=lambda x: (x["goals"], x["assists"]), reverse=True):
            print(f"   {s['name']:<22} G: {s['goals']}  A: {s['assists']}")

    if result.is_rivalry:
        print("\n🔥 Mecz oznaczony jako derbowy.")
    print("\n" + "=" * 80 + "\n")


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Symulacja meczu minuta po minucie")
    p.add_argument("--squads", type=str, default=str(SQUADS_JSON), help="Plik JSON ze składami i chemią")
    p.add_argument("--home", type=str)
    p.add_argument("--away", type=str)
    p.add_argument("--seed", type=int)
    p.add_argument("--verbose", action="store_true", help="Drukuj komentarz na żywo")
    p.add_argument("--preview-only", action="store_true", help="Tylko zapowiedź, bez symulacji")
    p.add_argument("--config", type=str, help="Plik YAML z nadpisaniami konfiguracji silnika")
    p.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    # Zapis JSON raportu (domyślnie włączony)
    p.add_argument(
        "--save-json",
        dest="save_json",
        type=lambda v: str(v).lower() not in ("0", "false", "no"),
        default=True,
        help="Czy zapisać wynik do pliku JSON (domyślnie True)",
    )
    p.add_argument(
        "--json-path",
        type=str,
        default=str(Path("out") / "last_report.json"),
        help="Ścieżka docelowa pliku JSON (domyślnie out/last_report.json)",
    )
    return p.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    load_config(args.config)

    try:
        home, away, chemistry = load_match(args.home, args.away, args.squads)
    except (FileNotFoundError, KeyError, ValueError) as e:
        print(f"[BŁĄD] {e}")
        return 1

    # Nagłówek
    print("\n⚽ MATCH ENGINE")
    print(f"   Mecz: {home.name} vs {away.name}\n   Czas trwania: {TOTAL_SIM_MINUTES} minut symulacji\n")

    render_lineups(home, away)
    preview = generate_match_preview(home, away, chemistry)
    print_preview(preview, home, away)
    if args.preview_only:
        return 0

    engine = MatchEngine(home, away, chemistry, rng=make_rng(args.seed), verbose=bool(args.verbose))
    result = engine.simulate_match()
    print_match_report(result, home, away)

    if args.save_json:
        out_path = Path(args.json_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"home": home.name, "away": away.name, "seed": args.seed,
                   "preview": preview.to_dict(), "result": result.to_dict()}
        out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
