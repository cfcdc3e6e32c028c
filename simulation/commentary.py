from __future__ import annotations
import json
import logging
import random
from pathlib import Path
from typing import Dict, List, Optional

from simulation.config import get_config

_log = logging.getLogger("matchsim.commentary")

ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets" / "commentary"

# Kanoniczne linie - używane, gdy paczki brak albo brak w niej klucza
FALLBACKS: Dict[str, str] = {
    "possession": "{side} regain possession in midfield.",
    "goal_assisted": "GOAL! {scorer} finishes it off, assisted by {assister}!",
    "goal_solo": "GOAL! A brilliant solo effort from {scorer}!",
    "tackle": "{attacker} goes on a run, but is stopped by a great tackle from {defender}.",
    "yellow_card": "A late challenge from {name} earns a yellow card.",
}


def _load_pack(path: Path) -> Dict[str, List[str]]:
    if not path.is_file():
        _log.warning("Brak paczki komentarzy %s - używam linii domyślnych", path)
        return {}
    raw = json.loads(path.read_text(encoding="utf-8"))
    out: Dict[str, List[str]] = {}
    for key, vals in (raw or {}).items():
        seen, uniq = set(), []
        for v in vals:
            t = str(v).strip()
            if t and t.lower() not in seen:
                seen.add(t.lower())
                uniq.append(t)
        out[key] = uniq
    return out


class Commentary:
    """
    Warstwa komentarzy:
    - Ładuje frazy z JSON (assets/commentary/<pack>.json)
    - Wybór losowy z puli z oknem anty-powtórek
    - Osobny RNG, żeby wybór frazy nie zmieniał przebiegu symulacji
    """

    def __init__(self, pack: Optional[str] = None, *, rng: Optional[random.Random] = None,
                 no_repeat_window: Optional[int] = None, pack_path: Optional[Path] = None) -> None:
        cfg = get_config()
        pack = pack or cfg.get('commentary.pack', 'en')
        self.rng = rng or random.Random(cfg.get('commentary.seed', 12345))
        self.no_repeat_window = int(no_repeat_window if no_repeat_window is not None
                                    else cfg.get('commentary.no_repeat_window', 3))
        self._pack = _load_pack(pack_path or ASSETS_DIR / f"{pack}.json")
        self._recent: Dict[str, List[str]] = {}

    def _pick(self, key: str, **vars) -> str:
        arr = self._pack.get(key) or []
        if not arr:
            return FALLBACKS[key].format(**vars)
        window = self.no_repeat_window
        recent = self._recent.get(key, [])
        # filtruj ostatnie N; jeśli zabraknie - bierz pełną pulę
        pool = [v for v in arr if v not in recent] or arr
        choice = self.rng.choice(pool)
        recent.append(choice)
        # trzymaj tylko okno anty-powtórek
        self._recent[key] = recent[-window:] if window > 0 else []
        return choice.format(**vars)

    def possession(self, side: str) -> str:
        return self._pick("possession", side="Home" if side == "home" else "Away")

    def goal(self, scorer: str, assister: Optional[str] = None) -> str:
        if assister:
            return self._pick("goal_assisted", scorer=scorer, assister=assister)
        return self._pick("goal_solo", scorer=scorer)

    def tackle(self, attacker: str, defender: str) -> str:
        return self._pick("tackle", attacker=attacker, defender=defender)

    def yellow_card(self, name: str) -> str:
        return self._pick("yellow_card", name=name)
