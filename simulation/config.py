"""
Konfiguracja silnika meczowego.

Wartości domyślne są w DEFAULTS; plik YAML (domyślnie engine_config.yml albo
ścieżka z MATCHSIM_CONFIG) jest nakładany na nie rekurencyjnie.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import copy
import logging
import os

import yaml

_log = logging.getLogger("matchsim.config")

CONFIG_ENV_VAR = "MATCHSIM_CONFIG"
DEFAULT_CONFIG_PATH = "engine_config.yml"

DEFAULTS: Dict[str, Any] = {
    'match': {
        'possession_change_prob': 0.30,
        'possession_exponent': 1.5,
    },
    'chances': {
        'base_creation_prob': 0.10,
        'base_goal_prob': 0.10,
        'goal_ratio_exponent': 2.0,
        'assist_prob': 0.70,
    },
    'fouls': {
        'base_prob_per_min': 0.001,
        'temperamental_mult': 1.5,
    },
    'strength': {
        'neutral': 50.0,
        'stamina_floor': 0.7,
        'multiplier_floor': 0.8,
        'multiplier_span': 0.4,
    },
    'rivalry': {
        'probability': 0.20,
    },
    'preview': {
        'key_players': 3,
        'poor_chemistry_threshold': 30.0,
    },
    'commentary': {
        'pack': 'en',
        'no_repeat_window': 3,
        'seed': 12345,
    },
}


def _merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(a)
    for k, v in (b or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


@dataclass
class EngineConfig:
    data: Dict[str, Any] = field(default_factory=lambda: copy.deepcopy(DEFAULTS))

    def get(self, path: str, default: Any = None) -> Any:
        cur: Any = self.data
        for part in path.split('.'):
            if isinstance(cur, dict) and part in cur:
                cur = cur[part]
            else:
                return default
        return cur


_GLOBAL_CONFIG: Optional[EngineConfig] = None


def load_config(path: Optional[str] = None) -> EngineConfig:
    global _GLOBAL_CONFIG
    path = path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    cfg = EngineConfig()
    if os.path.exists(path):
        with open(path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}
        cfg.data = _merge(copy.deepcopy(DEFAULTS), loaded)
        _log.info("Wczytano konfigurację silnika z %s", path)
    else:
        _log.debug("Brak pliku %s - używam wartości domyślnych", path)
    _GLOBAL_CONFIG = cfg
    return cfg


def get_config() -> EngineConfig:
    global _GLOBAL_CONFIG
    if _GLOBAL_CONFIG is None:
        _GLOBAL_CONFIG = load_config()
    return _GLOBAL_CONFIG


def reset_config() -> None:
    """Czyści globalną konfigurację (przy następnym get_config wczyta się od nowa)."""
    global _GLOBAL_CONFIG
    _GLOBAL_CONFIG = None
