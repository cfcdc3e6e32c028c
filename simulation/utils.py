"""Funkcje pomocnicze dla silnika meczowego."""
import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Tworzy niezależny generator liczb losowych.

    Args:
        seed: Seed dla powtarzalności (None = losowy)

    Returns:
        Instancja random.Random przekazywana do silnika
    """
    return random.Random(seed)


def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(max_val, value))


def best_by(players: Sequence[T], key, fallback: Sequence[T]) -> Optional[T]:
    """Zawodnik z najwyższą wartością `key` z puli; gdy pula pusta - pierwszy z `fallback`."""
    if players:
        return max(players, key=key)
    return fallback[0] if fallback else None
