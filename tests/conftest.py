from __future__ import annotations
import pytest

from simulation.config import CONFIG_ENV_VAR, reset_config


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Każdy test startuje z domyślną konfiguracją (bez engine_config.yml z cwd)."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()
