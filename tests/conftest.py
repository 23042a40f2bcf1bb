from pathlib import Path

import pytest

from timedlog.core.config import load_config


class FakeClock:
    """Deterministic clock: elapsed time only moves when a test sets or advances it."""

    def __init__(self) -> None:
        self.now = 0.0
        self._t0 = 0.0
        self.starts = 0

    def start(self) -> None:
        self._t0 = self.now
        self.starts += 1

    def elapsed_s(self) -> float:
        return self.now - self._t0

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def set_elapsed(self, seconds: float) -> None:
        self.now = self._t0 + seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch) -> Path:
    """Isolated configs/ tree with home + deploy pointing into tmp_path."""
    root = tmp_path / "configs"
    (root / "profiles").mkdir(parents=True)
    (root / "base.yaml").write_text(
        "logging:\n"
        "  level: INFO\n"
        "directories:\n"
        f"  home: {tmp_path / 'home'}\n"
        f"  deploy: {tmp_path / 'deploy'}\n"
        "playback:\n"
        "  poll_hz: 0\n"
        "metrics:\n"
        "  enabled: false\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("TIMEDLOG_CONFIG_DIR", str(root))
    monkeypatch.delenv("TIMEDLOG_PROFILE", raising=False)
    return root


@pytest.fixture
def cfg(config_dir):
    return load_config()
