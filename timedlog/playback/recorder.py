"""
Location : timedlog/playback/recorder.py
Purpose  : Write-time role over a log: stamp samples with the recorder's clock, persist to Home.

Usage    :
  recorder = start_recording("autoMove1")
  # every control period:
  recorder.record_log_entry(left_x, left_y)
  # when the session ends:
  recorder.save()
"""

from __future__ import annotations
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Tuple

from ..core import metrics
from ..core.clock import Clock, MonotonicClock
from ..core.config import ConfigSnapshot, load_config
from ..core.logging import log_event
from ..core.schemas import TimedEntry
from ..data.codec import encode
from ..data.entries import EntryStore
from ..data.locator import LoadDirectory, directory_path, file_name_for


class LogRecorder:
    def __init__(
        self,
        name: str,
        clock: Clock,
        home_dir: Path,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.store = EntryStore(name)
        self.clock = clock
        self.home_dir = Path(home_dir)
        self._now = now

    @property
    def name(self) -> str:
        return self.store.name

    @property
    def entries(self) -> Tuple[TimedEntry, ...]:
        return self.store.freeze()

    def record_log_entry(self, *data: float) -> TimedEntry:
        """Append the given values stamped with the time elapsed since recording started."""
        entry = TimedEntry(self.clock.elapsed_s(), tuple(float(v) for v in data))
        self.store.append(entry)
        metrics.inc_entries_recorded()
        return entry

    def save_path(self) -> Path:
        return self.home_dir / file_name_for(self.name, self._now())

    def save(self) -> Optional[Path]:
        """
        Write the log to '<home>/<name>_<timestamp>.csv'.
        I/O failures are reported as a warning and swallowed; the in-memory entries are kept.
        Returns the written path, or None if the write failed.
        """
        path = self.save_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(encode(self.store), encoding="utf-8")
        except OSError as e:
            metrics.inc_save("error")
            log_event("recorder", "recorder.save", "save_failed", level=logging.WARNING,
                      name=self.name, path=str(path.absolute()), error=f"{type(e).__name__}: {e}")
            return None
        metrics.inc_save("ok")
        log_event("recorder", "recorder.save", "saved",
                  name=self.name, path=str(path.absolute()), entries=len(self.store))
        return path


def start_recording(
    name: str,
    clock: Optional[Clock] = None,
    *,
    home_dir: Optional[Path] = None,
    cfg: Optional[ConfigSnapshot] = None,
    now: Callable[[], datetime] = datetime.now,
) -> LogRecorder:
    """Create an empty log whose clock starts now. home_dir defaults to the configured Home role."""
    if home_dir is None:
        home_dir = directory_path(LoadDirectory.HOME, cfg or load_config())
    clock = clock or MonotonicClock()
    clock.start()
    log_event("recorder", "recorder.start", "recording", name=name, home=str(home_dir))
    return LogRecorder(name, clock, home_dir, now=now)
