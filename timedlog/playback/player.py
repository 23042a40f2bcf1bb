"""
Location : timedlog/playback/player.py
Purpose  : Read-time role over a loaded log: replay entries against a fresh elapsed-time clock.
Plain    : A cursor walks forward while the clock has passed the current entry's timestamp,
           so the entry returned is the first one still due (timestamp >= elapsed).
           The LAST entry is a sentinel: its data is never returned. Playback is finished once
           the clock passes the second-to-last timestamp.
           So an empty or single-entry log is finished immediately.
Notes    : Loading is fail-fast (LogLoadError and subclasses). read_log_entry() before
           start_reading() raises PlaybackNotStartedError.

Usage    :
  player = load_last_file_for_name(LoadDirectory.HOME, "autoMove1")
  player.start_reading()
  # every control period:
  res = player.read_log_entry()
  if isinstance(res, Playing):
      drive(*res.data)
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from ..core import metrics
from ..core.clock import Clock, MonotonicClock
from ..core.config import ConfigSnapshot
from ..core.errors import LogDecodeError, LogLoadError, LogNotFoundError, PlaybackNotStartedError
from ..core.logging import log_event
from ..core.schemas import Finished, PlaybackState, Playing, ReadResult, TimedEntry
from ..data.codec import decode
from ..data.entries import EntryStore
from ..data.locator import DirectoryLike, log_name_from_file, resolve, resolve_latest


class LogPlayer:
    def __init__(
        self,
        name: str,
        entries: Sequence[TimedEntry],
        clock: Optional[Clock] = None,
        source: Optional[Path] = None,
    ) -> None:
        self.name = name
        self.source = source
        self._entries: Tuple[TimedEntry, ...] = tuple(entries)
        self._clock = clock or MonotonicClock()
        self._cursor = 0
        self._state = PlaybackState.NOT_STARTED

    @property
    def entries(self) -> Tuple[TimedEntry, ...]:
        return self._entries

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def last_index(self) -> int:
        return len(self._entries) - 1

    def start_reading(self) -> None:
        """Restart the clock at zero and rewind the cursor."""
        self._clock.start()
        self._cursor = 0
        self._state = PlaybackState.READING

    def read_log_entry(self) -> ReadResult:
        """Return Playing(data) for the entry active right now, or Finished() once the sentinel is reached."""
        if self._state is PlaybackState.NOT_STARTED:
            raise PlaybackNotStartedError(f"start_reading() must be called before reading '{self.name}'")

        elapsed = self._clock.elapsed_s()
        last = self.last_index
        # step past every entry whose timestamp the clock has already passed
        while self._cursor < last and elapsed > self._entries[self._cursor].elapsed_time_s:
            self._cursor += 1

        if self._cursor < last:
            return Playing(self._entries[self._cursor].data)

        if self._state is not PlaybackState.FINISHED:
            self._state = PlaybackState.FINISHED
            metrics.inc_playback_finished()
            log_event("player", "player.finished", "finished", name=self.name, elapsed_s=elapsed)
        return Finished()


def _read_entries(path: Path) -> EntryStore:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise LogNotFoundError(f"Cannot read log from {path.absolute()}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise LogLoadError(f"Cannot read log from {path.absolute()}", path) from e
    try:
        entries = decode(text)
    except LogDecodeError as e:
        raise LogDecodeError(f"Cannot decode log {path.absolute()}: {e}", e.line_no, path) from e
    return EntryStore(log_name_from_file(path.name), entries)


def load_path(path: Path, clock: Optional[Clock] = None) -> LogPlayer:
    path = Path(path)
    try:
        store = _read_entries(path)
    except LogLoadError as e:
        metrics.inc_load("error")
        log_event("player", "player.load", "load_failed", level=logging.ERROR,
                  path=str(path.absolute()), error=type(e).__name__)
        raise

    arities = store.arities()
    if len(arities) > 1:
        log_event("player", "player.load", "arity_mixed", level=logging.WARNING,
                  path=str(path.absolute()), arities=sorted(arities))
    metrics.inc_load("ok")
    log_event("player", "player.load", "loaded",
              name=store.name, path=str(path.absolute()), entries=len(store))
    return LogPlayer(store.name, store.freeze(), clock, source=path)


def load_from_file(
    directory: DirectoryLike,
    file_name: str,
    clock: Optional[Clock] = None,
    *,
    cfg: Optional[ConfigSnapshot] = None,
) -> LogPlayer:
    """Load '<directory>/<file_name>' for replay. Raises LogLoadError on any I/O or parse failure."""
    return load_path(resolve(directory, file_name, cfg), clock)


def load_last_file_for_name(
    directory: DirectoryLike,
    name: str,
    clock: Optional[Clock] = None,
    *,
    cfg: Optional[ConfigSnapshot] = None,
) -> LogPlayer:
    """Load the most recently saved log called `name`. Raises LogNotFoundError if there is none."""
    try:
        path = resolve_latest(directory, name, cfg)
    except LogNotFoundError as e:
        metrics.inc_load("error")
        log_event("player", "player.load", "not_found", level=logging.ERROR,
                  name=name, directory=str(e.path) if e.path else None)
        raise
    return load_path(path, clock)
