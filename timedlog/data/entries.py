"""
Location : timedlog/data/entries.py
Purpose  : In-memory representation of one log: a name plus time-ordered TimedEntry items.
Plain    : Append-only while recording; frozen into a tuple once saved or handed to a player.
"""

from __future__ import annotations
from typing import Iterable, Iterator, Optional, Set, Tuple

from ..core.schemas import TimedEntry


class EntryStore:
    def __init__(self, name: str, entries: Optional[Iterable[TimedEntry]] = None) -> None:
        self.name = name
        self._entries = list(entries or [])

    def append(self, entry: TimedEntry) -> None:
        self._entries.append(entry)

    def freeze(self) -> Tuple[TimedEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TimedEntry]:
        return iter(self._entries)

    def __getitem__(self, i: int) -> TimedEntry:
        return self._entries[i]

    def arities(self) -> Set[int]:
        return {e.arity for e in self._entries}

    @property
    def duration_s(self) -> float:
        if not self._entries:
            return 0.0
        return self._entries[-1].elapsed_time_s
