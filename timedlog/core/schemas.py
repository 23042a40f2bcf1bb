"""
Location : timedlog/core/schemas.py
Purpose  : Typed models shared by recorder, codec and player.
Notes    : Entries of one log are expected to share the same arity; nothing enforces it.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


# ------- One sampled control vector ------- #
@dataclass(frozen=True)
class TimedEntry:
    elapsed_time_s: float          # seconds since the log's clock started
    data: Tuple[float, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.data)


# ------- Player read results ------- #
@dataclass(frozen=True)
class Playing:
    data: Tuple[float, ...]


@dataclass(frozen=True)
class Finished:
    pass


ReadResult = Union[Playing, Finished]


class PlaybackState(str, Enum):
    NOT_STARTED = "NotStarted"
    READING = "Reading"
    FINISHED = "Finished"
