"""Record timed control-input vectors once, replay them later against a fresh clock."""

from .core.clock import Clock, MonotonicClock
from .core.errors import LogDecodeError, LogLoadError, LogNotFoundError, PlaybackNotStartedError
from .core.schemas import Finished, PlaybackState, Playing, ReadResult, TimedEntry
from .data.locator import LoadDirectory
from .playback import (
    LogPlayer,
    LogRecorder,
    load_from_file,
    load_last_file_for_name,
    start_recording,
)

__all__ = [
    "Clock",
    "Finished",
    "LoadDirectory",
    "LogDecodeError",
    "LogLoadError",
    "LogNotFoundError",
    "LogPlayer",
    "LogRecorder",
    "MonotonicClock",
    "PlaybackNotStartedError",
    "PlaybackState",
    "Playing",
    "ReadResult",
    "TimedEntry",
    "load_from_file",
    "load_last_file_for_name",
    "start_recording",
]
