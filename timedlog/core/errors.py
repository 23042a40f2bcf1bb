"""Exceptions raised on the load/playback side. The save path never raises."""
from __future__ import annotations
from pathlib import Path
from typing import Optional, Union


class LogLoadError(RuntimeError):
    """Fatal failure while loading a timed log; nothing is returned to the caller."""

    def __init__(self, msg: str, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(msg)
        self.path = Path(path) if path is not None else None


class LogNotFoundError(LogLoadError):
    pass


class LogDecodeError(LogLoadError):
    def __init__(self, msg: str, line_no: int, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(msg, path)
        self.line_no = line_no


class PlaybackNotStartedError(RuntimeError):
    pass
