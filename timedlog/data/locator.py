"""
Location : timedlog/data/locator.py
Purpose  : Map a log name (+ directory role) to a concrete file.
Naming   : <name>_<yyyy_MM_dd_HH_mm_ss>.csv   (save time, second resolution, 24h clock)
Notes    : The timestamp is fixed-width and zero-padded, so lexical order == chronological order.
"""

from __future__ import annotations
import re
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from ..core.config import ConfigSnapshot, load_config
from ..core.errors import LogNotFoundError

SUFFIX = ".csv"
TIMESTAMP_FORMAT = "%Y_%m_%d_%H_%M_%S"
_STAMPED = re.compile(r"^(?P<name>.+)_\d{4}_\d{2}_\d{2}_\d{2}_\d{2}_\d{2}\.csv$")


class LoadDirectory(str, Enum):
    HOME = "home"
    DEPLOY = "deploy"


DirectoryLike = Union[LoadDirectory, str, Path]


def format_timestamp(when: datetime) -> str:
    return when.strftime(TIMESTAMP_FORMAT)


def file_name_for(name: str, when: datetime) -> str:
    return f"{name}_{format_timestamp(when)}{SUFFIX}"


def log_name_from_file(file_name: str) -> str:
    """'autoMove1_2024_03_02_14_05_09.csv' -> 'autoMove1'. Unstamped names fall back to the stem."""
    m = _STAMPED.match(Path(file_name).name)
    if m:
        return m.group("name")
    return Path(file_name).stem


def directory_path(directory: DirectoryLike, cfg: Optional[ConfigSnapshot] = None) -> Path:
    """Roles resolve through config; any str or Path is taken literally, even 'home'."""
    if isinstance(directory, LoadDirectory):
        return (cfg or load_config()).directory(directory.value)
    return Path(directory)


def resolve(directory: DirectoryLike, file_name: str, cfg: Optional[ConfigSnapshot] = None) -> Path:
    return directory_path(directory, cfg) / file_name


def candidates(directory: DirectoryLike, name: str, cfg: Optional[ConfigSnapshot] = None) -> List[str]:
    """File names in `directory` (non-recursive) that start with '<name>_' and end with .csv, sorted."""
    root = directory_path(directory, cfg)
    prefix = name + "_"
    try:
        names = [p.name for p in root.iterdir() if p.is_file()]
    except OSError as e:
        raise LogNotFoundError(f"Cannot list log directory {root}", root) from e
    return sorted(n for n in names if n.startswith(prefix) and n.endswith(SUFFIX))


def resolve_latest(directory: DirectoryLike, name: str, cfg: Optional[ConfigSnapshot] = None) -> Path:
    root = directory_path(directory, cfg)
    found = candidates(root, name)
    if not found:
        raise LogNotFoundError(f"No log named '{name}' in {root}", root)
    return root / found[-1]
