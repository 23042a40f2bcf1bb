"""
Location : timedlog/data/codec.py
Purpose  : Flat text line format for a timed log.
Format   : <elapsed_s>,<data_0>,<data_1>,...,<data_n>   (one entry per line, no header)
Notes    : Every line must parse; a blank line or any non-numeric field aborts the whole decode.
           Fields are plain decimals (optional exponent), or nan/inf as written by repr(float).
"""

from __future__ import annotations
import re
from typing import Iterable, List

from ..core.errors import LogDecodeError
from ..core.schemas import TimedEntry

_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|nan|inf|infinity)",
    re.IGNORECASE,
)


def encode_entry(entry: TimedEntry) -> str:
    return ",".join(repr(float(v)) for v in (entry.elapsed_time_s, *entry.data))


def encode(entries: Iterable[TimedEntry]) -> str:
    return "".join(encode_entry(e) + "\n" for e in entries)


def parse_field(field: str) -> float:
    text = field.strip()
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"not a number: {field!r}")
    return float(text)


def decode_line(line: str, line_no: int = 1) -> TimedEntry:
    try:
        values = [parse_field(field) for field in line.split(",")]
    except ValueError as e:
        raise LogDecodeError(f"Non-numeric field on line {line_no}: {line!r}", line_no) from e
    return TimedEntry(values[0], tuple(values[1:]))


def decode(text: str) -> List[TimedEntry]:
    return [decode_line(line, line_no) for line_no, line in enumerate(text.splitlines(), start=1)]
