"""
Location : timedlog/core/metrics.py
Purpose  : Prometheus metrics helpers; HTTP endpoint started by the CLI when enabled.
Outputs  : module-level helpers: inc_entries_recorded, inc_save, inc_load, inc_playback_finished
"""
from __future__ import annotations
from prometheus_client import Counter, start_http_server

_entries_recorded = Counter("tl_entries_recorded_total", "Entries appended by recorders")
_saves = Counter("tl_saves_total", "Save attempts by outcome", ["outcome"])
_loads = Counter("tl_loads_total", "Load attempts by outcome", ["outcome"])
_playbacks_finished = Counter("tl_playbacks_finished_total", "Players that reached the sentinel entry")

def start_metrics_server(port: int = 8008) -> None:
    try:
        start_http_server(port)
    except OSError:
        # already started
        pass

def inc_entries_recorded(n: int = 1) -> None:
    _entries_recorded.inc(n)

def inc_save(outcome: str) -> None:
    _saves.labels(outcome=outcome).inc()

def inc_load(outcome: str) -> None:
    _loads.labels(outcome=outcome).inc()

def inc_playback_finished() -> None:
    _playbacks_finished.inc()
