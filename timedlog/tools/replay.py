"""
Offline record / inspect / replay tool for timed logs.

Run:
  python -m timedlog.tools.replay record autoMove1 < inputs.csv
  python -m timedlog.tools.replay show autoMove1 --dir deploy
  python -m timedlog.tools.replay replay --file autoMove1_2024_03_02_14_05_09.csv
"""
from __future__ import annotations
import argparse, json, sys, time
from pathlib import Path
from typing import IO, List, Optional

from ..core.config import ConfigSnapshot, load_config
from ..core.errors import LogLoadError
from ..core.logging import configure_logging
from ..core.metrics import start_metrics_server
from ..core.schemas import Playing
from ..data.codec import parse_field
from ..data.entries import EntryStore
from ..data.locator import DirectoryLike, LoadDirectory
from ..playback.player import LogPlayer, load_from_file, load_last_file_for_name
from ..playback.recorder import start_recording


def _parse_vector(line: str) -> List[float]:
    """Every field must be numeric; an empty field would shift the ones after it."""
    return [parse_field(v) for v in line.strip().split(",")]


def _directory(arg: str) -> DirectoryLike:
    """'home' / 'deploy' name a configured role; anything else is a path (use ./home for a folder)."""
    try:
        return LoadDirectory(arg.lower())
    except ValueError:
        return Path(arg)


def _load(args: argparse.Namespace, cfg: ConfigSnapshot) -> LogPlayer:
    if args.file:
        return load_from_file(_directory(args.dir), args.file, cfg=cfg)
    if not args.name:
        raise SystemExit("[timedlog] a log NAME or --file is required")
    return load_last_file_for_name(_directory(args.dir), args.name, cfg=cfg)


def cmd_record(args: argparse.Namespace, cfg: ConfigSnapshot, stdin: IO[str], out: IO[str]) -> int:
    recorder = start_recording(args.name, cfg=cfg)
    for line in stdin:
        if not line.strip():
            continue
        try:
            vec = _parse_vector(line)
        except ValueError:
            print(f"[record] skipping malformed line: {line.strip()!r}", file=sys.stderr)
            continue
        recorder.record_log_entry(*vec)
    path = recorder.save()
    if path is None:
        print(f"[record] could not save '{args.name}'", file=sys.stderr)
        return 1
    print(f"[record] wrote {len(recorder.entries)} entries to {path}", file=out)
    return 0


def cmd_show(args: argparse.Namespace, cfg: ConfigSnapshot, out: IO[str]) -> int:
    player = _load(args, cfg)
    store = EntryStore(player.name, player.entries)
    summary = {
        "name": player.name,
        "file": str(player.source) if player.source else None,
        "entries": len(store),
        "replayable": max(0, len(store) - 1),
        "arity": sorted(store.arities()),
        "duration_s": store.duration_s,
    }
    print(json.dumps(summary), file=out)
    return 0


def cmd_replay(args: argparse.Namespace, cfg: ConfigSnapshot, out: IO[str]) -> int:
    player = _load(args, cfg)
    hz = float(args.hz or (cfg.playback or {}).get("poll_hz", 50))
    period = 1.0 / hz if hz > 0 else 0.0
    player.start_reading()
    while True:
        res = player.read_log_entry()
        if not isinstance(res, Playing):
            break
        print(json.dumps({"cursor": player.cursor, "data": list(res.data)}), file=out)
        if period:
            time.sleep(period)
    print(json.dumps({"cursor": player.cursor, "finished": True}), file=out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="timedlog")
    ap.add_argument("--profile", default=None, help="Config profile name")
    sub = ap.add_subparsers(dest="cmd", required=True)

    rec = sub.add_parser("record", help="Record comma-separated vectors from stdin, then save to home")
    rec.add_argument("name")

    for cmd, help_ in (("show", "Print a summary of a saved log"), ("replay", "Replay a saved log in real time")):
        p = sub.add_parser(cmd, help=help_)
        p.add_argument("name", nargs="?", help="Log name; the newest '<name>_*.csv' is used")
        p.add_argument("--file", default=None, help="Exact file name inside --dir")
        p.add_argument("--dir", default="home", help="home | deploy | <path>")
        if cmd == "replay":
            p.add_argument("--hz", type=float, default=None, help="Polling rate (default playback.poll_hz)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.profile)
    configure_logging(cfg, stream=sys.stderr)
    if bool((cfg.metrics or {}).get("enabled", False)):
        start_metrics_server(int(cfg.metrics.get("port", 8008)))

    try:
        if args.cmd == "record":
            return cmd_record(args, cfg, sys.stdin, sys.stdout)
        if args.cmd == "show":
            return cmd_show(args, cfg, sys.stdout)
        return cmd_replay(args, cfg, sys.stdout)
    except LogLoadError as e:
        print(f"[timedlog] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
