"""Timestamped progress lines for the CLI and API (plain stdout, flushed)."""

# logs.py

from __future__ import annotations

import time


def ts() -> str:
    # Local time timestamp for logs
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, quiet: bool = False) -> None:
    if not quiet:
        print(f"[{ts()}] {msg}", flush=True)


def format_stats(stats) -> str:
    return (
        f"nodes={stats.nodes:,}, forced={stats.forced:,}, branches={stats.branches:,}, "
        f"dead_ends={stats.dead_ends:,}, elapsed={stats.elapsed:,.3f}s"
    )
