"""Solver settings: YAML file values merged with explicit overrides (CLI flags, API callers)."""

# config.py
# Example YAML:
#   workers: 4
#   parallel: true
#   quiet: false
#   default_puzzle: puzzles/hard1.txt

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

DEFAULT_PUZZLE = Path(__file__).resolve().parent / "data" / "easy1.txt"


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)


def merge_overrides(cfg: dict[str, Any], **overrides) -> dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


@dataclass
class SolverConfig:
    workers: int | None = None  # None -> ThreadPoolExecutor default
    parallel: bool = True
    quiet: bool = False
    default_puzzle: str | None = None

    @property
    def puzzle_path(self) -> Path:
        return Path(self.default_puzzle) if self.default_puzzle else DEFAULT_PUZZLE


def load_config(path: str | Path | None = None, **overrides) -> SolverConfig:
    raw: dict[str, Any] = load_yaml(path) if path else DotDict()
    merge_overrides(raw, **overrides)
    known = {f.name for f in fields(SolverConfig)}
    cfg = SolverConfig(**{k: v for k, v in raw.items() if k in known})
    if cfg.workers is not None and cfg.workers < 1:
        raise ValueError(f"workers must be >= 1, got {cfg.workers}")
    return cfg
