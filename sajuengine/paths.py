"""Filesystem locations of data shipped with :mod:`sajuengine`."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

__all__ = ["SajuPaths", "get_paths", "profiles_dir"]


@dataclass(frozen=True)
class SajuPaths:
    package_root: Path
    profiles: Path


@lru_cache(maxsize=1)
def get_paths() -> SajuPaths:
    root = Path(__file__).resolve().parent
    return SajuPaths(package_root=root, profiles=root / "profiles")


def profiles_dir() -> Path:
    return get_paths().profiles
