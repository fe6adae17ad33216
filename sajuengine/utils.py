"""Helpers shared by the policy and settings loaders."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

__all__ = ["deep_merge", "load_json_document"]


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``override`` merged into a copy of ``base``.

    Nested mappings merge key by key; any other value in ``override`` replaces
    the one in ``base``. Neither argument is mutated.
    """

    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_json_document(
    path: str | Path,
    *,
    comment_prefixes: Sequence[str] = ("#",),
    encoding: str = "utf-8",
) -> Any:
    """Read JSON from ``path``, dropping whole-line comments."""

    prefixes = tuple(comment_prefixes)
    lines = Path(path).read_text(encoding=encoding).splitlines()
    if prefixes:
        lines = [line for line in lines if not line.strip().startswith(prefixes)]
    return json.loads("\n".join(lines))
