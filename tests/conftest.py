"""Pytest configuration for sajuengine."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings helpers away from the real home directory."""

    monkeypatch.setenv("SAJUENGINE_HOME", str(tmp_path / "sajuengine-home"))
