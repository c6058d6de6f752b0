"""Pytest bootstrap for local source imports and config isolation.

Puts the repository root on ``sys.path`` so ``import dirtree`` resolves to the
local package, and points the persisted config at a per-test temporary file so
a developer's own defaults never leak into listings under test.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT_STR = str(Path(__file__).resolve().parent.parent)

if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Redirect ``dirtree.config.CONFIG_PATH`` into ``tmp_path``."""
    from dirtree import config

    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config.json")
    yield
