"""Shared pytest fixtures and configuration for the drills test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Floating-point results are compared with ``pytest.approx``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import sys

import pytest


@pytest.fixture
def hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every ``rich`` import fail for the duration of a test."""
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
