"""Custom exception hierarchy for drills.

The core arithmetic never raises: every exercise is total over its
numeric or string domain.  Typed errors only appear at the boundary
where user input is turned into domain objects, and all of them
inherit from :class:`DrillsError` so the CLI error boundary can render
them cleanly.

Hierarchy
---------
DrillsError
├── UnknownShapeError
├── ShapeArgumentError
└── EnvironmentError
"""

from __future__ import annotations


class DrillsError(Exception):
    """Base exception for all drills errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Shape construction ----------------------------------------------------

class UnknownShapeError(DrillsError):
    """Raised when a shape kind name is not recognised."""


class ShapeArgumentError(DrillsError):
    """Raised when the dimensions supplied for a shape are unusable."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(DrillsError):
    """Raised when an optional runtime dependency is not available."""
