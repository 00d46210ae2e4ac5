"""Build shapes from a kind name and positional dimensions.

This is the boundary where untrusted input (typically CLI arguments)
becomes domain objects, so it is the only place in the core that
raises.  The shapes themselves accept any finite real.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from drills.core.geometry import Circle, Rectangle, RightTriangle
from drills.core.protocols import Shape
from drills.exceptions import ShapeArgumentError, UnknownShapeError

ShapeSpec = tuple[Callable[..., Shape], tuple[str, ...]]

SHAPE_KINDS: dict[str, ShapeSpec] = {
    "rectangle": (Rectangle, ("width", "height")),
    "circle": (Circle, ("radius",)),
    "triangle": (RightTriangle, ("base", "height")),
}
"""Known kind names mapped to ``(constructor, dimension names)``."""


def dimension_names(kind: str) -> tuple[str, ...]:
    """Return the ordered dimension names for *kind*.

    Raises
    ------
    UnknownShapeError
        If *kind* is not one of :data:`SHAPE_KINDS`.
    """
    return _lookup(kind)[1]


def build_shape(kind: str, dimensions: Sequence[float]) -> Shape:
    """Construct the shape named *kind* from *dimensions*.

    Parameters
    ----------
    kind:
        Case-insensitive kind name; surrounding whitespace is ignored.
    dimensions:
        Positional dimensions, in the order given by
        :func:`dimension_names`.

    Raises
    ------
    UnknownShapeError
        If *kind* is not recognised.
    ShapeArgumentError
        If the number of dimensions is wrong or any of them is not finite.
    """
    factory, names = _lookup(kind)
    usage = f"{kind.strip().lower()} {' '.join(n.upper() for n in names)}"

    if len(dimensions) != len(names):
        raise ShapeArgumentError(
            f"{kind.strip().lower()} takes {len(names)} dimension(s), "
            f"got {len(dimensions)}.",
            hint=f"Usage: {usage}",
        )

    for name, value in zip(names, dimensions):
        if not math.isfinite(value):
            raise ShapeArgumentError(
                f"Dimension {name!r} must be a finite number, got {value!r}.",
                hint=f"Usage: {usage}",
            )

    return factory(*(float(v) for v in dimensions))


def _lookup(kind: str) -> ShapeSpec:
    key = kind.strip().lower()
    try:
        return SHAPE_KINDS[key]
    except KeyError:
        raise UnknownShapeError(
            f"Unknown shape kind: {kind!r}.",
            hint=f"Choose one of: {', '.join(SHAPE_KINDS)}",
        ) from None
