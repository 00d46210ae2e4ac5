"""Tabular rendering of shape measurements.

Uses a Rich table when Rich is importable, otherwise a fixed-width
plain-text table.  No geometry happens here; every number comes from
:func:`drills.core.geometry.measure`.
"""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Sequence

from drills.cli.console import console
from drills.core.geometry import ShapeMeasurement, measure
from drills.core.protocols import Shape


# ---------------------------------------------------------------------------
# Number formatting
# ---------------------------------------------------------------------------

def format_integer(value: int) -> str:
    """Return the decimal digits of *value*, however large it is.

    ``str()`` refuses integers above ``sys.get_int_max_str_digits()``
    digits, so oversized values are converted in fixed-width chunks
    that each stay below that limit.
    """
    try:
        return str(value)
    except ValueError:
        pass

    chunk_digits = max(1, sys.get_int_max_str_digits() // 2)
    base = 10**chunk_digits
    sign = "-" if value < 0 else ""
    remaining = abs(value)
    chunks: list[int] = []
    while remaining:
        remaining, low = divmod(remaining, base)
        chunks.append(low)

    head = str(chunks.pop())
    return sign + head + "".join(f"{chunk:0{chunk_digits}d}" for chunk in reversed(chunks))


# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------

def describe_dimensions(shape: Shape) -> str:
    """Return ``"width=10, height=5"`` style text for a dataclass shape."""
    if not dataclasses.is_dataclass(shape):
        return ""
    return ", ".join(
        f"{field.name}={getattr(shape, field.name):g}"
        for field in dataclasses.fields(shape)
    )


def build_rows(shapes: Sequence[Shape]) -> list[tuple[str, str, str, str]]:
    """Return ``(kind, dimensions, area, perimeter)`` text rows."""
    rows: list[tuple[str, str, str, str]] = []
    for shape in shapes:
        result: ShapeMeasurement = measure(shape)
        rows.append(
            (
                result.kind,
                describe_dimensions(shape),
                f"{result.area:.6f}",
                f"{result.perimeter:.6f}",
            )
        )
    return rows


def _print_plain_table(rows: list[tuple[str, str, str, str]], title: str) -> None:
    """Render rows without Rich."""
    print(title)
    print(f"{'Shape':<14} {'Dimensions':<26} {'Area':>14} {'Perimeter':>14}")
    print("-" * 71)
    for kind, dims, area, perimeter in rows:
        print(f"{kind:<14} {dims:<26} {area:>14} {perimeter:>14}")


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def render_shapes(shapes: Sequence[Shape], *, title: str = "Shapes") -> None:
    """Measure every shape in *shapes* and print one table row per shape."""
    rows = build_rows(shapes)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(rows, title)
        return

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Shape", style="bold", min_width=12)
    table.add_column("Dimensions", min_width=16)
    table.add_column("Area", justify="right", min_width=12)
    table.add_column("Perimeter", justify="right", min_width=12)

    for row in rows:
        table.add_row(*row)

    console.print(table)
