"""CLI application entry point and command routing for drills.

This module is the **sole error boundary** for the application.  It
catches :class:`~drills.exceptions.DrillsError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering readable messages and
returning well-defined exit codes.

Commands
--------
* ``drills factorial [N]``
* ``drills repeat TEXT COUNT``
* ``drills shape KIND DIM [DIM ...]``
* ``drills shapes``
* ``drills --version``
"""

from __future__ import annotations

import argparse
import sys

from drills.cli import exit_codes
from drills.cli.console import console, err_console
from drills.core.shape_factory import SHAPE_KINDS, dimension_names
from drills.exceptions import DrillsError
from drills.version import __version__

DEFAULT_FACTORIAL_N: int = 5


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _dimensions_help() -> str:
    """Return ``"rectangle: WIDTH HEIGHT, circle: RADIUS, ..."`` for help text."""
    return ", ".join(
        f"{kind}: {' '.join(name.upper() for name in dimension_names(kind))}"
        for kind in SHAPE_KINDS
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drills",
        description="Introductory programming exercises: factorial, repeat, shapes.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    fact = commands.add_parser("factorial", help="Compute n! (1 for n <= 0).")
    fact.add_argument(
        "n",
        type=int,
        nargs="?",
        default=DEFAULT_FACTORIAL_N,
        help=f"Integer argument (default: {DEFAULT_FACTORIAL_N}).",
    )

    rep = commands.add_parser("repeat", help="Repeat a string COUNT times.")
    rep.add_argument("text", help="String to repeat.")
    rep.add_argument("count", type=int, help="Number of repetitions.")

    shape = commands.add_parser("shape", help="Area and perimeter of one shape.")
    shape.add_argument(
        "kind",
        help=f"Shape kind: {', '.join(SHAPE_KINDS)}.",
    )
    shape.add_argument(
        "dimensions",
        type=float,
        nargs="+",
        metavar="DIM",
        help=f"Dimensions in order ({_dimensions_help()}).",
    )

    commands.add_parser("shapes", help="Measure the demo set of shapes.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_factorial(n: int) -> int:
    from drills.cli.report import format_integer
    from drills.core.numbers import factorial

    console.print(f"{n}! = {format_integer(factorial(n))}", soft_wrap=True)
    return exit_codes.SUCCESS


def _handle_repeat(text: str, count: int) -> int:
    from drills.core.strings import repeat

    console.print(repeat(text, count), markup=False, emoji=False, soft_wrap=True)
    return exit_codes.SUCCESS


def _handle_shape(kind: str, dimensions: list[float]) -> int:
    """Build a single shape from CLI input and render its measurements."""
    from drills.cli.report import render_shapes
    from drills.core.shape_factory import build_shape

    shape = build_shape(kind, dimensions)
    render_shapes([shape], title=type(shape).__name__)
    return exit_codes.SUCCESS


def _handle_demo() -> int:
    """Render the classic demo set through the shared shape interface."""
    from drills.cli.report import render_shapes
    from drills.core.geometry import Circle, Rectangle, RightTriangle

    render_shapes(
        [
            Rectangle(width=10, height=5),
            Circle(radius=10),
            RightTriangle(base=10, height=5),
        ],
        title="Demo shapes",
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the drills CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "factorial":
        return _handle_factorial(args.n)
    if args.command == "repeat":
        return _handle_repeat(args.text, args.count)
    if args.command == "shape":
        return _handle_shape(args.kind, args.dimensions)
    return _handle_demo()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except DrillsError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
