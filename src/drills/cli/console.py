"""CLI console helpers with optional Rich support.

Rich is imported lazily so that bootstrap paths (``--help``,
``--version``) and plain output keep working when it is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from drills.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def strip_markup(text: str) -> str:
	"""Remove Rich style tags such as ``[bold]`` from *text*."""
	return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def print(
		self,
		*objects: object,
		markup: bool = True,
		emoji: bool = True,
		soft_wrap: bool = False,
	) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			stream = sys.stderr if self._stderr else sys.stdout
			if markup:
				objects = tuple(
					strip_markup(obj) if isinstance(obj, str) else obj for obj in objects
				)
			print(*objects, file=stream)
			return
		rich_console.print(*objects, markup=markup, emoji=emoji, soft_wrap=soft_wrap)


console = _ConsoleProxy()
"""Results and tables (stdout)."""

err_console = _ConsoleProxy(stderr=True)
"""Errors and hints (stderr)."""
