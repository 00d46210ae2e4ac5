"""String drills."""

from __future__ import annotations


def repeat(s: str, count: int) -> str:
    """Return *s* concatenated with itself *count* times.

    A non-positive *count* yields the empty string.
    """
    parts: list[str] = []
    for _ in range(count):
        parts.append(s)
    return "".join(parts)
