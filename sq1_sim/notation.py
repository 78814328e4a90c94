"""Text rendering of Square-1 scrambles."""

from __future__ import annotations

from typing import Iterable

SEPARATOR = " / "


def format_twist(twist: tuple[int, int]) -> str:
    top, bottom = twist
    return str((int(top), int(bottom)))


def format_scramble(twists: Iterable[tuple[int, int]]) -> str:
    """Render twists as ``"(1, -2) / (0, 3)"``."""
    return SEPARATOR.join(format_twist(t) for t in twists)
