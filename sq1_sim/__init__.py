"""Square-1 simulator and scramble generator package."""

from .engine import SCRAMBLE_LENGTH, SquareOneEngine
from .notation import format_scramble
from .solved_check import is_solved

__all__ = ["SCRAMBLE_LENGTH", "SquareOneEngine", "format_scramble", "is_solved"]
