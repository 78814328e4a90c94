"""Colors, pieces and layer geometry for the Square-1 simulator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union


class Color(IntEnum):
    # Antipodal colors have codes that differ by exactly 1.
    WHITE = 0
    YELLOW = 1
    BLUE = 3
    GREEN = 4
    RED = 6
    ORANGE = 7


TOP_COLOR = Color.WHITE
BOTTOM_COLOR = Color.YELLOW

# Equator colors in clockwise order around a layer.
COLOR_ORDER = (Color.GREEN, Color.ORANGE, Color.BLUE, Color.RED)

N_SLOTS = 12
HALF_SLOTS = N_SLOTS // 2
OFFSET_MIN = -5
OFFSET_MAX = 6


def possible(c1: int, c2: int) -> bool:
    """Return True if the two colors can sit on the same piece."""
    return abs(int(c1) - int(c2)) != 1


@dataclass(frozen=True)
class Edge:
    colors: tuple[Color, Color]

    def possible(self) -> bool:
        return possible(self.colors[0], self.colors[1])


@dataclass(frozen=True)
class Corner:
    colors: tuple[Color, Color, Color]

    def possible(self) -> bool:
        a, b, c = self.colors
        return possible(a, b) and possible(b, c) and possible(a, c)


Piece = Union[Edge, Corner]
# None marks the second slot of a corner (or a slot emptied mid-flip).
Slot = Optional[Piece]


def normalize(offset: int) -> int:
    """Map any integer rotation to its representative in [-5, 6]."""
    return (offset + 5) % N_SLOTS - 5


def slot_index(position: int, offset: int) -> int:
    """Return the layer index seen at ``position`` after rotating by ``offset``."""
    return (position - offset) % N_SLOTS


def generate_layer(is_top: bool) -> list[Slot]:
    """Build a solved layer: corner, continuation, edge for each equator color."""
    pole = TOP_COLOR if is_top else BOTTOM_COLOR
    layer: list[Slot] = []
    for i, color in enumerate(COLOR_ORDER):
        prev_color = COLOR_ORDER[(i - 1) % len(COLOR_ORDER)]
        layer.append(Corner((prev_color, color, pole)))
        layer.append(None)
        layer.append(Edge((color, pole)))
    return layer


def piece_name(piece: Slot) -> str:
    if piece is None:
        return "-"
    return "".join(color.name[0] for color in piece.colors)
