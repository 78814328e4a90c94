"""Solved-state checks for the Square-1 simulator."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .pieces import N_SLOTS, Slot, generate_layer, slot_index
from .state_codec import encode_layer

_SOLVED_TOP = encode_layer(generate_layer(True))
_SOLVED_BOTTOM = encode_layer(generate_layer(False))
# A solved layer may sit at any quarter turn.
_QUARTER_TURNS = range(0, N_SLOTS, 3)


def layer_view(layer: Sequence[Slot], offset: int) -> list[Slot]:
    """Return the layer as seen after rotating it by ``offset``."""
    return [layer[slot_index(i, offset)] for i in range(N_SLOTS)]


def _is_solved_layer(layer: Sequence[Slot], offset: int, solved: np.ndarray) -> bool:
    view = encode_layer(layer_view(layer, offset))
    return any(np.array_equal(view, np.roll(solved, k, axis=0)) for k in _QUARTER_TURNS)


def is_solved(
    top: Sequence[Slot],
    top_offset: int,
    bottom: Sequence[Slot],
    bottom_offset: int,
    middle: bool,
) -> bool:
    if middle:
        return False
    return _is_solved_layer(top, top_offset, _SOLVED_TOP) and _is_solved_layer(
        bottom, bottom_offset, _SOLVED_BOTTOM
    )
