"""Layer validation and codec helpers."""

from __future__ import annotations

from collections import Counter
from typing import Any, Sequence

import numpy as np

from .pieces import N_SLOTS, Corner, Edge, Slot

MAX_COLORS_PER_PIECE = 3


class StateValidationError(ValueError):
    """Raised when a layer or a caller-supplied argument is invalid."""


def validate_layer(layer: Sequence[Slot]) -> list[Slot]:
    """Check slot count, corner/continuation pairing and piece colors.

    Returns a shallow copy of the layer as a list.
    """
    slots = list(layer)
    if len(slots) != N_SLOTS:
        raise StateValidationError(f"Layer must have {N_SLOTS} slots, got {len(slots)}")

    for i, slot in enumerate(slots):
        prev_slot = slots[(i - 1) % N_SLOTS]
        next_slot = slots[(i + 1) % N_SLOTS]
        if slot is None:
            if not isinstance(prev_slot, Corner):
                raise StateValidationError(f"Continuation at slot {i} does not follow a corner")
            continue
        if not isinstance(slot, (Edge, Corner)):
            raise StateValidationError(f"Slot {i} holds an unknown piece type: {type(slot).__name__}")
        if isinstance(slot, Corner) and next_slot is not None:
            raise StateValidationError(f"Corner at slot {i} is not followed by a continuation")
        if not slot.possible():
            raise StateValidationError(f"Slot {i} holds an impossible piece: {slot.colors}")

    return slots


def encode_layer(layer: Sequence[Slot]) -> np.ndarray:
    """Encode a layer as color codes with shape (12, 3), padded with -1."""
    out = np.full((N_SLOTS, MAX_COLORS_PER_PIECE), -1, dtype=np.int8)
    for i, slot in enumerate(validate_layer(layer)):
        if slot is None:
            continue
        out[i, : len(slot.colors)] = [int(c) for c in slot.colors]
    return out


def layer_to_json(layer: Sequence[Slot]) -> list[list[int]]:
    return [[int(c) for c in row if c >= 0] for row in encode_layer(layer)]


def piece_counts(layer: Sequence[Slot]) -> Counter:
    """Multiset of the pieces in a layer (continuations excluded)."""
    return Counter(slot for slot in layer if slot is not None)


def state_to_json(
    top: Sequence[Slot],
    top_offset: int,
    bottom: Sequence[Slot],
    bottom_offset: int,
    middle: bool,
) -> dict[str, Any]:
    return {
        "top": layer_to_json(top),
        "top_offset": int(top_offset),
        "bottom": layer_to_json(bottom),
        "bottom_offset": int(bottom_offset),
        "middle": bool(middle),
    }
