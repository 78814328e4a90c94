"""Core Square-1 simulator engine."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

import numpy as np

from .pieces import (
    HALF_SLOTS,
    N_SLOTS,
    OFFSET_MAX,
    OFFSET_MIN,
    Corner,
    Slot,
    generate_layer,
    normalize,
    slot_index,
)
from .solved_check import is_solved
from .state_codec import StateValidationError, state_to_json

SCRAMBLE_LENGTH = 20


class IntegerSource(Protocol):
    def integers(self, low: int, high: int) -> Any: ...


def _require_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise StateValidationError(f"{name} must be an integer")
    return int(value)


class SquareOneEngine:
    """Square-1 puzzle state with twist, flip and scramble generation.

    Each layer is a list of 12 slots (30 degrees each). A corner takes two
    consecutive slots, the second one holding ``None``. Offsets record how far
    each layer has been turned; slot contents are never shifted by a twist.
    """

    def __init__(self, rng: IntegerSource | None = None):
        self._rng = rng if rng is not None else np.random.default_rng()
        self.top: list[Slot] = []
        self.bottom: list[Slot] = []
        self.top_offset = 0
        self.bottom_offset = 0
        self.middle = False
        self.step_count = 0
        self.history: list[tuple[int, int]] = []
        self.reset()

    def reset(self) -> None:
        self.top = generate_layer(True)
        self.bottom = generate_layer(False)
        self.top_offset = 0
        self.bottom_offset = 0
        self.middle = False
        self.step_count = 0
        self.history = []

    def get_layers(self) -> tuple[list[Slot], list[Slot]]:
        """Return copies of the (top, bottom) slot lists."""
        return list(self.top), list(self.bottom)

    @staticmethod
    def can_flip_layer(layer: Sequence[Slot], offset: int) -> bool:
        # A cut may not run through the middle of a corner.
        if isinstance(layer[slot_index(HALF_SLOTS - 1, offset)], Corner):
            return False
        if isinstance(layer[slot_index(N_SLOTS - 1, offset)], Corner):
            return False
        return True

    def can_flip(self) -> bool:
        return self.can_flip_layer(self.top, self.top_offset) and self.can_flip_layer(
            self.bottom, self.bottom_offset
        )

    @staticmethod
    def extract_reversed_half(layer: list[Slot], offset: int) -> list[Slot]:
        """Take the back half of ``layer`` in reversed order.

        Walks backward from the back cut to the front cut, clearing every slot
        it reads. A continuation slot pulls its corner along so the pair stays
        in corner-then-continuation order.
        """
        reverse: list[Slot] = []
        i = slot_index(N_SLOTS - 1, offset)
        end = slot_index(HALF_SLOTS - 1, offset)

        while i != end:
            if layer[i] is not None:
                reverse.append(layer[i])
                layer[i] = None
            else:
                owner = (i - 1) % N_SLOTS
                reverse.append(layer[owner])
                reverse.append(None)
                layer[owner] = None
                i = owner
            i = (i - 1) % N_SLOTS

        return reverse

    def flip(self) -> bool:
        """Swap the back halves of both layers. Returns False if blocked."""
        if not self.can_flip():
            return False

        top_reverse = self.extract_reversed_half(self.top, self.top_offset)
        bottom_reverse = self.extract_reversed_half(self.bottom, self.bottom_offset)

        for index, position in enumerate(range(HALF_SLOTS, N_SLOTS)):
            self.top[slot_index(position, self.top_offset)] = bottom_reverse[index]
            self.bottom[slot_index(position, self.bottom_offset)] = top_reverse[index]

        self.middle = not self.middle
        return True

    def twist(self, top_delta: int, bottom_delta: int) -> None:
        """Turn both layers using standard (top, bottom) notation."""
        top_delta = _require_int("top_delta", top_delta)
        bottom_delta = _require_int("bottom_delta", bottom_delta)
        self.top_offset = normalize(self.top_offset + top_delta)
        self.bottom_offset = normalize(self.bottom_offset - bottom_delta)

    def step(self, top_delta: int, bottom_delta: int) -> bool:
        """Apply one scramble move: twist, then flip."""
        self.twist(top_delta, bottom_delta)
        flipped = self.flip()
        self.step_count += 1
        self.history.append((int(top_delta), int(bottom_delta)))
        return flipped

    def random_layer_offset(
        self, layer: Sequence[Slot], offset: int, rng: IntegerSource | None = None
    ) -> int:
        """Draw a turn in [-5, 6] after which ``layer`` can be flipped."""
        rng = rng if rng is not None else self._rng
        while True:
            r = int(rng.integers(OFFSET_MIN, OFFSET_MAX + 1))
            if self.can_flip_layer(layer, r + offset):
                return r

    def scramble(self, steps: int = SCRAMBLE_LENGTH, seed: int | None = None) -> list[tuple[int, int]]:
        """Scramble the puzzle and return the applied (top, bottom) twists."""
        steps = _require_int("Scramble steps", steps)
        if steps < 0:
            raise StateValidationError("Scramble steps must be a non-negative integer")
        if seed is not None:
            seed = _require_int("seed", seed)

        rng = np.random.default_rng(seed) if seed is not None else self._rng
        twists: list[tuple[int, int]] = []

        for _ in range(steps):
            top_turn = self.random_layer_offset(self.top, self.top_offset, rng)
            bottom_turn = self.random_layer_offset(self.bottom, self.bottom_offset, rng)
            # A move that turns neither layer is not allowed.
            if top_turn == 0:
                while bottom_turn == 0:
                    bottom_turn = self.random_layer_offset(self.bottom, self.bottom_offset, rng)

            # Negating a bottom turn of 6 gives -6, the same half turn as 6.
            twist = (top_turn, normalize(-bottom_turn))
            self.step(*twist)
            twists.append(twist)

        return twists

    def is_solved(self) -> bool:
        return is_solved(self.top, self.top_offset, self.bottom, self.bottom_offset, self.middle)

    def state_payload(self) -> dict[str, Any]:
        payload = state_to_json(self.top, self.top_offset, self.bottom, self.bottom_offset, self.middle)
        payload["step_count"] = self.step_count
        payload["solved"] = self.is_solved()
        return payload
