"""Keyboard and mouse state tracked across frames."""

from __future__ import annotations

import enum
from collections.abc import Hashable, Iterable


class ElementState(enum.Enum):
    """Whether a key or button is down or up."""

    PRESSED = enum.auto()
    RELEASED = enum.auto()


_State = tuple[ElementState, ElementState]


class Input:
    """Current and previous state of keys and mouse buttons, plus the cursor.

    Keys and buttons may be any hashable identifiers.
    """

    def __init__(self) -> None:
        self._keyboard: dict[Hashable, _State] = {}
        self._mouse_buttons: dict[Hashable, _State] = {}
        self._mouse_position = (0.0, 0.0)
        self._mouse_delta = (0.0, 0.0)

    @staticmethod
    def _pressed(states: dict[Hashable, _State], key: Hashable) -> bool:
        entry = states.get(key)
        return (
            entry is not None
            and entry[0] is ElementState.PRESSED
            and entry[1] is not ElementState.PRESSED
        )

    @staticmethod
    def _is(states: dict[Hashable, _State], key: Hashable, state: ElementState) -> bool:
        entry = states.get(key)
        return entry is not None and entry[0] is state

    def key_pressed(self, key: Hashable) -> bool:
        """True on the frame the key went down."""
        return self._pressed(self._keyboard, key)

    def key_held(self, key: Hashable) -> bool:
        """True while the key is down."""
        return self._is(self._keyboard, key, ElementState.PRESSED)

    def key_released(self, key: Hashable) -> bool:
        """True on the frame the key went up."""
        return self._is(self._keyboard, key, ElementState.RELEASED)

    def keys_pressed(self, keys: Iterable[Hashable]) -> bool:
        return any(self.key_pressed(k) for k in keys)

    def keys_held(self, keys: Iterable[Hashable]) -> bool:
        return any(self.key_held(k) for k in keys)

    def keys_released(self, keys: Iterable[Hashable]) -> bool:
        return any(self.key_released(k) for k in keys)

    def all_keys_pressed(self, keys: Iterable[Hashable]) -> bool:
        return all(self.key_pressed(k) for k in keys)

    def all_keys_held(self, keys: Iterable[Hashable]) -> bool:
        return all(self.key_held(k) for k in keys)

    def all_keys_released(self, keys: Iterable[Hashable]) -> bool:
        return all(self.key_released(k) for k in keys)

    def mouse_pressed(self, button: Hashable) -> bool:
        """True on the frame the button went down."""
        return self._pressed(self._mouse_buttons, button)

    def mouse_held(self, button: Hashable) -> bool:
        """True while the button is down."""
        return self._is(self._mouse_buttons, button, ElementState.PRESSED)

    def mouse_released(self, button: Hashable) -> bool:
        """True on the frame the button went up."""
        return self._is(self._mouse_buttons, button, ElementState.RELEASED)

    def mouse_position(self) -> tuple[float, float]:
        return self._mouse_position

    def mouse_delta(self) -> tuple[float, float]:
        return self._mouse_delta

    @staticmethod
    def _record(states: dict[Hashable, _State], key: Hashable, state: ElementState) -> None:
        prev = states.get(key, (ElementState.RELEASED, ElementState.RELEASED))[0]
        states[key] = (state, prev)

    def keyboard(self, key: Hashable, state: ElementState) -> None:
        """Record a keyboard event."""
        self._record(self._keyboard, key, state)

    def mouse(self, button: Hashable, state: ElementState) -> None:
        """Record a mouse button event."""
        self._record(self._mouse_buttons, button, state)

    def cursor(self, x: float, y: float) -> None:
        """Record a cursor move, updating the position and the delta."""
        px, py = self._mouse_position
        pos = (float(x), float(y))
        self._mouse_delta = (pos[0] - px, pos[1] - py)
        self._mouse_position = pos

    def end_frame(self) -> None:
        """Roll current states into previous ones and forget released inputs."""
        for states in (self._keyboard, self._mouse_buttons):
            rolled = {k: (curr, curr) for k, (curr, _) in states.items()}
            states.clear()
            states.update(
                (k, s) for k, s in rolled.items() if s[0] is not ElementState.RELEASED
            )
        self._mouse_delta = (0.0, 0.0)