"""The per-action values produced when an input map is processed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable

from actionbind.core import InputControlKind


@dataclass(frozen=True)
class UpdatedValue:
    """The new value of one action: a press state, an axis, a pair or a triple."""

    kind: InputControlKind
    value: Any

    @classmethod
    def button(cls, pressed: bool) -> "UpdatedValue":
        """A buttonlike action that was pressed or released."""
        return cls(InputControlKind.BUTTON, bool(pressed))

    @classmethod
    def axis(cls, value: float) -> "UpdatedValue":
        """An axislike action that was updated."""
        return cls(InputControlKind.AXIS, float(value))

    @classmethod
    def dual_axis(cls, pair) -> "UpdatedValue":
        """A dual-axislike action that was updated."""
        x, y = pair
        return cls(InputControlKind.DUAL_AXIS, (float(x), float(y)))

    @classmethod
    def triple_axis(cls, triple) -> "UpdatedValue":
        """A triple-axislike action that was updated."""
        x, y, z = triple
        return cls(InputControlKind.TRIPLE_AXIS, (float(x), float(y), float(z)))


class UpdatedActions(dict):
    """Maps each action to its freshly computed :class:`UpdatedValue`."""

    def pressed(self, action: Hashable) -> bool:
        """True if the action is both buttonlike and pressed."""
        updated = self.get(action)
        if updated is None or updated.kind is not InputControlKind.BUTTON:
            return False
        return bool(updated.value)