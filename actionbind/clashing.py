"""Detection and resolution of clashing buttonlike inputs.

Two buttonlike actions clash when the buttons of one input are a strict
subset of the other's, as with ``Ctrl + S`` and ``S``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Hashable

from actionbind.core import InputStore


class ClashStrategy(enum.Enum):
    """How clashing inputs are handled by an input map."""

    PRESS_ALL = "press_all"
    """All matching inputs are always pressed."""

    PRIORITIZE_LONGEST = "prioritize_longest"
    """Only the action with the longest chord is pressed (the default)."""

    @classmethod
    def variants(cls) -> list["ClashStrategy"]:
        """All possible clash strategies."""
        return [cls.PRESS_ALL, cls.PRIORITIZE_LONGEST]


@dataclass
class Clash:
    """Two actions that clash, with the inputs of each that take part."""

    action_a: Hashable
    action_b: Hashable
    inputs_a: list = field(default_factory=list)
    inputs_b: list = field(default_factory=list)


def check_clash(clash: Clash, input_store: InputStore, gamepad: Any) -> Clash | None:
    """Given the current input state, return the clash if it occurs, else None."""
    actual = replace(clash, inputs_a=list(clash.inputs_a), inputs_b=list(clash.inputs_b))

    pressed_a = [i for i in clash.inputs_a if i.pressed(input_store, gamepad)]
    pressed_b = [i for i in clash.inputs_b if i.pressed(input_store, gamepad)]
    for input_a in pressed_a:
        for input_b in pressed_b:
            if input_a.decompose().clashes_with(input_b.decompose()):
                actual.inputs_a.append(input_a)
                actual.inputs_b.append(input_b)

    return actual if clash.inputs_a else None


def resolve_clash(
    clash: Clash,
    clash_strategy: ClashStrategy,
    input_store: InputStore,
    gamepad: Any,
) -> Hashable | None:
    """Return the action of the clash that should be discarded, if any."""
    reasons_a = [i for i in clash.inputs_a if i.pressed(input_store, gamepad)]
    reasons_b = [i for i in clash.inputs_b if i.pressed(input_store, gamepad)]

    # A clash is spurious if both actions are pressed for a non-clashing reason.
    for reason_a in reasons_a:
        for reason_b in reasons_b:
            if not reason_a.decompose().clashes_with(reason_b.decompose()):
                return None

    if clash_strategy is ClashStrategy.PRESS_ALL:
        return None

    longest_a = max((len(i.decompose()) for i in reasons_a), default=0)
    longest_b = max((len(i.decompose()) for i in reasons_b), default=0)
    if longest_a > longest_b:
        return clash.action_b
    if longest_a < longest_b:
        return clash.action_a
    return None