"""Run conditions built on an action state.

Each factory returns a callable taking an action state (anything with
``pressed``, ``just_pressed`` and ``just_released`` methods) and returning
whether the condition holds.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable

Condition = Callable[[Any], bool]


def action_toggle_active(default: bool, action: Hashable) -> Condition:
    """A stateful condition flipped each time the action is just pressed."""
    active = bool(default)

    def condition(action_state: Any) -> bool:
        nonlocal active
        active ^= bool(action_state.just_pressed(action))
        return active

    return condition


def action_pressed(action: Hashable) -> Condition:
    """Active while the action is pressed."""
    return lambda action_state: bool(action_state.pressed(action))


def action_just_pressed(action: Hashable) -> Condition:
    """Active on the frame the action was just pressed."""
    return lambda action_state: bool(action_state.just_pressed(action))


def action_just_released(action: Hashable) -> Condition:
    """Active on the frame the action was just released."""
    return lambda action_state: bool(action_state.just_released(action))