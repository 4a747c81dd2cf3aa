"""A multi-map from actions to the inputs bound to them."""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Iterator, Mapping

from actionbind.core import (
    Axislike,
    Buttonlike,
    DualAxislike,
    InputControlKind,
    TripleAxislike,
    control_kind,
)

_INPUT_TYPES = {
    InputControlKind.BUTTON: (Buttonlike, "a Buttonlike"),
    InputControlKind.AXIS: (Axislike, "an Axislike"),
    InputControlKind.DUAL_AXIS: (DualAxislike, "a DualAxislike"),
    InputControlKind.TRIPLE_AXIS: (TripleAxislike, "a TripleAxislike"),
}


def _insert_unique(mapping: dict, action: Hashable, value: Any) -> None:
    bound = mapping.setdefault(action, [])
    if value not in bound:
        bound.append(value)


class BindingMap:
    """Maps actions to any number of inputs of the action's control kind.

    Adding the same input to the same action twice creates one binding only.
    A single input may be bound to several actions.
    """

    def __init__(self, bindings: Iterable[tuple[Hashable, Buttonlike]] = ()) -> None:
        self._maps: dict[InputControlKind, dict[Hashable, list]] = {
            kind: {} for kind in InputControlKind
        }
        self._gamepad: Any = None
        self.insert_multiple(bindings)

    @classmethod
    def from_mapping(
        cls, raw_map: Mapping[Hashable, Iterable[Buttonlike]]
    ) -> "BindingMap":
        """Build a map from a mapping of actions to their buttonlike inputs."""
        result = cls()
        for action, inputs in raw_map.items():
            result.insert_one_to_many(action, inputs)
        return result

    # Builders

    def with_button(self, action: Hashable, button: Buttonlike) -> "BindingMap":
        """Bind a buttonlike input and return this map."""
        return self.insert(action, button)

    def with_axis(self, action: Hashable, axis: Axislike) -> "BindingMap":
        """Bind an axislike input and return this map."""
        return self.insert_axis(action, axis)

    def with_dual_axis(self, action: Hashable, dual_axis: DualAxislike) -> "BindingMap":
        """Bind a dual-axislike input and return this map."""
        return self.insert_dual_axis(action, dual_axis)

    def with_triple_axis(
        self, action: Hashable, triple_axis: TripleAxislike
    ) -> "BindingMap":
        """Bind a triple-axislike input and return this map."""
        return self.insert_triple_axis(action, triple_axis)

    def with_one_to_many(
        self, action: Hashable, inputs: Iterable[Buttonlike]
    ) -> "BindingMap":
        """Bind several buttonlike inputs to one action and return this map."""
        return self.insert_one_to_many(action, inputs)

    def with_multiple(
        self, bindings: Iterable[tuple[Hashable, Buttonlike]]
    ) -> "BindingMap":
        """Add several action-input bindings and return this map."""
        return self.insert_multiple(bindings)

    # Insertion

    def _insert(self, kind: InputControlKind, action: Hashable, input: Any) -> "BindingMap":
        expected_type, label = _INPUT_TYPES[kind]
        action_kind = control_kind(action)
        if action_kind is not kind:
            raise ValueError(
                f"Cannot map {label} input for action {action!r} of kind {action_kind.name}"
            )
        if not isinstance(input, expected_type):
            raise TypeError(f"{input!r} is not {label} input")
        _insert_unique(self._maps[kind], action, input)
        return self

    def insert(self, action: Hashable, button: Buttonlike) -> "BindingMap":
        """Bind a buttonlike input to a button action."""
        return self._insert(InputControlKind.BUTTON, action, button)

    def insert_axis(self, action: Hashable, axis: Axislike) -> "BindingMap":
        """Bind an axislike input to an axis action."""
        return self._insert(InputControlKind.AXIS, action, axis)

    def insert_dual_axis(self, action: Hashable, dual_axis: DualAxislike) -> "BindingMap":
        """Bind a dual-axislike input to a dual-axis action."""
        return self._insert(InputControlKind.DUAL_AXIS, action, dual_axis)

    def insert_triple_axis(
        self, action: Hashable, triple_axis: TripleAxislike
    ) -> "BindingMap":
        """Bind a triple-axislike input to a triple-axis action."""
        return self._insert(InputControlKind.TRIPLE_AXIS, action, triple_axis)

    def insert_one_to_many(
        self, action: Hashable, inputs: Iterable[Buttonlike]
    ) -> "BindingMap":
        """Bind several buttonlike inputs to the same action."""
        bound = self._maps[InputControlKind.BUTTON].setdefault(action, [])
        for input in inputs:
            if input not in bound:
                bound.append(input)
        return self

    def insert_multiple(
        self, bindings: Iterable[tuple[Hashable, Buttonlike]]
    ) -> "BindingMap":
        """Add several buttonlike action-input bindings."""
        for action, input in bindings:
            self.insert(action, input)
        return self

    def merge(self, other: "BindingMap") -> "BindingMap":
        """Merge another map's bindings into this one, avoiding duplicates.

        If the associated gamepads differ, the association is removed.
        """
        if self._gamepad != other._gamepad:
            self.clear_gamepad()
        for kind, other_map in other._maps.items():
            for action, inputs in other_map.items():
                for input in inputs:
                    _insert_unique(self._maps[kind], action, input)
        return self

    # Gamepad configuration

    def gamepad(self) -> Any:
        """The gamepad this map exclusively accepts input from, or None for any."""
        return self._gamepad

    def with_gamepad(self, gamepad: Any) -> "BindingMap":
        """Associate a gamepad and return this map."""
        return self.set_gamepad(gamepad)

    def set_gamepad(self, gamepad: Any) -> "BindingMap":
        """Accept gamepad input from the given gamepad only."""
        self._gamepad = gamepad
        return self

    def clear_gamepad(self) -> "BindingMap":
        """Accept gamepad input from any gamepad again."""
        self._gamepad = None
        return self

    # Iteration

    def iter_buttonlike(self) -> Iterator[tuple[Hashable, list]]:
        """Buttonlike actions with their inputs."""
        return iter(self._maps[InputControlKind.BUTTON].items())

    def iter_axislike(self) -> Iterator[tuple[Hashable, list]]:
        """Axislike actions with their inputs."""
        return iter(self._maps[InputControlKind.AXIS].items())

    def iter_dual_axislike(self) -> Iterator[tuple[Hashable, list]]:
        """Dual-axislike actions with their inputs."""
        return iter(self._maps[InputControlKind.DUAL_AXIS].items())

    def iter_triple_axislike(self) -> Iterator[tuple[Hashable, list]]:
        """Triple-axislike actions with their inputs."""
        return iter(self._maps[InputControlKind.TRIPLE_AXIS].items())

    def _bindings(self, kind: InputControlKind) -> Iterator[tuple[Hashable, Any]]:
        for action, inputs in self._maps[kind].items():
            for input in inputs:
                yield action, input

    def buttonlike_bindings(self) -> Iterator[tuple[Hashable, Buttonlike]]:
        """Every buttonlike (action, input) binding."""
        return self._bindings(InputControlKind.BUTTON)

    def axislike_bindings(self) -> Iterator[tuple[Hashable, Axislike]]:
        """Every axislike (action, input) binding."""
        return self._bindings(InputControlKind.AXIS)

    def dual_axislike_bindings(self) -> Iterator[tuple[Hashable, DualAxislike]]:
        """Every dual-axislike (action, input) binding."""
        return self._bindings(InputControlKind.DUAL_AXIS)

    def triple_axislike_bindings(self) -> Iterator[tuple[Hashable, TripleAxislike]]:
        """Every triple-axislike (action, input) binding."""
        return self._bindings(InputControlKind.TRIPLE_AXIS)

    def buttonlike_actions(self) -> Iterator[Hashable]:
        """Every action with buttonlike bindings."""
        return iter(self._maps[InputControlKind.BUTTON])

    def axislike_actions(self) -> Iterator[Hashable]:
        """Every action with axislike bindings."""
        return iter(self._maps[InputControlKind.AXIS])

    def dual_axislike_actions(self) -> Iterator[Hashable]:
        """Every action with dual-axislike bindings."""
        return iter(self._maps[InputControlKind.DUAL_AXIS])

    def triple_axislike_actions(self) -> Iterator[Hashable]:
        """Every action with triple-axislike bindings."""
        return iter(self._maps[InputControlKind.TRIPLE_AXIS])

    # Lookup

    def get(self, action: Hashable) -> list | None:
        """A copy of the inputs bound to the action, or None if it has none."""
        inputs = self._maps[control_kind(action)].get(action)
        return None if inputs is None else list(inputs)

    def get_buttonlike(self, action: Hashable) -> list | None:
        """The live list of buttonlike inputs bound to the action, or None."""
        return self._maps[InputControlKind.BUTTON].get(action)

    def get_axislike(self, action: Hashable) -> list | None:
        """The live list of axislike inputs bound to the action, or None."""
        return self._maps[InputControlKind.AXIS].get(action)

    def get_dual_axislike(self, action: Hashable) -> list | None:
        """The live list of dual-axislike inputs bound to the action, or None."""
        return self._maps[InputControlKind.DUAL_AXIS].get(action)

    def get_triple_axislike(self, action: Hashable) -> list | None:
        """The live list of triple-axislike inputs bound to the action, or None."""
        return self._maps[InputControlKind.TRIPLE_AXIS].get(action)

    def __len__(self) -> int:
        """Total number of bindings."""
        return sum(
            len(inputs) for mapping in self._maps.values() for inputs in mapping.values()
        )

    def is_empty(self) -> bool:
        """True if the map holds no bindings."""
        return len(self) == 0

    def clear(self) -> None:
        """Remove every binding."""
        for mapping in self._maps.values():
            mapping.clear()

    # Removal

    def clear_action(self, action: Hashable) -> None:
        """Remove every binding of the action."""
        self._maps[control_kind(action)].pop(action, None)

    def remove_at(self, action: Hashable, index: int) -> bool:
        """Remove the action's input at the index; False if there was none."""
        inputs = self._maps[control_kind(action)].get(action)
        if inputs is None or not 0 <= index < len(inputs):
            return False
        del inputs[index]
        return True

    def remove(self, action: Hashable, input: Buttonlike) -> int | None:
        """Remove a buttonlike input from the action; return its index, or None."""
        inputs = self._maps[InputControlKind.BUTTON].get(action)
        if inputs is None or input not in inputs:
            return None
        index = inputs.index(input)
        del inputs[index]
        return index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BindingMap):
            return NotImplemented
        return self._maps == other._maps and self._gamepad == other._gamepad

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{kind.value}={mapping!r}" for kind, mapping in self._maps.items()
        )
        return f"{type(self).__name__}({parts}, gamepad={self._gamepad!r})"