"""Input kinds, decomposed button sets and the basic input types."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable


class InputControlKind(enum.Enum):
    """The shape of value an action or input produces."""

    BUTTON = "button"
    AXIS = "axis"
    DUAL_AXIS = "dual_axis"
    TRIPLE_AXIS = "triple_axis"


def control_kind(action: Any) -> InputControlKind:
    """Return the control kind of an action.

    Actions declare their kind through an ``input_control_kind`` attribute;
    actions without one are buttons.
    """
    kind = getattr(action, "input_control_kind", InputControlKind.BUTTON)
    if not isinstance(kind, InputControlKind):
        raise TypeError(f"{action!r} has an invalid input_control_kind: {kind!r}")
    return kind


class BasicInputsKind(enum.Enum):
    """How the buttons of a decomposed input relate to each other."""

    NONE = "none"
    SIMPLE = "simple"
    COMPOSITE = "composite"
    CHORD = "chord"


@dataclass(frozen=True)
class BasicInputs:
    """A flat list of the buttonlike inputs that make up one user input.

    Used to find clashes, where one input is a strict subset of another.
    """

    kind: BasicInputsKind
    members: tuple = field(default=())

    @classmethod
    def none(cls) -> "BasicInputs":
        """No buttonlike inputs are involved, as for a joystick axis."""
        return cls(BasicInputsKind.NONE, ())

    @classmethod
    def simple(cls, input: "Buttonlike") -> "BasicInputs":
        """A single fundamental button."""
        return cls(BasicInputsKind.SIMPLE, (input,))

    @classmethod
    def composite(cls, inputs: Iterable["Buttonlike"]) -> "BasicInputs":
        """One logical input that any of several buttons can trigger."""
        return cls(BasicInputsKind.COMPOSITE, tuple(inputs))

    @classmethod
    def chord(cls, inputs: Iterable["Buttonlike"]) -> "BasicInputs":
        """Several buttons that must be pressed together."""
        return cls(BasicInputsKind.CHORD, tuple(inputs))

    def inputs(self) -> list:
        """The underlying buttons; do not use this to measure clash length."""
        return list(self.members)

    def compose(self, other: "BasicInputs") -> "BasicInputs":
        """Combine two decompositions into one composite."""
        return BasicInputs.composite([*self.inputs(), *other.inputs()])

    def __len__(self) -> int:
        """Number of logical buttons: a composite counts as one."""
        if self.kind is BasicInputsKind.NONE:
            return 0
        if self.kind is BasicInputsKind.CHORD:
            return len(self.members)
        return 1

    def clashes_with(self, other: "BasicInputs") -> bool:
        """Whether the two decompositions clash with each other."""
        a, b = self.kind, other.kind
        mine, theirs = list(self.members), list(other.members)
        K = BasicInputsKind

        if a is K.NONE or b is K.NONE:
            return False
        if a is K.SIMPLE and b is K.SIMPLE:
            return False
        if a is K.SIMPLE and b is K.CHORD:
            return len(theirs) > 1 and mine[0] in theirs
        if a is K.CHORD and b is K.SIMPLE:
            return len(mine) > 1 and theirs[0] in mine
        if a is K.SIMPLE and b is K.COMPOSITE:
            return mine[0] in theirs
        if a is K.COMPOSITE and b is K.SIMPLE:
            return theirs[0] in mine
        if a is K.COMPOSITE and b is K.CHORD:
            return len(theirs) > 1 and any(item in mine for item in theirs)
        if a is K.CHORD and b is K.COMPOSITE:
            return len(mine) > 1 and any(item in theirs for item in mine)
        if a is K.CHORD and b is K.CHORD:
            return (
                len(mine) > 1
                and len(theirs) > 1
                and mine != theirs
                and (
                    all(item in theirs for item in mine)
                    or all(item in mine for item in theirs)
                )
            )
        # Composite against composite.
        return any(item in mine for item in theirs) or any(
            item in theirs for item in mine
        )


class InputStore:
    """The current state of raw buttons, shared by every input map."""

    def __init__(self) -> None:
        self._pressed: set = set()

    def press(self, button: Hashable) -> None:
        """Mark a raw button as held down."""
        self._pressed.add(button)

    def release(self, button: Hashable) -> None:
        """Mark a raw button as released."""
        self._pressed.discard(button)

    def is_pressed(self, button: Hashable) -> bool:
        """Whether the raw button is currently held down."""
        return button in self._pressed


class Buttonlike(ABC):
    """An input that is either pressed or released."""

    @abstractmethod
    def pressed(self, input_store: InputStore, gamepad: Any) -> bool:
        """Whether the input is pressed."""

    @abstractmethod
    def decompose(self) -> BasicInputs:
        """The buttons this input is made of."""


class Axislike(ABC):
    """An input producing one value."""

    @abstractmethod
    def value(self, input_store: InputStore, gamepad: Any) -> float:
        """The current value of the axis."""

    @abstractmethod
    def decompose(self) -> BasicInputs:
        """The buttons this input is made of."""


class DualAxislike(ABC):
    """An input producing a pair of values."""

    @abstractmethod
    def axis_pair(self, input_store: InputStore, gamepad: Any) -> tuple[float, float]:
        """The current (x, y) pair."""

    @abstractmethod
    def decompose(self) -> BasicInputs:
        """The buttons this input is made of."""


class TripleAxislike(ABC):
    """An input producing three values."""

    @abstractmethod
    def axis_triple(
        self, input_store: InputStore, gamepad: Any
    ) -> tuple[float, float, float]:
        """The current (x, y, z) triple."""

    @abstractmethod
    def decompose(self) -> BasicInputs:
        """The buttons this input is made of."""


@dataclass(frozen=True)
class Key(Buttonlike):
    """A single named keyboard key."""

    name: str

    def pressed(self, input_store: InputStore, gamepad: Any) -> bool:
        return input_store.is_pressed(self)

    def decompose(self) -> BasicInputs:
        return BasicInputs.simple(self)

    def __repr__(self) -> str:
        return f"Key({self.name!r})"


class ButtonlikeChord(Buttonlike):
    """Several buttons that must all be held together."""

    def __init__(self, buttons: Iterable[Buttonlike] = ()) -> None:
        unique: list = []
        for button in buttons:
            if button not in unique:
                unique.append(button)
        self.buttons: tuple = tuple(unique)

    def pressed(self, input_store: InputStore, gamepad: Any) -> bool:
        return all(button.pressed(input_store, gamepad) for button in self.buttons)

    def decompose(self) -> BasicInputs:
        return BasicInputs.chord(
            item for button in self.buttons for item in button.decompose().inputs()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ButtonlikeChord):
            return NotImplemented
        return self.buttons == other.buttons

    def __hash__(self) -> int:
        return hash(("chord", self.buttons))

    def __repr__(self) -> str:
        return f"ButtonlikeChord({list(self.buttons)!r})"