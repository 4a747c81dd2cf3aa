import enum
from dataclasses import dataclass

import pytest

from actionbind.bindings import BindingMap
from actionbind.core import (
    Axislike,
    BasicInputs,
    ButtonlikeChord,
    DualAxislike,
    InputControlKind,
    Key,
    TripleAxislike,
)


class Action(enum.Enum):
    RUN = "run"
    JUMP = "jump"
    HIDE = "hide"
    AXIS = "axis"
    DUAL_AXIS = "dual_axis"
    TRIPLE_AXIS = "triple_axis"

    @property
    def input_control_kind(self):
        return {
            Action.AXIS: InputControlKind.AXIS,
            Action.DUAL_AXIS: InputControlKind.DUAL_AXIS,
            Action.TRIPLE_AXIS: InputControlKind.TRIPLE_AXIS,
        }.get(self, InputControlKind.BUTTON)


@dataclass(frozen=True)
class FixedAxis(Axislike):
    amount: float

    def value(self, input_store, gamepad):
        return self.amount

    def decompose(self):
        return BasicInputs.none()


@dataclass(frozen=True)
class FixedPair(DualAxislike):
    pair: tuple

    def axis_pair(self, input_store, gamepad):
        return self.pair

    def decompose(self):
        return BasicInputs.none()


@dataclass(frozen=True)
class FixedTriple(TripleAxislike):
    triple: tuple

    def axis_triple(self, input_store, gamepad):
        return self.triple

    def decompose(self):
        return BasicInputs.none()


def test_creation():
    input_map = (
        BindingMap()
        .with_button(Action.RUN, Key("KeyW"))
        .with_button(Action.RUN, Key("ShiftLeft"))
        .with_button(Action.RUN, Key("ShiftLeft"))
        .with_one_to_many(Action.RUN, [Key("KeyR"), Key("ShiftRight")])
        .with_multiple(
            [
                (Action.JUMP, Key("Space")),
                (Action.HIDE, Key("ControlLeft")),
                (Action.HIDE, Key("ControlRight")),
            ]
        )
    )
    expected = {
        Key("KeyW"): Action.RUN,
        Key("ShiftLeft"): Action.RUN,
        Key("KeyR"): Action.RUN,
        Key("ShiftRight"): Action.RUN,
        Key("Space"): Action.JUMP,
        Key("ControlLeft"): Action.HIDE,
        Key("ControlRight"): Action.HIDE,
    }
    bindings = list(input_map.buttonlike_bindings())
    assert len(bindings) == len(expected)
    for action, input in bindings:
        assert expected[input] == action


def test_insertion_idempotency():
    input_map = BindingMap()
    input_map.insert(Action.RUN, Key("Space"))
    assert input_map.get_buttonlike(Action.RUN) == [Key("Space")]
    input_map.insert(Action.RUN, Key("Space"))
    assert input_map.get_buttonlike(Action.RUN) == [Key("Space")]


def test_multiple_insertion():
    input_map = BindingMap()
    input_map.insert(Action.RUN, Key("Space"))
    input_map.insert(Action.RUN, Key("Enter"))
    assert input_map.get_buttonlike(Action.RUN) == [Key("Space"), Key("Enter")]


def test_input_clearing():
    input_map = BindingMap()
    input_map.insert(Action.RUN, Key("Space"))
    input_map.clear_action(Action.RUN)
    assert input_map == BindingMap()

    input_map.insert(Action.RUN, Key("Space"))
    input_map.insert(Action.RUN, Key("ShiftLeft"))
    assert input_map.remove_at(Action.RUN, 1) is True
    assert input_map.remove_at(Action.RUN, 1) is False
    assert input_map.remove_at(Action.RUN, 0) is True
    assert input_map.remove_at(Action.RUN, 0) is False


def test_merging():
    input_map = BindingMap()
    keyboard_map = BindingMap()
    keyboard_map.insert(Action.RUN, Key("ShiftLeft"))
    keyboard_map.insert(
        Action.HIDE, ButtonlikeChord([Key("ControlLeft"), Key("KeyH")])
    )

    input_map.merge(keyboard_map)
    assert input_map == keyboard_map

    input_map.merge(keyboard_map)
    assert input_map == keyboard_map


def test_merge_combines_bindings():
    first = BindingMap([(Action.RUN, Key("ShiftLeft"))])
    second = BindingMap([(Action.RUN, Key("Numpad0")), (Action.HIDE, Key("Numpad7"))])
    first.merge(second)
    assert first.get_buttonlike(Action.RUN) == [Key("ShiftLeft"), Key("Numpad0")]
    assert first.get_buttonlike(Action.HIDE) == [Key("Numpad7")]
    assert len(first) == 3


def test_merge_clears_mismatched_gamepad():
    first = BindingMap().with_gamepad(1)
    second = BindingMap().with_gamepad(2)
    first.merge(second)
    assert first.gamepad() is None


def test_merge_keeps_matching_gamepad():
    first = BindingMap().with_gamepad(7)
    first.merge(BindingMap().with_gamepad(7))
    assert first.gamepad() == 7


def test_gamepad_swapping():
    input_map = BindingMap()
    assert input_map.gamepad() is None
    input_map.set_gamepad(123)
    assert input_map.gamepad() == 123
    input_map.clear_gamepad()
    assert input_map.gamepad() is None


def test_constructor_deduplicates():
    input_map = BindingMap(
        [
            (Action.RUN, Key("ShiftLeft")),
            (Action.RUN, Key("ShiftRight")),
            (Action.RUN, Key("ShiftRight")),
            (Action.JUMP, Key("Space")),
        ]
    )
    assert len(input_map) == 3
    assert sorted(a.value for a in input_map.buttonlike_actions()) == ["jump", "run"]


def test_from_mapping():
    input_map = BindingMap.from_mapping(
        {Action.RUN: [Key("ShiftLeft"), Key("ShiftRight"), Key("ShiftLeft")]}
    )
    assert input_map.get_buttonlike(Action.RUN) == [Key("ShiftLeft"), Key("ShiftRight")]


def test_wrong_kind_is_rejected():
    input_map = BindingMap()
    with pytest.raises(ValueError):
        input_map.insert(Action.AXIS, Key("Space"))
    with pytest.raises(ValueError):
        input_map.insert_axis(Action.RUN, FixedAxis(1.0))
    with pytest.raises(ValueError):
        input_map.insert_dual_axis(Action.AXIS, FixedPair((1.0, 0.0)))
    with pytest.raises(ValueError):
        input_map.insert_triple_axis(Action.DUAL_AXIS, FixedTriple((0.0, 0.0, 1.0)))
    assert input_map.is_empty()


def test_wrong_input_type_is_rejected():
    with pytest.raises(TypeError):
        BindingMap().insert_axis(Action.AXIS, Key("Space"))


def test_axis_kinds_and_lookup():
    input_map = (
        BindingMap()
        .with_axis(Action.AXIS, FixedAxis(0.5))
        .with_dual_axis(Action.DUAL_AXIS, FixedPair((1.0, 2.0)))
        .with_triple_axis(Action.TRIPLE_AXIS, FixedTriple((1.0, 2.0, 3.0)))
    )
    assert len(input_map) == 3
    assert input_map.get_axislike(Action.AXIS) == [FixedAxis(0.5)]
    assert input_map.get_dual_axislike(Action.DUAL_AXIS) == [FixedPair((1.0, 2.0))]
    assert input_map.get_triple_axislike(Action.TRIPLE_AXIS) == [
        FixedTriple((1.0, 2.0, 3.0))
    ]
    assert input_map.get(Action.AXIS) == [FixedAxis(0.5)]
    assert input_map.get(Action.RUN) is None
    assert list(input_map.axislike_actions()) == [Action.AXIS]
    assert list(input_map.dual_axislike_bindings()) == [
        (Action.DUAL_AXIS, FixedPair((1.0, 2.0)))
    ]
    assert dict(input_map.iter_triple_axislike()) == {
        Action.TRIPLE_AXIS: [FixedTriple((1.0, 2.0, 3.0))]
    }


def test_get_returns_copy():
    input_map = BindingMap([(Action.RUN, Key("Space"))])
    copy = input_map.get(Action.RUN)
    copy.append(Key("Enter"))
    assert input_map.get_buttonlike(Action.RUN) == [Key("Space")]


def test_remove_returns_index():
    input_map = BindingMap([(Action.RUN, Key("Space")), (Action.RUN, Key("Enter"))])
    assert input_map.remove(Action.RUN, Key("Enter")) == 1
    assert input_map.remove(Action.RUN, Key("Enter")) is None
    assert input_map.remove(Action.JUMP, Key("Space")) is None
    assert input_map.get_buttonlike(Action.RUN) == [Key("Space")]


def test_clear_removes_all_bindings_but_keeps_gamepad():
    input_map = (
        BindingMap([(Action.RUN, Key("Space"))])
        .with_axis(Action.AXIS, FixedAxis(1.0))
        .with_gamepad(3)
    )
    assert not input_map.is_empty()
    input_map.clear()
    assert input_map.is_empty()
    assert len(input_map) == 0
    assert input_map.gamepad() == 3


def test_clear_action_axis():
    input_map = BindingMap().with_axis(Action.AXIS, FixedAxis(1.0))
    input_map.clear_action(Action.AXIS)
    assert input_map.get_axislike(Action.AXIS) is None
    assert input_map == BindingMap()


def test_equality_considers_gamepad():
    assert BindingMap().with_gamepad(1) != BindingMap()
    assert BindingMap([(Action.RUN, Key("A"))]) == BindingMap([(Action.RUN, Key("A"))])