import pytest

from actionbind.core import InputControlKind
from actionbind.updated import UpdatedActions, UpdatedValue


def test_button_value_kind_and_state():
    value = UpdatedValue.button(True)
    assert value.kind is InputControlKind.BUTTON
    assert value.value is True


def test_axis_value():
    value = UpdatedValue.axis(0.5)
    assert value.kind is InputControlKind.AXIS
    assert value.value == 0.5


def test_dual_axis_value():
    value = UpdatedValue.dual_axis((5.0, 8.0))
    assert value.kind is InputControlKind.DUAL_AXIS
    assert value.value == (5.0, 8.0)


def test_triple_axis_value():
    value = UpdatedValue.triple_axis([1, 2, 3])
    assert value.kind is InputControlKind.TRIPLE_AXIS
    assert value.value == (1.0, 2.0, 3.0)


def test_dual_axis_rejects_wrong_length():
    with pytest.raises(ValueError):
        UpdatedValue.dual_axis((1.0, 2.0, 3.0))


def test_values_compare_by_content():
    assert UpdatedValue.button(True) == UpdatedValue.button(True)
    assert UpdatedValue.button(True) != UpdatedValue.button(False)
    assert UpdatedValue.axis(0.0) != UpdatedValue.button(False)


def test_pressed_only_for_pressed_buttons():
    actions = UpdatedActions()
    actions["jump"] = UpdatedValue.button(True)
    actions["run"] = UpdatedValue.button(False)
    actions["steer"] = UpdatedValue.axis(1.0)
    assert actions.pressed("jump") is True
    assert actions.pressed("run") is False
    assert actions.pressed("steer") is False
    assert actions.pressed("missing") is False


def test_removing_an_action_releases_it():
    actions = UpdatedActions({"jump": UpdatedValue.button(True)})
    del actions["jump"]
    assert actions.pressed("jump") is False
    assert len(actions) == 0


def test_updated_actions_equality():
    first = UpdatedActions({"a": UpdatedValue.button(True)})
    second = UpdatedActions()
    second["a"] = UpdatedValue.button(True)
    assert first == second