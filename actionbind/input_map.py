"""Input maps that turn raw input state into per-action values, resolving clashes."""

from __future__ import annotations

from typing import Any, Hashable

from actionbind.bindings import BindingMap
from actionbind.clashing import Clash, ClashStrategy, check_clash, resolve_clash
from actionbind.core import BasicInputs, InputControlKind, InputStore, control_kind
from actionbind.updated import UpdatedActions, UpdatedValue


class InputMap(BindingMap):
    """A binding map that can compute the state of every bound action.

    Buttonlike actions are pressed if any of their inputs is pressed; axislike
    actions take the sum of their inputs. Clashing buttonlike actions are
    resolved according to a :class:`ClashStrategy`.
    """

    def pressed(
        self,
        action: Hashable,
        input_store: InputStore,
        clash_strategy: ClashStrategy = ClashStrategy.PRIORITIZE_LONGEST,
    ) -> bool:
        """Whether the action is pressed once clashes have been resolved."""
        updated = self.process_actions(input_store, clash_strategy).get(action)
        if updated is None or updated.kind is not InputControlKind.BUTTON:
            return False
        return bool(updated.value)

    def process_actions(
        self,
        input_store: InputStore,
        clash_strategy: ClashStrategy = ClashStrategy.PRIORITIZE_LONGEST,
        gamepad: Any = None,
    ) -> UpdatedActions:
        """Compute the new value of every bound action.

        The map's associated gamepad, if set, takes precedence over ``gamepad``.
        """
        associated = self.gamepad()
        if associated is not None:
            gamepad = associated

        updated = UpdatedActions()

        for action, inputs in self.iter_buttonlike():
            updated[action] = UpdatedValue.button(
                any(binding.pressed(input_store, gamepad) for binding in inputs)
            )

        for action, inputs in self.iter_axislike():
            updated[action] = UpdatedValue.axis(
                sum((binding.value(input_store, gamepad) for binding in inputs), 0.0)
            )

        for action, inputs in self.iter_dual_axislike():
            x = y = 0.0
            for binding in inputs:
                dx, dy = binding.axis_pair(input_store, gamepad)
                x += dx
                y += dy
            updated[action] = UpdatedValue.dual_axis((x, y))

        for action, inputs in self.iter_triple_axislike():
            x = y = z = 0.0
            for binding in inputs:
                dx, dy, dz = binding.axis_triple(input_store, gamepad)
                x += dx
                y += dy
                z += dz
            updated[action] = UpdatedValue.triple_axis((x, y, z))

        self.handle_clashes(updated, input_store, clash_strategy, gamepad)
        return updated

    def handle_clashes(
        self,
        updated_actions: UpdatedActions,
        input_store: InputStore,
        clash_strategy: ClashStrategy,
        gamepad: Any = None,
    ) -> None:
        """Remove from ``updated_actions`` the actions overruled by a clash."""
        for clash in self._get_clashes(updated_actions, input_store, gamepad):
            culled = resolve_clash(clash, clash_strategy, input_store, gamepad)
            if culled is not None:
                updated_actions.pop(culled, None)

    def possible_clashes(self) -> list[Clash]:
        """Every ordered pair of buttonlike actions whose bindings could clash."""
        actions = list(self.buttonlike_actions())
        clashes = []
        for action_a in actions:
            for action_b in actions:
                clash = self.possible_clash(action_a, action_b)
                if clash is not None:
                    clashes.append(clash)
        return clashes

    def possible_clash(self, action_a: Hashable, action_b: Hashable) -> Clash | None:
        """How the two actions could clash, or None if they cannot."""
        inputs_a = self.get_buttonlike(action_a)
        inputs_b = self.get_buttonlike(action_b)
        if inputs_a is None or inputs_b is None:
            return None

        clash = Clash(action_a, action_b)
        for input_a in inputs_a:
            for input_b in inputs_b:
                if input_a.decompose().clashes_with(input_b.decompose()):
                    clash.inputs_a.append(input_a)
                    clash.inputs_b.append(input_b)
        return clash if clash.inputs_a else None

    def decomposed(self, action: Hashable) -> list[BasicInputs]:
        """The decomposition of every binding of the action."""
        kind = control_kind(action)
        lookup = {
            InputControlKind.BUTTON: self.get_buttonlike,
            InputControlKind.AXIS: self.get_axislike,
            InputControlKind.DUAL_AXIS: self.get_dual_axislike,
            InputControlKind.TRIPLE_AXIS: self.get_triple_axislike,
        }[kind]
        return [binding.decompose() for binding in lookup(action) or ()]

    def _get_clashes(
        self, updated_actions: UpdatedActions, input_store: InputStore, gamepad: Any
    ) -> list[Clash]:
        clashes = []
        for clash in self.possible_clashes():
            # Clashes can only occur if both actions were triggered.
            if updated_actions.pressed(clash.action_a) and updated_actions.pressed(
                clash.action_b
            ):
                actual = check_clash(clash, input_store, gamepad)
                if actual is not None:
                    clashes.append(actual)
        return clashes