# actionbind

Bind abstract game actions to concrete inputs, then ask which actions are
active for the current input state.

An action can be a button (pressed or not), a single axis, a dual axis or a
triple axis. Each action may be bound to many inputs, and one input may serve
many actions. Adding the same binding twice has no effect.

## Installing

```
pip install actionbind
```

## Actions and inputs

Any hashable value can be an action. An action declares its kind through an
`input_control_kind` attribute holding an `actionbind.core.InputControlKind`
(`BUTTON`, `AXIS`, `DUAL_AXIS` or `TRIPLE_AXIS`). An action without that
attribute, such as a plain string, is a button.

`actionbind.core` provides:

- `InputStore`, which holds the raw buttons currently held down. You call its
  `press`, `release` and `is_pressed` methods.
- `Key`, a single named key.
- `ButtonlikeChord`, several buttons that must all be held together.
- The abstract bases `Buttonlike`, `Axislike`, `DualAxislike` and
  `TripleAxislike`. Subclass them for other kinds of input. Every input
  implements `decompose()`, which returns a `BasicInputs` describing the
  buttons the input is made of.

## Binding actions

```python
from actionbind.core import Key, ButtonlikeChord, InputStore
from actionbind.input_map import InputMap
from actionbind.clashing import ClashStrategy

input_map = InputMap([
    ("save", ButtonlikeChord([Key("ControlLeft"), Key("KeyS")])),
    ("move_down", Key("KeyS")),
])

store = InputStore()
store.press(Key("ControlLeft"))
store.press(Key("KeyS"))

input_map.pressed("save", store, ClashStrategy.PRIORITIZE_LONGEST)       # True
input_map.pressed("move_down", store, ClashStrategy.PRIORITIZE_LONGEST)  # False
```

`actionbind.bindings.BindingMap`, the base of `InputMap`, offers several groups
of methods:

- Chaining builders: `with_button`, `with_axis`, `with_dual_axis`,
  `with_triple_axis`, `with_one_to_many` and `with_multiple`.
- In-place insertion: `insert`, `insert_axis`, `insert_dual_axis`,
  `insert_triple_axis`, `insert_one_to_many` and `insert_multiple`.
- Construction from a mapping of actions to inputs: `BindingMap.from_mapping`.
- `merge`, which adds another map's bindings without duplicates.
- Lookup: `get`, `get_buttonlike`, `get_axislike`, `get_dual_axislike`,
  `get_triple_axislike` and `len()`.
- Iteration: `iter_*`, `*_bindings` and `*_actions`.
- Removal: `clear_action`, `remove_at` and `remove`. `remove_at` returns
  whether an input was removed. `remove` returns the removed input's index, or
  `None`.
- `clear`, which removes every binding.

Binding an input to an action of the wrong kind raises `ValueError`. Binding
an object that is not of the required input type raises `TypeError`.

## Clashing inputs

Two button bindings clash when the buttons of one are a strict subset of the
buttons of the other, such as `S` and `Ctrl + S`. When both are held, the
`actionbind.clashing.ClashStrategy` decides what happens:

- `ClashStrategy.PRESS_ALL` keeps every matching action pressed.
- `ClashStrategy.PRIORITIZE_LONGEST` keeps only the action with the longest
  chord. It is the default.

`InputMap.process_actions` returns an `actionbind.updated.UpdatedActions`, a
dict that maps each bound action to its `UpdatedValue`:

- A button action is pressed if any of its bindings is pressed.
- Axis, dual-axis and triple-axis values are the sum over all of the action's
  bindings.
- Actions overruled by a clash are removed from the result.

`possible_clashes`, `possible_clash` and `decomposed` let you inspect how
bindings overlap.

## Gamepads

A map can be tied to one gamepad with `set_gamepad` or `with_gamepad`. The tie
is removed with `clear_gamepad`, and `gamepad()` returns the current one. When
the map is processed, its gamepad is passed to every input that is read. If
the map has none, the `gamepad` argument given to `process_actions` is passed
instead.

## Run conditions

`actionbind.conditions` builds callables that take an action state and return
a bool. An action state here is any object with `pressed`, `just_pressed` and
`just_released` methods. The callables are `action_pressed`,
`action_just_pressed`, `action_just_released` and the stateful
`action_toggle_active`.

## What this package does not do

- It does not read keyboards, mice or gamepads. You fill the `InputStore`
  yourself.
- It does not keep a per-action state across frames, such as "just pressed"
  tracking or press durations. The run conditions expect such an object to be
  supplied by you.
- Apart from `Key` and `ButtonlikeChord`, no concrete input types are
  included. Axis-style inputs are written by subclassing the abstract bases.