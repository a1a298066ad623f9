# enhanced_input

This package provides building blocks for turning raw input values into game action values:

- **Core types** (`enhanced_input.core`)
  - `ActionValue` holds a `bool`, a 1D float, or a 2D or 3D vector.
  - `Dim` is the dimension of an `ActionValue`.
  - `TriggerState`, `TimeKind` and `ContextTime` are also here.
  - `InputModifier` is the base class for modifiers.
  - `ModifierRegistry` keeps an ordered list of modifiers for each entity, with at most one modifier of each type.
- **Modifiers** (`enhanced_input.modifier`) reshape a value before an action uses it:
  - `AccumulateBy`
  - `Clamp`
  - `DeadZone` with `DeadZoneKind`
  - `DeltaScale`
  - `ExponentialCurve`
  - `LinearStep`
  - `Negate`
  - `Scale`
  - `SmoothNudge`
  - `SwizzleAxis`
- **Preset base** (`enhanced_input.preset.base`) provides `Preset`. It is an abstract base class for a group of bindings that map several inputs onto one action.
- **State sync** (`enhanced_input.state`) provides `ActiveInStates` and `StateContextSync`. Together they turn a context's activity on and off as the application state changes.

## Installation

```
pip install .
```

## Action values

```python
from enhanced_input.core import ActionValue, Dim

v = ActionValue.of((0.5, -1.0))
v.dim()               # Dim.AXIS2D
v.as_axis3d()         # (0.5, -1.0, 0.0)
v.convert(Dim.BOOL)   # ActionValue(value=True)
```

A value with a wrong number of components raises `ValueError`. A value of an unsupported type raises `TypeError`.

## Modifiers

Every modifier has a `transform(actions, time, value)` method, which takes an `ActionValue` and returns a new one:

- `actions` maps action identifiers to their `TriggerState`.
- `time` is a `ContextTime` that holds the frame deltas in seconds.

```python
from enhanced_input.core import ActionValue, ContextTime
from enhanced_input.modifier.scale import Scale
from enhanced_input.modifier.negate import Negate
from enhanced_input.modifier.dead_zone import DeadZone

time = ContextTime()
value = ActionValue.of(1.0)

value = Scale.splat(2.0).transform({}, time, value)   # 2.0
value = Negate.all().transform({}, time, value)       # -2.0
DeadZone().transform({}, time, ActionValue.of(0.5))   # 0.375
```

Most modifiers turn a `bool` input into a 1D value. `SwizzleAxis` is the exception: it moves components between axes and may promote the value to a higher dimension. For example, `SwizzleAxis.YXZ` puts a 1D input onto the Y axis of a 2D value.

`LinearStep`, `SmoothNudge` and `AccumulateBy` keep state between calls. `AccumulateBy(action)` sums values while `actions[action]` is `TriggerState.FIRED`. If the action is missing from `actions`, it logs a warning and returns the value unchanged.

`DeltaScale` and `SmoothNudge` read the clock that their `TimeKind` selects from `ContextTime`. `ContextTime` has two clocks, `real` and `virtual`.

## Modifier registry

```python
from enhanced_input.core import ModifierRegistry
from enhanced_input.modifier.scale import Scale

registry = ModifierRegistry()
registry.add("jump", Scale.splat(2.0))
registry.add("jump", Scale.splat(3.0))   # replaces the earlier Scale in place
registry.modifiers("jump")               # [Scale(factor=(3.0, 3.0, 3.0))]
registry.remove("jump", Scale)           # KeyError if there is none
```

## Presets

`Preset` is meant to be subclassed as a dataclass. Each field of the dataclass is a bundle: a single component, or a tuple of components. A subclass provides `bindings()`, which returns one flat tuple of components for each binding entity. The base class adds two methods:

- `size_hint()` returns the number of fields.
- `with_bundle(bundle)` returns a copy with `bundle` attached to every field.

The helper `_entity(*parts)` flattens bundles. It raises `ValueError` if the same component type appears twice in one entity.

```python
from dataclasses import dataclass
from typing import Any

from enhanced_input.modifier.negate import Negate
from enhanced_input.modifier.scale import Scale
from enhanced_input.preset.base import Preset


@dataclass
class LeftRight(Preset):
    right: Any
    left: Any

    def bindings(self):
        return [self._entity(self.right), self._entity(self.left, Negate.all())]


preset = LeftRight("KeyD", "KeyA").with_bundle(Scale.splat(0.5))
preset.bindings()
preset.size_hint()   # 2
```

## State-driven contexts

```python
from enhanced_input.state import ActiveInStates, StateContextSync

sync = StateContextSync()
sync.insert("player", ActiveInStates.single("playing"), current_state="playing")
sync.is_active("player")        # True
sync.transition("paused")       # {"player": False}
sync.is_active("player")        # False
```

A state of `None` means that no state exists. In that case, every context is inactive.

## What this package does not do

- It ships no ready-made binding layouts. There are no WASD, arrow-key, D-pad, stick, numpad or 3D movement presets, only the `Preset` base class.
- It does not read keyboards, mice or gamepads.
- It does not evaluate trigger conditions or dispatch action events.
- It does not run a state machine. Callers report state changes to `StateContextSync` themselves.

## Running the tests

```
pip install .[test]
pytest
```