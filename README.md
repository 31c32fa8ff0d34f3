# solid-principles

This package has a small runnable example for each of the five SOLID design
principles. Most principles come in two versions. One follows the principle
and one breaks it, so you can compare them side by side.

All examples use a missile and aircraft setting.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the examples

Each example is a command that prints what its objects do. The commands
take no options.

| Principle | Followed | Violated |
|---|---|---|
| Single responsibility | `solid-single-responsibility` | — |
| Open/closed | `solid-open-close` | `solid-open-close-violation` |
| Liskov substitution | `solid-liskov` | `solid-liskov-violation` |
| Interface segregation | `solid-interface-segregation` | `solid-interface-segregation-violation` |
| Dependency inversion | `solid-dependency-inversion` | `solid-dependency-inversion-violation` |

Example:

```
$ solid-open-close
Fired using Infrared guidance
Fired using Laser guidance
Fired using GPS guidance
```

`solid-liskov-violation` is meant to fail. Its `DummyMissile` is a subclass
of `Missile`, but its `fire` raises `RuntimeError("This missile is for
testing. Cannot fire.")` when `launch_missile` calls it. That failure is the
point of the example.

## Using the modules

You can also import and combine the classes yourself:

```python
from solid_principles.dependency_inversion import AircraftModel, AgniMissile, TejasMissile

model = AircraftModel(TejasMissile())
model.turn_missile(1)            # TejasMissile: Turning left.
model.control_missile_speed(-1)  # TejasMissile: Slowing down.

model = AircraftModel(AgniMissile())  # swapped without touching AircraftModel
model.control_missile_speed(1)        # AgniMissile: Increasing speed.
```

For turning, a signal of `1` means left, `0` means right, and any other
value means straight on. For speed, only the sign of the signal counts.

```python
from solid_principles.open_close import GPSFiring, Missile

message = Missile(GPSFiring()).execute()   # prints and returns "Fired using GPS guidance"
```

```python
from solid_principles.interface_segregation import Boeing, Glider, check_engine, check_flight

check_flight(Glider())
check_engine(Boeing())
check_engine(Glider())   # TypeError: Glider is not EnginePowered
```

## Modules

- `solid_principles.single_responsibility`: `Missile.execute` passes its work
  to a `TargetLocator`, a `TargetLocker` and a `FiringSystem`. `Location` is
  a frozen dataclass of latitude and longitude. `FiringSystem.fire` returns
  `"Fired"`, or `"Enter a valid location"` when given `None`.
- `solid_principles.open_close`: interchangeable `FiringStrategy` classes
  (`InfraredFiring`, `LaserFiring`, `GPSFiring`) plugged into a `Missile`.
- `solid_principles.open_close_violation`: a `Missile` that looks up its
  message from a fixed `FiringType` enum.
- `solid_principles.liskov`: `ICBMMissile` and `ShortRangeMissile` can stand
  in for `Missile`. The simulation-only `DummyMissile` is kept outside the
  hierarchy, and `launch` raises `TypeError` for anything that is not a
  `Missile`.
- `solid_principles.liskov_violation`: a `DummyMissile` that subclasses
  `Missile` and breaks its contract.
- `solid_principles.interface_segregation`: separate `BasicAircraft`,
  `EnginePowered` and `AutopilotEnabled` interfaces. `Boeing` records its
  `airborne`, `engine_running` and `autopilot_engaged` state. `Glider`
  records only `airborne`.
- `solid_principles.interface_segregation_violation`: one large `Aircraft`
  interface that forces `Glider` to implement engine and autopilot methods
  that only print excuses.
- `solid_principles.dependency_inversion`: an `AircraftModel` that depends on
  the abstract `Missile`.
- `solid_principles.dependency_inversion_violation`: an `AircraftModel` tied
  to the concrete `AgniMissile`.

## What this package does not do

These are teaching examples. The missiles and aircraft only print and return
fixed messages. Nothing is simulated, no coordinates are computed, and
`TargetLocator.search_target` always returns the same `Location`, whatever
points it is given.