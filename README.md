# thrustpad

A tiny arcade-style movement model. A single 50-pixel object lives in a
1315 × 685 playfield. It slides left and right in fixed steps, gets an
upward kick when thrust is applied, and is pulled back down by gravity
on every frame until it rests on the floor.

The package also has a minimal signal/slot helper for wiring one
object's events to another object's handlers.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
thrustpad [ACTION ...] [--frames N]
```

Each `ACTION` is one of `left`, `right`, `thrust` or `wait`. Every
action is applied and then followed by one frame of simulation (`wait`
only advances the frame). After the actions, `--frames N` simulates `N`
more frames (default 0). Unknown actions or a negative `--frames` are
reported as usage errors.

Before simulating, the command wires an `Announcer` to a `Printer` and
fires the announcement once, so `I have printed` is written to standard
error. The final position is then printed to standard output:

```
$ thrustpad
x=607 y=635
```

## Using the controller

```python
from thrustpad.controller import Controller

ctrl = Controller()     # starts at x=607, y=635 (resting on the floor)
ctrl.move_left()        # x shifts left by 10, never below 0
ctrl.move_right()       # x shifts right by 10, never beyond 1315
ctrl.apply_thrust()     # vertical speed set to -15, or to 0 if y is already above 635 / 1.5
ctrl.update_state()     # one frame: move by the speed, add gravity 0.5, clamp at the floor
ctrl.run(60)            # advance 60 frames; a negative count raises ValueError
print(ctrl.x, ctrl.y, ctrl.y_speed)
```

`x` and `y` are properties. Assigning a different value to either emits
the controller's `x_changed` or `y_changed` signal; `update_state` emits
`y_changed` on every frame.

## Signals

```python
from thrustpad.signals import Signal

changed = Signal()
handler = lambda value: print("got", value)
changed.connect(handler)
changed.emit(42)          # prints "got 42"
changed.disconnect(handler)
```

- `connect` raises `TypeError` for anything that is not callable;
  connecting the same callable twice makes it run twice.
- `emit` calls the slots in the order they were connected.
- `disconnect` removes every connection to the callable and raises
  `ValueError` if it was not connected.
- `len(signal)` is the number of connections.

`Announcer` carries a `print_it` signal, and `Printer.report` is a
ready-made handler for it that writes `I have printed` to the stream
given to `Printer` (standard error by default).

## What it does not do

There is no window, drawing or keyboard input, and no real-time clock:
the object is never shown on screen, and frames advance only when
`update_state` or `run` is called (or once per action on the command
line). The constant `FRAME_INTERVAL_MS` in `thrustpad.controller` (16)
records the intended frame interval but nothing schedules frames by it.