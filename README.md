# pinballkit

Building blocks for the control software of a small pinball machine:

- `pinballkit.debounce.Debounce` turns noisy switch readings into a steady
  on/off state. It can also ignore new presses for a set time after each
  release.
- `pinballkit.pixelstrand.PixelStrand` holds the colours of an addressable LED
  strand. It provides fills, alternating patterns, rainbows and rotation. The
  colours go to any object that has the `StrandOutput` interface.
  `RecordingOutput` records every frame, for tests and simulation.
- `pinballkit.layout` describes a machine's switches and solenoids: which ones
  it has, what they are called and how many points each one awards.

The package has no dependencies beyond the standard library.

## Installation

```
pip install pinballkit
```

To run the test suite:

```
pip install "pinballkit[test]"
pytest
```

## Debouncing a switch

```python
from pinballkit.debounce import Debounce

switch = Debounce(debounce_delay=4, ignore_window=0)   # these are the defaults

switch.update(1, 100)   # reading changed; not steady yet -> 0
switch.update(1, 104)   # steady for 4 ms -> 1
if switch.state() and not switch.serviced:
    print("pressed at", switch.activation_time())
    switch.serviced = True
```

`update(current_value, current_millis)` takes the raw reading (0 or 1) and the
time in milliseconds. It returns the steady state. A reading must hold for
`debounce_delay` milliseconds before the steady state follows it.

After a release, a new press is accepted only when `ignore_window`
milliseconds have passed since the release began. Releases are never delayed
by the window. `is_ignoring(now)` returns `True` while the switch is on and
the window is still open.

`serviced` is cleared on every change of steady state. The caller sets it once
it has handled the change. Time differences wrap like a 32-bit millisecond
counter. A negative delay or window raises `ValueError`.

## Driving an LED strand

```python
from pinballkit.pixelstrand import PixelStrand, RecordingOutput, white_strand

output = RecordingOutput()
strand = PixelStrand(8, output)          # every pixel starts black

strand.alternate(255, 0, 0, 0, 0, 255)   # red on even pixels, blue on odd
strand.rotate(1)                         # shift colours one pixel along
strand.rainbow(0, 1)                     # one gamma-corrected hue cycle
print(strand.get_color(0, 0))            # red channel of pixel 0
print(strand.colors)                     # all colours as (r, g, b) tuples
print(output.frames[-1])                 # last frame sent to the output

lit = white_strand(8, RecordingOutput()) # brightness 225, every pixel white
```

`alternate`, `rainbow`, `rotate` and `show` each send one frame to the output.

`color_wipe(red, green, blue, wait)` fills the strand one pixel at a time. It
sends a frame after each pixel and sleeps `wait` milliseconds in between.

`set_color` and `set_packed_color` change a single pixel. The change reaches
the output at the next `show`.

`set_brightness` passes a value from 0 to 255 to the output.

Colour channels outside 0–255 raise `ValueError`. Pixel or channel indexes
outside the strand raise `IndexError`.

A hardware driver only has to implement two methods:

- `set_brightness(value)`
- `write(colors)`, where `colors` is a sequence of `(red, green, blue)` tuples.

Two helpers convert colours:

- `color_hsv(hue, saturation, value)` turns a 16-bit hue and 8-bit saturation
  and value into a packed `0xRRGGBB` colour.
- `unpack_color(color)` splits a packed colour into its channels.

## Machine layouts

```python
from pinballkit.layout import eckerd_layout, vanilla_layout

layout = eckerd_layout()
print(layout.switch_name(11))     # "Spinner"
print(layout.switch_score(11))    # 5 points by default
print(layout.solenoid_name(2))    # "PB_3"
print(layout.driver_solenoids[4]) # "PB_2", the name on the solenoid board

generic = vanilla_layout()
print(generic.solenoid_name(8))   # "X8"
```

A machine has switches 1–12 and solenoids 1–8.

- A number outside that range raises `ValueError`.
- A number the machine does not use raises `KeyError`.
- Switches and solenoids award 5 points unless the layout gives them other
  scores in `switch_scores` or `solenoid_scores`.
- You can build your own `MachineLayout` from plain dictionaries.

## What the package does not do

The package talks to no hardware. It does not read switch pins, fire
solenoids or drive LEDs. Your own `StrandOutput` must send frames to a real
strand.

It has no game loop, score keeping, display or command-line program. It
supplies the parts that such a program is built from.