# filterdemo

This package holds the non-graphical parts of a tool for exploring digital audio filters:

- **Response chart models** (`gainchart`, `phasechart`, `groupdelaychart`, `stepresponsechart`, `polezerochart`). Each model takes a filter object you supply and turns its response into a `ChartPath`. It also gives you the `AffineTransform` that maps that path onto a chart area of a given width and height.
- **Geometry helpers** (`geometry`): `Rectangle`, `BorderSize`, `AffineTransform`, `ChartPath` and `tlbr`.
- **A content constrainer** (`constrainer`). You give size limits for a window's content, and it widens them by the window frame and the content border.
- **Menu catalogues** (`catalog`): the filter families, the filter types each family offers, the audio sources, state types and smoothing modes, and the design order of each family.

It has no dependencies outside the standard library.

## Installation

```
pip install filterdemo
```

## Filters

The chart models do not design filters. You pass in any object that has the methods the chart uses:

| Chart | What the filter must provide |
|---|---|
| `GainChart`, `PhaseChart`, `GroupDelayChart` | `response(frequency)` returning a complex number |
| `StepResponseChart` | `reset()` and `process(samples)`. `process` either returns the output samples or fills the list it is given. |
| `PoleZeroChart` | `pole_zeros()` returning an iterable of `PoleZeroPair` |

## Examples

### Gain and phase

```python
import cmath
import math

from filterdemo.gainchart import GainChart
from filterdemo.phasechart import PhaseChart


class OnePole:
    def __init__(self, a):
        self.a = a

    def response(self, normalized_frequency):
        z = cmath.exp(-2j * math.pi * normalized_frequency)
        return (1 - self.a) / (1 - self.a * z)


gain = GainChart(320, 240)
gain.update(OnePole(0.9))
gain.is_defined              # True once a curve has been computed
points = gain.path.points()  # x in 0..1, y in dB
screen = [gain.transform().apply(x, y) for x, y in points]
for line in gain.db_lines():  # 0 dB, -3 dB, then steps of 6 or 12 dB while on screen
    print(line.value, line.y, line.style, line.label)

phase = PhaseChart(320, 240)
phase.update(OnePole(0.9))
phase.phase_lines()          # guide lines at 0, 90 and -90 that fall on screen
```

`GainChart` takes an optional `x_to_f` function that maps the horizontal position (0..1) to a frequency before `response(f / 2)` is called. The default leaves x unchanged. Gains below 1e-5 are clamped before conversion to dB. If any point comes out as NaN, the path is cleared and `is_defined` is set to `False`.

`GroupDelayChart` plots `-abs(response(w)) / w` with `w = pi * x / 2`. Its y range is -3..3 and zero sits at the vertical centre. `delay_lines()` gives the guide lines at 0, 1 and -1.

### Impulse response

`StepResponseChart.update` resets the filter and feeds it 2048 samples that start with `1, -1` and are zero after that. It drops the quiet tail of the output, resamples what is left across the chart width, and keeps the largest absolute value in `y_max` (at least 0.1). `transform()` scales the path so that `-y_max..y_max` fits the chart height.

### Poles and zeros

```python
from filterdemo.polezerochart import PoleZeroChart, PoleZeroPair

chart = PoleZeroChart(300, 300)
chart.add_pole_zeros([
    PoleZeroPair((0.5 + 0.5j, 0.5 - 0.5j), (-1 + 0j, -1 + 0j)),
    PoleZeroPair.single(0.9, 0),
])
poles, zeros = chart.markers()  # screen positions; pairs containing NaN are skipped
```

If any coordinate is larger than 1.2, `transform()` shrinks the plane so that every point still fits on the chart.

### Content size limits

```python
from filterdemo.constrainer import BoundsConstrainer, ContentConstrainer
from filterdemo.geometry import BorderSize

window_limits = BoundsConstrainer(min_width=256, min_height=256)
content = ContentConstrainer(window_limits)
content.resize_start(BorderSize(top=22, left=1, bottom=1, right=1), BorderSize())
content.min_width, content.min_height  # (258, 280)
```

`ContentConstrainer` raises `ValueError` if it is given no constrainer to wrap. `add_without_overflow(a, b)` returns `a + b`, or `0x7FFFFFFF` when `a` is not below `0x7FFFFFF - b`.

### Menus

```python
from filterdemo.catalog import Family, choose_type_id, design_order, family_menu, type_menu

families = family_menu()
types = type_menu(Family.BUTTERWORTH)
selected = choose_type_id(types, 3)   # Butterworth has no type 3, so this returns 1
design_order(Family.BESSEL)           # 25
```

Equivalent filter types use the same item id in every family, so `choose_type_id` can keep the selected type when the family changes. `tempo_for_slider(value)` returns `1.2 ** value`.

## What this package does not do

This package does not:

- design filters or process audio with them;
- play sound, read audio files or generate test signals;
- draw charts or open windows;
- provide a command to run.

It computes chart paths, transforms, size limits and menu contents. Drawing, playback and filter design are left to the code that uses it.

## Running the tests

```
pip install -e ".[test]"
pytest
```