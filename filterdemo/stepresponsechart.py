"""Impulse response of a filter, laid out for drawing."""

from __future__ import annotations

import math
from typing import List

from filterdemo.geometry import AffineTransform, ChartPath, Rectangle

_MARGIN = 4
_NUM_SAMPLES = 2048


def _run_filter(filter, samples: List[float]) -> List[float]:
    """Feed samples through the filter; it may return a new list or work in place."""
    result = filter.process(samples)
    return list(result) if result is not None else samples


def _trimmed_length(impulse: List[float]) -> int:
    """Length of the response once its quiet tail is dropped."""
    count = len(impulse)
    bigs = 0
    n = count - 1
    for value in reversed(impulse[11:]):
        n -= 1
        if value > 1e-3:
            bigs += 1
            if bigs > 10:
                break
    return min(count, int(1.2 * n))


class StepResponseChart:
    """Runs an impulse through a filter and maps the output onto a chart area.

    The filter needs reset() and process(samples); process returns the output
    samples or fills the given list in place.
    """

    name = "Impulse Response"

    def __init__(self, width: int, height: int) -> None:
        self.bounds = Rectangle(0, 0, width, height)
        self.path = ChartPath()
        self.is_defined = False
        self.y_max = 1.0

    def update(self, filter) -> None:
        """Recompute the path: x runs over 0..1, y is the filter output."""
        self.is_defined = False
        self.path.clear()
        self.y_max = 0.1
        if filter is None:
            return

        filter.reset()
        impulse = [0.0] * _NUM_SAMPLES
        impulse[0] = 1.0
        impulse[1] = -1.0
        impulse = _run_filter(filter, impulse)
        num_samples = _trimmed_length(impulse)

        self.is_defined = True
        width = int(self.bounds.reduced(_MARGIN, _MARGIN).width)
        for xi in range(width - 1):
            x = xi * num_samples / width
            index = int(x)
            t = x - math.floor(x)
            y0 = impulse[index]
            y1 = impulse[index + 1] if index + 1 < len(impulse) else y0
            y = y0 + t * (y1 - y0)
            if math.isnan(y):
                self.path.clear()
                self.is_defined = False
                break
            x /= num_samples
            if xi == 0:
                self.path.start_new_sub_path(x, y)
            else:
                self.path.line_to(x, y)
            self.y_max = max(abs(y), self.y_max)

        if self.is_defined:
            self.path.start_new_sub_path(0.0, 0.0)

    def transform(self) -> AffineTransform:
        """Map (0..1, -y_max..y_max) onto the chart area, zero at the vertical centre."""
        r = self.bounds.reduced(_MARGIN, _MARGIN)
        return (
            AffineTransform()
            .scaled(float(r.width), -1.0 / self.y_max)
            .scaled(1.0, r.height / 2.1)
            .translated(float(r.x), float(r.centre_y()))
        )

    def y_to_screen(self, y: float) -> int:
        return int(self.transform().apply(0.0, y)[1])