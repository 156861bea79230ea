"""Poles and zeros of a filter, placed on the complex plane for drawing."""

from __future__ import annotations

import cmath
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from filterdemo.geometry import AffineTransform, Rectangle

Point = Tuple[float, float]

_MARGIN = 0.2


@dataclass(frozen=True)
class PoleZeroPair:
    """One or two poles with their matching zeros; a single pole has zero seconds."""

    poles: Tuple[complex, complex]
    zeros: Tuple[complex, complex]

    @classmethod
    def single(cls, pole: complex, zero: complex) -> PoleZeroPair:
        return cls((complex(pole), 0j), (complex(zero), 0j))

    def is_single_pole(self) -> bool:
        return self.poles[1] == 0 and self.zeros[1] == 0

    def is_nan(self) -> bool:
        return any(cmath.isnan(value) for value in (*self.poles, *self.zeros))

    def used_poles(self) -> Tuple[complex, ...]:
        return self.poles[:1] if self.is_single_pole() else self.poles

    def used_zeros(self) -> Tuple[complex, ...]:
        return self.zeros[:1] if self.is_single_pole() else self.zeros


class PoleZeroChart:
    """Holds a filter's poles and zeros and maps them onto a chart area.

    The filter needs pole_zeros(), returning an iterable of PoleZeroPair.
    """

    name = "Pole/Zero"

    def __init__(self, width: int, height: int) -> None:
        self.bounds = Rectangle(0, 0, width, height)
        self.max = 0.0
        self.pairs: List[PoleZeroPair] = []

    def clear(self) -> None:
        self.max = 0.0
        self.pairs.clear()

    def update(self, filter) -> None:
        self.clear()
        if filter is not None:
            self.add_pole_zeros(filter.pole_zeros())

    def add_pole_zeros(self, pairs: Iterable[PoleZeroPair]) -> None:
        """Add pairs and widen the largest coordinate seen."""
        for pair in pairs:
            self.pairs.append(pair)
            for value in (*pair.used_poles(), *pair.used_zeros()):
                self.max = max(self.max, abs(value.real), abs(value.imag))

    def transform(self) -> AffineTransform:
        """Map the complex plane onto the chart, shrinking it if points leave the unit disc."""
        size = (min(self.bounds.width, self.bounds.height) + 2) // 3
        t = AffineTransform()
        if self.max > 1 + _MARGIN:
            scale = 1 / (self.max - _MARGIN)
            t = t.scaled(scale, scale)
        return t.scaled(float(size), -float(size)).translated(
            float(self.bounds.centre_x()), float(self.bounds.centre_y())
        )

    def markers(self) -> Tuple[List[Point], List[Point]]:
        """Screen positions of the poles and of the zeros, skipping undefined pairs."""
        t = self.transform()
        poles: List[Point] = []
        zeros: List[Point] = []
        for pair in self.pairs:
            if pair.is_nan():
                continue
            poles.extend(t.apply(p.real, p.imag) for p in pair.used_poles())
            zeros.extend(t.apply(z.real, z.imag) for z in pair.used_zeros())
        return poles, zeros