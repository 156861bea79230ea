"""Gain response of a filter in decibels, laid out for drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from filterdemo.geometry import AffineTransform, ChartPath, Rectangle

_MARGIN = 4


class LineStyle(Enum):
    """Which pen a horizontal guide line is drawn with."""

    ZERO = "zero"
    MINOR = "minor"
    MAJOR = "major"


@dataclass(frozen=True)
class AxisLine:
    """A horizontal guide line at a chart value, with an optional label."""

    value: float
    y: int
    style: LineStyle
    label: Optional[str] = None
    label_position: Optional[Tuple[int, int]] = None
    label_below: bool = False

    @classmethod
    def place(
        cls,
        value: float,
        y: int,
        bounds: Rectangle,
        style: LineStyle,
        labelled: bool = True,
    ) -> Optional[AxisLine]:
        """The line at screen row y, or None when the row is outside bounds."""
        if not (bounds.y <= y < bounds.bottom()):
            return None
        if not labelled:
            return cls(value, y, style)
        below = value < 0
        position = (int(bounds.x) + 6, y + 2 if below else y - 2)
        return cls(value, y, style, f"{value:g}", position, below)


class GainChart:
    """Computes the gain curve of a filter and maps it onto a chart area."""

    MAX_DB = 17
    MIN_DB = -65
    name = "Gain (dB)"

    def __init__(
        self,
        width: int,
        height: int,
        x_to_f: Optional[Callable[[float], float]] = None,
    ) -> None:
        self.bounds = Rectangle(0, 0, width, height)
        self.x_to_f: Callable[[float], float] = x_to_f or (lambda x: x)
        self.path = ChartPath()
        self.is_defined = False
        self.max_db = 0.0

    def update(self, filter) -> None:
        """Recompute the path: x runs over 0..1, y is the gain in dB."""
        self.is_defined = False
        self.path.clear()
        if filter is not None:
            self.is_defined = True
            width = int(self.bounds.reduced(_MARGIN, _MARGIN).width)
            for xi in range(width):
                x = xi / width
                f = self.x_to_f(x)
                y = abs(filter.response(f / 2))
                if y < 1e-5:
                    y = 1e-5
                y = 20 * math.log10(y) if not math.isnan(y) else y
                if math.isnan(y):
                    self.path.clear()
                    self.is_defined = False
                    break
                if xi == 0:
                    self.path.start_new_sub_path(x, y)
                else:
                    self.path.line_to(x, y)
            if self.is_defined:
                self.path.start_new_sub_path(0.0, 0.0)
        self.max_db = float(math.floor(self.path.bounds().bottom() + 0.5))

    def transform(self) -> AffineTransform:
        """Map (0..1, dB) onto the chart area, with the top dB value at the top."""
        r = self.bounds.reduced(_MARGIN, _MARGIN)
        max_db = max(self.max_db, float(self.MAX_DB))
        return (
            AffineTransform()
            .scaled(float(r.width), -1.0)
            .translated(0.0, max_db)
            .scaled(1.0, 1.0 / (max_db - self.MIN_DB))
            .scaled(1.0, float(r.height))
            .translated(float(r.x), float(r.y))
        )

    def y_to_screen(self, y: float) -> int:
        return int(self.transform().apply(0.0, y)[1])

    def db_lines(self) -> List[AxisLine]:
        """Guide lines: 0 dB, -3 dB, then steps down and up while on screen."""
        lines: List[AxisLine] = []
        for value, style in ((0, LineStyle.ZERO), (-3, LineStyle.MINOR)):
            line = AxisLine.place(value, self.y_to_screen(value), self.bounds, style, False)
            if line is not None:
                lines.append(line)

        skip = 12 if self.bounds.height < 240 else 6
        for step in (-skip, skip):
            db = step
            last_y: Optional[int] = None
            while True:
                y = self.y_to_screen(db)
                if y == last_y:
                    break
                line = AxisLine.place(db, y, self.bounds, LineStyle.MAJOR)
                if line is None:
                    break
                lines.append(line)
                last_y = y
                db += step
        return lines