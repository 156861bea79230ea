"""Phase response of a filter in degrees, laid out for drawing."""

from __future__ import annotations

import cmath
import math
from typing import List

from filterdemo.gainchart import AxisLine, LineStyle
from filterdemo.geometry import AffineTransform, ChartPath, Rectangle

_MARGIN = 4


class PhaseChart:
    """Computes the phase curve of a filter and maps it onto a chart area."""

    # leaves some room above and below the +/-90 degree lines
    MAX_PHASE = 120
    name = "Phase (deg)"

    def __init__(self, width: int, height: int) -> None:
        self.bounds = Rectangle(0, 0, width, height)
        self.path = ChartPath()
        self.is_defined = False

    def update(self, filter) -> None:
        """Recompute the path: x runs over 0..1, y is the phase scaled to +/-90."""
        self.is_defined = False
        self.path.clear()
        if filter is None:
            return
        self.is_defined = True
        width = int(self.bounds.reduced(_MARGIN, _MARGIN).width)
        for xi in range(width):
            x = xi / width
            y = 90 * (cmath.phase(complex(filter.response(x / 2))) / math.pi)
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

    def transform(self) -> AffineTransform:
        """Map (0..1, -MAX_PHASE..MAX_PHASE) onto the chart area."""
        r = self.bounds.reduced(_MARGIN, _MARGIN)
        return (
            AffineTransform()
            .scaled(float(r.width), -1.0)
            .translated(0.0, float(self.MAX_PHASE))
            .scaled(1.0, 1.0 / (self.MAX_PHASE - -self.MAX_PHASE))
            .scaled(1.0, float(r.height))
            .translated(float(r.x), float(r.y))
        )

    def y_to_screen(self, y: float) -> int:
        return int(self.transform().apply(0.0, y)[1])

    def phase_lines(self) -> List[AxisLine]:
        """Guide lines at 0 (unlabelled), 90 and -90 that fall on screen."""
        wanted = ((0, LineStyle.ZERO, False), (90, LineStyle.MAJOR, True), (-90, LineStyle.MAJOR, True))
        lines = (
            AxisLine.place(value, self.y_to_screen(value), self.bounds, style, labelled)
            for value, style, labelled in wanted
        )
        return [line for line in lines if line is not None]