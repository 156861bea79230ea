"""Group delay of a filter in seconds, laid out for drawing."""

from __future__ import annotations

import math
from typing import List

from filterdemo.gainchart import AxisLine, LineStyle
from filterdemo.geometry import AffineTransform, ChartPath, Rectangle

_MARGIN = 4
# the chart shows -H..H seconds
_HALF_RANGE = 3.0


class GroupDelayChart:
    """Computes the group delay curve of a filter and maps it onto a chart area."""

    name = "Group Delay (s)"

    def __init__(self, width: int, height: int) -> None:
        self.bounds = Rectangle(0, 0, width, height)
        self.path = ChartPath()
        self.is_defined = False

    def update(self, filter) -> None:
        """Recompute the path: x runs over 0..1, y is the delay in seconds."""
        self.is_defined = False
        self.path.clear()
        if filter is None:
            return
        self.is_defined = True
        width = int(self.bounds.reduced(_MARGIN, _MARGIN).width)
        # start from 1 so the angular frequency is never zero
        for xi in range(1, width):
            x = xi / width
            w = math.pi * (x / 2.0)
            y = -abs(filter.response(w)) / w
            if math.isnan(y):
                self.path.clear()
                self.is_defined = False
                break
            if xi == 1:
                self.path.start_new_sub_path(x, y)
            else:
                self.path.line_to(x, y)
        if self.is_defined:
            self.path.start_new_sub_path(0.0, 0.0)

    def transform(self) -> AffineTransform:
        """Map (0..1, -3..3 seconds) onto the chart area, zero at the vertical centre."""
        r = self.bounds.reduced(_MARGIN, _MARGIN)
        return (
            AffineTransform()
            .scaled(float(r.width), -1.0)
            .scaled(1.0, r.height / (2.0 * _HALF_RANGE))
            .translated(float(r.x), float(r.centre_y()))
        )

    def y_to_screen(self, y: float) -> int:
        return int(self.transform().apply(0.0, y)[1])

    def delay_lines(self) -> List[AxisLine]:
        """Guide lines at 0 (unlabelled), 1 and -1 seconds that fall on screen."""
        wanted = (
            (0.0, LineStyle.ZERO, False),
            (1.0, LineStyle.MAJOR, True),
            (-1.0, LineStyle.MAJOR, True),
        )
        lines = (
            AxisLine.place(value, self.y_to_screen(value), self.bounds, style, labelled)
            for value, style, labelled in wanted
        )
        return [line for line in lines if line is not None]