"""Small geometry helpers used by the chart and layout code."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Union

Number = Union[int, float]


def _half(value: Number) -> Number:
    if isinstance(value, int):
        return int(value / 2)
    return value / 2


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: Number = 0
    y: Number = 0
    width: Number = 0
    height: Number = 0

    def right(self) -> Number:
        return self.x + self.width

    def bottom(self) -> Number:
        return self.y + self.height

    def centre_x(self) -> Number:
        return self.x + _half(self.width)

    def centre_y(self) -> Number:
        return self.y + _half(self.height)

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def reduced(self, dx: Number, dy: Number) -> Rectangle:
        """Shrink by dx on the left and right and dy on the top and bottom."""
        return Rectangle(
            self.x + dx,
            self.y + dy,
            max(0, self.width - 2 * dx),
            max(0, self.height - 2 * dy),
        )

    def union(self, other: Rectangle) -> Rectangle:
        """Smallest rectangle holding both; an empty rectangle contributes nothing."""
        if other.is_empty():
            return self
        if self.is_empty():
            return other
        left = min(self.x, other.x)
        top = min(self.y, other.y)
        right = max(self.right(), other.right())
        bottom = max(self.bottom(), other.bottom())
        return Rectangle(left, top, right - left, bottom - top)


@dataclass(frozen=True)
class BorderSize:
    """Thickness of the four edges of a frame."""

    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0

    def left_and_right(self) -> int:
        return self.left + self.right

    def top_and_bottom(self) -> int:
        return self.top + self.bottom


@dataclass(frozen=True)
class AffineTransform:
    """A 2D affine transform; the default is the identity."""

    mat00: float = 1.0
    mat01: float = 0.0
    mat02: float = 0.0
    mat10: float = 0.0
    mat11: float = 1.0
    mat12: float = 0.0

    def scaled(self, sx: float, sy: float) -> AffineTransform:
        """This transform followed by a scale about the origin."""
        return AffineTransform(
            sx * self.mat00,
            sx * self.mat01,
            sx * self.mat02,
            sy * self.mat10,
            sy * self.mat11,
            sy * self.mat12,
        )

    def translated(self, dx: float, dy: float) -> AffineTransform:
        """This transform followed by a translation."""
        return AffineTransform(
            self.mat00,
            self.mat01,
            self.mat02 + dx,
            self.mat10,
            self.mat11,
            self.mat12 + dy,
        )

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        return (
            self.mat00 * x + self.mat01 * y + self.mat02,
            self.mat10 * x + self.mat11 * y + self.mat12,
        )


@dataclass
class ChartPath:
    """A polyline path made of sub-paths of points."""

    sub_paths: List[List[Tuple[float, float]]] = field(default_factory=list)

    def start_new_sub_path(self, x: float, y: float) -> None:
        self.sub_paths.append([(x, y)])

    def line_to(self, x: float, y: float) -> None:
        if not self.sub_paths:
            self.sub_paths.append([(0.0, 0.0)])
        self.sub_paths[-1].append((x, y))

    def clear(self) -> None:
        self.sub_paths.clear()

    def points(self) -> List[Tuple[float, float]]:
        return [point for sub in self.sub_paths for point in sub]

    def bounds(self) -> Rectangle:
        """Bounding box of every point; an empty path gives an empty rectangle."""
        pts = self.points()
        if not pts:
            return Rectangle(0.0, 0.0, 0.0, 0.0)
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        left, top = min(xs), min(ys)
        return Rectangle(left, top, max(xs) - left, max(ys) - top)


def tlbr(top: Number, left: Number, bottom: Number, right: Number) -> Rectangle:
    """Build a rectangle from its top, left, bottom and right edges."""
    return Rectangle(left, top, right - left, bottom - top)