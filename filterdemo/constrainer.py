"""Size constraints for a window, adjusted so they apply to its content area."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from filterdemo.geometry import BorderSize, Rectangle

_UNLIMITED = 0x3FFFFFFF
_INT_MAX = 0x7FFFFFFF


def add_without_overflow(a: int, b: int) -> int:
    """Add two sizes, saturating at the largest 32-bit signed integer."""
    if a < (0x7FFFFFF - b):
        return a + b
    return _INT_MAX


@dataclass
class BoundsConstrainer:
    """Minimum and maximum size, aspect ratio and on-screen limits of a window."""

    min_width: int = 0
    max_width: int = _UNLIMITED
    min_height: int = 0
    max_height: int = _UNLIMITED
    fixed_aspect_ratio: float = 0.0
    minimum_when_off_the_top: int = 0
    minimum_when_off_the_left: int = 0
    minimum_when_off_the_bottom: int = 0
    minimum_when_off_the_right: int = 0

    def copy_from(self, other: BoundsConstrainer) -> None:
        """Take over every limit of another constrainer."""
        self.min_width = other.min_width
        self.max_width = other.max_width
        self.min_height = other.min_height
        self.max_height = other.max_height
        self.fixed_aspect_ratio = other.fixed_aspect_ratio
        self.set_minimum_onscreen_amounts(
            other.minimum_when_off_the_top,
            other.minimum_when_off_the_left,
            other.minimum_when_off_the_bottom,
            other.minimum_when_off_the_right,
        )

    def set_minimum_onscreen_amounts(
        self, top: int, left: int, bottom: int, right: int
    ) -> None:
        self.minimum_when_off_the_top = top
        self.minimum_when_off_the_left = left
        self.minimum_when_off_the_bottom = bottom
        self.minimum_when_off_the_right = right

    def resize_start(self) -> None:
        """Hook called when an interactive resize begins."""

    def resize_end(self) -> None:
        """Hook called when an interactive resize ends."""

    def apply_bounds_to_component(self, component, bounds: Rectangle) -> None:
        component.set_bounds(bounds)


class ContentConstrainer(BoundsConstrainer):
    """Wraps a window's constrainer so its limits describe the content component.

    When a resize starts, the wrapped limits are copied and grown by the window
    frame and content border, so the content ends up exactly the size asked for.
    """

    def __init__(self, original: Optional[BoundsConstrainer]) -> None:
        super().__init__()
        if original is None:
            raise ValueError("the window must already have a constrainer")
        self.original = original

    def resize_start(
        self,
        frame_border: BorderSize = BorderSize(),
        content_border: BorderSize = BorderSize(),
    ) -> None:
        self.original.resize_start()
        self.copy_from(self.original)
        self.adjust_constraints(frame_border, content_border)

    def resize_end(self) -> None:
        self.original.resize_end()

    def apply_bounds_to_component(self, component, bounds: Rectangle) -> None:
        self.original.apply_bounds_to_component(component, bounds)

    def adjust_constraints(
        self, frame_border: BorderSize, content_border: BorderSize
    ) -> None:
        """Grow the limits by the decorations around the content."""
        extra_width = frame_border.left_and_right() + content_border.left_and_right()
        extra_height = frame_border.top_and_bottom() + content_border.top_and_bottom()
        self.min_height = self.original.min_height + extra_height
        self.max_height = add_without_overflow(self.original.max_height, extra_height)
        self.min_width = self.original.min_width + extra_width
        self.max_width = add_without_overflow(self.original.max_width, extra_width)