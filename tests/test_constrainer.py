import pytest

from filterdemo.constrainer import (
    BoundsConstrainer,
    ContentConstrainer,
    add_without_overflow,
)
from filterdemo.geometry import BorderSize, Rectangle


class _Recording(BoundsConstrainer):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.events = []

    def resize_start(self):
        self.events.append("start")

    def resize_end(self):
        self.events.append("end")


class _Target:
    def __init__(self):
        self.bounds = None

    def set_bounds(self, bounds):
        self.bounds = bounds


def test_add_without_overflow_small_values():
    assert add_without_overflow(1, 2) == 3


def test_add_without_overflow_saturates():
    assert add_without_overflow(0x7FFFFFFF, 5) == 0x7FFFFFFF
    assert add_without_overflow(0x7FFFFFF, 0) == 0x7FFFFFFF


def test_missing_original_is_rejected():
    with pytest.raises(ValueError):
        ContentConstrainer(None)


def test_copy_from_takes_every_limit():
    source = BoundsConstrainer(10, 200, 20, 300, 1.5)
    source.set_minimum_onscreen_amounts(1, 2, 3, 4)
    target = BoundsConstrainer()
    target.copy_from(source)
    assert target == source


def test_resize_start_grows_by_decorations():
    original = _Recording(min_width=100, max_width=500, min_height=50, max_height=400)
    frame = BorderSize(top=20, left=5, bottom=5, right=5)
    content = BorderSize(top=2, left=2, bottom=2, right=2)
    cc = ContentConstrainer(original)
    cc.resize_start(frame, content)
    extra_w = frame.left_and_right() + content.left_and_right()
    extra_h = frame.top_and_bottom() + content.top_and_bottom()
    assert cc.min_width - original.min_width == extra_w
    assert cc.min_height - original.min_height == extra_h
    assert cc.max_width - original.max_width == extra_w
    assert cc.max_height - original.max_height == extra_h
    assert original.events == ["start"]


def test_unlimited_maximum_saturates():
    original = BoundsConstrainer()
    cc = ContentConstrainer(original)
    cc.resize_start(BorderSize(1, 1, 1, 1), BorderSize())
    assert cc.max_width == 0x7FFFFFFF
    assert cc.max_height == 0x7FFFFFFF


def test_resize_start_copies_aspect_and_onscreen():
    original = BoundsConstrainer(fixed_aspect_ratio=2.0)
    original.set_minimum_onscreen_amounts(7, 8, 9, 10)
    cc = ContentConstrainer(original)
    cc.resize_start()
    assert cc.fixed_aspect_ratio == original.fixed_aspect_ratio
    assert (
        cc.minimum_when_off_the_top,
        cc.minimum_when_off_the_left,
        cc.minimum_when_off_the_bottom,
        cc.minimum_when_off_the_right,
    ) == (7, 8, 9, 10)


def test_resize_end_and_apply_bounds_delegate():
    original = _Recording()
    cc = ContentConstrainer(original)
    cc.resize_end()
    assert original.events == ["end"]
    target = _Target()
    cc.apply_bounds_to_component(target, Rectangle(1, 2, 3, 4))
    assert target.bounds == Rectangle(1, 2, 3, 4)