import pytest

from filterdemo.geometry import (
    AffineTransform,
    BorderSize,
    ChartPath,
    Rectangle,
    tlbr,
)


def test_rectangle_edges():
    r = Rectangle(10, 20, 30, 40)
    assert r.right() == 40
    assert r.bottom() == 60


def test_centre_of_int_rectangle_is_int():
    r = Rectangle(0, 0, 7, 9)
    assert isinstance(r.centre_x(), int)
    assert r.centre_x() == 3
    assert r.centre_y() == 4


def test_reduced_keeps_centre():
    r = Rectangle(0, 0, 100, 60)
    small = r.reduced(4, 4)
    assert small.x == 4 and small.y == 4
    assert small.right() == r.right() - 4
    assert small.bottom() == r.bottom() - 4
    assert small.centre_x() == r.centre_x()


def test_reduced_never_negative_size():
    r = Rectangle(0, 0, 4, 4).reduced(10, 10)
    assert r.width == 0 and r.height == 0


def test_union_covers_both():
    a = Rectangle(0, 0, 10, 10)
    b = Rectangle(5, 5, 10, 10)
    u = a.union(b)
    assert (u.x, u.y, u.right(), u.bottom()) == (0, 0, b.right(), b.bottom())


def test_union_with_empty_returns_other():
    a = Rectangle(3, 4, 5, 6)
    assert Rectangle().union(a) == a
    assert a.union(Rectangle()) == a


def test_tlbr_round_trip():
    r = tlbr(2, 3, 12, 23)
    assert (r.y, r.x, r.bottom(), r.right()) == (2, 3, 12, 23)


def test_border_size_sums():
    b = BorderSize(top=1, left=2, bottom=3, right=4)
    assert b.left_and_right() == 2 + 4
    assert b.top_and_bottom() == 1 + 3


def test_identity_transform():
    assert AffineTransform().apply(3.5, -2.0) == (3.5, -2.0)


def test_scale_then_translate_order():
    t = AffineTransform().scaled(2.0, -1.0).translated(5.0, 7.0)
    x, y = t.apply(1.0, 1.0)
    assert x == pytest.approx(1.0 * 2.0 + 5.0)
    assert y == pytest.approx(-1.0 + 7.0)


def test_translate_then_scale_order():
    t = AffineTransform().translated(1.0, 1.0).scaled(3.0, 3.0)
    assert t.apply(0.0, 0.0) == pytest.approx((3.0, 3.0))


def test_transform_is_immutable():
    base = AffineTransform()
    base.scaled(4.0, 4.0)
    assert base.apply(1.0, 1.0) == (1.0, 1.0)


def test_path_bounds():
    p = ChartPath()
    p.start_new_sub_path(0.0, -3.0)
    p.line_to(0.5, 2.0)
    p.line_to(1.0, 1.0)
    b = p.bounds()
    assert (b.x, b.y, b.right(), b.bottom()) == pytest.approx((0.0, -3.0, 1.0, 2.0))


def test_path_clear_and_empty_bounds():
    p = ChartPath()
    p.start_new_sub_path(1.0, 1.0)
    p.clear()
    assert p.points() == []
    assert p.bounds().is_empty()


def test_sub_paths_are_separate():
    p = ChartPath()
    p.start_new_sub_path(0.0, 0.0)
    p.line_to(1.0, 1.0)
    p.start_new_sub_path(2.0, 2.0)
    assert len(p.sub_paths) == 2
    assert p.sub_paths[1] == [(2.0, 2.0)]