import cmath
import math

import pytest

from filterdemo.gainchart import LineStyle
from filterdemo.geometry import Rectangle
from filterdemo.phasechart import PhaseChart


class _Response:
    def __init__(self, func):
        self.func = func

    def response(self, f):
        return self.func(f)


def test_unity_filter_has_zero_phase():
    chart = PhaseChart(100, 100)
    chart.update(_Response(lambda f: 1 + 0j))
    assert chart.is_defined
    assert all(y == pytest.approx(0.0) for _, y in chart.path.sub_paths[0])
    assert chart.path.sub_paths[-1] == [(0.0, 0.0)]


def test_one_point_per_column():
    chart = PhaseChart(80, 60)
    chart.update(_Response(lambda f: 1))
    assert len(chart.path.sub_paths[0]) == Rectangle(0, 0, 80, 60).reduced(4, 4).width


def test_linear_phase_delay():
    chart = PhaseChart(100, 100)
    chart.update(_Response(lambda f: cmath.exp(-2j * math.pi * f)))
    for x, y in chart.path.sub_paths[0]:
        assert y == pytest.approx(-90 * x)


def test_no_filter_gives_empty_path():
    chart = PhaseChart(100, 100)
    chart.update(None)
    assert not chart.is_defined
    assert chart.path.points() == []


def test_nan_response_clears_path():
    chart = PhaseChart(100, 100)
    chart.update(_Response(lambda f: complex(math.nan, math.nan)))
    assert not chart.is_defined
    assert chart.path.points() == []


def test_transform_maps_range_to_area():
    chart = PhaseChart(200, 240)
    r = Rectangle(0, 0, 200, 240).reduced(4, 4)
    t = chart.transform()
    assert t.apply(0.0, PhaseChart.MAX_PHASE)[1] == pytest.approx(r.y)
    assert t.apply(0.0, -PhaseChart.MAX_PHASE)[1] == pytest.approx(r.bottom())
    assert t.apply(0.0, 0.0)[1] == pytest.approx(r.y + r.height / 2)
    assert t.apply(1.0, 0.0)[0] == pytest.approx(r.right())


def test_y_to_screen_order():
    chart = PhaseChart(200, 240)
    assert chart.y_to_screen(90) < chart.y_to_screen(0) < chart.y_to_screen(-90)


def test_phase_lines():
    chart = PhaseChart(200, 200)
    lines = chart.phase_lines()
    assert [line.value for line in lines] == [0, 90, -90]
    assert lines[0].style is LineStyle.ZERO and lines[0].label is None
    assert [line.label for line in lines[1:]] == ["90", "-90"]
    assert lines[2].label_below and not lines[1].label_below
    assert all(0 <= line.y < 200 for line in lines)