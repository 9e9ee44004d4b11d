import logging
import math

import numpy as np
import pytest

from splinekit import BSpline, LoopingBSpline

LINE = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0), (4.0, 0.0)]
SQUARE = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]


def test_polyline_length():
    spline = BSpline([(0.0, 0.0), (3.0, 4.0), (3.0, 10.0)], degree=1)

    assert math.isclose(spline.total_length(), 11.0)
    assert math.isclose(spline.segment_length(0, 0.0, 1.0), 5.0)
    assert math.isclose(spline.arc_length(0.5, 1.5), 5.5)


def test_arc_length_is_symmetric_and_clamped():
    spline = BSpline([(0.0, 0.0), (1.0, 2.0), (3.0, 3.0), (4.0, 1.0), (6.0, 0.0)], degree=3)

    assert math.isclose(spline.arc_length(1.7, 0.2), spline.arc_length(0.2, 1.7))
    assert math.isclose(spline.arc_length(-3.0, 10.0), spline.total_length())
    assert spline.arc_length(0.4, 0.4) == 0.0


def test_total_length_is_deterministic():
    spline = BSpline([(0.0, 0.0), (1.0, 2.0), (3.0, 3.0), (4.0, 1.0), (6.0, 0.0)], degree=3)

    first = spline.total_length()
    assert first == spline.total_length()
    chord = np.linalg.norm(spline.position(spline.max_t()) - spline.position(0.0))
    assert first > chord


def test_arc_length_across_segments_adds_up():
    rng = np.random.default_rng(3)
    spline = BSpline(rng.uniform(-2.0, 2.0, (7, 2)), degree=3, alpha=0.5)
    a = 0.3 * spline.max_t()
    b = 0.8 * spline.max_t()
    middle = 0.5 * (a + b)

    assert math.isclose(spline.arc_length(a, b), spline.arc_length(a, middle) + spline.arc_length(middle, b),
                        rel_tol=1e-4)


def test_degenerate_segment_has_zero_length():
    spline = BSpline([(0.0, 0.0), (1.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0)], degree=1, alpha=1.0)

    assert spline.segment_t(1) == spline.segment_t(2)
    assert spline.segment_length(1, 1.0, 1.0) == 0.0
    assert math.isclose(spline.total_length(), 3.0)


def test_degenerate_cubic_segment_is_skipped(caplog):
    points = [(0.0, 0.0), (1.0, 2.0), (1.0, 2.0), (4.0, 1.0), (6.0, 0.0), (7.0, 3.0)]
    spline = BSpline(points, degree=3, alpha=0.5)
    t = spline.segment_t(1)

    with caplog.at_level(logging.DEBUG):
        assert spline.segment_length(1, t, t) == 0.0
    assert "zero-length segment 1" in caplog.text
    total = spline.total_length()
    assert math.isfinite(total)
    assert total > 0.0


def test_invalid_segment_raises():
    spline = BSpline(LINE, degree=3)
    with pytest.raises(ValueError):
        spline.segment_length(2, 0.0, 1.0)


def test_straight_line_has_unit_speed():
    spline = BSpline(LINE, degree=3)

    # uniform cubic B-splines reproduce straight lines, here x = 1 + t
    np.testing.assert_allclose(spline.position(0.6), [1.6, 0.0])
    assert math.isclose(spline.total_length(), 2.0)
    assert math.isclose(spline.solve_length(0.0, 0.75), 0.75, abs_tol=1e-8)
    assert math.isclose(spline.solve_length(0.5, 1.0), 1.5, abs_tol=1e-8)


def test_solve_length_inverts_arc_length():
    spline = BSpline([(0.0, 0.0), (1.0, 2.0), (3.0, 3.0), (4.0, 1.0), (6.0, 0.0)], degree=3)
    length = spline.arc_length(0.25, 1.6)

    assert math.isclose(spline.solve_length(0.25, length), 1.6, abs_tol=1e-7)


def test_solve_length_stops_at_end_of_open_curve():
    spline = BSpline(LINE, degree=3)

    assert spline.solve_length(1.5, 10.0) == spline.max_t()
    assert spline.solve_length(1.5, 0.0) == 1.5


def test_partition():
    spline = BSpline(LINE, degree=3)

    np.testing.assert_allclose(spline.partition(0.6), [0.0, 0.6, 1.2, 1.8], atol=1e-8)
    with pytest.raises(ValueError):
        spline.partition(0.0)


def test_looping_partition_leaves_out_max_t():
    spline = LoopingBSpline(SQUARE, degree=1)

    np.testing.assert_allclose(spline.partition(2.0), [0.0, 1.0, 2.0, 3.0], atol=1e-8)
    np.testing.assert_allclose(spline.partition(3.0), [0.0, 1.5, 3.0], atol=1e-8)



def test_looping_lengths():
    spline = LoopingBSpline(SQUARE, degree=1)

    assert math.isclose(spline.total_length(), 8.0)
    assert math.isclose(spline.cyclic_arc_length(3.5, 0.5), 2.0)
    assert math.isclose(spline.cyclic_arc_length(0.5, 3.5), 6.0)
    assert math.isclose(spline.cyclic_arc_length(4.5, 7.5), 6.0)


def test_looping_solve_length_wraps():
    spline = LoopingBSpline(SQUARE, degree=1)

    assert math.isclose(spline.solve_length(3.5, 2.0), 0.5, abs_tol=1e-8)
    assert math.isclose(spline.solve_length(0.0, 17.0), 0.5, abs_tol=1e-8)
    assert math.isclose(spline.solve_length(1.0, 8.0), 1.0, abs_tol=1e-8)


def test_smooth_loop_length_is_below_polygon():
    spline = LoopingBSpline(SQUARE, degree=3, alpha=0.5)

    total = spline.total_length()
    assert 0.0 < total < 8.0
    assert math.isclose(spline.cyclic_arc_length(1.0, 1.0), 0.0, abs_tol=1e-12)
    assert math.isclose(spline.cyclic_arc_length(3.0, 1.0) + spline.cyclic_arc_length(1.0, 3.0), total)
