from itertools import islice

import numpy.testing as npt
import pytest

from line_geometry import HalfLine, Line, Point2D, Point3D, Segment, Vector2D, Vector3D


def test_segment_sampling_includes_both_ends():
    segment = Segment(Point2D(0.0, 0.0), Point2D(10.0, 0.0))
    points = list(segment.sample(1.0))
    assert len(points) == 11
    npt.assert_allclose([p.x for p in points], range(11))
    assert points[0] == segment.start
    assert points[-1] == segment.end
    assert all(segment.contains(p) for p in points)


def test_segment_sampling_in_3d():
    a = Point3D(1.0, 2.0, 3.0)
    b = Point3D(4.0, 6.0, 3.0)
    segment = Segment(a, b)
    points = list(segment.sample(0.5))
    assert len(points) == 11
    assert points[2] == Point3D(1.6, 2.8, 3.0)
    assert all(segment.contains(p) for p in points)


def test_segment_sampling_does_not_force_end():
    segment = Segment(Point2D(0.0, 0.0), Point2D(1.0, 0.0))
    points = list(segment.sample(0.3))
    assert len(points) == 4
    assert points[-1] == Point2D(0.9, 0.0)
    assert points[-1] != segment.end


def test_segment_sampling_keeps_end_reached_within_tolerance():
    # 0.1 + 0.1 + 0.1 overshoots 0.3 by a rounding error
    segment = Segment(Point2D(0.0, 0.0), Point2D(0.3, 0.0))
    points = list(segment.sample(0.1))
    assert len(points) == 4
    assert points[-1] == segment.end
    assert segment.contains(points[-1])


def test_segment_sampling_with_precision_longer_than_segment():
    segment = Segment(Point2D(0.0, 0.0), Point2D(1.0, 0.0))
    assert list(segment.sample(5.0)) == [segment.start]


def test_line_sampling_alternates_around_fixed_point():
    line = Line(Point2D(1.0, 1.0), Vector2D(2.0, 0.0))
    points = list(islice(line.sample(1.0), 7))
    npt.assert_allclose([p.x for p in points], [1.0, 2.0, 0.0, 3.0, -1.0, 4.0, -2.0])
    assert all(p.y == pytest.approx(1.0) for p in points)


def test_line_sampling_magnitude_never_decreases():
    p = Point3D(1.0, 2.0, 3.0)
    line = Line(p, Vector3D(1.0, -1.0, 2.0))
    distances = [p.distance_to(q) for q in islice(line.sample(0.25), 200)]
    assert all(b >= a - 1e-9 for a, b in zip(distances, distances[1:]))
    assert distances[-1] > 20.0


def test_half_line_sampling_increases_monotonically():
    end = Point3D(0.0, 0.0, 1.0)
    ray = HalfLine(end, Vector3D(0.0, 3.0, 4.0))
    points = list(islice(ray.sample(0.5), 100))
    assert points[0] == end
    distances = [end.distance_to(q) for q in points]
    assert all(b > a for a, b in zip(distances, distances[1:]))
    assert points[2] == Point3D(0.0, 0.6, 1.8)
    assert all(ray.contains(q) for q in points)


def test_each_call_returns_independent_sequence():
    ray = HalfLine(Point2D.ORIGIN, Vector2D.I)
    first = ray.sample(1.0)
    next(first)
    next(first)
    second = ray.sample(1.0)
    assert next(second) == Point2D.ORIGIN
    assert next(first) == Point2D(2.0, 0.0)


@pytest.mark.parametrize("precision", [0.0, -1.0, float('nan')])
def test_non_positive_precision_rejected(precision):
    segment = Segment(Point2D.ORIGIN, Point2D(1.0, 0.0))
    with pytest.raises(ValueError):
        segment.sample(precision)
