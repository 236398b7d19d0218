# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Relations between points, vectors and line-like objects - all stateless."""

import logging
import math

import numpy as np
from scipy.linalg import LinAlgError, lstsq

from .coordinates import Point, Vector
from .exceptions import NonParallelLinesError
from .line import Line
from .line_base import LineBase
from .tolerance import APPROXIMATE_EQUAL_ERROR

logger = logging.getLogger(__name__)


def vector_between(start, end):
    """Vector from ``start`` to ``end``."""
    return start.vector_to(end)


def distance_between_points(p1, p2):
    return vector_between(p1, p2).length


def _direction_of(obj):
    if isinstance(obj, LineBase):
        return obj.direction
    if isinstance(obj, Vector):
        return obj
    raise TypeError(f"Expected a vector or a line-like object, got {type(obj).__name__}")


def are_parallel(a, b):
    """
    Determine whether two vectors or line-like objects are parallel.

    Args:
        a : Vector or LineBase
            First operand
        b : Vector or LineBase
            Second operand

    Returns
    -------
    bool
        True if the directions are parallel. A zero vector is parallel
        to every vector.

    """
    return _direction_of(a).is_parallel_to(_direction_of(b))


def are_perpendicular(a, b):
    """Determine whether two vectors or line-like objects are perpendicular."""
    return _direction_of(a).is_perpendicular_to(_direction_of(b))


def included_angle_of(a, b):
    """
    Included angle in radians.

    For two vectors the result lies in ``[0, pi]`` and is NaN if either
    vector is zero. For two line-like objects the sign of the directions
    is irrelevant, so the result lies in ``[0, pi / 2]``.

    Raises
    ------
    TypeError
        If a vector is mixed with a line-like object

    """
    if isinstance(a, LineBase) and isinstance(b, LineBase):
        cosine = abs(a.direction.dot(b.direction))
        return math.acos(float(np.clip(cosine, 0.0, 1.0)))
    if isinstance(a, Vector) and isinstance(b, Vector):
        return a.included_angle_with(b)
    raise TypeError(
        f"Cannot compute included angle of {type(a).__name__} and {type(b).__name__}"
    )


def included_angle_degrees_of(a, b):
    return math.degrees(included_angle_of(a, b))


def _require_line(obj):
    if not isinstance(obj, Line):
        raise TypeError(
            f"Distance is only defined for unbounded lines, got {type(obj).__name__}; "
            f"use its corresponding_line"
        )


def _distance_line_to_point(line, point):
    # Rejection of FP from the unit direction d: FP - (FP . d) d
    fp = line.fixed_point.vector_to(point)
    rejection = fp - line.direction * fp.dot(line.direction)
    return rejection.length


def distance_between(a, b):
    """
    Distance between two points, a line and a point, or two parallel lines.

    Args:
        a : Point or Line
            First operand
        b : Point or Line
            Second operand

    Returns
    -------
    float
        The distance

    Raises
    ------
    NonParallelLinesError
        If both operands are lines and they are not parallel
    TypeError
        If an operand is a half-line, a segment or another type

    """
    if isinstance(a, Point) and isinstance(b, Point):
        return distance_between_points(a, b)
    if isinstance(a, Point) and isinstance(b, LineBase):
        a, b = b, a
    if isinstance(a, LineBase) and isinstance(b, Point):
        _require_line(a)
        return _distance_line_to_point(a, b)
    if isinstance(a, LineBase) and isinstance(b, LineBase):
        _require_line(a)
        _require_line(b)
        if not are_parallel(a, b):
            raise NonParallelLinesError(
                "You cannot calculate the distance between 2 non-parallel lines."
            )
        return _distance_line_to_point(a, b.fixed_point)
    raise TypeError(
        f"Cannot compute distance between {type(a).__name__} and {type(b).__name__}"
    )


def intersection_point_of(l1, l2):
    """
    Solve the intersection point of two line-like objects.

    With l1 = {P, d1} and l2 = {Q, d2}, an intersection R satisfies
    ``PR = x * d1`` and ``QR = y * d2``, hence ``x * d1 - y * d2 = PQ``.
    The two-column system is solved by least squares; R is accepted only
    if both objects contain it, which rejects intersections outside a
    half-line or segment and skew lines in 3D.

    Returns
    -------
    Point or None
        The intersection point, or None if the objects are parallel,
        coincide, miss each other, or the system cannot be solved

    """
    if l1.dimension != l2.dimension:
        raise ValueError(f"Dimensions differ ({l1.dimension} vs {l2.dimension})")

    matrix = np.column_stack([l1.direction.to_array(), -l2.direction.to_array()])
    rhs = l1.fixed_point.vector_to(l2.fixed_point).to_array()

    try:
        solution, _, rank, _ = lstsq(matrix, rhs, cond=APPROXIMATE_EQUAL_ERROR)
    except (LinAlgError, ValueError) as e:
        logger.debug("Intersection solve failed: %s", e)
        return None

    if rank < 2:
        logger.debug("No unique intersection for %r and %r (rank %d)", l1, l2, rank)
        return None
    if not np.all(np.isfinite(solution)):
        logger.debug("Non-finite intersection solution %s", solution)
        return None

    r = l1.point_at(float(solution[0]))
    if l1.contains(r) and l2.contains(r):
        return r
    return None
