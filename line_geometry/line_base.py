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

"""LineBase - shared model for lines, half-lines and segments."""

import enum
import logging
from abc import ABC, abstractmethod

from .coordinates import Point, Vector
from .exceptions import ZeroVectorError
from .tolerance import APPROXIMATE_EQUAL_ERROR, is_near_zero

logger = logging.getLogger(__name__)


class LineKind(enum.Enum):
    """Boundary shape of a line-like object."""

    LINE = 'line'
    HALF_LINE = 'half_line'
    SEGMENT = 'segment'


class LineBase(ABC):
    """
    A line, or part of a line, in 2D or 3D space.

    The object is described by a number axis: ``fixed_point`` is its origin
    and the unit ``direction`` its positive direction. ``boundaries`` holds
    the axis coordinates of both ends; an infinite value means the object
    has no end on that side. Every point P of the object satisfies
    ``P = fixed_point + t * direction`` with ``start <= t <= end``.

    Instances are immutable. Equality and sampling depend on ``kind``.
    """

    kind = None

    def __init__(self, fixed_point, direction, boundaries):
        """
        Initialize from fixed point, direction and axis boundaries.

        Args:
            fixed_point : Point
                A point on the object
            direction : Vector
                Direction of the axis, normalized on storage
            boundaries : tuple
                (start, end) coordinates on the axis

        Raises
        ------
        TypeError
            If the operands are not a Point and a Vector
        ValueError
            If point and direction have different dimensions
        ZeroVectorError
            If the direction vector is near zero

        """
        if not isinstance(fixed_point, Point):
            raise TypeError(f"fixed_point must be a Point, got {type(fixed_point).__name__}")
        if not isinstance(direction, Vector):
            raise TypeError(f"direction must be a Vector, got {type(direction).__name__}")
        if fixed_point.DIMENSION != direction.DIMENSION:
            raise ValueError(
                f"Point and direction dimensions differ "
                f"({fixed_point.DIMENSION} vs {direction.DIMENSION})"
            )
        if is_near_zero(direction.length):
            raise ZeroVectorError("Lines must be constructed with a non-zero direction vector.")

        start, end = boundaries
        self._fixed_point = fixed_point
        self._direction = direction.normalized
        self._boundaries = (float(start), float(end))

    @property
    def fixed_point(self):
        return self._fixed_point

    @property
    def direction(self):
        """Unit direction vector."""
        return self._direction

    @property
    def boundaries(self):
        return self._boundaries

    @property
    def dimension(self):
        return self._fixed_point.DIMENSION

    @property
    @abstractmethod
    def corresponding_line(self):
        """The unbounded line sharing fixed point and direction."""

    def point_at(self, t):
        """Point at axis coordinate ``t``, boundaries not checked."""
        return self._fixed_point.move_by(self._direction * t)

    def contains(self, point):
        """
        Check whether the point belongs to the object.

        The point must first lie on the corresponding line; its axis
        coordinate then has to fall within the boundaries, both inclusive
        up to ``APPROXIMATE_EQUAL_ERROR``.
        """
        relative = self._fixed_point.vector_to(point)
        if not self._direction.is_parallel_to(relative):
            return False
        t = relative.dot(self._direction)
        start, end = self._boundaries
        return start - APPROXIMATE_EQUAL_ERROR < t < end + APPROXIMATE_EQUAL_ERROR

    def is_parallel_to(self, other):
        from .relations import are_parallel
        return are_parallel(self, other)

    def is_perpendicular_to(self, other):
        from .relations import are_perpendicular
        return are_perpendicular(self, other)

    def included_angle_with(self, other):
        from .relations import included_angle_of
        return included_angle_of(self, other)

    def intersection_point_with(self, other):
        """Intersection point with another line-like object, or None."""
        from .relations import intersection_point_of
        return intersection_point_of(self, other)

    @abstractmethod
    def _equals(self, other):
        """Variant equality, called only when ``other`` has the same kind."""

    @abstractmethod
    def _iter_axis_coordinates(self, precision):
        """Yield axis coordinates of the samples in emission order."""

    def sample(self, precision):
        """
        Lazily sample points about ``precision`` apart.

        Each call returns a new, independent generator. Unbounded objects
        produce infinite sequences; bound them with ``itertools.islice``.

        Raises
        ------
        ValueError
            If precision is not positive

        """
        if not precision > 0:
            raise ValueError(f"precision must be positive, got {precision}")
        logger.debug("Sampling %r with precision %s", self, precision)
        return (self.point_at(t) for t in self._iter_axis_coordinates(float(precision)))

    def __eq__(self, other):
        if not isinstance(other, LineBase):
            return NotImplemented
        if self is other:
            return True
        if self.kind is not other.kind or self.dimension != other.dimension:
            return False
        return self._equals(other)

    def __hash__(self):
        return hash((self.kind, self.dimension))
