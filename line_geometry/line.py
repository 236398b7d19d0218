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

"""Line - infinite line in 2D or 3D space."""

import math

from .coordinates import Point2D, Point3D, Vector2D, Vector3D
from .line_base import LineBase, LineKind


class Line(LineBase):
    """
    Infinite line through a point along a direction.

    Boundaries are (-inf, +inf).
    """

    kind = LineKind.LINE

    def __init__(self, point, direction):
        """
        Initialize line from a point on it and its direction.

        Args:
            point : Point
                Any point on the line
            direction : Vector
                Direction of the line, any non-zero length

        """
        super().__init__(point, direction, (-math.inf, math.inf))

    @classmethod
    def through(cls, p1, p2):
        """Build the line passing through two distinct points."""
        return cls(p1, p1.vector_to(p2))

    @property
    def corresponding_line(self):
        return self

    def distance_to(self, other):
        """
        Distance to a point, or to a parallel line.

        Raises
        ------
        NonParallelLinesError
            If ``other`` is a line that is not parallel to this one

        """
        from .relations import distance_between
        return distance_between(self, other)

    def _equals(self, other):
        return self._direction.is_parallel_to(other.direction) and self.contains(other.fixed_point)

    def _iter_axis_coordinates(self, precision):
        # 0, +p, -p, +2p, -2p, ...
        yield 0.0
        t = 0.0
        while True:
            t += precision
            yield t
            yield -t

    def __repr__(self):
        return f"Line(point={self._fixed_point!r}, direction={self._direction!r})"


X_AXIS_2D = Line(Point2D.ORIGIN, Vector2D.I)
Y_AXIS_2D = Line(Point2D.ORIGIN, Vector2D.J)

X_AXIS_3D = Line(Point3D.ORIGIN, Vector3D.I)
Y_AXIS_3D = Line(Point3D.ORIGIN, Vector3D.J)
Z_AXIS_3D = Line(Point3D.ORIGIN, Vector3D.K)
