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

"""Segment - geometry primitive for 2D and 3D line segments."""

from functools import cached_property

from .coordinates import Point
from .line import Line
from .line_base import LineBase, LineKind
from .tolerance import APPROXIMATE_EQUAL_ERROR


class Segment(LineBase):
    """
    Represent a line segment defined by start and end points.

    Boundaries are (0, length) on the axis starting at ``start``.
    """

    kind = LineKind.SEGMENT

    def __init__(self, start, end):
        """
        Initialize segment from start and end points.

        Args:
            start: Start point
            end: End point

        Raises
        ------
        TypeError
            If either end is not a Point
        ValueError
            If the points have different dimensions
        ZeroVectorError
            If segment is degenerate (zero length)

        """
        for point in (start, end):
            if not isinstance(point, Point):
                raise TypeError(f"Segment ends must be Points, got {type(point).__name__}")
        super().__init__(start, start.vector_to(end), (0.0, start.distance_to(end)))

    @property
    def start(self):
        return self._fixed_point

    @cached_property
    def end(self):
        return self.point_at(self._boundaries[1])

    @property
    def length(self):
        return self._boundaries[1]

    @cached_property
    def midpoint(self):
        return self.point_at(self.length / 2.0)

    @cached_property
    def corresponding_line(self):
        return Line(self._fixed_point, self._direction)

    def _equals(self, other):
        if self.start == other.start and self.end == other.end:
            return True
        return self.start == other.end and self.end == other.start

    def _iter_axis_coordinates(self, precision):
        # The step accumulates; the end is only emitted if a step lands on it.
        start, end = self._boundaries
        t = start
        while t <= end + APPROXIMATE_EQUAL_ERROR:
            yield min(t, end)
            t += precision

    def __repr__(self):
        return f"Segment(start={self.start!r}, end={self.end!r}, length={self.length:.3f})"
