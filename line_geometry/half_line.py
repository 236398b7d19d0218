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

"""HalfLine - ray starting at an end point."""

import math
from functools import cached_property

from .line import Line
from .line_base import LineBase, LineKind


class HalfLine(LineBase):
    """
    Half-line from an end point towards infinity.

    Boundaries are (0, +inf); the fixed point is the end.
    """

    kind = LineKind.HALF_LINE

    def __init__(self, end, direction):
        """
        Initialize half-line from its end and direction.

        Args:
            end : Point
                The end of the half-line
            direction : Vector
                Direction pointing from the end to infinity

        """
        super().__init__(end, direction, (0.0, math.inf))

    @property
    def end(self):
        return self._fixed_point

    @cached_property
    def corresponding_line(self):
        return Line(self._fixed_point, self._direction)

    def _equals(self, other):
        return self._direction == other.direction and self.end == other.end

    def _iter_axis_coordinates(self, precision):
        t = 0.0
        while True:
            yield t
            t += precision

    def __repr__(self):
        return f"HalfLine(end={self._fixed_point!r}, direction={self._direction!r})"
