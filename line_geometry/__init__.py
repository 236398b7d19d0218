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

"""Points, vectors and line-like objects in 2D and 3D space."""

from .coordinates import Point, Point2D, Point3D, Vector, Vector2D, Vector3D
from .exceptions import GeometryError, NonParallelLinesError, ZeroVectorError
from .half_line import HalfLine
from .line import Line, X_AXIS_2D, Y_AXIS_2D, X_AXIS_3D, Y_AXIS_3D, Z_AXIS_3D
from .line_base import LineBase, LineKind
from .relations import (
    are_parallel,
    are_perpendicular,
    distance_between,
    distance_between_points,
    included_angle_degrees_of,
    included_angle_of,
    intersection_point_of,
    vector_between,
)
from .segment import Segment
from .tolerance import APPROXIMATE_EQUAL_ERROR

__version__ = '0.1.0'

__all__ = [
    'APPROXIMATE_EQUAL_ERROR',
    'GeometryError',
    'HalfLine',
    'Line',
    'LineBase',
    'LineKind',
    'NonParallelLinesError',
    'Point',
    'Point2D',
    'Point3D',
    'Segment',
    'Vector',
    'Vector2D',
    'Vector3D',
    'X_AXIS_2D',
    'X_AXIS_3D',
    'Y_AXIS_2D',
    'Y_AXIS_3D',
    'Z_AXIS_3D',
    'ZeroVectorError',
    'are_parallel',
    'are_perpendicular',
    'distance_between',
    'distance_between_points',
    'included_angle_degrees_of',
    'included_angle_of',
    'intersection_point_of',
    'vector_between',
]
