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

"""SceneObject - named line-like object with its sampled points."""

import math
from itertools import islice

from .coordinates import Point2D, Point3D, Vector2D, Vector3D
from .half_line import HalfLine
from .line import Line
from .segment import Segment

SUPPORTED_TYPES = ['line', 'half_line', 'segment']

_POINT_TYPES = {2: Point2D, 3: Point3D}
_VECTOR_TYPES = {2: Vector2D, 3: Vector3D}


def _check_sequence(values, key):
    if not isinstance(values, (list, tuple)):
        raise ValueError(f"'{key}' must be a list of coordinates, got {values!r}")


def _point(values, key):
    _check_sequence(values, key)
    point_type = _POINT_TYPES.get(len(values))
    if point_type is None:
        raise ValueError(f"'{key}' must have 2 or 3 coordinates, got {len(values)}")
    return point_type.from_array(values)


def _vector(values, key):
    _check_sequence(values, key)
    vector_type = _VECTOR_TYPES.get(len(values))
    if vector_type is None:
        raise ValueError(f"'{key}' must have 2 or 3 coordinates, got {len(values)}")
    return vector_type.from_array(values)


def build_geometry(object_dict):
    """
    Build a line-like object from its scene description.

    Args:
        object_dict : dict
            Dictionary with a 'type' key and either 'start'/'end'
            (segment) or 'point'/'direction' (line, half_line)

    Returns
    -------
    LineBase
        The constructed object

    Raises
    ------
    ValueError
        If the type is unknown or keys are missing

    """
    kind = object_dict.get('type')
    if kind not in SUPPORTED_TYPES:
        raise ValueError(f"Unsupported object type: {kind}")

    required = ['start', 'end'] if kind == 'segment' else ['point', 'direction']
    for key in required:
        if key not in object_dict:
            raise ValueError(f"Object of type '{kind}' missing '{key}'")

    if kind == 'segment':
        return Segment(_point(object_dict['start'], 'start'), _point(object_dict['end'], 'end'))

    point = _point(object_dict['point'], 'point')
    direction = _vector(object_dict['direction'], 'direction')
    if kind == 'line':
        return Line(point, direction)
    return HalfLine(point, direction)


class SceneObject:
    """
    Represent a named object of a scene.

    Wraps a line-like object for geometry and holds the sampled points.
    """

    def __init__(self, name, object_dict):
        """
        Initialize scene object from its YAML dictionary.

        Args:
            name : str
                Unique name of the object
            object_dict : dict
                Dictionary accepted by ``build_geometry``

        """
        self.name = name
        self.geometry = build_geometry(object_dict)
        self.samples = None
        self.is_sampled = False

    @property
    def is_bounded(self):
        return isinstance(self.geometry, Segment)

    def generate_samples(self, precision, max_points):
        """
        Sample the geometry, keeping at most ``max_points`` points.

        Unbounded objects never stop on their own, so ``max_points`` is
        the only cutoff for lines and half-lines.
        """
        if max_points < 1:
            raise ValueError(f"max_points must be at least 1, got {max_points}")
        points = islice(self.geometry.sample(precision), max_points)
        self.samples = [point.tolist() for point in points]
        self.is_sampled = True

    def to_dict(self):
        """
        Convert scene object to dictionary for JSON export.

        Raises
        ------
        RuntimeError
            If samples not generated yet

        """
        if not self.is_sampled:
            raise RuntimeError(f"Cannot export '{self.name}' - samples not generated yet")

        geometry = self.geometry
        return {
            'type': geometry.kind.value,
            'fixed_point': geometry.fixed_point.tolist(),
            'direction': geometry.direction.tolist(),
            'boundaries': [None if math.isinf(b) else b for b in geometry.boundaries],
            'samples': self.samples,
            'num_samples': len(self.samples),
        }

    def __repr__(self):
        status = "sampled" if self.is_sampled else "not sampled"
        return f"SceneObject({self.name!r}, {self.geometry.kind.value}, {status})"
