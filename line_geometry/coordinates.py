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

"""Points and vectors in 2D and 3D space, backed by read-only numpy arrays."""

import math
import numbers
from abc import ABC, abstractmethod

import numpy as np

from .exceptions import ZeroVectorError
from .tolerance import is_approximately_equal, is_near_zero, APPROXIMATE_EQUAL_ERROR


class Coordinate:
    """
    Immutable tuple of 2 or 3 real coordinates.

    Equality is approximate: two coordinates of the same class are equal
    when every component differs by less than ``APPROXIMATE_EQUAL_ERROR``.
    Hashing only uses the class, so approximately-equal objects always
    share a hash.
    """

    DIMENSION = None
    # Keep numpy scalars from treating coordinates as sequences
    __array_ufunc__ = None

    def __init__(self, *components):
        """
        Initialize from individual components.

        Raises
        ------
        ValueError
            If the number of components does not match ``DIMENSION``

        """
        if len(components) != self.DIMENSION:
            raise ValueError(
                f"{type(self).__name__} needs {self.DIMENSION} coordinates, "
                f"got {len(components)}"
            )
        coords = np.array(components, dtype=float)
        coords.flags.writeable = False
        self._coords = coords

    @classmethod
    def from_array(cls, array):
        """
        Build from a sequence or array of coordinates.

        Args:
            array: Sequence with exactly ``DIMENSION`` numbers

        Raises
        ------
        ValueError
            If the sequence has the wrong length

        """
        values = np.asarray(array, dtype=float)
        if values.shape != (cls.DIMENSION,):
            raise ValueError(
                f"{cls.__name__} must be built from {cls.DIMENSION} coordinates, "
                f"got shape {values.shape}"
            )
        return cls(*values)

    @property
    def x(self):
        return float(self._coords[0])

    @property
    def y(self):
        return float(self._coords[1])

    @property
    def dimension(self):
        return self.DIMENSION

    def to_array(self):
        """Return a writable copy of the coordinates."""
        return self._coords.copy()

    def tolist(self):
        return self._coords.tolist()

    def _check_dimension(self, other):
        if other.DIMENSION != self.DIMENSION:
            raise ValueError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def __iter__(self):
        return iter(self.tolist())

    def __len__(self):
        return self.DIMENSION

    def __getitem__(self, index):
        return float(self._coords[index])

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.all(np.abs(self._coords - other._coords) < APPROXIMATE_EQUAL_ERROR))

    def __hash__(self):
        return hash(type(self).__name__)

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(c) for c in self.tolist())})"


class Vector(Coordinate, ABC):
    """Displacement in space."""

    @property
    def length(self):
        """Euclidean norm of the vector."""
        return float(np.linalg.norm(self._coords))

    @property
    def normalized(self):
        """
        Unit vector with the same direction.

        Raises
        ------
        ZeroVectorError
            If the vector has near-zero length

        """
        length = self.length
        if is_near_zero(length):
            raise ZeroVectorError("You cannot normalize a zero vector.")
        return self / length

    def dot(self, other):
        """Scalar product with another vector of the same dimension."""
        self._check_dimension(other)
        return float(np.dot(self._coords, other._coords))

    def is_zero(self):
        return self == type(self).ZERO

    @abstractmethod
    def is_parallel_to(self, other):
        """Return True if the vectors are parallel."""

    def is_perpendicular_to(self, other):
        """Return True if the dot product is near zero (zero vectors included)."""
        return is_near_zero(self.dot(other))

    def included_angle_with(self, other):
        """
        Included angle in radians, in ``[0, pi]``.

        Returns NaN when either vector is zero, since the angle is undefined.
        """
        self._check_dimension(other)
        if self.is_zero() or other.is_zero():
            return math.nan
        cosine = self.dot(other) / self.length / other.length
        return math.acos(float(np.clip(cosine, -1.0, 1.0)))

    def included_angle_degrees_with(self, other):
        return math.degrees(self.included_angle_with(other))

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_dimension(other)
        return type(self)(*(self._coords + other._coords))

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_dimension(other)
        return type(self)(*(self._coords - other._coords))

    def __neg__(self):
        return type(self)(*(-self._coords))

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return type(self)(*(self._coords * float(scalar)))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return type(self)(*(self._coords / float(scalar)))


class Vector2D(Vector):
    """Vector in 2-dimensional space."""

    DIMENSION = 2

    def is_parallel_to(self, other):
        """
        Return True if the vectors are parallel.

        ``v1 = k * v2`` or ``v2 = 0`` both reduce to ``x1 * y2 == y1 * x2``,
        so a zero vector is parallel to everything.
        """
        self._check_dimension(other)
        return is_approximately_equal(self.x * other.y, self.y * other.x)

    def sample_perpendicular_vector(self):
        """Return the vector rotated a quarter turn clockwise."""
        return Vector2D(self.y, -self.x)


class Vector3D(Vector):
    """Vector in 3-dimensional space."""

    DIMENSION = 3

    @property
    def z(self):
        return float(self._coords[2])

    def cross(self, other):
        """Cross product ``self x other``."""
        self._check_dimension(other)
        return Vector3D(*np.cross(self._coords, other._coords))

    def is_parallel_to(self, other):
        """Return True if the cross product is the zero vector."""
        return self.cross(other) == Vector3D.ZERO

    def sample_perpendicular_vector(self):
        """Return some vector perpendicular to this one (not normalized)."""
        if is_near_zero(self.z):
            return Vector3D(0.0, 0.0, 1.0)
        return Vector3D(self.z, self.z, -self.x - self.y)


class Point(Coordinate):
    """Position in space."""

    VECTOR_TYPE = None

    def move_by(self, vector):
        """Translate the point by a vector."""
        self._check_dimension(vector)
        return type(self)(*(self._coords + vector._coords))

    def vector_to(self, end):
        """Vector from this point to ``end``."""
        self._check_dimension(end)
        return self.VECTOR_TYPE(*(end._coords - self._coords))

    def vector_from(self, start):
        """Vector from ``start`` to this point."""
        return start.vector_to(self)

    def distance_to(self, other):
        """
        Distance to another point, or to a line.

        Args:
            other : Point or Line
                Target of the distance

        Returns
        -------
        float
            Euclidean distance

        """
        if isinstance(other, Point):
            return self.vector_to(other).length
        from .relations import distance_between
        return distance_between(other, self)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.move_by(other)

    def __sub__(self, other):
        if isinstance(other, Point):
            return other.vector_to(self)
        if isinstance(other, Vector):
            return self.move_by(-other)
        return NotImplemented


class Point2D(Point):
    """Point in 2-dimensional space."""

    DIMENSION = 2
    VECTOR_TYPE = Vector2D


class Point3D(Point):
    """Point in 3-dimensional space."""

    DIMENSION = 3
    VECTOR_TYPE = Vector3D

    @property
    def z(self):
        return float(self._coords[2])


Vector2D.ZERO = Vector2D(0.0, 0.0)
Vector2D.I = Vector2D(1.0, 0.0)
Vector2D.J = Vector2D(0.0, 1.0)

Vector3D.ZERO = Vector3D(0.0, 0.0, 0.0)
Vector3D.I = Vector3D(1.0, 0.0, 0.0)
Vector3D.J = Vector3D(0.0, 1.0, 0.0)
Vector3D.K = Vector3D(0.0, 0.0, 1.0)

Point2D.ORIGIN = Point2D(0.0, 0.0)
Point3D.ORIGIN = Point3D(0.0, 0.0, 0.0)
