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

"""Exceptions raised by geometry operations that have no valid answer."""


class GeometryError(Exception):
    """Base class for geometry domain errors."""


class ZeroVectorError(GeometryError, ArithmeticError):
    """A zero vector was normalized or used as a direction."""


class NonParallelLinesError(GeometryError, ArithmeticError):
    """Distance was requested between two lines that are not parallel."""
