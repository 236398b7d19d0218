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

"""Floating-point tolerance shared by every comparison in the package."""

# Two reals closer than this are considered equal.
APPROXIMATE_EQUAL_ERROR = 1e-5


def is_approximately_equal(a, b):
    """Return True if ``|a - b|`` is below ``APPROXIMATE_EQUAL_ERROR``."""
    return abs(a - b) < APPROXIMATE_EQUAL_ERROR


def is_near_zero(value):
    """Return True if ``value`` can be considered as 0."""
    return is_approximately_equal(value, 0.0)
