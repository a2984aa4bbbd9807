# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
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

"""Rectangle area computed from plain numbers, a tuple, or a dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from roster.core.errors import ValidationError


def _check_dimension(name: str, value: int) -> None:
    if value < 0:
        raise ValidationError(f"{name} must not be negative", field=name, value=value)


def area(width: int, height: int) -> int:
    """Area from separate width and height."""
    _check_dimension("width", width)
    _check_dimension("height", height)
    return width * height


def tuple_area(dimensions: Tuple[int, int]) -> int:
    """Area from a ``(width, height)`` tuple."""
    return area(dimensions[0], dimensions[1])


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle measured in pixels.

    Attributes:
        width: Horizontal size
        height: Vertical size
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        _check_dimension("width", self.width)
        _check_dimension("height", self.height)

    def area(self) -> int:
        return self.width * self.height

    def scaled(self, factor: int) -> "Rectangle":
        """Rectangle with its width multiplied by ``factor``."""
        return Rectangle(width=self.width * factor, height=self.height)


def describe_area(value: int) -> str:
    return f"The area of the rectangle is {value} square pixels."
