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

"""Median and mode of a list of non-negative integers."""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence, Tuple

from roster.core.errors import ValidationError


def parse_integers(text: str) -> List[int]:
    """Parse whitespace-separated non-negative integers.

    Raises:
        ValidationError: If any token is not a non-negative integer or the
            text holds no numbers at all
    """
    values: List[int] = []
    for token in text.split():
        if not (token.isascii() and token.isdigit()):
            raise ValidationError(
                f"'{token}' is not a non-negative integer",
                field="integers",
                value=token,
                recovery_hint="Enter numbers separated by spaces, e.g. 3 1 4 1 5",
            )
        values.append(int(token))

    if not values:
        raise ValidationError("No integers given", field="integers", value=text)
    return values


def _require_values(values: Sequence[int]) -> None:
    if not values:
        raise ValidationError("Cannot compute statistics of an empty list", field="integers")


def median(values: Sequence[int]) -> int:
    """Middle value of the sorted list; the upper middle for even lengths."""
    _require_values(values)
    ordered = sorted(values)
    return ordered[len(ordered) // 2]


def frequencies(values: Sequence[int]) -> Dict[int, int]:
    """Occurrence count of each value, ordered by value."""
    counts = Counter(values)
    return {value: counts[value] for value in sorted(counts)}


def mode(values: Sequence[int]) -> Tuple[int, int]:
    """Most frequent value and its count; ties go to the smallest value."""
    _require_values(values)
    counts = frequencies(values)
    best = max(counts, key=lambda v: (counts[v], -v))
    return best, counts[best]
