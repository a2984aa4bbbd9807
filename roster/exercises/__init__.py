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

"""Small stand-alone console exercises."""

from roster.exercises.integer_stats import frequencies, median, mode, parse_integers
from roster.exercises.pig_latin import convert_text, to_pig_latin
from roster.exercises.rectangle import Rectangle, area, describe_area, tuple_area

__all__ = [
    "Rectangle",
    "area",
    "convert_text",
    "describe_area",
    "frequencies",
    "median",
    "mode",
    "parse_integers",
    "to_pig_latin",
    "tuple_area",
]
