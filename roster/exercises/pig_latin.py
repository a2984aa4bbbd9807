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

"""Pig Latin conversion.

A word starting with a consonant moves that letter to a dashed suffix
followed by "ay" ("first" becomes "irst-fay"). A word starting with a
vowel keeps its letters and gains "-hay" ("apple" becomes "apple-hay").
"""

from __future__ import annotations

from roster.core.errors import ValidationError

VOWELS = frozenset("aeiou")
SUFFIX = "ay"


def starts_with_vowel(word: str) -> bool:
    return bool(word) and word[0].lower() in VOWELS


def to_pig_latin(word: str) -> str:
    """Convert a single word."""
    if not word:
        raise ValidationError("Cannot convert an empty word", field="word", value=word)

    if starts_with_vowel(word):
        return f"{word}-h{SUFFIX}"
    return f"{word[1:]}-{word[0]}{SUFFIX}"


def convert_text(text: str) -> str:
    """Convert every whitespace-separated word in ``text``."""
    words = text.split()
    if not words:
        raise ValidationError(
            "No text to convert",
            field="text",
            value=text,
            recovery_hint="Type at least one word.",
        )
    return " ".join(to_pig_latin(word) for word in words)
