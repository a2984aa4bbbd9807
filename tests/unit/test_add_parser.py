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

"""Tests for the add-command grammar."""

import pytest

from roster.core.errors import CommandParseError, ErrorCategory
from roster.directory import parse_add_command, scan_add_command


class TestParseAddCommand:
    """Tests for the strict grammar."""

    def test_valid_command(self):
        """Test the canonical form."""
        result = parse_add_command("Add Sally to Engineering")

        assert result.ok
        assert result.require() == ("Sally", "Engineering")

    @pytest.mark.parametrize(
        "text, fragment",
        [
            ("", "Empty"),
            ("foo bar baz", "Expected 'Add'"),
            ("add Sally to Engineering", "Expected 'Add'"),
            ("Add", "Missing name"),
            ("Add to Engineering", "Missing name"),
            ("Add Sally", "Missing 'to"),
            ("Add Sally in Engineering", "Expected 'to'"),
            ("Add Sally to", "Missing department"),
            ("Add Sally to Research and Development", "Unexpected text"),
        ],
    )
    def test_malformed_commands(self, text, fragment):
        """Test that each malformed shape is reported, not guessed."""
        result = parse_add_command(text)

        assert not result.ok
        assert fragment in result.error

    def test_require_raises_parse_error(self):
        """Test that require() turns a failed parse into CommandParseError."""
        result = parse_add_command("foo bar baz")

        with pytest.raises(CommandParseError) as exc_info:
            result.require()

        error = exc_info.value
        assert error.text == "foo bar baz"
        assert error.category == ErrorCategory.INVALID_INPUT
        assert "Add Sally to Engineering" in error.recovery_hint

    def test_partial_slots_are_kept(self):
        """Test that the name survives when only the department is missing."""
        result = parse_add_command("Add Sally to")

        assert result.name == "Sally"
        assert result.department == ""


class TestScanAddCommand:
    """Tests for the lenient token scan."""

    def test_malformed_text_reports_both_slots(self):
        """Test that nothing recognized leaves both slots empty."""
        result = scan_add_command("foo bar baz")

        assert result.as_pair() == ("", "")
        assert result.error == "Missing name and department"

    def test_complete_scan_has_no_error(self):
        """Test that a full line scans cleanly."""
        result = scan_add_command("Add Sally to Engineering")

        assert result.ok
        assert result.as_pair() == ("Sally", "Engineering")

    def test_missing_department(self):
        """Test that the scan stops on an unrecognized token."""
        result = scan_add_command("Add Sally from Engineering")

        assert result.as_pair() == ("Sally", "")
        assert result.error == "Missing department"
