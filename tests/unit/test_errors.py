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

"""Tests for the error types."""

from roster.core.errors import (
    CommandParseError,
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    RosterError,
    SelectorError,
    ValidationError,
)


class TestRosterError:
    """Tests for the base error."""

    def test_defaults(self):
        """Test default category and severity."""
        error = RosterError("boom")

        assert error.category == ErrorCategory.UNKNOWN
        assert error.severity == ErrorSeverity.ERROR
        assert str(error) == "boom"

    def test_str_includes_recovery_hint(self):
        """Test that the hint is appended to the message."""
        error = RosterError("boom", recovery_hint="try again")

        assert str(error) == "boom\nRecovery hint: try again"

    def test_to_dict(self):
        """Test serialization."""
        error = ValidationError("bad", field="width", value=-1)

        data = error.to_dict()

        assert data["error"] == "bad"
        assert data["category"] == "validation_error"
        assert data["details"] == {"field": "width", "value": "-1"}


class TestSubclasses:
    """Tests for the specialized errors."""

    def test_command_parse_error(self):
        """Test defaults for add-command parse errors."""
        error = CommandParseError("Missing name", text="Add")

        assert isinstance(error, ValidationError)
        assert error.category == ErrorCategory.INVALID_INPUT
        assert error.details["field"] == "add_command"
        assert error.recovery_hint == "Use the form: Add Sally to Engineering"

    def test_selector_error_is_a_warning(self):
        """Test that selector errors are recoverable warnings."""
        error = SelectorError("Wrong input. Please re-type.", selector="7")

        assert error.severity == ErrorSeverity.WARNING
        assert error.category == ErrorCategory.UNKNOWN_SELECTOR
        assert error.details["value"] == "7"

    def test_configuration_error(self):
        """Test the config key is recorded."""
        error = ConfigurationError("bad value", config_key="log_level")

        assert error.category == ErrorCategory.CONFIG_INVALID
        assert error.details["config_key"] == "log_level"
