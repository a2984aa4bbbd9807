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

"""Error types for Roster.

This module provides:
- Exception types for each error category the console exercises can hit
- User-facing messages with recovery hints
- A ``to_dict`` form for logging and structured reporting
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


# =============================================================================
# Error Categories
# =============================================================================


class ErrorCategory(Enum):
    """Categories of errors for classification and handling."""

    # Configuration errors
    CONFIG_INVALID = "config_invalid"
    CONFIG_MISSING = "config_missing"

    # User errors
    VALIDATION_ERROR = "validation_error"
    INVALID_INPUT = "invalid_input"
    UNKNOWN_SELECTOR = "unknown_selector"

    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


# =============================================================================
# Custom Exception Types
# =============================================================================


class RosterError(Exception):
    """Base exception for all Roster errors.

    Carries a category, a severity, free-form details and an optional hint
    telling the user how to recover.
    """

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        details: Optional[Dict[str, Any]] = None,
        recovery_hint: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.details = details or {}
        self.recovery_hint = recovery_hint
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
        }

    def __str__(self) -> str:
        result = self.message
        if self.recovery_hint:
            result += f"\nRecovery hint: {self.recovery_hint}"
        return result


class ConfigurationError(RosterError):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs: Any,
    ):
        kwargs.setdefault("category", ErrorCategory.CONFIG_INVALID)
        super().__init__(message, **kwargs)
        self.config_key = config_key
        self.details["config_key"] = config_key


class ValidationError(RosterError):
    """Input validation errors."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs: Any,
    ):
        kwargs.setdefault("category", ErrorCategory.VALIDATION_ERROR)
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
        self.details["field"] = field
        self.details["value"] = str(value) if value is not None else None


class CommandParseError(ValidationError):
    """Add-command text that does not follow ``Add <name> to <department>``."""

    def __init__(self, message: str, text: Optional[str] = None, **kwargs: Any):
        kwargs.setdefault("category", ErrorCategory.INVALID_INPUT)
        kwargs.setdefault("recovery_hint", "Use the form: Add Sally to Engineering")
        super().__init__(message, field="add_command", value=text, **kwargs)
        self.text = text


class SelectorError(ValidationError):
    """Menu selector that does not name a known command."""

    def __init__(self, message: str, selector: Optional[str] = None, **kwargs: Any):
        kwargs.setdefault("category", ErrorCategory.UNKNOWN_SELECTOR)
        kwargs.setdefault("severity", ErrorSeverity.WARNING)
        super().__init__(message, field="selector", value=selector, **kwargs)
        self.selector = selector


__all__ = [
    "ErrorCategory",
    "ErrorSeverity",
    "RosterError",
    "ConfigurationError",
    "ValidationError",
    "CommandParseError",
    "SelectorError",
]
