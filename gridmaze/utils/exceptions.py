"""
Exception classes for gridmaze with helpful error messages and user guidance.

Each exception carries the component that raised it, an optional suggested
action, an error code and diagnostic data, all folded into the message so
that a plain ``str(error)`` is enough to understand what went wrong.
"""

from __future__ import annotations

from typing import Any


class MazeError(Exception):
    """
    Base exception for gridmaze errors with context and suggestions.

    The formatted message contains:
    - The component name and the error description
    - A suggested action, if one is known
    - An error code for programmatic handling
    - Diagnostic key/value pairs
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "gridmaze"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class MazeConfigurationError(MazeError, ValueError):
    """Exception raised when a maze parameter is invalid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        expected_type: type | None = None,
        valid_range: tuple | None = None,
        valid_choices: list[str] | None = None,
        component: str | None = None,
    ):
        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if expected_type:
            diagnostic_data["expected_type"] = expected_type.__name__

        if valid_range:
            upper = "inf" if valid_range[1] is None else valid_range[1]
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {upper}]"

        if valid_choices:
            diagnostic_data["valid_choices"] = ", ".join(valid_choices)

        self.parameter_name = parameter_name
        self.provided_value = provided_value

        suggested_action = _generate_configuration_suggestions(
            parameter_name, provided_value, expected_type, valid_range, valid_choices
        )

        message = f"Invalid configuration for parameter '{parameter_name}'"

        super().__init__(
            message=message,
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )


class FrozenGridError(MazeError):
    """Exception raised when a finished maze grid is mutated."""

    def __init__(self, operation_attempted: str, width: int, height: int):
        diagnostic_data = {
            "attempted_operation": operation_attempted,
            "grid_size": f"{width}x{height}",
        }

        super().__init__(
            message=f"Cannot perform '{operation_attempted}' - grid is frozen",
            component="Grid",
            suggested_action="Generate a new maze instead of modifying a finished one",
            error_code="GRID_FROZEN",
            diagnostic_data=diagnostic_data,
        )


def _generate_configuration_suggestions(
    parameter_name: str,
    provided_value: Any,
    expected_type: type | None,
    valid_range: tuple | None,
    valid_choices: list[str] | None,
) -> str:
    """Generate specific suggestions for configuration errors."""

    suggestions = []

    if expected_type and not isinstance(provided_value, expected_type):
        suggestions.append(f"Convert {parameter_name} to {expected_type.__name__}")

    if valid_range and isinstance(provided_value, (int, float)):
        if provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif valid_range[1] is not None and provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    if valid_choices:
        suggestions.append(f"Use one of: {', '.join(valid_choices)}")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


def validate_dimension(value: Any, parameter_name: str, component: str | None = None) -> int:
    """Validate a grid dimension (non-negative int) and return it."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise MazeConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            expected_type=int,
            component=component,
        )

    if value < 0:
        raise MazeConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            valid_range=(0, None),
            component=component,
        )

    return value
