"""
Input validation for the sales loss diagnostic.

The engine accepts any numbers; range checks are the input layer's job.
This module performs them at the API boundary. All check functions are
pure and return lists of error messages.
"""

import math
from typing import Optional

from sales_diagnostic.config import DEFAULT_INPUT_BOUNDS, InputBound, InputBounds
from sales_diagnostic.models import InputParameters


class ValidationError(Exception):
    """
    Raised when input validation fails.

    Attributes:
        errors: List of validation error messages
    """

    def __init__(self, errors: list[str]):
        self.errors = errors
        message = "; ".join(errors) if errors else "Validation failed"
        super().__init__(message)


# =============================================================================
# Field Validation
# =============================================================================


def validate_field(name: str, value: float, bound: InputBound) -> list[str]:
    """
    Validate one input against its bound. Returns list of errors.

    Non-finite values are reported on their own; range is only checked
    for finite values.
    """
    if not math.isfinite(value):
        return [f"{name} must be a finite number (got {value})"]

    if not (bound.min <= value <= bound.max):
        return [f"{name} must be in [{bound.min:g}, {bound.max:g}] (got {value:g})"]

    return []


def validate_inputs(
    params: InputParameters,
    bounds: Optional[InputBounds] = None,
) -> list[str]:
    """
    Validate all five inputs. Returns every error found, not just the first.

    Args:
        params: The inputs to check
        bounds: Widget bounds (defaults to DEFAULT_INPUT_BOUNDS)
    """
    bounds = bounds or DEFAULT_INPUT_BOUNDS
    errors: list[str] = []

    for name in InputParameters.model_fields:
        errors.extend(validate_field(name, getattr(params, name), getattr(bounds, name)))

    return errors


# =============================================================================
# Convenience Functions
# =============================================================================


def validate_and_raise(
    params: InputParameters,
    bounds: Optional[InputBounds] = None,
) -> None:
    """
    Validate inputs and raise ValidationError if any errors found.

    This is a convenience function for API boundary validation.
    """
    errors = validate_inputs(params, bounds)
    if errors:
        raise ValidationError(errors)
