"""
Engine configuration for the sales loss diagnostic.

All model constants live here - no magic numbers in engine code.
Input bounds and defaults describe the input widgets and are only used
at the API boundary; the engine never clamps to them.
"""

from pydantic import BaseModel, Field

from sales_diagnostic.models import InputParameters


# =============================================================================
# Engine Configuration
# =============================================================================


class EngineConfig(BaseModel):
    """
    All configurable parameters for the loss-estimation engine.

    Passed explicitly to engine functions rather than hardcoded.
    The defaults reproduce the calibrated curves; other values enable
    what-if analysis and unit testing with controlled parameters.
    """

    # Calendar
    months_per_year: int = Field(default=12, gt=0, description="Monthly-to-annual multiplier")

    # Follow-up model (logarithmic decay)
    follow_up_attempt_cap: int = Field(
        default=10,
        gt=0,
        description="Attempts above this are treated as the cap (decay is calibrated on 0..cap)",
    )
    follow_up_recoverable_share: float = Field(
        default=0.50, ge=0, le=1, description="Share of non-converted leads reachable by follow-up"
    )
    follow_up_close_rate: float = Field(
        default=0.12, ge=0, le=1, description="Close rate on leads recovered by follow-up"
    )
    follow_up_critical_above: float = Field(
        default=0.60, ge=0, le=1, description="factor > this is CRITICAL"
    )
    follow_up_warning_from: float = Field(
        default=0.30, ge=0, le=1, description="factor >= this (and not CRITICAL) is WARNING"
    )

    # Response-time model (logistic over log10 minutes)
    response_steepness: float = Field(default=2.5, gt=0, description="Sigmoid slope k")
    response_midpoint: float = Field(
        default=1.78, description="Sigmoid inflection on log10(minutes + 1) (~59 minutes)"
    )
    response_recoverable_share: float = Field(
        default=0.60, ge=0, le=1, description="Share of non-converted leads reachable by fast response"
    )
    response_close_rate: float = Field(
        default=0.15, ge=0, le=1, description="Close rate on leads recovered by fast response"
    )
    response_excellent_max_minutes: float = Field(
        default=5, gt=0, description="minutes <= this is EXCELLENT"
    )
    response_good_max_minutes: float = Field(
        default=30, gt=0, description="minutes <= this is GOOD"
    )
    response_warning_max_minutes: float = Field(
        default=60, gt=0, description="minutes <= this is WARNING, above is CRITICAL"
    )

    # Findings
    efficiency_alert_threshold: float = Field(
        default=70.0, ge=0, le=100, description="Efficiency below this is flagged as an error"
    )


DEFAULT_ENGINE_CONFIG = EngineConfig()


# =============================================================================
# Input Bounds
# =============================================================================


class InputBound(BaseModel):
    """Accepted range and step of one input widget."""

    min: float
    max: float
    step: float = Field(..., gt=0)


class InputBounds(BaseModel):
    """
    Ranges of the five input widgets.

    Enforced by sales_diagnostic.validation before the API calls the engine.
    """

    leads: InputBound = Field(default_factory=lambda: InputBound(min=10, max=5000, step=10))
    conversion_rate: InputBound = Field(
        default_factory=lambda: InputBound(min=0, max=100, step=0.5)
    )
    average_ticket: InputBound = Field(
        default_factory=lambda: InputBound(min=50, max=50000, step=50)
    )
    follow_up_attempts: InputBound = Field(
        default_factory=lambda: InputBound(min=0, max=10, step=1)
    )
    response_time_minutes: InputBound = Field(
        default_factory=lambda: InputBound(min=1, max=180, step=1)
    )


DEFAULT_INPUT_BOUNDS = InputBounds()


# =============================================================================
# Default Inputs
# =============================================================================

DEFAULT_INPUTS = InputParameters(
    leads=100,
    conversion_rate=10,
    average_ticket=5000,
    follow_up_attempts=3,
    response_time_minutes=60,
)
