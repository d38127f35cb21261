"""
Pydantic models for the sales loss diagnostic.

This module contains the input, result and API data models.
Models handle validation and serialization only - no business logic.
"""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================


class FollowUpStatus(str, Enum):
    """Classification of the follow-up loss factor."""

    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    ADEQUATE = "ADEQUATE"


class ResponseStatus(str, Enum):
    """Classification of the average first-response time."""

    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


# =============================================================================
# Input Models
# =============================================================================


class InputParameters(BaseModel):
    """
    The five commercial-process inputs.

    Owned by the caller and passed by value into the engine. No range
    constraints are declared here: the engine accepts out-of-bounds and
    non-finite values as-is, bounds belong to the input layer
    (see sales_diagnostic.validation).
    """

    model_config = ConfigDict(frozen=True)

    leads: float = Field(..., description="Leads received per month")
    conversion_rate: float = Field(..., description="Conversion rate in percent (0-100)")
    average_ticket: float = Field(..., description="Average monetary value per sale")
    follow_up_attempts: int = Field(..., description="Contact attempts per lead")
    response_time_minutes: float = Field(
        ..., description="Average minutes until first response"
    )


# =============================================================================
# Result Models
# =============================================================================


class BaselineMetrics(BaseModel):
    """Current performance computed from the inputs alone."""

    model_config = ConfigDict(frozen=True)

    current_sales: float = Field(..., description="leads * conversion_rate / 100")
    current_revenue: float = Field(..., description="current_sales * average_ticket")
    annual_revenue: float = Field(..., description="current_revenue * 12")
    non_converted_leads: float = Field(
        ..., description="leads - current_sales (pool for both loss models)"
    )


class FollowUpLoss(BaseModel):
    """Revenue forfeited through insufficient follow-up persistence."""

    model_config = ConfigDict(frozen=True)

    status: FollowUpStatus
    factor: float = Field(..., description="Loss factor in [0, 1]")
    loss_sales: float = Field(..., description="Sales lost per month")
    loss_revenue: float = Field(..., description="Revenue lost per month")
    loss_annual: float = Field(..., description="Revenue lost per year")


class ResponseLoss(BaseModel):
    """Revenue forfeited through slow first response."""

    model_config = ConfigDict(frozen=True)

    status: ResponseStatus
    factor: float = Field(..., description="Loss factor in [0, 1]")
    loss_sales: float = Field(..., description="Sales lost per month")
    loss_revenue: float = Field(..., description="Revenue lost per month")
    loss_annual: float = Field(..., description="Revenue lost per year")


class TotalLoss(BaseModel):
    """Additive aggregation of both leaks plus the efficiency score."""

    model_config = ConfigDict(frozen=True)

    loss_sales: float
    loss_revenue: float
    loss_annual: float
    efficiency_percent: float = Field(
        ..., description="current / (current + lost) sales, as a percentage"
    )


class DiagnosticResult(BaseModel):
    """
    Full engine output for one set of inputs.

    Built fresh on every compute() call and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    current_sales: float
    current_revenue: float
    annual_revenue: float
    non_converted_leads: float

    follow_up: FollowUpLoss
    response: ResponseLoss
    total: TotalLoss

    @property
    def has_loss(self) -> bool:
        """True when any annual revenue is being forfeited."""
        return self.total.loss_annual > 0


# =============================================================================
# Chart Models
# =============================================================================


class ChartPoint(BaseModel):
    """A single labelled value in a chart series."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Stable machine identifier")
    label: str = Field(..., description="Human-readable label")
    value: float


class ChartData(BaseModel):
    """Chart-ready series derived from a DiagnosticResult."""

    model_config = ConfigDict(frozen=True)

    revenue_breakdown: list[ChartPoint] = Field(
        default_factory=list,
        description="Monthly current revenue vs. each monthly loss",
    )
    loss_composition: list[ChartPoint] = Field(
        default_factory=list,
        description="Annual loss split by cause, zero slices removed",
    )


# =============================================================================
# Finding Models
# =============================================================================


class Finding(BaseModel):
    """
    A single status statement with machine-readable metadata.
    The engine produces these; the presentation layer renders them to copy.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier for this finding")
    label: str = Field(..., description="Human-readable label")
    severity: Literal["info", "warning", "error"] = Field(..., description="Severity level")
    category: Literal["follow_up", "response_time", "efficiency", "summary"] = Field(
        ..., description="Finding category"
    )
    status: Optional[str] = Field(None, description="Status label, when one applies")
    metric: Optional[str] = Field(None, description="Related metric name")
    value: Optional[float] = Field(None, description="Metric value")
    threshold: Optional[float] = Field(None, description="Threshold if applicable")
    loss_revenue: Optional[float] = Field(None, description="Monthly revenue at stake")


# =============================================================================
# API Models
# =============================================================================


class DiagnosticRequest(BaseModel):
    """Request body for POST /diagnostic."""

    leads: float
    conversion_rate: float
    average_ticket: float
    follow_up_attempts: int
    response_time_minutes: float

    def to_parameters(self) -> InputParameters:
        return InputParameters(**self.model_dump())


class DiagnosticResponse(BaseModel):
    """Response body for POST /diagnostic."""

    inputs: InputParameters = Field(..., description="The inputs used")
    result: DiagnosticResult = Field(..., description="Engine output")
    has_loss: bool = Field(..., description="True when any revenue is being forfeited")
    charts: ChartData = Field(..., description="Chart-ready series")
    findings: list[Finding] = Field(default_factory=list, description="Status findings")


class ErrorResponse(BaseModel):
    """Error response body for API errors."""

    error: str = Field(..., description="Short error description")
    detail: Optional[str] = Field(None, description="Detailed error message")
    code: str = Field(..., description="Error code (e.g., 'VALIDATION_FAILED')")
