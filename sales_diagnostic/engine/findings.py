"""
Status findings for the sales loss diagnostic.

This module turns a DiagnosticResult into structured Finding objects.
The presentation layer picks card colours, icons and copy from these;
no text beyond short labels is produced here.

All functions are pure and deterministic.

Finding Categories:
- follow_up: status of follow-up persistence
- response_time: status of first-response speed
- efficiency: overall efficiency score against the alert threshold
- summary: whether the operation is leaking revenue at all
"""

from typing import Literal

from sales_diagnostic.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from sales_diagnostic.models import (
    DiagnosticResult,
    Finding,
    FollowUpStatus,
    ResponseStatus,
)

Severity = Literal["info", "warning", "error"]


# =============================================================================
# Main Entry Point
# =============================================================================


def generate_findings(
    result: DiagnosticResult,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[Finding]:
    """
    Generate structured findings from an engine result.

    Always returns four findings, in order: follow_up, response_time,
    efficiency, summary.

    Args:
        result: The engine result
        config: Engine configuration (efficiency alert threshold)

    Returns:
        List of Finding objects for UI rendering
    """
    return [
        _follow_up_finding(result),
        _response_finding(result),
        _efficiency_finding(result, config),
        _summary_finding(result),
    ]


# =============================================================================
# Per-Leak Findings
# =============================================================================


FOLLOW_UP_SEVERITY: dict[FollowUpStatus, Severity] = {
    FollowUpStatus.CRITICAL: "error",
    FollowUpStatus.WARNING: "warning",
    FollowUpStatus.ADEQUATE: "info",
}

# GOOD still calls for attention; only EXCELLENT is informational
RESPONSE_SEVERITY: dict[ResponseStatus, Severity] = {
    ResponseStatus.CRITICAL: "error",
    ResponseStatus.WARNING: "warning",
    ResponseStatus.GOOD: "warning",
    ResponseStatus.EXCELLENT: "info",
}


def _follow_up_finding(result: DiagnosticResult) -> Finding:
    labels = {
        FollowUpStatus.CRITICAL: "Follow-up Critical",
        FollowUpStatus.WARNING: "Follow-up Needs Attention",
        FollowUpStatus.ADEQUATE: "Follow-up Adequate",
    }
    follow_up = result.follow_up
    return Finding(
        id=f"follow_up_{follow_up.status.value.lower()}",
        label=labels[follow_up.status],
        severity=FOLLOW_UP_SEVERITY[follow_up.status],
        category="follow_up",
        status=follow_up.status.value,
        metric="follow_up_factor",
        value=follow_up.factor,
        loss_revenue=follow_up.loss_revenue,
    )


def _response_finding(result: DiagnosticResult) -> Finding:
    labels = {
        ResponseStatus.EXCELLENT: "Response Time Excellent",
        ResponseStatus.GOOD: "Response Time Good",
        ResponseStatus.WARNING: "Response Time Poor",
        ResponseStatus.CRITICAL: "Response Time Critical",
    }
    response = result.response
    return Finding(
        id=f"response_time_{response.status.value.lower()}",
        label=labels[response.status],
        severity=RESPONSE_SEVERITY[response.status],
        category="response_time",
        status=response.status.value,
        metric="response_factor",
        value=response.factor,
        loss_revenue=response.loss_revenue,
    )


# =============================================================================
# Aggregate Findings
# =============================================================================


def _efficiency_finding(result: DiagnosticResult, config: EngineConfig) -> Finding:
    efficiency = result.total.efficiency_percent
    threshold = config.efficiency_alert_threshold

    if efficiency < threshold:
        return Finding(
            id="efficiency_low",
            label="Commercial Efficiency Below Target",
            severity="error",
            category="efficiency",
            metric="efficiency_percent",
            value=efficiency,
            threshold=threshold,
        )

    return Finding(
        id="efficiency_ok",
        label="Commercial Efficiency On Target",
        severity="info",
        category="efficiency",
        metric="efficiency_percent",
        value=efficiency,
        threshold=threshold,
    )


def _summary_finding(result: DiagnosticResult) -> Finding:
    if result.has_loss:
        return Finding(
            id="summary_revenue_leak",
            label="Total Financial Impact",
            severity="warning",
            category="summary",
            metric="total_loss_annual",
            value=result.total.loss_annual,
            loss_revenue=result.total.loss_revenue,
        )

    return Finding(
        id="summary_optimized",
        label="Optimized Operation",
        severity="info",
        category="summary",
        metric="total_loss_annual",
        value=result.total.loss_annual,
        loss_revenue=result.total.loss_revenue,
    )
