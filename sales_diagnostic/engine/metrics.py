"""
Loss-estimation stages.

This module contains the four composable stages of the engine:
baseline performance, follow-up loss, response-time loss and aggregation.

All functions are:
- Pure (no side effects)
- Deterministic (same inputs -> same outputs)
- Total over floats: non-finite values propagate instead of raising
"""

import math

from sales_diagnostic.config import EngineConfig
from sales_diagnostic.engine.classification import classify_follow_up, classify_response
from sales_diagnostic.models import (
    BaselineMetrics,
    FollowUpLoss,
    InputParameters,
    ResponseLoss,
    TotalLoss,
)


# =============================================================================
# Numeric Helpers
# =============================================================================


def _ln(x: float) -> float:
    """Natural log with IEEE semantics: ln(0) = -inf, ln(x < 0) = nan."""
    if x > 0:
        return math.log(x)
    if x == 0:
        return -math.inf
    return math.nan


def _log10(x: float) -> float:
    """Base-10 log with IEEE semantics: log10(0) = -inf, log10(x < 0) = nan."""
    if x > 0:
        return math.log10(x)
    if x == 0:
        return -math.inf
    return math.nan


def _exp(x: float) -> float:
    """exp() that overflows to +inf instead of raising."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


# =============================================================================
# Baseline Performance
# =============================================================================


def compute_baseline(params: InputParameters, config: EngineConfig) -> BaselineMetrics:
    """
    Compute current sales and revenue from the inputs alone.

    Out-of-range values (e.g. conversion_rate > 100) are used as-is.
    """
    current_sales = params.leads * (params.conversion_rate / 100)
    current_revenue = current_sales * params.average_ticket

    return BaselineMetrics(
        current_sales=current_sales,
        current_revenue=current_revenue,
        annual_revenue=current_revenue * config.months_per_year,
        non_converted_leads=params.leads - current_sales,
    )


# =============================================================================
# Follow-Up Loss
# =============================================================================


def compute_follow_up_factor(attempts: int, config: EngineConfig) -> float:
    """
    Logarithmic decay of loss with follow-up attempts.

    1.0 at zero attempts, exactly 0.0 at the cap, non-increasing in between
    and 0.0 beyond the cap.
    """
    cap = config.follow_up_attempt_cap
    safe_attempts = min(attempts, cap)

    raw_factor = 1 - _ln(safe_attempts + 1) / math.log(cap + 1)

    # max(0, nan) returns 0; nan has to survive
    return 0.0 if raw_factor < 0 else raw_factor


def compute_follow_up_loss(
    params: InputParameters,
    non_converted_leads: float,
    config: EngineConfig,
) -> FollowUpLoss:
    """
    Estimate sales forfeited by giving up on leads too early.

    At most follow_up_recoverable_share of the non-converted leads are
    considered reachable, and recovered leads close at follow_up_close_rate.
    """
    factor = compute_follow_up_factor(params.follow_up_attempts, config)

    max_recoverable = non_converted_leads * config.follow_up_recoverable_share
    recoverable_leads = max_recoverable * factor
    loss_sales = recoverable_leads * config.follow_up_close_rate
    loss_revenue = loss_sales * params.average_ticket

    return FollowUpLoss(
        status=classify_follow_up(factor, config),
        factor=factor,
        loss_sales=loss_sales,
        loss_revenue=loss_revenue,
        loss_annual=loss_revenue * config.months_per_year,
    )


# =============================================================================
# Response-Time Loss
# =============================================================================


def compute_response_factor(minutes: float, config: EngineConfig) -> float:
    """
    Logistic loss curve over log-scaled response minutes.

    factor = 1 / (1 + exp(-k * (log10(minutes + 1) - midpoint)))

    Strictly increasing in minutes; the inflection sits at
    10**midpoint - 1 minutes (~59 with the default midpoint).
    """
    time_log = _log10(minutes + 1)
    z = -config.response_steepness * (time_log - config.response_midpoint)
    return 1 / (1 + _exp(z))


def compute_response_loss(
    params: InputParameters,
    non_converted_leads: float,
    config: EngineConfig,
) -> ResponseLoss:
    """
    Estimate sales forfeited by responding to leads slowly.

    At most response_recoverable_share of the non-converted leads are
    considered reachable, and recovered leads close at response_close_rate.
    """
    factor = compute_response_factor(params.response_time_minutes, config)

    max_recoverable = non_converted_leads * config.response_recoverable_share
    recoverable_leads = max_recoverable * factor
    loss_sales = recoverable_leads * config.response_close_rate
    loss_revenue = loss_sales * params.average_ticket

    return ResponseLoss(
        status=classify_response(params.response_time_minutes, config),
        factor=factor,
        loss_sales=loss_sales,
        loss_revenue=loss_revenue,
        loss_annual=loss_revenue * config.months_per_year,
    )


# =============================================================================
# Aggregation & Efficiency
# =============================================================================


def compute_efficiency(current_sales: float, lost_sales: float) -> float:
    """
    Actual sales as a percentage of actual plus recoverable sales.

    Defined as 100 when both are zero (nothing sold, nothing lost).
    """
    potential_sales = current_sales + lost_sales
    if potential_sales == 0:
        return 100.0
    return current_sales / potential_sales * 100


def compute_total_loss(
    current_sales: float,
    follow_up: FollowUpLoss,
    response: ResponseLoss,
    config: EngineConfig,
) -> TotalLoss:
    """
    Sum both leaks and score efficiency.

    The two losses are treated as independent leaks from the same
    non-converted pool and simply added (no probabilistic union).
    """
    loss_sales = follow_up.loss_sales + response.loss_sales
    loss_revenue = follow_up.loss_revenue + response.loss_revenue

    return TotalLoss(
        loss_sales=loss_sales,
        loss_revenue=loss_revenue,
        loss_annual=loss_revenue * config.months_per_year,
        efficiency_percent=compute_efficiency(current_sales, loss_sales),
    )
