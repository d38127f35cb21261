"""
Engine entry point.

compute() chains the four stages in metrics.py into a DiagnosticResult.
It is stateless: no caching, no I/O, no shared mutable state, so concurrent
or repeated calls with equal inputs always return equal results.
"""

from sales_diagnostic.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from sales_diagnostic.engine.metrics import (
    compute_baseline,
    compute_follow_up_loss,
    compute_response_loss,
    compute_total_loss,
)
from sales_diagnostic.models import DiagnosticResult, InputParameters


def compute(
    params: InputParameters,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> DiagnosticResult:
    """
    Estimate monthly and annual revenue lost to weak follow-up and slow response.

    Args:
        params: The five commercial-process inputs (not range-checked)
        config: Engine configuration with curve constants and thresholds

    Returns:
        DiagnosticResult with baseline, per-leak losses, totals and efficiency
    """
    baseline = compute_baseline(params, config)

    follow_up = compute_follow_up_loss(params, baseline.non_converted_leads, config)
    response = compute_response_loss(params, baseline.non_converted_leads, config)

    total = compute_total_loss(baseline.current_sales, follow_up, response, config)

    return DiagnosticResult(
        current_sales=baseline.current_sales,
        current_revenue=baseline.current_revenue,
        annual_revenue=baseline.annual_revenue,
        non_converted_leads=baseline.non_converted_leads,
        follow_up=follow_up,
        response=response,
        total=total,
    )
