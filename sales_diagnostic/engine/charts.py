"""
Chart series projection.

Builds presentation-ready series from a DiagnosticResult. Values are copied
from the result unchanged; only the composition series filters points.
"""

from sales_diagnostic.models import ChartData, ChartPoint, DiagnosticResult


CURRENT_REVENUE_LABEL = "Current Sales"
FOLLOW_UP_LOSS_LABEL = "Follow-up Loss"
RESPONSE_LOSS_LABEL = "Response Time Loss"


def build_revenue_breakdown(result: DiagnosticResult) -> list[ChartPoint]:
    """Three bars: monthly current revenue and each monthly loss."""
    return [
        ChartPoint(key="current_revenue", label=CURRENT_REVENUE_LABEL, value=result.current_revenue),
        ChartPoint(key="follow_up_loss", label=FOLLOW_UP_LOSS_LABEL, value=result.follow_up.loss_revenue),
        ChartPoint(key="response_loss", label=RESPONSE_LOSS_LABEL, value=result.response.loss_revenue),
    ]


def build_loss_composition(result: DiagnosticResult) -> list[ChartPoint]:
    """Annual loss split by cause; slices that are not positive are dropped."""
    slices = [
        ChartPoint(key="follow_up_loss", label=FOLLOW_UP_LOSS_LABEL, value=result.follow_up.loss_annual),
        ChartPoint(key="response_loss", label=RESPONSE_LOSS_LABEL, value=result.response.loss_annual),
    ]
    return [s for s in slices if s.value > 0]


def build_chart_data(result: DiagnosticResult) -> ChartData:
    return ChartData(
        revenue_breakdown=build_revenue_breakdown(result),
        loss_composition=build_loss_composition(result),
    )
