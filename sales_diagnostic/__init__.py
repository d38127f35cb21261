"""Sales loss diagnostic: estimates revenue lost to weak follow-up and slow response."""

from sales_diagnostic.engine import build_chart_data, compute, generate_findings
from sales_diagnostic.models import DiagnosticResult, InputParameters

__all__ = [
    "compute",
    "build_chart_data",
    "generate_findings",
    "DiagnosticResult",
    "InputParameters",
]
