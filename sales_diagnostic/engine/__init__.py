"""
Loss-estimation engine.

Contains pure functions for loss computation, classification,
chart projection and findings.
"""

from sales_diagnostic.engine.charts import build_chart_data
from sales_diagnostic.engine.classification import classify_follow_up, classify_response
from sales_diagnostic.engine.diagnostic import compute
from sales_diagnostic.engine.findings import generate_findings
from sales_diagnostic.engine.metrics import (
    compute_baseline,
    compute_efficiency,
    compute_follow_up_factor,
    compute_follow_up_loss,
    compute_response_factor,
    compute_response_loss,
    compute_total_loss,
)

__all__ = [
    # Entry point
    "compute",
    # Stages
    "compute_baseline",
    "compute_follow_up_factor",
    "compute_follow_up_loss",
    "compute_response_factor",
    "compute_response_loss",
    "compute_total_loss",
    "compute_efficiency",
    # Classification
    "classify_follow_up",
    "classify_response",
    # Presentation helpers
    "build_chart_data",
    "generate_findings",
]
