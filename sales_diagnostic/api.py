"""
FastAPI Application for the sales loss diagnostic.

It is a thin layer: validates inputs against the widget bounds and delegates
all computation to the engine.

Endpoints:
    GET /health - Service status
    GET /defaults - Default inputs and input bounds
    POST /diagnostic - Run the loss diagnostic for a set of inputs
"""

import logging
import os
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

import pydantic
from fastapi import FastAPI, HTTPException

from sales_diagnostic.config import (
    DEFAULT_ENGINE_CONFIG,
    DEFAULT_INPUT_BOUNDS,
    DEFAULT_INPUTS,
    EngineConfig,
)
from sales_diagnostic.engine import build_chart_data, compute, generate_findings
from sales_diagnostic.models import DiagnosticRequest, DiagnosticResponse, ErrorResponse
from sales_diagnostic.validation import ValidationError, validate_and_raise


logger = logging.getLogger(__name__)


def get_engine_config() -> EngineConfig:
    """
    Get the engine configuration based on environment configuration.

    EFFICIENCY_ALERT_THRESHOLD overrides the efficiency alert threshold;
    everything else uses DEFAULT_ENGINE_CONFIG. The override goes through
    EngineConfig validation; a value that fails it is logged and ignored.
    """
    threshold = os.environ.get("EFFICIENCY_ALERT_THRESHOLD")
    if not threshold:
        return DEFAULT_ENGINE_CONFIG

    try:
        config = EngineConfig.model_validate(
            {**DEFAULT_ENGINE_CONFIG.model_dump(), "efficiency_alert_threshold": threshold}
        )
    except pydantic.ValidationError as e:
        logger.warning(
            f"Ignoring EFFICIENCY_ALERT_THRESHOLD={threshold!r}: "
            f"{e.errors()[0]['msg']}; using default "
            f"{DEFAULT_ENGINE_CONFIG.efficiency_alert_threshold}"
        )
        return DEFAULT_ENGINE_CONFIG

    logger.info(f"Using efficiency alert threshold {threshold} from environment")
    return config


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="Sales Loss Diagnostic API",
    version="1.0.0",
    description="Estimates revenue lost to weak follow-up and slow lead response",
)


# =============================================================================
# Endpoints
# =============================================================================


@app.get(
    "/health",
    summary="Health check",
    description="Returns service health status",
    tags=["System"],
)
def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "Sales Loss Diagnostic API",
        "version": "1.0.0",
    }


@app.get(
    "/defaults",
    summary="Default inputs and bounds",
    description="Returns the reset values and accepted range of each input",
    tags=["Diagnostic"],
)
def get_defaults() -> dict:
    return {
        "inputs": DEFAULT_INPUTS.model_dump(),
        "bounds": DEFAULT_INPUT_BOUNDS.model_dump(),
    }


@app.post(
    "/diagnostic",
    response_model=DiagnosticResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Input out of bounds"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
    tags=["Diagnostic"],
)
def run_diagnostic(request: DiagnosticRequest) -> DiagnosticResponse:
    """
    Run the loss diagnostic.

    Status Codes:
        200: Success (including zero-loss results)
        400: An input is outside its bound or not finite
        422: Pydantic validation error (automatic)
        500: Internal error
    """
    params = request.to_parameters()

    try:
        validate_and_raise(params, DEFAULT_INPUT_BOUNDS)
    except ValidationError as e:
        logger.info(f"Diagnostic rejected (validation): {e.errors}")
        error_response = ErrorResponse(
            error="Validation failed",
            detail=str(e.errors),
            code="VALIDATION_FAILED",
        )
        raise HTTPException(status_code=400, detail=error_response.model_dump())

    config = get_engine_config()

    try:
        result = compute(params, config)
        response = DiagnosticResponse(
            inputs=params,
            result=result,
            has_loss=result.has_loss,
            charts=build_chart_data(result),
            findings=generate_findings(result, config),
        )
    except Exception as e:
        logger.exception("Diagnostic failed (unexpected)")
        error_response = ErrorResponse(
            error="Internal error",
            detail=str(e),
            code="INTERNAL_ERROR",
        )
        raise HTTPException(status_code=500, detail=error_response.model_dump())

    logger.info(
        f"Diagnostic computed: loss_revenue={result.total.loss_revenue:.2f} "
        f"efficiency={result.total.efficiency_percent:.1f}%"
    )
    return response
