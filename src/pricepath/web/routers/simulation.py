"""Simulation API endpoints."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from pricepath.analysis.sim_models.normal import RandomNormalSource
from pricepath.analysis.simulation import run_simulation
from pricepath.analysis.validation import Rejection, validate_parameters
from pricepath.config import Settings
from pricepath.web.dependencies import get_normal_source, get_settings
from pricepath.web.schemas import ErrorResponse, SimulationRequest, SimulationResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["simulation"])

INTERNAL_ERROR = ErrorResponse(error="Error interno del servidor", code="internal_error")
USE_POST = ErrorResponse(error="Usa POST para esta ruta", code="method_not_allowed")


def _error(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error.model_dump())


@router.post(
    "/simular",
    responses={
        200: {"model": SimulationResponse},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": SimulationRequest.model_json_schema()}},
        }
    },
)
async def simulate(
    request: Request,
    settings: Settings = Depends(get_settings),
    source: RandomNormalSource = Depends(get_normal_source),
):
    """Run a Monte Carlo GBM simulation and return paths, bands and VaR."""
    try:
        body = await request.json()
    except ValueError:
        body = None

    outcome = validate_parameters(body)
    if isinstance(outcome, Rejection):
        logger.info("Rejected simulation request: %s", outcome.code.value)
        return _error(400, ErrorResponse(error=outcome.message, code=outcome.code.value))

    try:
        result = await run_in_threadpool(
            run_simulation, outcome, source, settings.simulation_max_workers
        )
    except Exception:
        logger.exception("Simulation failed for %s", outcome)
        return _error(500, INTERNAL_ERROR)

    return JSONResponse(content=result.to_dict())


@router.get("/simular", status_code=405, response_model=ErrorResponse)
async def simulate_get():
    """Only POST is supported on this route."""
    return _error(405, USE_POST)
