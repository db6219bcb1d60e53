"""POST /v1/estimate - Study-abroad budget estimate endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from abroad_budget.api.v1.schemas import EstimateRequest, EstimateResponse
from abroad_budget.api.dependencies import get_remote_predictor, get_request_id
from abroad_budget.infrastructure.clients.remote_predictor import RemotePredictorClient
from abroad_budget.domain.prediction import make_cost_estimate
from abroad_budget.domain.exceptions import RemotePredictionError
from abroad_budget.infrastructure.observability.metrics import record_estimate, remote_prediction_failures_counter
from abroad_budget.infrastructure.observability.logging import log_estimate
from abroad_budget.utils.currency import format_cost

router = APIRouter()


@router.post("/estimate", response_model=EstimateResponse)
async def create_estimate(
    request_body: EstimateRequest,
    request: Request,
    remote_predictor: RemotePredictorClient | None = Depends(get_remote_predictor),
):
    """
    Estimate the total cost of a stay.

    Flow:
    1. Price locally from historical reports or the base formula,
       or delegate to the remote procedure when configured
    2. Record metrics and log the outcome
    3. Return the total with its display string
    """
    start_time = time.time()
    request_id = get_request_id(request)
    prediction_request = request_body.to_domain()

    if remote_predictor is not None:
        try:
            total_cost = await remote_predictor.predict_cost(prediction_request)
        except RemotePredictionError as e:
            remote_prediction_failures_counter.inc()
            logging.error(f"Remote prediction error: {e}", extra={"request_id": request_id})
            raise HTTPException(status_code=503, detail="Cost prediction service unavailable")
        basis = "remote"
    else:
        estimate = make_cost_estimate(prediction_request)
        total_cost, basis = estimate.total_cost, estimate.basis

    duration_ms = (time.time() - start_time) * 1000
    record_estimate(basis, total_cost)
    log_estimate(request_id, prediction_request.city_id, basis, total_cost, duration_ms)

    return EstimateResponse(
        city_id=prediction_request.city_id,
        university_id=prediction_request.university_id,
        total_cost=total_cost,
        formatted_cost=format_cost(total_cost),
        basis=basis,
    )
