"""GET/POST /v1/affordability - maximum loan amount and delta against the asking price"""

import time
import logging
from typing import Optional
from fastapi import APIRouter, Query, Request
from starlette.responses import Response

from affordability_gateway.api.v1.schemas import AffordabilityRequest, AffordabilityResponse
from affordability_gateway.api.dependencies import get_request_id
from affordability_gateway.domain.affordability import compute_result, monthly_rate
from affordability_gateway.domain.exceptions import InvalidInputError
from affordability_gateway.domain.models import AffordabilityInput, AffordabilityResult
from affordability_gateway.domain.parsing import build_input
from affordability_gateway.infrastructure.observability.metrics import record_calculation, invalid_input_counter
from affordability_gateway.infrastructure.observability.logging import log_calculation

router = APIRouter()


def evaluate(data: AffordabilityInput, request_id: str) -> AffordabilityResult:
    """
    Run the calculator and record metrics and logs for the outcome.

    Raises:
        InvalidInputError: Inputs are finite but large enough to overflow the
            loan amount or delta
    """
    start_time = time.time()

    result = compute_result(data)
    if not result.is_finite:
        raise InvalidInputError("input", "result overflows the float range")

    duration_ms = (time.time() - start_time) * 1000
    zero_rate = monthly_rate(data) == 0
    record_calculation(result.outcome, result.delta, zero_rate)
    log_calculation(request_id, result.outcome, result.loan_amount, result.delta, zero_rate, duration_ms)

    return result


def record_invalid_input(error: InvalidInputError, request_id: str) -> None:
    """Count and log a rejected request"""
    invalid_input_counter.inc()
    logging.warning(f"Invalid input: {error}", extra={"request_id": request_id, "field": error.field})


@router.get("/affordability", response_model=AffordabilityResponse)
def get_affordability(
    request: Request,
    ask_price: Optional[str] = Query(None, description="Asking price of the property"),
    income: Optional[str] = Query(None, description="Monthly income"),
    expense: Optional[str] = Query(None, description="Stated monthly expense"),
    interest_rate: Optional[str] = Query(None, description="Annual interest rate in percent"),
):
    """
    Calculate affordability from query string parameters.

    Missing or non-numeric parameters yield 400 with an empty body.
    """
    request_id = get_request_id(request)

    try:
        data = build_input(
            {
                "ask_price": ask_price,
                "income": income,
                "expense": expense,
                "interest_rate": interest_rate,
            }
        )
        result = evaluate(data, request_id)
    except InvalidInputError as e:
        record_invalid_input(e, request_id)
        return Response(status_code=400)

    return AffordabilityResponse.from_result(result)


@router.post("/affordability", response_model=AffordabilityResponse)
def post_affordability(request_body: AffordabilityRequest, request: Request):
    """
    Calculate affordability from a JSON payload.

    Payload validation failures are turned into an empty 400 by the
    application-level RequestValidationError handler.
    """
    request_id = get_request_id(request)

    try:
        result = evaluate(request_body.to_domain(), request_id)
    except InvalidInputError as e:
        record_invalid_input(e, request_id)
        return Response(status_code=400)

    return AffordabilityResponse.from_result(result)
