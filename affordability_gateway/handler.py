"""AWS Lambda entrypoint for API Gateway proxy integration"""

import uuid
from typing import Any, Dict

from affordability_gateway.api.v1.affordability import evaluate, record_invalid_input
from affordability_gateway.api.v1.schemas import AffordabilityResponse
from affordability_gateway.domain.exceptions import InvalidInputError
from affordability_gateway.domain.parsing import build_input
from affordability_gateway.infrastructure.observability.logging import setup_logging
from affordability_gateway.config import settings

setup_logging(settings.log_level)


def _request_id(event: Dict[str, Any], context: Any) -> str:
    request_id = (event.get("requestContext") or {}).get("requestId")
    return request_id or getattr(context, "aws_request_id", None) or str(uuid.uuid4())


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Calculate affordability from API Gateway query string parameters.

    Event:
        {"queryStringParameters": {"ask_price": "500000", "income": "10000",
                                   "expense": "2000", "interest_rate": "5.0"}}

    Returns:
        Proxy response with the result JSON, or statusCode 400 and an empty
        body when a parameter is missing or malformed, or the result overflows
    """
    request_id = _request_id(event, context)

    try:
        result = evaluate(build_input(event.get("queryStringParameters")), request_id)
    except InvalidInputError as e:
        record_invalid_input(e, request_id)
        return {"statusCode": 400, "body": ""}

    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json", "X-Request-ID": request_id},
        "body": AffordabilityResponse.from_result(result).model_dump_json(),
    }
