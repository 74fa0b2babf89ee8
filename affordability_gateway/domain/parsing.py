"""Conversion of raw request parameters into calculator input"""

import math
from typing import Mapping, Optional

from affordability_gateway.domain.exceptions import InvalidInputError
from affordability_gateway.domain.models import AffordabilityInput

ASK_PRICE_KEY = "ask_price"
INCOME_KEY = "income"
EXPENSE_KEY = "expense"
INTEREST_RATE_KEY = "interest_rate"


def parse_number(params: Mapping[str, Optional[str]], key: str) -> float:
    """Read one parameter as a finite float"""
    raw = params.get(key)
    if raw is None:
        raise InvalidInputError(key, "missing")

    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(key, f"not a number: {raw!r}") from e

    if not math.isfinite(value):
        raise InvalidInputError(key, f"not a finite number: {raw!r}")

    return value


def build_input(params: Optional[Mapping[str, Optional[str]]]) -> AffordabilityInput:
    """
    Build calculator input from string-keyed parameters.

    Accepts query-string style mappings (values are strings) as well as decoded
    JSON payloads (values are already numbers).

    Raises:
        InvalidInputError: A parameter is missing, not numeric, not finite,
            or the interest rate is negative
    """
    params = params or {}

    data = AffordabilityInput(
        ask_price=parse_number(params, ASK_PRICE_KEY),
        income=parse_number(params, INCOME_KEY),
        expense=parse_number(params, EXPENSE_KEY),
        interest_rate=parse_number(params, INTEREST_RATE_KEY),
    )

    # (1 + r)^-360 is undefined at r == -1, and rates are quoted as positive APRs
    if data.interest_rate < 0:
        raise InvalidInputError(INTEREST_RATE_KEY, "must not be negative")

    return data
