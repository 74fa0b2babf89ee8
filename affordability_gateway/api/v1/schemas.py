"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field

from affordability_gateway.domain.models import AffordabilityInput, AffordabilityResult


class AffordabilityRequest(BaseModel):
    """Request body for POST /v1/affordability"""

    ask_price: float = Field(..., allow_inf_nan=False, description="Asking price of the property")
    income: float = Field(..., allow_inf_nan=False, description="Monthly income")
    expense: float = Field(..., allow_inf_nan=False, description="Stated monthly expense")
    interest_rate: float = Field(..., ge=0, allow_inf_nan=False, description="Annual interest rate in percent")

    def to_domain(self) -> AffordabilityInput:
        return AffordabilityInput(
            ask_price=self.ask_price,
            income=self.income,
            expense=self.expense,
            interest_rate=self.interest_rate,
        )


class InputSchema(BaseModel):
    """Echo of the numbers the calculation used"""

    ask_price: float
    income: float
    expense: float
    interest_rate: float


class AffordabilityResponse(BaseModel):
    """Response for GET and POST /v1/affordability"""

    input: InputSchema
    effective_cash_flow: float
    loan_amount: float
    delta: float

    @classmethod
    def from_result(cls, result: AffordabilityResult) -> "AffordabilityResponse":
        return cls.model_validate(result.to_dict())
