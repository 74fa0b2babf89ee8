"""Domain models - immutable dataclasses for a single affordability calculation"""

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class AffordabilityInput:
    """Numbers supplied by the caller for one calculation"""

    ask_price: float
    income: float
    expense: float
    interest_rate: float  # annual percentage, 5.0 == 5%


@dataclass(frozen=True)
class AffordabilityResult:
    """Output of the affordability calculator"""

    input: AffordabilityInput
    effective_cash_flow: float
    loan_amount: float
    delta: float

    @property
    def outcome(self) -> str:
        """'shortfall' when the loan does not cover the asking price"""
        return "shortfall" if self.delta > 0 else "affordable"

    @property
    def is_finite(self) -> bool:
        """False when a huge input overflowed the float range"""
        return all(math.isfinite(v) for v in (self.effective_cash_flow, self.loan_amount, self.delta))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
