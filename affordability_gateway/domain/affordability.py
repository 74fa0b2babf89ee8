"""Affordability calculator - core business logic"""

import math

from affordability_gateway.domain.models import AffordabilityInput, AffordabilityResult

STANDARD_EXPENSE_RATIO = 0.35
CASH_FLOW_WEIGHT = 1.2
LOAN_TERM_MONTHS = 360  # 30 years


def effective_cash_flow(data: AffordabilityInput) -> float:
    """
    Monthly cash flow available for a mortgage payment.

    Expenses are floored at 35% of income: a stated expense below that baseline
    is replaced by the baseline. The remainder is weighted down by 1.2.

    Negative results are returned as-is (expense above income).
    """
    expense = data.income * STANDARD_EXPENSE_RATIO
    if data.expense > expense:
        expense = data.expense

    return (data.income - expense) / CASH_FLOW_WEIGHT


def monthly_rate(data: AffordabilityInput) -> float:
    """Convert the annual percentage rate to a monthly fraction"""
    return (data.interest_rate / 100.0) / 12.0


def amortization_factor(rate: float, periods: int = LOAN_TERM_MONTHS) -> float:
    """
    Present value of an annuity paying 1 per period:

        factor = (1 - (1 + r)^-n) / r

    Evaluated via log1p/expm1 so rates close to zero keep full precision
    instead of cancelling to 0. At r == 0 the formula is undefined; its limit
    is n (straight-line repayment).
    """
    if rate == 0:
        return float(periods)
    return -math.expm1(-periods * math.log1p(rate)) / rate


def loan_amount(data: AffordabilityInput, cash_flow: float) -> float:
    """Largest principal the cash flow can service over the 30-year term"""
    return cash_flow * amortization_factor(monthly_rate(data))


def compute_result(data: AffordabilityInput) -> AffordabilityResult:
    """
    Main entry point: derive cash flow, loan amount and delta for one input.

    delta = ask_price - loan_amount, so a positive delta is the shortfall
    between what the buyer can borrow and what the seller asks.
    """
    cash_flow = effective_cash_flow(data)
    loan = loan_amount(data, cash_flow)

    return AffordabilityResult(
        input=data,
        effective_cash_flow=cash_flow,
        loan_amount=loan,
        delta=data.ask_price - loan,
    )
