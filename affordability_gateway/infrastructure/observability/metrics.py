"""Prometheus metrics for monitoring calculation volume, outcomes and input quality"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "affordability_calculations_total",
    "Total affordability calculations",
    ["outcome"],  # affordable | shortfall
)

delta_histogram = Histogram(
    "affordability_delta",
    "Asking price minus affordable loan amount",
    buckets=[-500_000, -250_000, -100_000, -50_000, 0, 50_000, 100_000, 250_000, 500_000],
)

zero_rate_counter = Counter(
    "affordability_zero_rate_total",
    "Calculations amortized at a 0% interest rate",
)

invalid_input_counter = Counter(
    "affordability_invalid_input_total",
    "Requests rejected for missing or malformed numeric input",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(outcome: str, delta: float, zero_rate: bool) -> None:
    """Record calculation metrics for monitoring outcome mix and delta distribution"""
    calculation_counter.labels(outcome=outcome).inc()
    delta_histogram.observe(delta)

    if zero_rate:
        zero_rate_counter.inc()
