"""Prometheus metrics for monitoring estimates, remote RPC health and image lookups"""

from prometheus_client import Counter, Histogram

# Estimate metrics
estimate_counter = Counter(
    "abroad_budget_estimate_total",
    "Total budget estimates produced",
    ["basis"],  # historical | base | remote
)

estimated_cost_histogram = Histogram(
    "abroad_budget_estimated_cost",
    "Distribution of estimated total costs",
    buckets=[5_000, 10_000, 20_000, 40_000, 80_000, 160_000],
)

# Remote procedure metrics
remote_prediction_failures_counter = Counter(
    "remote_prediction_failures_total",
    "Failed calls to the remote cost procedure",
)

# Image search metrics
image_search_fallback_counter = Counter(
    "image_search_fallback_total",
    "University image lookups answered with the placeholder",
    ["reason"],  # config | http | empty | inaccessible | network
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_estimate(basis: str, total_cost: int) -> None:
    """Record estimate metrics by prediction basis and cost"""
    estimate_counter.labels(basis=basis).inc()
    estimated_cost_histogram.observe(total_cost)
