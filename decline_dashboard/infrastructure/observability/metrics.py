"""Prometheus metrics for monitoring dashboard query volume and dataset health"""

from prometheus_client import Counter, Histogram, Gauge

# Analytics query metrics
query_counter = Counter(
    "decline_dashboard_queries_total",
    "Analytics queries served",
    ["endpoint"],  # overview | breakdown | timeseries | decline_codes | filter_options
)

filtered_transactions_histogram = Histogram(
    "decline_dashboard_filtered_transactions",
    "Transactions remaining after filters were applied",
    ["endpoint"],
    buckets=[0, 10, 50, 100, 250, 500, 750, 1000],
)

# Dataset metrics
dataset_size_gauge = Gauge(
    "dataset_transactions",
    "Transactions held in the in-memory store",
)

dataset_generation_histogram = Histogram(
    "dataset_generation_seconds",
    "Time spent materializing the synthetic dataset",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_query(endpoint: str, matched: int) -> None:
    """Record one analytics query and how many transactions it scanned after filtering"""
    query_counter.labels(endpoint=endpoint).inc()
    filtered_transactions_histogram.labels(endpoint=endpoint).observe(matched)
