"""Prometheus metrics for the MoodGuard service.

Metrics are organized into two categories:

Business Metrics (for Product dashboards):
- moodguard_transaction_evaluations_total: Candidates by outcome and tier
- moodguard_pending_resolutions_total: Pending transactions by resolution
- moodguard_impulse_purchases_total: Impulse purchases flagged
- moodguard_hold_rate: Share of evaluated candidates that were held
- moodguard_advisor_replies_total: Advisor chat replies by topic

Technical Metrics (for Engineering dashboards):
- moodguard_emotion_detection_total: Detections by emotion and status
- moodguard_emotion_detection_latency_seconds: Detection latency
- moodguard_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, Gauge, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

transaction_evaluations_total = Counter(
    "moodguard_transaction_evaluations_total",
    "Total number of candidate transactions evaluated",
    ["outcome", "tier"],  # held/committed, risky/cautious/balanced
)

pending_resolutions_total = Counter(
    "moodguard_pending_resolutions_total",
    "Pending transactions resolved by a user",
    ["resolution"],  # approved, rejected
)

impulse_purchases_total = Counter(
    "moodguard_impulse_purchases_total",
    "Expenses flagged as impulse purchases",
)

hold_rate_gauge = Gauge(
    "moodguard_hold_rate",
    "Share of evaluated candidates held for review (0.0-1.0)",
)

advisor_replies_total = Counter(
    "moodguard_advisor_replies_total",
    "Advisor chat replies by detected topic",
    ["topic"],  # invest, spend, save, general
)

_held_count = 0
_evaluated_count = 0


# =============================================================================
# Technical Metrics
# =============================================================================

emotion_detection_total = Counter(
    "moodguard_emotion_detection_total",
    "Emotion detections by detected emotion and status",
    ["emotion", "status"],  # status: success, timeout
)

emotion_detection_latency = Histogram(
    "moodguard_emotion_detection_latency_seconds",
    "Emotion detection latency in seconds",
    buckets=[0.1, 0.25, 0.5, 1.0, 1.5, 2.5, 5.0, 10.0],
)

http_requests_total = Counter(
    "moodguard_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "moodguard_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_evaluation(held: bool, tier: str) -> None:
    """Record a candidate evaluation in metrics."""
    global _held_count, _evaluated_count

    outcome = "held" if held else "committed"
    transaction_evaluations_total.labels(outcome=outcome, tier=tier).inc()

    _evaluated_count += 1
    if held:
        _held_count += 1

    if _evaluated_count > 0:
        hold_rate_gauge.set(_held_count / _evaluated_count)


def record_pending_resolution(resolution: str) -> None:
    """Record an approve/reject of a pending transaction."""
    pending_resolutions_total.labels(resolution=resolution).inc()


def record_impulse_purchase() -> None:
    """Record an impulse purchase flag."""
    impulse_purchases_total.inc()


def record_advisor_reply(topic: str) -> None:
    """Record an advisor chat reply."""
    advisor_replies_total.labels(topic=topic).inc()


def record_detection(emotion: str, status: str = "success") -> None:
    """Record an emotion detection attempt."""
    emotion_detection_total.labels(emotion=emotion, status=status).inc()


@contextmanager
def track_detection_latency() -> Generator[None, None, None]:
    """Context manager to track emotion detection latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        emotion_detection_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
