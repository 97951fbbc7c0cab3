"""Prometheus metrics for the KuberX engine.

Business Metrics:
- kuberx_kuber_score_total: Kuber scores computed, by status
- kuberx_purchase_verdict_total: Purchase evaluations, by verdict
- kuberx_profile_saves_total: Profile snapshots written

Technical Metrics:
- kuberx_evaluation_latency_seconds: Engine evaluation latency, by operation
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

kuber_score_total = Counter(
    "kuberx_kuber_score_total",
    "Total number of Kuber scores computed",
    ["status"],  # Vulnerable, Stable, Wealth Builder
)

purchase_verdict_total = Counter(
    "kuberx_purchase_verdict_total",
    "Total number of purchase evaluations",
    ["verdict"],  # Approved, Delay Recommended, Not Recommended
)

profile_saves_total = Counter(
    "kuberx_profile_saves_total",
    "Total number of profile snapshots saved",
)


# =============================================================================
# Technical Metrics
# =============================================================================

evaluation_latency = Histogram(
    "kuberx_evaluation_latency_seconds",
    "Engine evaluation latency in seconds",
    ["operation"],
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_kuber_score(status: str) -> None:
    """Record a computed Kuber score."""
    kuber_score_total.labels(status=status).inc()


def record_purchase_verdict(verdict: str) -> None:
    """Record a purchase verdict."""
    purchase_verdict_total.labels(verdict=verdict).inc()


def record_profile_save() -> None:
    """Record a profile snapshot write."""
    profile_saves_total.inc()


@contextmanager
def track_evaluation_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track engine evaluation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        evaluation_latency.labels(operation=operation).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics exposition."""
    return CONTENT_TYPE_LATEST
