"""Observability module for retrieval metrics."""

from retrieval_model.observability.metrics import (
    get_metrics,
    get_metrics_content_type,
    track_attempt_decision,
    track_retrieval,
)

__all__ = [
    "get_metrics",
    "get_metrics_content_type",
    "track_attempt_decision",
    "track_retrieval",
]
