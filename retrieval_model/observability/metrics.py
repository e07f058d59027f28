"""Prometheus metrics for retrieval lifecycles.

Provides metrics instrumentation for:
- States observed by the orchestrator driving retrievals
- Attempt decisions taken from those states
"""

from typing import Any

from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

from retrieval_model.config import get_settings
from retrieval_model.logging_config import get_logger
from retrieval_model.retrieval.helpers import resolve_state, should_attempt
from retrieval_model.retrieval.models import Retrieval, RetrievalState

logger = get_logger(__name__)

METRICS_NAMESPACE = get_settings().metrics.namespace

RETRIEVAL_STATES_TOTAL = Counter(
    "states_total",
    "Retrievals observed, by state",
    ["state"],
    namespace=METRICS_NAMESPACE,
)

ATTEMPT_DECISIONS_TOTAL = Counter(
    "attempt_decisions_total",
    "Retry decisions taken, by state and outcome",
    ["state", "decision"],
    namespace=METRICS_NAMESPACE,
)


def state_label(retrieval: Retrieval[Any] | RetrievalState | int) -> str:
    """Return the metric label for the state of a retrieval.

    Args:
        retrieval: A retrieval, or its bare state.

    Returns:
        The state name, or ``UNKNOWN`` for unrecognized states.
    """
    state = resolve_state(retrieval)
    if isinstance(state, int) and not isinstance(state, bool):
        try:
            return RetrievalState(state).name
        except ValueError:
            pass
    return "UNKNOWN"


def track_retrieval(retrieval: Retrieval[Any] | RetrievalState | int) -> None:
    """Record an observed retrieval state.

    Args:
        retrieval: A retrieval, or its bare state.
    """
    if not get_settings().metrics.enabled:
        return

    label = state_label(retrieval)
    RETRIEVAL_STATES_TOTAL.labels(state=label).inc()
    logger.debug(f"Observed retrieval in state {label}")


def track_attempt_decision(
    retrieval: Retrieval[Any] | RetrievalState | int,
) -> bool:
    """Decide whether to attempt a retrieval and record the decision.

    Args:
        retrieval: A retrieval, or its bare state.

    Returns:
        The result of ``should_attempt`` for the retrieval.
    """
    decision = should_attempt(retrieval)
    if not get_settings().metrics.enabled:
        return decision

    label = state_label(retrieval)
    ATTEMPT_DECISIONS_TOTAL.labels(
        state=label,
        decision="attempt" if decision else "skip",
    ).inc()
    logger.debug(
        f"Attempt decision for {label}: {decision}",
        extra={"state": label, "attempt": decision},
    )
    return decision


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def get_metrics_content_type() -> str:
    """Get the content type for metrics output."""
    return CONTENT_TYPE_LATEST
