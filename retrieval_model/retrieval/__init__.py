"""Retrieval lifecycle model."""

from retrieval_model.retrieval.codec import dump_retrieval, parse_retrieval
from retrieval_model.retrieval.helpers import (
    IDLE_RETRIEVAL,
    WORKING_RETRIEVAL,
    error,
    resolve_state,
    should_attempt,
    success,
)
from retrieval_model.retrieval.models import (
    Error,
    IdleRetrieval,
    Retrieval,
    RetrievalError,
    RetrievalState,
    ServiceError,
    SuccessfulRetrieval,
    WorkingRetrieval,
)

__all__ = [
    "IDLE_RETRIEVAL",
    "WORKING_RETRIEVAL",
    "Error",
    "IdleRetrieval",
    "Retrieval",
    "RetrievalError",
    "RetrievalState",
    "ServiceError",
    "SuccessfulRetrieval",
    "WorkingRetrieval",
    "dump_retrieval",
    "error",
    "parse_retrieval",
    "resolve_state",
    "should_attempt",
    "success",
]
