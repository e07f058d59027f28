"""Constructors, shared constants and the retry predicate."""

from collections.abc import Mapping
from typing import Any, TypeVar

from retrieval_model.retrieval.models import (
    E,
    IdleRetrieval,
    Retrieval,
    RetrievalError,
    RetrievalState,
    SuccessfulRetrieval,
    WorkingRetrieval,
)

T = TypeVar("T")

_RETRYABLE_STATES = frozenset({RetrievalState.ERRORED, RetrievalState.IDLE})


def success(value: T) -> SuccessfulRetrieval[T]:
    """Create a successful retrieval containing the given value."""
    return SuccessfulRetrieval(value=value)


def error(err: E) -> RetrievalError[E]:
    """Create an errored retrieval containing the given error."""
    return RetrievalError(error=err)


def resolve_state(retrieval: Retrieval[Any] | RetrievalState | int) -> Any:
    """Return the state carried by a retrieval or bare state value.

    Integers (``RetrievalState`` members included) are the state itself.
    Mappings have their ``state`` key read and anything else its ``state``
    attribute. Inputs without one resolve to ``None``.
    """
    if isinstance(retrieval, int) and not isinstance(retrieval, bool):
        return retrieval
    if isinstance(retrieval, Mapping):
        return retrieval.get("state")
    return getattr(retrieval, "state", None)


def should_attempt(retrieval: Retrieval[Any] | RetrievalState | int) -> bool:
    """Return whether a retrieval is in a state worth (re)trying.

    Idle and errored retrievals have nothing in flight and hold no result,
    so a new attempt makes sense. Unrecognized states are not retryable.

    Args:
        retrieval: A retrieval, or its bare state.

    Returns:
        True if the state is ``ERRORED`` or ``IDLE``.
    """
    state = resolve_state(retrieval)
    # Only real integers are states; False and 0.0 compare equal to IDLE.
    if not isinstance(state, int) or isinstance(state, bool):
        return False
    return state in _RETRYABLE_STATES


IDLE_RETRIEVAL: Retrieval[Any] = IdleRetrieval()
"""Shared idle retrieval."""

WORKING_RETRIEVAL: Retrieval[Any] = WorkingRetrieval()
"""Shared in-progress retrieval."""
